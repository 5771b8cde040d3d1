import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from unittest.mock import AsyncMock, MagicMock

from tripsplit.main import app
from tripsplit.db.mongo import get_db
from tripsplit.models.expense import SplitType
from tripsplit.models.trip import Trip
from tripsplit.schemas.expense import ExpenseCreate
from tripsplit.services.expense_service import ExpenseService


@pytest.fixture
def participants():
    return ["Alice", "Bob", "Carl"]


@pytest.fixture
def make_expense():
    """Build an expense the way the API does, through ExpenseService."""
    def _make(amount, paid_by, split_between, custom_splits=None, **extra):
        trip = Trip(name="fixture", participants=list(dict.fromkeys([paid_by, *split_between])))
        expense_in = ExpenseCreate(
            amount=amount,
            paid_by=paid_by,
            split_between=split_between,
            split_type=SplitType.CUSTOM if custom_splits is not None else SplitType.FAIR,
            custom_splits=custom_splits,
            **extra
        )
        return ExpenseService.build(trip, expense_in)

    return _make


def make_cursor(docs):
    """Motor-style cursor: find(...).sort(...).to_list(None)."""
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.to_list = AsyncMock(return_value=docs)
    return cursor


@pytest.fixture
def cursor_factory():
    return make_cursor


@pytest.fixture
def mock_db():
    """Mock MongoDB database for tests"""
    db = MagicMock()

    for name in ("trips", "expenses", "settlements"):
        collection = MagicMock()
        collection.insert_one = AsyncMock()
        collection.find_one = AsyncMock(return_value=None)
        collection.update_one = AsyncMock()
        collection.find_one_and_update = AsyncMock(return_value=None)
        collection.find = MagicMock(return_value=make_cursor([]))
        setattr(db, name, collection)

    return db


@pytest_asyncio.fixture
async def client(mock_db):
    """API client wired to the mock database."""
    app.dependency_overrides[get_db] = lambda: mock_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as api_client:
        yield api_client
    app.dependency_overrides.clear()
