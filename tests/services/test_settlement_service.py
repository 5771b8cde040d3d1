import pytest

from tripsplit.models.balance import TransactionSuggestion
from tripsplit.models.settlement import Settlement, SettlementStateError, SettlementStatus
from tripsplit.models.trip import Trip
from tripsplit.schemas.settlement import SettlementCreate
from tripsplit.services.settlement_service import SettlementService
from tripsplit.utils.validation import TripValidationError


@pytest.fixture
def trip(participants):
    return Trip(id="trip-1", name="Goa", participants=participants)


def test_create_pending_settlement(trip):
    settlement = SettlementService.create(trip, SettlementCreate(from_user="Bob", to_user="Alice", amount=25.0))

    assert settlement.trip_id == "trip-1"
    assert settlement.status == SettlementStatus.PENDING
    assert settlement.paid_at is None


def test_create_already_paid_settlement(trip):
    settlement_in = SettlementCreate.model_validate({"from": "Bob", "to": "Alice", "amount": 25.0, "is_paid": True})

    settlement = SettlementService.create(trip, settlement_in)

    assert settlement.is_paid is True
    assert settlement.paid_at is not None


def test_cannot_pay_yourself(trip):
    with pytest.raises(TripValidationError, match="Cannot pay yourself"):
        SettlementService.create(trip, SettlementCreate(from_user="Bob", to_user="Bob", amount=5.0))


def test_mark_as_paid_keeps_existing_proof():
    settlement = Settlement(from_user="Bob", to_user="Alice", amount=10.0, proof_image_url="https://img/1.png")

    paid = SettlementService.mark_as_paid(settlement)

    assert paid.is_paid is True
    assert paid.proof_image_url == "https://img/1.png"
    assert settlement.is_paid is False  # original untouched


def test_paid_is_terminal():
    paid = SettlementService.mark_as_paid(Settlement(from_user="Bob", to_user="Alice", amount=10.0))

    with pytest.raises(SettlementStateError):
        SettlementService.mark_as_paid(paid, "https://img/2.png")


def test_untracked_suggestions_skips_matching_pending():
    suggestions = [
        TransactionSuggestion(from_user="Bob", to_user="Alice", amount=100.0),
        TransactionSuggestion(from_user="Carl", to_user="Alice", amount=100.0),
    ]
    settlements = [
        Settlement(from_user="Bob", to_user="Alice", amount=100.004),
        Settlement(from_user="Carl", to_user="Alice", amount=100.0, is_paid=True),
    ]

    remaining = SettlementService.untracked_suggestions(suggestions, settlements)

    assert [(t.from_user, t.to_user) for t in remaining] == [("Carl", "Alice")]


def test_untracked_suggestions_requires_same_amount():
    suggestions = [TransactionSuggestion(from_user="Bob", to_user="Alice", amount=100.0)]
    settlements = [Settlement(from_user="Bob", to_user="Alice", amount=50.0)]

    assert SettlementService.untracked_suggestions(suggestions, settlements) == suggestions


def test_build_plan_scenario(participants, make_expense):
    expense = make_expense(300.0, "Alice", participants)
    settlements = [
        Settlement(from_user="Bob", to_user="Alice", amount=100.0, is_paid=True),
        Settlement(from_user="Carl", to_user="Alice", amount=100.0),
    ]

    plan = SettlementService.build_plan(participants, [expense], settlements)

    assert [b.net for b in plan.balances] == [100.0, 0.0, -100.0]
    assert plan.suggested == []  # Carl's payment is already pending
    assert plan.outstanding == []
    assert len(plan.pending) == 1
    assert len(plan.paid) == 1
    assert plan.total_spent == 300.0
    assert plan.is_settled is False


def test_build_plan_empty_trip_is_settled(participants):
    plan = SettlementService.build_plan(participants, [], [])

    assert plan.is_settled is True
    assert plan.total_spent == 0.0
    assert all(b.net == 0.0 for b in plan.balances)
