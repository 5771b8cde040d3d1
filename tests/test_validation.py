import pytest

from tripsplit.models.expense import SplitType
from tripsplit.schemas.expense import ExpenseCreate
from tripsplit.schemas.settlement import SettlementCreate
from tripsplit.utils.validation import (
    TripValidationError,
    validate_expense,
    validate_member_photos,
    validate_participants,
    validate_settlement,
)

PEOPLE = ["Alice", "Bob", "Carl"]


def test_valid_participants():
    validate_participants(PEOPLE)


@pytest.mark.parametrize("participants,message", [
    ([], "at least one participant"),
    (["Alice", "  "], "blank"),
    (["Alice", "Bob", "Alice"], "Duplicate participant"),
])
def test_invalid_participants(participants, message):
    with pytest.raises(TripValidationError, match=message):
        validate_participants(participants)


@pytest.mark.parametrize("fields,message", [
    ({"amount": 0.0}, "must be positive"),
    ({"amount": -5.0}, "must be positive"),
    ({"split_between": []}, "at least one participant"),
    ({"split_between": ["Alice", "Zed"]}, "Unknown participant in split"),
])
def test_invalid_expense(fields, message):
    data = {"amount": 30.0, "paid_by": "Alice", "split_between": ["Alice", "Bob"]}
    data.update(fields)

    with pytest.raises(TripValidationError, match=message):
        validate_expense(ExpenseCreate(**data), PEOPLE)


def test_custom_split_within_tolerance_is_valid():
    expense_in = ExpenseCreate(
        amount=100.0,
        paid_by="Alice",
        split_between=["Alice", "Bob", "Carl"],
        split_type=SplitType.CUSTOM,
        custom_splits={"Alice": 33.33, "Bob": 33.33, "Carl": 33.335},
    )

    validate_expense(expense_in, PEOPLE)


def test_custom_split_negative_share_rejected():
    expense_in = ExpenseCreate(
        amount=10.0,
        paid_by="Alice",
        split_between=["Alice", "Bob"],
        split_type=SplitType.CUSTOM,
        custom_splits={"Alice": 15.0, "Bob": -5.0},
    )

    with pytest.raises(TripValidationError, match="negative"):
        validate_expense(expense_in, PEOPLE)


@pytest.mark.parametrize("data,message", [
    ({"from": "Zed", "to": "Alice", "amount": 5.0}, "Unknown participant"),
    ({"from": "Bob", "to": "Bob", "amount": 5.0}, "Cannot pay yourself"),
    ({"from": "Bob", "to": "Alice", "amount": 0.0}, "must be positive"),
])
def test_invalid_settlement(data, message):
    with pytest.raises(TripValidationError, match=message):
        validate_settlement(SettlementCreate.model_validate(data), PEOPLE)


def test_member_photos_drop_blank_urls():
    photos = validate_member_photos({"Alice": "https://img/a.png", "Bob": "", "Carl": "   "}, PEOPLE)

    assert photos == {"Alice": "https://img/a.png"}


@pytest.mark.parametrize("photos,message", [
    ({"Zed": "https://img/z.png"}, "Unknown participant"),
    ({"Alice": ""}, "No valid photos"),
    ({}, "No valid photos"),
])
def test_invalid_member_photos(photos, message):
    with pytest.raises(TripValidationError, match=message):
        validate_member_photos(photos, PEOPLE)
