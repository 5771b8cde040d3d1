"""Trip input validation, applied before records are created."""
from typing import Dict, List, Sequence

from tripsplit.models.expense import SplitType
from tripsplit.schemas.expense import ExpenseCreate
from tripsplit.schemas.settlement import SettlementCreate
from tripsplit.utils.money import EPSILON, money_sum


class TripValidationError(Exception):
    """Custom exception for trip, expense and settlement validation errors."""
    pass


def validate_participants(participants: List[str]) -> None:
    """
    Validate a trip's participant list.

    Rules:
    - at least one participant
    - names must not be blank
    - names must be unique (they are the join key everywhere)
    """
    if not participants:
        raise TripValidationError("Trip needs at least one participant")

    seen = set()
    for name in participants:
        if not name.strip():
            raise TripValidationError("Participant names must not be blank")
        if name in seen:
            raise TripValidationError(f"Duplicate participant: '{name}'")
        seen.add(name)


def validate_expense(expense_in: ExpenseCreate, participants: Sequence[str]) -> None:
    """
    Validate an expense against the trip's participants.

    Rules:
    - amount must be positive
    - paid_by and everyone in split_between must be trip participants
    - split_between must not be empty
    - custom splits: no negative share, shares of split_between sum to amount
    """
    if expense_in.amount <= 0:
        raise TripValidationError(f"Expense amount must be positive: {expense_in.amount}")

    if expense_in.paid_by not in participants:
        raise TripValidationError(f"Unknown payer: '{expense_in.paid_by}'")

    if not expense_in.split_between:
        raise TripValidationError("Expense must be split between at least one participant")

    for name in expense_in.split_between:
        if name not in participants:
            raise TripValidationError(f"Unknown participant in split: '{name}'")

    if expense_in.split_type == SplitType.CUSTOM:
        custom_splits = expense_in.custom_splits or {}
        for name, share in custom_splits.items():
            if share < 0:
                raise TripValidationError(f"Custom share for '{name}' is negative: {share}")

        custom_total = money_sum(custom_splits.get(name, 0.0) for name in set(expense_in.split_between))
        if abs(custom_total - expense_in.amount) > EPSILON:
            raise TripValidationError(
                f"Custom amounts ({custom_total:.2f}) don't match total ({expense_in.amount:.2f})"
            )


def validate_member_photos(member_photos: Dict[str, str], participants: Sequence[str]) -> Dict[str, str]:
    """
    Validate a member photo update and return the photos to store.

    Rules:
    - every name must be a trip participant
    - blank URLs are dropped
    - at least one photo must remain
    """
    photos = {}
    for name, url in member_photos.items():
        if name not in participants:
            raise TripValidationError(f"Unknown participant: '{name}'")
        if url and url.strip():
            photos[name] = url.strip()

    if not photos:
        raise TripValidationError("No valid photos to upload")
    return photos


def validate_settlement(settlement_in: SettlementCreate, participants: Sequence[str]) -> None:
    """
    Validate a settlement.

    Rules:
    - sender and receiver are different trip participants
    - amount must be positive
    """
    for name in (settlement_in.from_user, settlement_in.to_user):
        if name not in participants:
            raise TripValidationError(f"Unknown participant: '{name}'")

    if settlement_in.from_user == settlement_in.to_user:
        raise TripValidationError("Cannot pay yourself")

    if settlement_in.amount <= 0:
        raise TripValidationError(f"Settlement amount must be positive: {settlement_in.amount}")
