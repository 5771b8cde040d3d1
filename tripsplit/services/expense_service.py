import logging

from tripsplit.models.expense import Expense, SplitType
from tripsplit.models.trip import Trip
from tripsplit.schemas.expense import ExpenseCreate
from tripsplit.utils.validation import validate_expense

logger = logging.getLogger(__name__)


class ExpenseService:
    @staticmethod
    def build(trip: Trip, expense_in: ExpenseCreate) -> Expense:
        """
        Validate an expense for a trip and freeze its shares.

        The fair per-person amount is computed here, once; later reads
        never recompute it from split_between.
        """
        validate_expense(expense_in, trip.participants)

        # split_between is a set; keep first-seen order
        split_between = list(dict.fromkeys(expense_in.split_between))

        if expense_in.split_type == SplitType.CUSTOM:
            per_person = 0.0
            custom_splits = {
                name: share
                for name, share in (expense_in.custom_splits or {}).items()
                if name in split_between
            }
        else:
            per_person = expense_in.amount / len(split_between)
            custom_splits = None

        expense = Expense(
            trip_id=trip.id,
            title=expense_in.title,
            amount=expense_in.amount,
            paid_by=expense_in.paid_by,
            split_between=split_between,
            per_person_amount=per_person,
            split_type=expense_in.split_type,
            custom_splits=custom_splits,
            payment_method=expense_in.payment_method,
            proof_image_url=expense_in.proof_image_url,
        )
        logger.debug("Built %s expense of %.2f paid by %s", expense.split_type.value, expense.amount, expense.paid_by)
        return expense
