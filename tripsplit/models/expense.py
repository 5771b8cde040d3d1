from enum import Enum
from typing import Dict, List, Optional

from pydantic import ConfigDict

from tripsplit.models.base import TripModel


class SplitType(str, Enum):
    FAIR = "fair"
    CUSTOM = "custom"


class PaymentMethod(str, Enum):
    CASH = "Cash"
    UPI = "UPI"


class Expense(TripModel):
    """
    A single payment made by one participant on behalf of a group.

    Invariants:
    - per_person_amount is fixed when the expense is created
      (amount / len(split_between) for fair splits, 0 for custom ones)
    - custom_splits is only set for custom splits
    - records are immutable once created
    """
    model_config = ConfigDict(frozen=True)

    trip_id: Optional[str] = None
    title: str = ""
    amount: float
    paid_by: str
    split_between: List[str]
    per_person_amount: float = 0.0
    split_type: SplitType = SplitType.FAIR
    custom_splits: Optional[Dict[str, float]] = None
    payment_method: PaymentMethod = PaymentMethod.UPI
    proof_image_url: Optional[str] = None

    def share_for(self, name: str) -> float:
        """What `name` owes on this expense."""
        if self.split_type == SplitType.CUSTOM and self.custom_splits is not None:
            return self.custom_splits.get(name, 0.0)
        return self.per_person_amount
