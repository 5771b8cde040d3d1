"""
Settlement model - a payment between two participants.

Life cycle: pending -> paid. Paid is terminal; there is no un-pay.
from/to/amount never change after creation.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field, ConfigDict

from tripsplit.models.base import TripModel, _utcnow


class SettlementStateError(Exception):
    """Raised on an invalid settlement state transition."""
    pass


class SettlementStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"


class Settlement(TripModel):
    model_config = ConfigDict(frozen=True)

    trip_id: Optional[str] = None
    from_user: str = Field(alias="from")
    to_user: str = Field(alias="to")
    amount: float
    is_paid: bool = False
    paid_at: Optional[datetime] = None
    proof_image_url: Optional[str] = None

    @property
    def status(self) -> SettlementStatus:
        return SettlementStatus.PAID if self.is_paid else SettlementStatus.PENDING

    def mark_paid(self, proof_image_url: Optional[str] = None) -> "Settlement":
        """Return the paid copy of a pending settlement."""
        if self.is_paid:
            raise SettlementStateError(f"Settlement {self.id} is already paid")

        return self.model_copy(update={
            "is_paid": True,
            "paid_at": _utcnow(),
            "proof_image_url": proof_image_url or self.proof_image_url,
        })
