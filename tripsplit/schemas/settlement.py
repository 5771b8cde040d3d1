from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class SettlementCreate(BaseModel):
    """Record a payment, either pending or already paid."""
    model_config = ConfigDict(populate_by_name=True)

    from_user: str = Field(alias="from")
    to_user: str = Field(alias="to")
    amount: float
    is_paid: bool = False
    proof_image_url: Optional[str] = None


class SettlementPayRequest(BaseModel):
    """Request body to mark a pending settlement as paid."""
    proof_image_url: Optional[str] = None
