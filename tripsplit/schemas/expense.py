from typing import Dict, List, Optional
from pydantic import BaseModel

from tripsplit.models.expense import SplitType, PaymentMethod


class ExpenseCreate(BaseModel):
    """Expense as submitted. per_person_amount is derived, never accepted."""
    title: str = ""
    amount: float
    paid_by: str
    split_between: List[str]
    split_type: SplitType = SplitType.FAIR
    custom_splits: Optional[Dict[str, float]] = None
    payment_method: PaymentMethod = PaymentMethod.UPI
    proof_image_url: Optional[str] = None
