from typing import List
from pydantic import BaseModel

from tripsplit.models.balance import Balance, TransactionSuggestion
from tripsplit.models.settlement import Settlement
from tripsplit.schemas.expense import ExpenseCreate


class TripSnapshot(BaseModel):
    """
    Everything needed to compute a plan, supplied in one request.
    Expenses are submitted like new ones so their shares are derived server-side.
    """
    participants: List[str]
    expenses: List[ExpenseCreate] = []
    settlements: List[Settlement] = []


class SettlementPlan(BaseModel):
    balances: List[Balance]
    suggested: List[TransactionSuggestion]  # minimal greedy plan, minus pending ones
    outstanding: List[TransactionSuggestion]  # direct pairwise debts, netted
    pending: List[Settlement]
    paid: List[Settlement]
    total_spent: float
    is_settled: bool
