from fastapi import APIRouter, HTTPException, status

from tripsplit.models.trip import Trip
from tripsplit.schemas.plan import SettlementPlan, TripSnapshot
from tripsplit.services.expense_service import ExpenseService
from tripsplit.services.settlement_service import SettlementService
from tripsplit.utils.validation import TripValidationError, validate_participants

router = APIRouter()


@router.post("/plan", response_model=SettlementPlan)
async def compute_plan(snapshot: TripSnapshot):
    """Settlement plan for a snapshot posted by the caller. Nothing is stored."""
    try:
        validate_participants(snapshot.participants)
        trip = Trip(name="snapshot", participants=snapshot.participants)
        expenses = [ExpenseService.build(trip, expense_in) for expense_in in snapshot.expenses]
    except TripValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

    return SettlementService.build_plan(snapshot.participants, expenses, snapshot.settlements)
