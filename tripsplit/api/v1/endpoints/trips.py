from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.concurrency import run_in_threadpool

from tripsplit.db.mongo import get_db
from tripsplit.models.balance import Balance
from tripsplit.models.trip import Trip
from tripsplit.repositories.expense_repo import ExpenseRepository
from tripsplit.repositories.settlement_repo import SettlementRepository
from tripsplit.repositories.trip_repo import TripRepository
from tripsplit.schemas.plan import SettlementPlan
from tripsplit.schemas.recommendation import RecommendationResponse
from tripsplit.schemas.trip import MemberPhotosUpdate, TripCreate
from tripsplit.services.balance_service import BalanceEngine
from tripsplit.services.recommendation_service import RecommendationService
from tripsplit.services.settlement_service import SettlementService
from tripsplit.utils.validation import TripValidationError

router = APIRouter()


async def get_trip_or_404(trip_id: str, db) -> Trip:
    trip = await TripRepository(db).get_trip(trip_id)
    if not trip:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Trip not found")
    return trip


@router.post("", response_model=Trip)
async def create_trip(trip_data: TripCreate, db = Depends(get_db)):
    """Create a trip with a fixed participant list."""
    try:
        return await TripRepository(db).create_trip(trip_data)
    except TripValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get("/{trip_id}", response_model=Trip)
async def get_trip(trip_id: str, db = Depends(get_db)):
    return await get_trip_or_404(trip_id, db)


@router.get("/{trip_id}/balances", response_model=List[Balance])
async def get_balances(trip_id: str, db = Depends(get_db)):
    """Current paid / owed / net for every participant."""
    trip = await get_trip_or_404(trip_id, db)
    expenses = await ExpenseRepository(db).list_expenses(trip.id)
    settlements = await SettlementRepository(db).list_settlements(trip.id)
    return BalanceEngine.compute_balances(trip.participants, expenses, settlements)


@router.get("/{trip_id}/plan", response_model=SettlementPlan)
async def get_plan(trip_id: str, db = Depends(get_db)):
    """Balances plus suggested and outstanding payments."""
    trip = await get_trip_or_404(trip_id, db)
    expenses = await ExpenseRepository(db).list_expenses(trip.id)
    settlements = await SettlementRepository(db).list_settlements(trip.id)
    return SettlementService.build_plan(trip.participants, expenses, settlements)


@router.get("/{trip_id}/recommendation", response_model=RecommendationResponse)
async def get_recommendation(trip_id: str, db = Depends(get_db)):
    """Short advice on who should pay next."""
    trip = await get_trip_or_404(trip_id, db)
    expenses = await ExpenseRepository(db).list_expenses(trip.id)
    settlements = await SettlementRepository(db).list_settlements(trip.id)
    balances = BalanceEngine.compute_balances(trip.participants, expenses, settlements)
    return await run_in_threadpool(RecommendationService.recommend, expenses, balances)


@router.patch("/{trip_id}/members", response_model=Trip)
async def update_member_photos(trip_id: str, update: MemberPhotosUpdate, db = Depends(get_db)):
    """Replace the participants' photo URLs."""
    trip = await get_trip_or_404(trip_id, db)
    try:
        updated = await TripRepository(db).update_member_photos(trip, update.member_photos)
    except TripValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))

    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Trip not found")
    return updated
