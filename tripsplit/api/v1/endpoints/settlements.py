from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from tripsplit.api.v1.endpoints.trips import get_trip_or_404
from tripsplit.db.mongo import get_db
from tripsplit.models.settlement import Settlement, SettlementStateError
from tripsplit.repositories.settlement_repo import SettlementRepository
from tripsplit.schemas.settlement import SettlementCreate, SettlementPayRequest
from tripsplit.services.settlement_service import SettlementService
from tripsplit.utils.validation import TripValidationError

router = APIRouter()


@router.post("/trips/{trip_id}/settlements", response_model=Settlement)
async def create_settlement(trip_id: str, settlement_in: SettlementCreate, db = Depends(get_db)):
    """Record a payment between two participants (pending unless is_paid)."""
    trip = await get_trip_or_404(trip_id, db)
    try:
        settlement = SettlementService.create(trip, settlement_in)
    except TripValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return await SettlementRepository(db).create_settlement(settlement)


@router.get("/trips/{trip_id}/settlements", response_model=List[Settlement])
async def list_settlements(trip_id: str, db = Depends(get_db)):
    trip = await get_trip_or_404(trip_id, db)
    return await SettlementRepository(db).list_settlements(trip.id)


@router.post("/settlements/{settlement_id}/pay", response_model=Settlement)
async def pay_settlement(settlement_id: str, payload: SettlementPayRequest, db = Depends(get_db)):
    """Mark a pending settlement as paid."""
    try:
        settlement = await SettlementRepository(db).mark_as_paid(settlement_id, payload.proof_image_url)
    except SettlementStateError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))

    if not settlement:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Settlement not found")
    return settlement


@router.delete("/settlements/{settlement_id}")
async def delete_settlement(settlement_id: str, db = Depends(get_db)):
    deleted = await SettlementRepository(db).soft_delete_settlement(settlement_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Settlement not found")

    return {"success": True}
