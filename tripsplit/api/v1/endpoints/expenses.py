from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from tripsplit.api.v1.endpoints.trips import get_trip_or_404
from tripsplit.db.mongo import get_db
from tripsplit.models.expense import Expense
from tripsplit.repositories.expense_repo import ExpenseRepository
from tripsplit.schemas.expense import ExpenseCreate
from tripsplit.services.expense_service import ExpenseService
from tripsplit.utils.validation import TripValidationError

router = APIRouter()


@router.post("/trips/{trip_id}/expenses", response_model=Expense)
async def create_expense(trip_id: str, expense_in: ExpenseCreate, db = Depends(get_db)):
    trip = await get_trip_or_404(trip_id, db)
    try:
        expense = ExpenseService.build(trip, expense_in)
    except TripValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    return await ExpenseRepository(db).create_expense(expense)


@router.get("/trips/{trip_id}/expenses", response_model=List[Expense])
async def list_expenses(trip_id: str, db = Depends(get_db)):
    trip = await get_trip_or_404(trip_id, db)
    return await ExpenseRepository(db).list_expenses(trip.id)


@router.delete("/expenses/{expense_id}")
async def delete_expense(expense_id: str, db = Depends(get_db)):
    deleted = await ExpenseRepository(db).soft_delete_expense(expense_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Expense not found")

    return {"success": True}
