import logging
from datetime import datetime, timezone
from typing import List

from motor.motor_asyncio import AsyncIOMotorDatabase
from bson import ObjectId

from tripsplit.models.expense import Expense

logger = logging.getLogger(__name__)


class ExpenseRepository:
    """Expense database operations. Expenses are never edited, only soft-deleted."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db.expenses

    async def create_expense(self, expense: Expense) -> Expense:
        doc = expense.model_dump(mode="json", exclude={"id", "created_at"})
        doc["created_at"] = expense.created_at
        doc["is_deleted"] = False

        result = await self.collection.insert_one(doc)
        logger.info("Created expense %s in trip %s", result.inserted_id, expense.trip_id)
        return expense.model_copy(update={"id": str(result.inserted_id)})

    async def list_expenses(self, trip_id: str) -> List[Expense]:
        """List a trip's expenses, newest first."""
        docs = await self.collection.find({
            "trip_id": trip_id,
            "is_deleted": False
        }).sort("created_at", -1).to_list(None)

        for doc in docs:
            doc["id"] = str(doc.pop("_id"))
        return [Expense(**doc) for doc in docs]

    async def soft_delete_expense(self, expense_id: str) -> bool:
        if not ObjectId.is_valid(expense_id):
            return False

        result = await self.collection.update_one(
            {"_id": ObjectId(expense_id), "is_deleted": False},
            {"$set": {
                "is_deleted": True,
                "deleted_at": datetime.now(timezone.utc)
            }}
        )
        if result.modified_count > 0:
            logger.info("Deleted expense %s", expense_id)
            return True
        return False
