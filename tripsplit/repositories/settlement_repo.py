"""
SettlementRepository - tracked payments between participants.

Only the pending -> paid transition ever updates a stored settlement.
The update is conditional on is_paid == False, so a settlement paid by a
concurrent request is never paid twice.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from bson import ObjectId

from tripsplit.models.settlement import Settlement, SettlementStateError
from tripsplit.services.settlement_service import SettlementService

logger = logging.getLogger(__name__)


class SettlementRepository:
    """Repository for settlements."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db.settlements

    async def create_settlement(self, settlement: Settlement) -> Settlement:
        doc = settlement.model_dump(by_alias=True, exclude={"id"})
        doc["is_deleted"] = False

        result = await self.collection.insert_one(doc)
        logger.info(
            "Recorded %s settlement %s: %s -> %s %.2f",
            settlement.status.value, result.inserted_id,
            settlement.from_user, settlement.to_user, settlement.amount
        )
        return settlement.model_copy(update={"id": str(result.inserted_id)})

    async def get_settlement(self, settlement_id: str) -> Optional[Settlement]:
        if not ObjectId.is_valid(settlement_id):
            return None

        doc = await self.collection.find_one({"_id": ObjectId(settlement_id), "is_deleted": False})
        if not doc:
            return None

        doc["id"] = str(doc.pop("_id"))
        return Settlement(**doc)

    async def list_settlements(self, trip_id: str) -> List[Settlement]:
        """List a trip's settlements, oldest first."""
        docs = await self.collection.find({
            "trip_id": trip_id,
            "is_deleted": False
        }).sort("created_at", 1).to_list(None)

        for doc in docs:
            doc["id"] = str(doc.pop("_id"))
        return [Settlement(**doc) for doc in docs]

    async def mark_as_paid(self, settlement_id: str, proof_image_url: Optional[str] = None) -> Optional[Settlement]:
        """
        Mark a pending settlement as paid.

        Returns the updated settlement or None if not found.
        Raises SettlementStateError if it is already paid or was deleted meanwhile.
        """
        settlement = await self.get_settlement(settlement_id)
        if not settlement:
            return None

        paid = SettlementService.mark_as_paid(settlement, proof_image_url)

        result = await self.collection.find_one_and_update(
            {"_id": ObjectId(settlement_id), "is_paid": False, "is_deleted": False},
            {"$set": {
                "is_paid": True,
                "paid_at": paid.paid_at,
                "proof_image_url": paid.proof_image_url
            }},
            return_document=True
        )
        if not result:
            raise SettlementStateError(f"Settlement {settlement_id} is no longer pending")

        result["id"] = str(result.pop("_id"))
        return Settlement(**result)

    async def soft_delete_settlement(self, settlement_id: str) -> bool:
        if not ObjectId.is_valid(settlement_id):
            return False

        result = await self.collection.update_one(
            {"_id": ObjectId(settlement_id), "is_deleted": False},
            {"$set": {
                "is_deleted": True,
                "deleted_at": datetime.now(timezone.utc)
            }}
        )
        if result.modified_count > 0:
            logger.info("Deleted settlement %s", settlement_id)
            return True
        return False
