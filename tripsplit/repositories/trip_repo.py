import logging
from typing import Dict, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from bson import ObjectId

from tripsplit.models.trip import Trip
from tripsplit.schemas.trip import TripCreate
from tripsplit.utils.validation import validate_member_photos, validate_participants

logger = logging.getLogger(__name__)


class TripRepository:
    """Trip database operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db.trips

    async def create_trip(self, trip_data: TripCreate) -> Trip:
        """
        Create a trip.
        Raises TripValidationError on a bad participant list.
        """
        validate_participants(trip_data.participants)

        trip = Trip(
            name=trip_data.name,
            participants=trip_data.participants,
            member_avatars=trip_data.member_avatars
        )
        result = await self.collection.insert_one(trip.model_dump(exclude={"id"}))
        trip = trip.model_copy(update={"id": str(result.inserted_id)})

        logger.info("Created trip %s with %d participants", trip.id, len(trip.participants))
        return trip

    async def get_trip(self, trip_id: str) -> Optional[Trip]:
        """Get a trip by id, None if unknown or malformed."""
        if not ObjectId.is_valid(trip_id):
            return None

        doc = await self.collection.find_one({"_id": ObjectId(trip_id)})
        if not doc:
            return None

        doc["id"] = str(doc.pop("_id"))
        return Trip(**doc)

    async def update_member_photos(self, trip: Trip, member_photos: Dict[str, str]) -> Optional[Trip]:
        """
        Replace the trip's photo map.
        Returns the updated trip, None if it vanished.
        Raises TripValidationError on unknown names or when no photo is left.
        """
        photos = validate_member_photos(member_photos, trip.participants)

        doc = await self.collection.find_one_and_update(
            {"_id": ObjectId(trip.id)},
            {"$set": {"member_photos": photos}},
            return_document=True
        )
        if not doc:
            return None

        logger.info("Updated photos for trip %s: %s", trip.id, sorted(photos))
        doc["id"] = str(doc.pop("_id"))
        return Trip(**doc)
