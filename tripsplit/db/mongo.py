import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from tripsplit.core.config import settings

logger = logging.getLogger(__name__)

class MongoDatabase:
    """MongoDB connection manager."""

    client: AsyncIOMotorClient = None
    db: AsyncIOMotorDatabase = None

mongodb = MongoDatabase()

async def connect_to_mongo():
    """Connect to MongoDB."""
    mongodb.client = AsyncIOMotorClient(settings.MONGODB_URI)
    mongodb.db = mongodb.client[settings.MONGODB_DB]

    # Create indexes
    await create_indexes()
    logger.info("Connected to MongoDB: %s", settings.MONGODB_DB)

async def disconnect_from_mongo():
    """Disconnect from MongoDB."""
    mongodb.client.close()
    logger.info("Disconnected from MongoDB")

async def create_indexes():
    """Create database indexes."""
    await mongodb.db.expenses.create_index([("trip_id", 1), ("created_at", -1)])
    await mongodb.db.settlements.create_index([("trip_id", 1), ("is_paid", 1)])

def get_db() -> AsyncIOMotorDatabase:
    """Get database instance."""
    return mongodb.db
