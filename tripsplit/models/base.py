from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TripModel(BaseModel):
    """Base for stored records. `id` is the string form of the Mongo `_id`."""
    id: Optional[str] = None
    created_at: datetime = Field(default_factory=_utcnow)

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True
    )
