from typing import Dict, List, Optional
from pydantic import BaseModel


class TripCreate(BaseModel):
    name: str
    participants: List[str]
    member_avatars: Optional[Dict[str, str]] = None


class MemberPhotosUpdate(BaseModel):
    """Replaces the trip's whole name -> photo URL map."""
    member_photos: Dict[str, str]
