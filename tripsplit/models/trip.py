from typing import Dict, List, Optional

from tripsplit.models.base import TripModel


class Trip(TripModel):
    name: str
    participants: List[str]  # display names, unique, in display order
    member_avatars: Optional[Dict[str, str]] = None  # name -> avatar id
    member_photos: Optional[Dict[str, str]] = None  # name -> photo URL
