from enum import Enum
from pydantic import BaseModel


class RecommendationSource(str, Enum):
    GEMINI = "gemini"
    FALLBACK = "fallback"


class RecommendationResponse(BaseModel):
    advice: str
    source: RecommendationSource
