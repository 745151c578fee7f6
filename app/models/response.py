from pydantic import BaseModel
from typing import Dict, List, Literal, Optional

class LeaderboardEntry(BaseModel):
    position: int
    username: str
    clan: Optional[str] = None
    score: int
    profile_url: str

class FetchErrorEntry(BaseModel):
    username: str
    message: str
    status_code: Optional[int] = None

class LeaderboardResponse(BaseModel):
    language: str
    categories: List[str]
    entries: List[LeaderboardEntry]
    errors: List[FetchErrorEntry]

class ProfileResponse(BaseModel):
    username: str
    clan: Optional[str] = None
    honor: Optional[int] = None
    overall_rank_name: Optional[str] = None
    overall_score: int
    language_scores: Dict[str, int]

class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    uptime: float
    codewars_api: str
