# --- Codewars API Schema ---
from pydantic import BaseModel, Field
from typing import Dict, Optional

class RankDetail(BaseModel):
    score: int
    rank: Optional[int] = None
    name: Optional[str] = None
    color: Optional[str] = None

class Ranks(BaseModel):
    overall: RankDetail
    languages: Optional[Dict[str, RankDetail]] = Field(default_factory=dict)

class CodewarsProfile(BaseModel):
    """Body of GET /api/v1/users/{username}; only the fields the leaderboard reads"""
    username: Optional[str] = None
    name: Optional[str] = None
    honor: Optional[int] = None
    clan: Optional[str] = None
    ranks: Ranks
