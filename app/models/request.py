# --- Pydantic Models ---
from pydantic import BaseModel, Field, field_validator
from typing import List

class LeaderboardRequest(BaseModel):
    usernames: List[str] = Field(..., min_length=1)
    language: str = Field("overall", min_length=1, max_length=100)

    @field_validator('usernames')
    @classmethod
    def validate_usernames(cls, v):
        # Blank entries and repeats are dropped, first occurrence kept
        cleaned = []
        for name in v:
            name = name.strip()
            if name and name not in cleaned:
                cleaned.append(name)
        if not cleaned:
            raise ValueError('Please enter at least one username.')
        return cleaned

    @field_validator('language')
    @classmethod
    def validate_language(cls, v):
        if not v.strip():
            raise ValueError('Language cannot be empty or whitespace')
        return v.strip()
