from typing import List, Sequence
from fastapi import APIRouter, Depends, HTTPException, Path, Query
from ..codewars import CodewarsClient, get_codewars_client, profile_page_url
from ..errors import ProfileFetchError
from ..models.data import UserRecord
from ..models.request import LeaderboardRequest
from ..models.response import FetchErrorEntry, LeaderboardEntry, LeaderboardResponse, ProfileResponse
from ..ranking import OVERALL, available_selectors, rank_by, score_of
from ..state import parse_usernames
from ..logger import get_logger

logger = get_logger()
router = APIRouter(prefix="/api")

def build_leaderboard(records: Sequence[UserRecord], language: str) -> LeaderboardResponse:
    categories = available_selectors(records)
    if language not in categories:
        raise HTTPException(status_code=400, detail=f'No ranking available for "{language}".')

    entries = [
        LeaderboardEntry(
            position=idx + 1,
            username=profile.username,
            clan=profile.clan_name,
            score=score_of(profile, language),
            profile_url=profile_page_url(profile.username)
        )
        for idx, profile in enumerate(rank_by(records, language))
    ]
    errors = [FetchErrorEntry(**rec.to_dict()) for rec in records if rec.is_error]
    return LeaderboardResponse(language=language, categories=categories, entries=entries, errors=errors)

async def _leaderboard(client: CodewarsClient, usernames: List[str], language: str) -> LeaderboardResponse:
    try:
        records = await client.fetch_all(usernames)
        response = build_leaderboard(records, language)
        logger.info(f"Built {language} leaderboard with {len(response.entries)} entries")
        return response
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error building leaderboard: {e}")
        raise HTTPException(status_code=500, detail="Failed to build leaderboard")

@router.get("/leaderboard", response_model=LeaderboardResponse)
async def get_leaderboard(
    usernames: str = Query(..., description="Comma-separated Codewars usernames"),
    language: str = Query(OVERALL, min_length=1, max_length=100),
    client: CodewarsClient = Depends(get_codewars_client)
):
    """
    Fetch the given users and rank them.

    - **usernames**: comma-separated list, blanks and duplicates are ignored
    - **language**: "overall" or a language one of the users has a rank in
    """
    try:
        names = parse_usernames(usernames)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return await _leaderboard(client, names, language)

@router.post("/leaderboard", response_model=LeaderboardResponse)
async def post_leaderboard(
    data: LeaderboardRequest,
    client: CodewarsClient = Depends(get_codewars_client)
):
    """
    Same as GET /api/leaderboard with the usernames given as a JSON list.
    """
    try:
        names = parse_usernames(",".join(data.usernames))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return await _leaderboard(client, names, data.language)

@router.get("/users/{username}", response_model=ProfileResponse)
async def get_user(
    username: str = Path(..., min_length=1, max_length=100),
    client: CodewarsClient = Depends(get_codewars_client)
):
    """Fetch a single Codewars profile"""
    try:
        profile = await client.fetch_user(username)
        return ProfileResponse(**profile.to_dict())
    except ProfileFetchError as e:
        logger.warning(f"Profile lookup failed: {e.message}")
        status_code = 404 if e.status_code == 404 else 502
        raise HTTPException(status_code=status_code, detail=e.message)
    except Exception as e:
        logger.error(f"Error getting user {username}: {e}")
        raise HTTPException(status_code=500, detail="Failed to get user")
