from typing import Iterable, List
from ..models.data import UserProfile, UserRecord

OVERALL = "overall"

def _profiles(records: Iterable[UserRecord]) -> List[UserProfile]:
    return [rec for rec in records if not rec.is_error]

def extract_categories(records: Iterable[UserRecord]) -> List[str]:
    """Sorted, de-duplicated language keys across all successful profiles"""
    languages = set()
    for profile in _profiles(records):
        languages.update(profile.language_scores.keys())
    languages.discard(OVERALL)
    return sorted(languages)

def available_selectors(records: Iterable[UserRecord]) -> List[str]:
    return [OVERALL] + extract_categories(records)

def score_of(profile: UserProfile, selector: str) -> int:
    if selector == OVERALL:
        return profile.overall_score
    return profile.language_scores[selector]

def rank_by(records: Iterable[UserRecord], selector: str) -> List[UserProfile]:
    """
    Order successful profiles by the selected score, highest first.

    For a language selector, profiles without that language are left out
    rather than scored as zero. Equal scores are ordered by username
    (case-insensitive, then exact) so the same input always yields the
    same leaderboard.
    """
    candidates = [
        profile for profile in _profiles(records)
        if selector == OVERALL or selector in profile.language_scores
    ]
    return sorted(
        candidates,
        key=lambda p: (-score_of(p, selector), p.username.casefold(), p.username)
    )
