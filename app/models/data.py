from typing import Dict, Optional, Union
from .profile import CodewarsProfile

class UserProfile:
    __slots__ = ('identifier', 'username', 'clan_name', 'overall_score',
                 'language_scores', 'honor', 'overall_rank_name')
    is_error = False

    def __init__(self, identifier: str, username: str, clan_name: Optional[str],
                 overall_score: int, language_scores: Dict[str, int],
                 honor: Optional[int] = None, overall_rank_name: Optional[str] = None):
        self.identifier = identifier
        self.username = username
        self.clan_name = clan_name
        self.overall_score = overall_score
        self.language_scores = language_scores
        self.honor = honor
        self.overall_rank_name = overall_rank_name

    @classmethod
    def from_profile(cls, identifier: str, profile: CodewarsProfile) -> 'UserProfile':
        return cls(
            identifier=identifier,
            username=profile.username or identifier,
            clan_name=profile.clan or None,
            overall_score=profile.ranks.overall.score,
            language_scores={lang: detail.score for lang, detail in (profile.ranks.languages or {}).items()},
            honor=profile.honor,
            overall_rank_name=profile.ranks.overall.name
        )

    def to_dict(self):
        return {
            'username': self.username,
            'clan': self.clan_name,
            'overall_score': self.overall_score,
            'language_scores': dict(self.language_scores),
            'honor': self.honor,
            'overall_rank_name': self.overall_rank_name
        }

    def __repr__(self):
        return f"UserProfile({self.identifier!r}, overall={self.overall_score})"

class FetchFailure:
    __slots__ = ('identifier', 'message', 'status_code')
    is_error = True

    def __init__(self, identifier: str, message: str, status_code: Optional[int] = None):
        self.identifier = identifier
        self.message = message
        self.status_code = status_code

    def to_dict(self):
        return {
            'username': self.identifier,
            'message': self.message,
            'status_code': self.status_code
        }

    def __repr__(self):
        return f"FetchFailure({self.identifier!r}, {self.message!r})"

UserRecord = Union[UserProfile, FetchFailure]
