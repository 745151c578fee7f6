from typing import Optional

class LeaderboardError(Exception):
    """Base class for errors raised by the leaderboard service"""

class EmptyUsernameListError(LeaderboardError, ValueError):
    def __init__(self, message: str = "Please enter at least one username."):
        super().__init__(message)

class UnknownSelectorError(LeaderboardError, ValueError):
    def __init__(self, selector: str):
        self.selector = selector
        super().__init__(f'No ranking available for "{selector}".')

class ProfileFetchError(LeaderboardError):
    """A single profile could not be fetched or parsed"""
    def __init__(self, username: str, message: str, status_code: Optional[int] = None):
        self.username = username
        self.message = message
        self.status_code = status_code
        super().__init__(message)
