from collections import OrderedDict
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

from .config import codewars, server
from .errors import EmptyUsernameListError, UnknownSelectorError
from .models.data import UserRecord
from .ranking import OVERALL, available_selectors

@dataclass(frozen=True)
class LeaderboardState:
    records: Tuple[UserRecord, ...] = ()
    selector: str = OVERALL
    generation: int = 0

def parse_usernames(text: Optional[str], limit: Optional[int] = None) -> List[str]:
    """
    Split a comma-separated field into trimmed, non-empty usernames.

    Repeated usernames are dropped (first occurrence kept), so each user
    appears once on the leaderboard. Names that cannot be encoded as UTF-8
    are rejected with ValueError.
    """
    usernames = []
    for part in (text or '').split(','):
        name = part.strip()
        try:
            name.encode('utf-8')
        except UnicodeEncodeError:
            raise ValueError(f"Invalid username: {name!r}")
        if name and name not in usernames:
            usernames.append(name)
    if not usernames:
        raise EmptyUsernameListError()
    limit = limit if limit is not None else codewars.MAX_USERNAMES
    if len(usernames) > limit:
        raise ValueError(f"Too many usernames: at most {limit} are allowed.")
    return usernames

def begin_fetch(state: LeaderboardState) -> Tuple[LeaderboardState, int]:
    """Register a new fetch; the returned ticket identifies it"""
    ticket = state.generation + 1
    return replace(state, generation=ticket), ticket

def apply_fetch(state: LeaderboardState, ticket: int, records: Sequence[UserRecord]) -> LeaderboardState:
    # Results of a fetch superseded by a later one are dropped.
    if ticket != state.generation:
        return state
    return replace(state, records=tuple(records), selector=OVERALL)

def change_selector(state: LeaderboardState, selector: str) -> LeaderboardState:
    if selector not in available_selectors(state.records):
        raise UnknownSelectorError(selector)
    return replace(state, selector=selector)

class SessionStore:
    """In-memory LeaderboardState per browser session, oldest evicted first"""

    def __init__(self, max_entries: Optional[int] = None):
        self.max_entries = max_entries or server.SESSION_MAX_ENTRIES
        self._states: "OrderedDict[str, LeaderboardState]" = OrderedDict()

    def get(self, session_id: str) -> LeaderboardState:
        state = self._states.get(session_id)
        if state is None:
            return LeaderboardState()
        self._states.move_to_end(session_id)
        return state

    def put(self, session_id: str, state: LeaderboardState):
        self._states[session_id] = state
        self._states.move_to_end(session_id)
        while len(self._states) > self.max_entries:
            self._states.popitem(last=False)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._states

    def __len__(self) -> int:
        return len(self._states)

sessions = SessionStore()

def get_session_store() -> SessionStore:
    """FastAPI dependency returning the process-wide session store"""
    return sessions
