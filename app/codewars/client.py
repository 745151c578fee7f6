import asyncio
from typing import List, Optional, Sequence
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from ..config import codewars
from ..errors import ProfileFetchError
from ..logger import get_logger
from ..models.data import FetchFailure, UserProfile, UserRecord
from ..models.profile import CodewarsProfile
from .errors import status_message

logger = get_logger()

class CodewarsClient:
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url or codewars.API_URL
        self.timeout = timeout if timeout is not None else codewars.REQUEST_TIMEOUT
        self.transport = transport
        self.client: Optional[httpx.AsyncClient] = None
        self._initialized = False
        self._init_lock = asyncio.Lock()

    async def initialize(self):
        """Open the shared HTTP client"""
        if self._initialized:
            return

        async with self._init_lock:
            if self._initialized:  # Double check after acquiring lock
                return
            self.client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={'User-Agent': codewars.USER_AGENT, 'Accept': 'application/json'},
                transport=self.transport
            )
            self._initialized = True
            logger.info(f"Codewars client initialized for {self.base_url}")

    async def close(self):
        """Close the HTTP client"""
        if self.client:
            await self.client.aclose()
            self.client = None
        self._initialized = False

    def profile_url(self, username: str) -> str:
        return self.base_url + quote(username, safe='')

    async def fetch_user(self, username: str) -> UserProfile:
        """Fetch one profile, raising ProfileFetchError on any failure"""
        if not self._initialized:
            await self.initialize()

        try:
            url = self.profile_url(username)
        except UnicodeError as e:
            raise ProfileFetchError(username, f'Invalid username "{username}".') from e

        try:
            response = await self.client.get(url)
        except httpx.TimeoutException as e:
            raise ProfileFetchError(username, f'Request timed out for "{username}".') from e
        except httpx.HTTPError as e:
            raise ProfileFetchError(username, f'Network error while fetching "{username}": {e}') from e

        if not response.is_success:
            raise ProfileFetchError(username, status_message(response.status_code, username),
                                    status_code=response.status_code)

        try:
            profile = CodewarsProfile.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ProfileFetchError(username, f'Malformed profile data for "{username}".',
                                    status_code=response.status_code) from e

        return UserProfile.from_profile(username, profile)

    async def _fetch_record(self, username: str) -> UserRecord:
        try:
            return await self.fetch_user(username)
        except ProfileFetchError as e:
            logger.warning(f"Profile fetch failed: {e.message}")
            return FetchFailure(username, e.message, status_code=e.status_code)
        except Exception as e:
            logger.error(f"Unexpected error while fetching {username!r}: {e}")
            return FetchFailure(username, f'Unexpected error while fetching "{username}": {e}')

    async def fetch_all(self, usernames: Sequence[str]) -> List[UserRecord]:
        """
        Fetch every profile concurrently.

        The result has one record per username, in input order. Failed
        requests become FetchFailure records so the call itself never fails.
        Cancelling the caller cancels all outstanding requests.
        """
        if not self._initialized:
            await self.initialize()

        logger.info(f"Fetching {len(usernames)} Codewars profiles")
        records = await asyncio.gather(*(self._fetch_record(name) for name in usernames))
        failures = sum(1 for rec in records if rec.is_error)
        logger.info(f"Fetched {len(records) - failures} profiles, {failures} failed")
        return list(records)

codewars_client = CodewarsClient()

def get_codewars_client() -> CodewarsClient:
    """FastAPI dependency returning the shared client"""
    return codewars_client

def profile_page_url(username: str) -> str:
    """Public Codewars profile page for a user"""
    return codewars.PROFILE_URL + quote(username, safe='')
