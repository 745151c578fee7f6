import asyncio
import pytest
import httpx
from fastapi.testclient import TestClient

from app.codewars import CodewarsClient, get_codewars_client
from app.main import app
from app.models.data import FetchFailure, UserProfile
from app.state import SessionStore, get_session_store

API_URL = "https://codewars.test/api/v1/users/"

def make_payload(username, overall, languages=None, clan=None, honor=100):
    return {
        'username': username,
        'name': None,
        'honor': honor,
        'clan': clan,
        'ranks': {
            'overall': {'rank': -4, 'name': '4 kyu', 'color': 'blue', 'score': overall},
            'languages': {
                lang: {'rank': -5, 'name': '5 kyu', 'color': 'yellow', 'score': score}
                for lang, score in (languages or {}).items()
            }
        }
    }

def make_profile(username, overall, languages=None, clan=None):
    return UserProfile(
        identifier=username,
        username=username,
        clan_name=clan,
        overall_score=overall,
        language_scores=dict(languages or {})
    )

def make_failure(username, message=None, status_code=404):
    return FetchFailure(username, message or f'User not found: "{username}" (404).', status_code=status_code)

def username_of(request: httpx.Request) -> str:
    return request.url.path.rsplit('/', 1)[-1]

def fake_api(responses, delays=None):
    """
    MockTransport serving `responses`: username -> payload dict, status int,
    or an exception instance to raise. Unknown users get 404.
    """
    seen = []

    async def handler(request: httpx.Request) -> httpx.Response:
        name = username_of(request)
        seen.append(name)
        if delays and name in delays:
            await asyncio.sleep(delays[name])
        outcome = responses.get(name, 404)
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, int):
            return httpx.Response(outcome, json={'success': False, 'reason': 'error'})
        if isinstance(outcome, str):
            return httpx.Response(200, text=outcome)
        return httpx.Response(200, json=outcome)

    transport = httpx.MockTransport(handler)
    transport.seen = seen
    return transport

@pytest.fixture
def abe_and_dan():
    return {
        'Abe': make_payload('Abe', 1500, {'javascript': 500}, clan='Warriors'),
        'Dan': make_payload('Dan', 2000, {'python': 1200}),
    }

@pytest.fixture
def codewars_client(abe_and_dan):
    return CodewarsClient(base_url=API_URL, timeout=1.0, transport=fake_api(abe_and_dan))

@pytest.fixture
def store():
    return SessionStore(max_entries=10)

@pytest.fixture
def test_client(codewars_client, store):
    app.dependency_overrides[get_codewars_client] = lambda: codewars_client
    app.dependency_overrides[get_session_store] = lambda: store
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
