import uuid
from typing import Optional
from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from ..codewars import CodewarsClient, get_codewars_client
from ..config import server
from ..errors import UnknownSelectorError
from ..state import SessionStore, apply_fetch, begin_fetch, change_selector, get_session_store, parse_usernames
from ..views.leaderboard import render_page
from ..logger import get_logger

logger = get_logger()
router = APIRouter()

def _session_id(request: Request) -> str:
    return request.cookies.get(server.SESSION_COOKIE) or uuid.uuid4().hex

def _page(session_id: str, html: str, status_code: int = 200):
    response = HTMLResponse(html, status_code=status_code)
    response.set_cookie(server.SESSION_COOKIE, session_id, httponly=True, samesite="lax")
    return response

def _usernames_text(state) -> str:
    return ", ".join(rec.identifier for rec in state.records)

@router.get("/", response_class=HTMLResponse)
async def show_leaderboard(
    request: Request,
    language: Optional[str] = None,
    store: SessionStore = Depends(get_session_store)
):
    """Leaderboard page for the caller's session; ?language= changes the ranking"""
    session_id = _session_id(request)
    state = store.get(session_id)
    if language is not None:
        try:
            state = change_selector(state, language)
            store.put(session_id, state)
        except UnknownSelectorError as e:
            html = render_page(state.records, state.selector, _usernames_text(state), [str(e)])
            return _page(session_id, html, status_code=400)
    return _page(session_id, render_page(state.records, state.selector, _usernames_text(state)))

@router.post("/", response_class=HTMLResponse)
async def show_rankings(
    request: Request,
    usernames: str = Form(""),
    store: SessionStore = Depends(get_session_store),
    client: CodewarsClient = Depends(get_codewars_client)
):
    """Fetch the submitted usernames into the caller's session"""
    session_id = _session_id(request)
    state = store.get(session_id)
    try:
        names = parse_usernames(usernames)
    except ValueError as e:
        html = render_page(state.records, state.selector, usernames, [f"⚠️ {e}"])
        return _page(session_id, html, status_code=400)

    state, ticket = begin_fetch(state)
    store.put(session_id, state)
    try:
        records = await client.fetch_all(names)
    except Exception as e:
        logger.error(f"Error fetching rankings: {e}")
        html = render_page(state.records, state.selector, usernames,
                           ["❌ Could not fetch user data. Please check usernames."])
        return _page(session_id, html, status_code=500)

    # Re-read: another request in this session may have started a newer fetch.
    store.put(session_id, apply_fetch(store.get(session_id), ticket, records))
    response = RedirectResponse("/", status_code=303)
    response.set_cookie(server.SESSION_COOKIE, session_id, httponly=True, samesite="lax")
    return response
