import json
from typing import Any, Dict

from fastapi import Request

from schedulify.db.session_store import ScheduleSession, SessionStore
from schedulify.services.generator import ScheduleGenerator

SESSION_ID_KEY = "sid"

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _is_json(content_type: str) -> bool:
    return content_type == "application/json" or content_type.endswith("+json")


async def read_payload(request: Request) -> Dict[str, Any]:
    """
    Request body as a plain dict, from JSON or a submitted form.
    Other content types and anything unreadable count as an empty body so field
    checks report it.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return {k: v for k, v in form.items() if isinstance(v, str)}
    if not _is_json(content_type):
        return {}

    raw = await request.body()
    if not raw:
        return {}
    try:
        data = json.loads(raw)
    except (ValueError, UnicodeDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def get_schedule_session(request: Request) -> ScheduleSession:
    """
    Resolve the server-side session for this client.
    The signed cookie only carries the id; a fresh id is issued on first contact.
    """
    store: SessionStore = request.app.state.session_store
    session_id = request.session.get(SESSION_ID_KEY)
    if not session_id:
        session_id = store.new_session_id()
        request.session[SESSION_ID_KEY] = session_id
    return ScheduleSession(store, session_id)


def get_schedule_generator(request: Request) -> ScheduleGenerator:
    return request.app.state.schedule_generator
