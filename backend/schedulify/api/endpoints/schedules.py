# backend/schedulify/api/endpoints/schedules.py
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError as PydanticValidationError

from schedulify.api.deps import get_schedule_session, read_payload
from schedulify.core.errors import NotFoundError, ValidationError
from schedulify.db.session_store import ScheduleSession
from schedulify.schemas.schedule import SCHEDULE_FIELDS, ScheduleIn, ScheduleRead

log = logging.getLogger(__name__)

router = APIRouter(tags=["Schedule"])

REQUIRED_FIELDS_MESSAGE = "All schedule fields are required"


@router.post("/set-schedule", response_class=PlainTextResponse)
async def set_schedule(
    payload: Dict[str, Any] = Depends(read_payload),
    session: ScheduleSession = Depends(get_schedule_session),
):
    """
    Replace the session's schedule with the four submitted times.
    Rejected input leaves whatever was stored before untouched.
    """
    # Falsy values (0, false, "") count as missing before numbers are coerced to text
    if any(not payload.get(name) for name in SCHEDULE_FIELDS):
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)

    try:
        schedule = ScheduleIn.model_validate(payload)
    except PydanticValidationError:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)

    if schedule.missing_fields():
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)

    session.set_schedule(schedule.model_dump())
    log.debug("Saved schedule for session %s: %s", session.session_id, session.schedule)
    return "Schedule saved successfully"


@router.get("/get-schedule", response_model=ScheduleRead)
async def get_schedule(session: ScheduleSession = Depends(get_schedule_session)):
    if not session.schedule:
        raise NotFoundError("No schedule found")
    return session.schedule
