# backend/schedulify/api/endpoints/analyze.py
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from schedulify.api.deps import get_schedule_generator, get_schedule_session, read_payload
from schedulify.core.errors import NotFoundError, UpstreamError, ValidationError
from schedulify.db.session_store import ScheduleSession
from schedulify.schemas.schedule import (
    SCHEDULE_FIELDS,
    AnalyzeTaskIn,
    SuggestedScheduleRead,
)
from schedulify.services.generator import ScheduleGenerator, build_schedule_prompt

log = logging.getLogger(__name__)

router = APIRouter(tags=["AI Schedule"])

INCOMPLETE_SCHEDULE_MESSAGE = (
    "Please provide specific times for Wake up, Lunch, Dinner, and Sleep."
)
UPSTREAM_FAILURE_MESSAGE = "An error occurred while processing the task."


@router.post("/analyze-task", response_model=SuggestedScheduleRead)
async def analyze_task(
    payload: Dict[str, Any] = Depends(read_payload),
    session: ScheduleSession = Depends(get_schedule_session),
    generator: ScheduleGenerator = Depends(get_schedule_generator),
):
    """
    Ask the model to fit the user's tasks around their fixed daily times.
    The answer is stored as the session's generated schedule only if the call succeeds.
    """
    # 1. The stored schedule must be complete before anything goes out
    schedule = session.schedule
    if not schedule or not all(schedule.get(name) for name in SCHEDULE_FIELDS):
        raise ValidationError(INCOMPLETE_SCHEDULE_MESSAGE)

    task = AnalyzeTaskIn.model_validate(payload)

    # 2. Compose and send a single request, no retry
    full_prompt = build_schedule_prompt(schedule, task.prompt_text)
    log.debug("Prompt sent to schedule generator:\n%s", full_prompt)

    try:
        generated_text = await generator.generate(full_prompt)
    except Exception:
        log.exception("Schedule generation failed for session %s", session.session_id)
        raise UpstreamError(UPSTREAM_FAILURE_MESSAGE)

    # 3. Only a successful answer replaces the previous one
    session.set_generated_schedule(generated_text)
    return SuggestedScheduleRead(suggestedSchedule=generated_text)


@router.get("/get-generated-schedule", response_model=SuggestedScheduleRead)
async def get_generated_schedule(session: ScheduleSession = Depends(get_schedule_session)):
    if not session.generated_schedule:
        raise NotFoundError("No generated schedule found")
    return SuggestedScheduleRead(suggestedSchedule=session.generated_schedule)
