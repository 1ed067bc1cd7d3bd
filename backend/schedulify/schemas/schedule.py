from pydantic import BaseModel, ConfigDict, Field
from typing import Any, Optional

SCHEDULE_FIELDS = ("wakeUp", "lunch", "dinner", "sleep")

# --- Request schemas ---

class ScheduleIn(BaseModel):
    """
    [Request] POST /set-schedule
    Every field is optional here so a missing one can be reported as a 400
    instead of FastAPI's default 422.
    """
    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    wakeUp: Optional[str] = None
    lunch: Optional[str] = None
    dinner: Optional[str] = None
    sleep: Optional[str] = None

    def missing_fields(self) -> list[str]:
        return [name for name in SCHEDULE_FIELDS if not getattr(self, name)]


class AnalyzeTaskIn(BaseModel):
    """
    [Request] POST /analyze-task
    The prompt is passed to the model as-is.
    """
    model_config = ConfigDict(extra="ignore")

    prompt: Any = None

    @property
    def prompt_text(self) -> str:
        return "" if self.prompt is None else str(self.prompt)

# --- Response schemas ---

class ScheduleRead(BaseModel):
    """[Response] GET /get-schedule"""
    wakeUp: str
    lunch: str
    dinner: str
    sleep: str


class SuggestedScheduleRead(BaseModel):
    """[Response] POST /analyze-task, GET /get-generated-schedule"""
    suggestedSchedule: str = Field(description="Model output, returned without parsing")
