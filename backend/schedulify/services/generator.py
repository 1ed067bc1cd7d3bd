# backend/schedulify/services/generator.py
import asyncio
import logging
from typing import Dict, Optional

from google import genai

from schedulify.core.config import Settings

log = logging.getLogger(__name__)


def build_schedule_prompt(schedule: Dict[str, str], prompt: str) -> str:
    """
    Combine the user's fixed daily times with their task text into one instruction
    for the model.
    """
    return f"""
    My schedule for today is:
    Wake up: {schedule["wakeUp"]}
    Lunch: {schedule["lunch"]}
    Dinner: {schedule["dinner"]}
    Sleep: {schedule["sleep"]}

    My tasks are:
    "{prompt}"

    Please provide an optimized schedule that includes the new task, while respecting the existing schedule as much as possible.
    Output the schedule as a list of items, each with a time and a task.
    """.strip()


class ScheduleGenerator:
    """Turns a composed instruction into schedule text. Raises on any failure."""

    @property
    def configured(self) -> bool:
        return True

    async def generate(self, prompt: str) -> str:
        raise NotImplementedError


class GeminiScheduleGenerator(ScheduleGenerator):
    def __init__(self, settings: Settings):
        self.api_key = settings.GEMINI_API_KEY
        self.model = settings.GEMINI_MODEL
        self.timeout = settings.GEMINI_TIMEOUT
        self._client: Optional[genai.Client] = None

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> genai.Client:
        # Built on first use so a missing key fails the request, not the startup
        if self._client is None:
            if not self.api_key:
                raise RuntimeError("GEMINI_API_KEY is not configured")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate(self, prompt: str) -> str:
        client = self._get_client()
        call = client.aio.models.generate_content(model=self.model, contents=prompt)
        if self.timeout:
            response = await asyncio.wait_for(call, timeout=self.timeout)
        else:
            response = await call

        text = response.text
        if not text or not text.strip():
            raise ValueError("Empty response from model.")
        return text
