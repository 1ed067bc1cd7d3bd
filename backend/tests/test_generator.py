import asyncio
from types import SimpleNamespace

import pytest

from schedulify.core.config import Settings
from schedulify.services.generator import GeminiScheduleGenerator, build_schedule_prompt

SCHEDULE = {"wakeUp": "7am", "lunch": "12pm", "dinner": "7pm", "sleep": "11pm"}


class FakeModels:
    def __init__(self, text):
        self.text = text
        self.calls = []

    async def generate_content(self, model, contents):
        self.calls.append((model, contents))
        return SimpleNamespace(text=self.text)


def _generator_with(text, **overrides):
    settings = Settings(_env_file=None, GEMINI_API_KEY="k", **overrides)
    gen = GeminiScheduleGenerator(settings)
    models = FakeModels(text)
    gen._client = SimpleNamespace(aio=SimpleNamespace(models=models))
    return gen, models


def test_prompt_lists_times_then_task():
    prompt = build_schedule_prompt(SCHEDULE, "gym at 5pm")
    assert prompt.startswith("My schedule for today is:")
    assert prompt.index("Wake up: 7am") < prompt.index("Sleep: 11pm") < prompt.index('"gym at 5pm"')
    assert "respecting the existing schedule as much as possible" in prompt
    assert "each with a time and a task" in prompt


def test_generate_returns_model_text():
    gen, models = _generator_with("5:00pm - Gym", GEMINI_MODEL="gemini-test")
    assert asyncio.run(gen.generate("hello")) == "5:00pm - Gym"
    assert models.calls == [("gemini-test", "hello")]


@pytest.mark.parametrize("text", [None, "", "   "])
def test_empty_model_answer_raises(text):
    gen, _ = _generator_with(text)
    with pytest.raises(ValueError):
        asyncio.run(gen.generate("hello"))


def test_missing_key_fails_at_call_time():
    gen = GeminiScheduleGenerator(Settings(_env_file=None, GEMINI_API_KEY=None))
    assert gen.configured is False
    with pytest.raises(RuntimeError):
        asyncio.run(gen.generate("hello"))


def test_timeout_applies_when_configured():
    gen = GeminiScheduleGenerator(Settings(_env_file=None, GEMINI_API_KEY="k", GEMINI_TIMEOUT=0.01))

    class SlowModels:
        async def generate_content(self, model, contents):
            await asyncio.sleep(1)

    gen._client = SimpleNamespace(aio=SimpleNamespace(models=SlowModels()))
    with pytest.raises(asyncio.TimeoutError):
        asyncio.run(gen.generate("hello"))
