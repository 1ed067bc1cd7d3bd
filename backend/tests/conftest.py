import pytest
from fastapi.testclient import TestClient

from schedulify.core.config import Settings
from schedulify.db.session_store import SessionStore
from schedulify.main import create_app
from schedulify.services.generator import ScheduleGenerator


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class StubGenerator(ScheduleGenerator):
    """Returns canned text, or raises `error` when set. Records every prompt."""

    def __init__(self, text: str = "5:00pm - Gym"):
        self.text = text
        self.error = None
        self.prompts = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return SessionStore(max_age=3600, clock=clock)


@pytest.fixture
def generator():
    return StubGenerator()


@pytest.fixture
def settings():
    return Settings(_env_file=None, SESSION_SECRET="test-secret", GEMINI_API_KEY="test-key")


@pytest.fixture
def app(settings, generator, store):
    return create_app(settings=settings, generator=generator, session_store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


SCHEDULE = {"wakeUp": "7am", "lunch": "12pm", "dinner": "7pm", "sleep": "11pm"}
