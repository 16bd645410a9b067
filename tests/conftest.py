import pytest
from fastapi.testclient import TestClient

from learnpath.agents.llm.base import LLMClient
from learnpath.mail import Mailer
from learnpath.main import create_app
from learnpath.settings import Settings


class FakeLLM(LLMClient):
    """Returns queued replies (or raises queued exceptions) in order."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def generate_text(self, *, system: str, user: str, temperature: float = 0.2) -> str:
        self.calls.append({"system": system, "user": user, "temperature": temperature})
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


class RecordingMailer(Mailer):
    def __init__(self):
        self.sent = []

    def send(self, *, to: str, subject: str, body: str) -> None:
        self.sent.append({"to": to, "subject": subject, "body": body})


@pytest.fixture
def settings():
    return Settings(_env_file=None, database_url="sqlite://", llm_provider="ollama", smtp_host="")


@pytest.fixture
def llm():
    return FakeLLM()


@pytest.fixture
def mailer():
    return RecordingMailer()


@pytest.fixture
def client(settings, llm, mailer):
    app = create_app(settings, llm_client=llm, mailer=mailer)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def signup(client):
    def _signup(name="Ada", email="ada@example.com", password="s3cret-pass"):
        r = client.post("/signup", json={"name": name, "email": email, "password": password})
        assert r.status_code == 201, r.text
        return {"name": name, "email": email, "password": password}
    return _signup
