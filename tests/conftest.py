import os
import tempfile
from pathlib import Path

# Must run before `app` is imported: settings and the engine are built at import time
_DB_PATH = Path(tempfile.mkdtemp()) / "test_taskdb.sqlite"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_PATH}"
os.environ["OPENROUTER_API_KEY"] = ""

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.main import app  # noqa: E402
from app.nlp.llm import ExtractionError, TaskExtractor  # noqa: E402
from app.schemas import ExternalExtraction  # noqa: E402


class FakeExtractor(TaskExtractor):
    def __init__(self, **fields):
        self.fields = fields
        self.calls: list[str] = []

    def extract(self, text: str) -> ExternalExtraction:
        self.calls.append(text)
        return ExternalExtraction(**self.fields)


class FailingExtractor(TaskExtractor):
    def __init__(self, message: str = "timed out"):
        self.message = message
        self.calls: list[str] = []

    def extract(self, text: str) -> ExternalExtraction:
        self.calls.append(text)
        raise ExtractionError(self.message)


@pytest.fixture(scope="session")
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture(autouse=True)
def _reset_overrides():
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def fake_extractor_factory():
    def _make(**fields):
        return FakeExtractor(**fields)

    return _make


@pytest.fixture
def failing_extractor():
    return FailingExtractor()
