from datetime import date, timedelta

from app.main import app
from app.nlp.llm import get_extractor

PROMPT = "call mom tomorrow at 5pm high priority"


def _tomorrow() -> str:
    return (date.today() + timedelta(days=1)).isoformat()


def test_ai_task_uses_local_parser_without_key(client):
    r = client.post("/ai-task", json={"prompt": PROMPT})
    assert r.status_code == 200, r.text
    task = r.json()["task"]
    assert task == {"text": "call mom", "date": _tomorrow(), "time": "17:00", "priority": "High"}


def test_ai_task_takes_only_title_from_extractor(client, fake_extractor_factory):
    fake = fake_extractor_factory(text="Call Mom", date="2099-01-01", time="06:00", priority="Low")
    app.dependency_overrides[get_extractor] = lambda: fake

    task = client.post("/ai-task", json={"prompt": PROMPT}).json()["task"]

    assert fake.calls == [PROMPT]
    assert task == {"text": "Call Mom", "date": _tomorrow(), "time": "17:00", "priority": "High"}


def test_ai_task_degrades_when_extractor_fails(client, failing_extractor):
    app.dependency_overrides[get_extractor] = lambda: failing_extractor

    r = client.post("/ai-task", json={"prompt": PROMPT})

    assert r.status_code == 200
    assert r.json()["task"]["text"] == "call mom"
    assert failing_extractor.calls == [PROMPT]


def test_ai_task_requires_prompt(client):
    for body in ({}, {"prompt": ""}, {"prompt": "   "}):
        r = client.post("/ai-task", json=body)
        assert r.status_code == 400
        assert r.json() == {"detail": "No prompt provided"}


def test_ingest_parses_and_persists(client):
    r = client.post("/ingest", json={"text": "dentist 3/15 at 2pm low priority"})
    assert r.status_code == 201, r.text
    created = r.json()
    assert created["text"] == "dentist"
    assert created["time"] == "14:00"
    assert created["priority"] == "Low"
    assert created["date"].endswith("-03-15")

    r = client.get(f"/tasks/{created['id']}")
    assert r.status_code == 200
    assert r.json()["text"] == "dentist"


def test_ingest_rejects_blank_text(client):
    assert client.post("/ingest", json={"text": "   "}).status_code == 400
