import json

from fastapi.testclient import TestClient

from app import main as app_main
from tests.api.quiz_app_fixtures import _settings


def _client(monkeypatch, **overrides) -> TestClient:
    monkeypatch.setattr(app_main, "get_settings", lambda: _settings(**overrides))
    return TestClient(app_main.create_app())


def test_live_ok(monkeypatch) -> None:
    client = _client(monkeypatch)
    response = client.get("/live")
    assert response.status_code == 200
    assert response.json() == {"status": "live"}


def test_health_ok_with_bundled_bank(monkeypatch) -> None:
    with _client(monkeypatch) as client:
        response = client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["checks"]["quiz_data"]["status"] == "ok"
    assert payload["checks"]["quiz_data"]["questions"] > 0


def test_ready_ok_with_question_file(monkeypatch, tmp_path) -> None:
    path = tmp_path / "quiz.json"
    path.write_text(
        json.dumps(
            [
                {
                    "question": "Q?",
                    "options": {"A": "yes", "B": "no"},
                    "correct_answer_key": "A",
                    "correct_answer_text": "yes",
                    "category": "General",
                }
            ]
        ),
        encoding="utf-8",
    )
    with _client(monkeypatch, quiz_data_source=str(path)) as client:
        response = client.get("/ready")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ready",
        "checks": {"quiz_data": {"status": "ok", "questions": 1}},
    }


def test_health_returns_503_when_quiz_data_failed(monkeypatch, tmp_path) -> None:
    with _client(monkeypatch, quiz_data_source=str(tmp_path / "missing.json")) as client:
        health_response = client.get("/health")
        ready_response = client.get("/ready")

    assert health_response.status_code == 503
    assert health_response.json() == {
        "status": "degraded",
        "checks": {"quiz_data": {"status": "failed", "error": "quiz_data_unavailable"}},
    }
    assert ready_response.status_code == 503
    assert ready_response.json()["status"] == "not_ready"


def test_ready_not_ready_before_startup(monkeypatch) -> None:
    client = _client(monkeypatch)
    response = client.get("/ready")
    assert response.status_code == 503
    assert response.json()["checks"]["quiz_data"] == {"status": "failed", "error": "quiz_data_not_loaded"}
