import pytest
from fastapi.testclient import TestClient

from notesense.api import create_app
from notesense.config import Config


def _config(**detection) -> Config:
    data = {"detection": {"max_text_length": 200, "memoize_size": 16, **detection}, "logging": {"level": "WARNING"}}
    return Config(data=data)


@pytest.fixture
def client():
    with TestClient(create_app(_config())) as test_client:
        yield test_client


def test_health(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_detect_returns_camel_case_result(client: TestClient):
    response = client.post("/detect", json={"text": "shoulder pain"})

    assert response.status_code == 200
    body = response.json()
    assert body["hasDetections"] is True
    assert body["bodyPartCount"] == 1
    assert body["symptomCount"] == 1
    assert body["tokens"][0] == {
        "text": "shoulder",
        "type": "bodyPart",
        "startIndex": 0,
        "endIndex": 8,
        "normalizedValue": "front_delt",
    }
    assert body["tokens"][1]["type"] == "symptom"
    assert [issue["bodyPart"] for issue in body["issues"]] == ["front_delt", "side_delt", "rear_delt"]
    assert all(issue["rawText"] == "shoulder pain" for issue in body["issues"])


def test_detect_empty_text(client: TestClient):
    body = client.post("/detect", json={"text": ""}).json()
    assert body["hasDetections"] is False
    assert body["tokens"] == [] and body["issues"] == []


def test_detect_memoizes_on_text(client: TestClient):
    client.post("/detect", json={"text": "knee sore"})
    client.post("/detect", json={"text": "knee sore"})

    assert client.app.state.detect.cache_info().hits == 1


def test_detect_rejects_text_over_cap():
    with TestClient(create_app(_config(max_text_length=10))) as client:
        response = client.post("/detect", json={"text": "knee sore and wrist tight"})
    assert response.status_code == 413


def test_vocabulary(client: TestClient):
    body = client.get("/body-issues/vocabulary").json()
    assert "lower back" in body["bodyParts"]
    assert "pain" in body["symptoms"]


def test_preview_resolves_severity(client: TestClient):
    response = client.post(
        "/body-issues/preview",
        json={"date": "2026-10-19", "text": "knee sore, wrist tight", "sessionId": 4},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 2
    assert body["issues"] == [
        {"bodyPart": "quads", "symptom": "sore", "severity": 2, "rawText": "knee sore", "sessionId": 4},
        {"bodyPart": "forearms", "symptom": "tight", "severity": 1, "rawText": "wrist tight", "sessionId": 4},
    ]


def test_preview_without_issues_is_unprocessable(client: TestClient):
    response = client.post("/body-issues/preview", json={"date": "2026-10-19", "text": "feeling sore today"})
    assert response.status_code == 422


def test_preview_rejects_bad_date(client: TestClient):
    response = client.post("/body-issues/preview", json={"date": "yesterday", "text": "knee sore"})
    assert response.status_code == 422


def test_normalize_expands_aliases(client: TestClient):
    response = client.post(
        "/body-issues/normalize",
        json={"date": "2026-10-19", "issues": [{"bodyPart": "elbow", "symptom": "ache", "rawText": "elbow ache"}]},
    )

    assert response.status_code == 200
    body = response.json()
    assert [issue["bodyPart"] for issue in body["issues"]] == ["forearms", "triceps"]


def test_normalize_rejects_unknown_body_part(client: TestClient):
    response = client.post(
        "/body-issues/normalize",
        json={"date": "2026-10-19", "issues": [{"bodyPart": "foot", "symptom": "ache"}]},
    )
    assert response.status_code == 400
    assert "foot" in response.json()["detail"]


def test_memoized_result_is_shared_but_immutable(client: TestClient):
    cached = client.app.state.detect
    first = cached("knee sore")

    assert cached("knee sore") is first
    assert isinstance(first.tokens, tuple) and isinstance(first.issues, tuple)
    assert client.post("/detect", json={"text": "knee sore"}).json()["symptomCount"] == 1
