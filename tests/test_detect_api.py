"""Tests for the language detection API routes."""
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

import backend
import ratelimit
import resolver
from models import Language, SUPPORTED_LANGUAGES
from detect_routes import router as detect_router, MAX_INPUT_LEN


@pytest.fixture()
def client():
    app = FastAPI()
    app.include_router(detect_router)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def external(monkeypatch, make_detector):
    """Replace the network detector; returns a setter for its answer."""
    def _set(answer=None, **kwargs):
        fake = make_detector(answer, **kwargs)
        monkeypatch.setattr(resolver, "detect_external", fake)
        return fake
    return _set


def test_detect_language_agreement(client, external):
    fake = external(Language.ENGLISH)
    resp = client.post("/api/detect-language", json={"text": "The early bird catches the worm"})
    assert resp.status_code == 200
    d = resp.json()
    assert d["language"] == "English"
    assert d["method"] == "agreement"
    assert 0 < d["confidence"] <= 1
    assert "needs_confirmation" in d
    assert fake.calls == ["The early bird catches the worm"]


def test_detect_language_detector_down(client, external):
    external(raises=OSError("network unreachable"))
    resp = client.post("/api/detect-language", json={"text": "猿も木から落ちる"})
    assert resp.status_code == 200
    d = resp.json()
    assert d["language"] == "Japanese"
    assert d["method"] == "emergency-fallback"
    assert d["needs_confirmation"] is True


def test_detect_language_too_short(client, external):
    fake = external(Language.ENGLISH)
    resp = client.post("/api/detect-language", json={"text": "ab"})
    assert resp.status_code == 200
    assert resp.json() == {
        "language": None, "confidence": 0.0, "method": "text-too-short", "needs_confirmation": True,
    }
    assert fake.calls == []


def test_detect_language_rejects_empty(client, external):
    external(Language.ENGLISH)
    assert client.post("/api/detect-language", json={"text": "   "}).status_code == 400


def test_detect_language_rejects_long_input(client, external):
    external(Language.ENGLISH)
    resp = client.post("/api/detect-language", json={"text": "a" * (MAX_INPUT_LEN + 1)})
    assert resp.status_code == 400


def test_detect_language_requires_text(client):
    assert client.post("/api/detect-language", json={}).status_code == 422


def test_classify_returns_scores(client):
    resp = client.post("/api/classify", json={"text": "Wij hebben geen tijd"})
    assert resp.status_code == 200
    d = resp.json()
    assert d["language"] == "Dutch"
    assert d["confidence"] > 0
    assert d["scores"]["Dutch"] == 12
    assert set(d["scores"]) == {lang.value for lang in Language}


def test_classify_ambiguous(client):
    d = client.post("/api/classify", json={"text": "der het"}).json()
    assert d["language"] is None
    assert d["confidence"] == 0.0


def test_languages(client):
    resp = client.get("/api/languages")
    assert resp.status_code == 200
    langs = resp.json()
    assert langs == SUPPORTED_LANGUAGES
    assert langs["vi"] == "Vietnamese"
    assert len(langs) == 8


def test_rate_limit(client, external, monkeypatch):
    external(None)
    monkeypatch.setattr(ratelimit, "RATE_LIMIT_REQUESTS", 2)
    for _ in range(2):
        assert client.post("/api/classify", json={"text": "the cat"}).status_code == 200
    assert client.post("/api/detect-language", json={"text": "the cat"}).status_code == 429


def test_rate_limit_keyed_by_forwarded_for(client, monkeypatch):
    monkeypatch.setattr(ratelimit, "RATE_LIMIT_REQUESTS", 1)
    first = client.post("/api/classify", json={"text": "the cat"}, headers={"X-Forwarded-For": "10.0.0.1"})
    other = client.post("/api/classify", json={"text": "the cat"}, headers={"X-Forwarded-For": "10.0.0.2, 10.0.0.9"})
    again = client.post("/api/classify", json={"text": "the cat"}, headers={"X-Forwarded-For": "10.0.0.1"})
    assert first.status_code == 200
    assert other.status_code == 200
    assert again.status_code == 429


def test_health(monkeypatch):
    async def _reachable():
        return True
    monkeypatch.setattr(backend, "check_detector_connectivity", _reachable)
    with TestClient(backend.app) as test_client:
        resp = test_client.get("/api/health")
    assert resp.status_code == 200
    d = resp.json()
    assert d["status"] == "ok"
    assert d["languages"] == 8
    assert d["detector"]["reachable"] is True


def test_health_degraded(monkeypatch):
    async def _unreachable():
        return False
    monkeypatch.setattr(backend, "check_detector_connectivity", _unreachable)
    with TestClient(backend.app) as test_client:
        d = test_client.get("/api/health").json()
    assert d["status"] == "degraded"
