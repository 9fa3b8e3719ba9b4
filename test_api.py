"""
HTTP layer tests: input validation, error envelope, auth and serialization.
"""

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from message_analyzer import main


@pytest.fixture
def client(monkeypatch):
    monkeypatch.delenv("ANALYZER_API_KEY", raising=False)
    return TestClient(main.app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_analyze_scam(client):
    response = client.post("/api/analyze", json={
        "message": "URGENT: verify your account immediately or it will be suspended. Send bitcoin to confirm."
    })
    assert response.status_code == 200
    body = response.json()
    assert body["riskLevel"] == "High Risk Fraud"
    assert body["suggestedReply"].keys() == {"legal"}
    assert body["isLead"] is False
    assert "leadQualityScore" not in body


def test_analyze_lead(client):
    response = client.post("/api/analyze", json={
        "message": "We are interested in your product and would like a pricing quote. Our budget "
                   "is $5000 and we need this by next month. Please contact us at sales@example.com."
    })
    assert response.status_code == 200
    body = response.json()
    assert body["riskLevel"] == "Safe"
    assert body["isLead"] is True
    assert body["leadQualityScore"] == 10
    assert set(body) == {
        "riskLevel", "reason", "businessImpact", "recommendedAction",
        "suggestedReply", "leadQualityScore", "businessInsight", "isLead",
    }


def test_whitespace_message_is_analyzed(client):
    response = client.post("/api/analyze", json={"message": "   "})
    assert response.status_code == 200
    assert response.json()["riskLevel"] == "Safe"


@pytest.mark.parametrize("payload", [
    {},
    {"message": ""},
    {"message": 42},
    {"message": None},
    {"message": ["hello"]},
    {"text": "hello"},
])
def test_invalid_message_rejected(client, payload):
    response = client.post("/api/analyze", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid message format"}


def test_non_json_body_rejected(client):
    response = client.post(
        "/api/analyze", content="not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid message format"}


def test_internal_fault_is_reported_generically(client, monkeypatch):
    def boom(text):
        raise RuntimeError("rule table exploded")

    monkeypatch.setattr(main.message_analyzer, "analyze", boom)
    response = client.post("/api/analyze", json={"message": "hello"})
    assert response.status_code == 500
    assert response.json() == {"error": "Analysis failed"}


def test_api_key_enforced_when_configured(client, monkeypatch):
    monkeypatch.setenv("ANALYZER_API_KEY", "s3cret-key")

    response = client.post("/api/analyze", json={"message": "hello"})
    assert response.status_code == 403

    response = client.post(
        "/api/analyze", json={"message": "hello"}, headers={"x-api-key": "s3cret-key"}
    )
    assert response.status_code == 200


@pytest.mark.parametrize("value, expected", [
    ("debug", logging.DEBUG),
    ("WARNING", logging.WARNING),
    ("bogus", logging.INFO),
    ("verbose", logging.INFO),
    ("basic_format", logging.INFO),
])
def test_resolve_log_level(monkeypatch, value, expected):
    monkeypatch.setenv("LOG_LEVEL", value)
    assert main._resolve_log_level() == expected


def test_app_imports_with_unknown_log_level():
    # Fresh interpreter: no handlers on the root logger, so basicConfig really runs
    env = dict(os.environ, LOG_LEVEL="bogus")
    completed = subprocess.run(
        [
            sys.executable, "-c",
            "import logging, message_analyzer.main; "
            "assert logging.getLogger().level == logging.INFO",
        ],
        cwd=Path(__file__).parent,
        env=env,
        capture_output=True,
        text=True,
    )
    assert completed.returncode == 0, completed.stderr
