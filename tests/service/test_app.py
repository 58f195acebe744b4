"""Tests for the FastAPI service mode."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from mylint.orchestrator import Orchestrator
from mylint.service import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(orchestrator_factory=Orchestrator))


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_lint_endpoint(client: TestClient) -> None:
    response = client.post("/lint", json={"text": "# H\n\\( x \\)"})
    assert response.status_code == 200
    assert response.json() == {"text": "# H\n\n$x$", "changed": True}


def test_lint_endpoint_honours_rule_toggles(client: TestClient) -> None:
    response = client.post(
        "/lint",
        json={"text": "- a\n\n- b", "normalize_spacing": False},
    )
    assert response.json() == {"text": "- a\n\n- b", "changed": False}


def test_fix_endpoint_dry_run(client: TestClient, tmp_path: Path) -> None:
    document = tmp_path / "note.md"
    document.write_text("- a\n\n- b", encoding="utf-8")

    response = client.post("/fix", json={"path": str(tmp_path), "dry_run": True})

    assert response.status_code == 200
    outcomes = response.json()["outcomes"]
    assert len(outcomes) == 1
    assert outcomes[0]["status"] == "updated"
    assert outcomes[0]["dry_run"] is True
    assert outcomes[0]["diff"]
    assert document.read_text(encoding="utf-8") == "- a\n\n- b"


def test_fix_endpoint_missing_path(client: TestClient, tmp_path: Path) -> None:
    response = client.post("/fix", json={"path": str(tmp_path / "missing")})
    assert response.status_code == 404
    assert "Path not found" in response.json()["detail"]
