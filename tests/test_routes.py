"""Tests for the REST API."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from brandmark.exceptions import ConfigurationError
from brandmark.pipeline import orchestrator
from brandmark.storage.database import SqliteTokenStore
from brandmark.storage.jobs import job_store
from brandmark.web import routes
from brandmark.web.app import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok", "service": "brandmark"}


class TestLogoRoutes:
    def test_prompt_preview(self, client, brand_data):
        response = client.post("/api/logos/prompt", json={"brand": brand_data})
        body = response.json()
        assert response.status_code == 200
        assert body["logo_type"] == "combination"
        assert body["validation"]["valid"] is True
        assert "Northwind" in body["prompt"]["full_prompt"]

    def test_prompt_preview_rejects_bad_style(self, client):
        response = client.post(
            "/api/logos/prompt",
            json={"visual_preferences": {"selected_style": "baroque"}},
        )
        assert response.status_code == 422

    def test_count_out_of_range(self, client):
        response = client.post(
            "/api/logos/prompt",
            json={"generation_options": {"count": 9}},
        )
        assert response.status_code == 422

    def test_generate_queues_job(self, client, brand_data):
        runner = AsyncMock()
        with patch.object(routes, "run_logo_generation", runner):
            response = client.post(
                "/api/logos/generate",
                json={"brand": brand_data},
                headers={"X-User-Id": "user-7"},
            )

        assert response.status_code == 202
        job = job_store.get(response.json()["job_id"])
        assert job.user_id == "user-7"
        assert job.request.brand_context.name == "Northwind"
        runner.assert_called_once_with(job)

    def test_job_detail_and_listing(self, client):
        with patch.object(routes, "run_logo_generation", AsyncMock()):
            job_id = client.post(
                "/api/logos/generate",
                json={},
                headers={"X-User-Id": "user-8"},
            ).json()["job_id"]

        detail = client.get(f"/api/jobs/{job_id}").json()
        assert detail["stage"] == "queued"
        assert detail["brand"] == "Brand"

        listing = client.get("/api/jobs", headers={"X-User-Id": "user-8"}).json()
        assert [j["job_id"] for j in listing] == [job_id]

    def test_unknown_job(self, client):
        assert client.get("/api/jobs/nope").status_code == 404


class TestPaletteAndTypographyRoutes:
    def test_palettes_fall_back_without_key(self, client, brand_data):
        failing = AsyncMock(side_effect=ConfigurationError("no key"))
        with patch.object(orchestrator, "run_suggestions", failing):
            response = client.post("/api/palettes", json={"brand": brand_data})

        assert response.status_code == 200
        assert len(response.json()) == 4
        assert response.json()[0]["ai_generated"] is False

    def test_typography_with_suggestions(self, client, brand_data):
        with patch.object(orchestrator, "run_suggestions", AsyncMock(return_value=["Crisp"])):
            response = client.post("/api/typography", json={"brand": brand_data})

        pairs = response.json()
        assert len(pairs) == 4
        assert pairs[0]["reasoning"] == "Crisp"

    def test_palette_export(self, client):
        palette = {
            "id": "p1",
            "name": "Ocean",
            "colors": ["#3B82F6"],
            "primary": "#3B82F6",
            "wcag_score": 95,
            "ai_generated": False,
        }
        response = client.post("/api/palettes/export?format=scss", json=palette)
        assert response.status_code == 200
        assert response.text == "$color-1: #3B82F6;"

        bad = client.post("/api/palettes/export?format=pdf", json=palette)
        assert bad.status_code == 400
        assert bad.json()["supported"] == ["css", "scss", "json", "ase"]

    def test_typography_export(self, client):
        pairing = {
            "id": "t1",
            "name": "Inter + Inter",
            "heading": {"family": "Inter"},
            "body": {"family": "Inter"},
            "ai_generated": False,
        }
        response = client.post("/api/typography/export?format=css", json=pairing)
        assert response.status_code == 200
        assert "font-family: 'Inter', sans-serif;" in response.text

        bad = client.post("/api/typography/export?format=ase", json=pairing)
        assert bad.status_code == 400
        assert bad.json()["supported"] == ["css", "scss", "json"]


class TestTokenRoute:
    def test_requires_user(self, client):
        assert client.get("/api/tokens").status_code == 401

    def test_balance(self, client, tmp_path):
        store = SqliteTokenStore(tmp_path / "tokens.db", default_balance=3)
        store.use_token("user-9", "logo_generation")
        with patch.object(routes, "get_token_store", return_value=store):
            body = client.get("/api/tokens", headers={"X-User-Id": "user-9"}).json()

        assert body["balance"] == 2
        assert len(body["transactions"]) == 1
