"""Tests for the FastAPI surface (maple_gateway.backend)."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from maple_gateway.backend.server import create_app
from maple_gateway.common.errors import (
    MalformedPayloadError,
    UpstreamRejectedError,
    UpstreamUnreachableError,
)
from maple_gateway.services import CharacterService
from maple_gateway.upstream import Category


@pytest.fixture
def upstream(hyper_stat_payload, set_effect_payload, stat_payload):
    payloads = {
        Category.ID: {"ocid": "ocid-alice"},
        Category.STAT: stat_payload,
        Category.HYPER_STAT: hyper_stat_payload,
        Category.SET_EFFECT: set_effect_payload,
        Category.SKILL: {"character_skill": [{"skill_name": "인피니티", "skill_effect": None}]},
    }

    async def fetch(category, ocid=None, **params):
        return payloads[category]

    client = AsyncMock()
    client.fetch = AsyncMock(side_effect=fetch)
    return client


@pytest.fixture
def app(store, upstream):
    return create_app(service=CharacterService(store, upstream), file_logging=False)


@pytest.fixture
def http(app):
    with TestClient(app) as client:
        yield client


class TestHealth:
    def test_health(self, http):
        response = http.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestOcid:
    def test_lookup(self, http, store):
        response = http.post("/api/character/ocid", json={"nick_name": "Alice"}, headers={"uuid": "abc"})

        assert response.status_code == 200
        assert response.json() == {"ocid": "ocid-alice"}
        assert store.get_identity("abc") == "ocid-alice"

    def test_missing_header(self, http, upstream):
        response = http.post("/api/character/ocid", json={"nick_name": "Alice"})

        assert response.status_code == 400
        assert response.json() == {"detail": "Missing or invalid uuid header"}
        upstream.fetch.assert_not_awaited()

    def test_blank_header(self, http):
        response = http.post("/api/character/ocid", json={"nick_name": "Alice"}, headers={"uuid": "  "})
        assert response.status_code == 400
        assert response.json()["detail"] == "Missing or invalid uuid header"

    def test_empty_nickname(self, http):
        response = http.post("/api/character/ocid", json={"nick_name": ""}, headers={"uuid": "abc"})
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid request"

    def test_upstream_failure(self, http, upstream):
        upstream.fetch.side_effect = UpstreamRejectedError(400)
        response = http.post("/api/character/ocid", json={"nick_name": "Nobody"}, headers={"uuid": "abc"})

        assert response.status_code == 400
        assert response.json() == {"detail": "Failed to fetch OCID"}

    def test_missing_nickname_field(self, http, upstream):
        response = http.post("/api/character/ocid", json={}, headers={"uuid": "abc"})

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid request"}
        upstream.fetch.assert_not_awaited()

    def test_body_not_json(self, http):
        response = http.post(
            "/api/character/ocid",
            content="not json",
            headers={"uuid": "abc", "content-type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid request"}

    def test_header_is_not_trimmed(self, http, store):
        http.post("/api/character/ocid", json={"nick_name": "Alice"}, headers={"uuid": " abc"})

        assert store.get_identity(" abc") == "ocid-alice"
        assert "abc" not in store
        response = http.get("/api/character/stat", headers={"uuid": "abc"})
        assert response.status_code == 400
        assert response.json() == {"detail": "Character not resolved"}


class TestCategories:
    def test_end_to_end_uses_cached_identity(self, http, upstream):
        http.post("/api/character/ocid", json={"nick_name": "Alice"}, headers={"uuid": "abc"})
        response = http.get("/api/character/stat", headers={"uuid": "abc"})

        assert response.status_code == 200
        assert response.json()["final_stat"][1] == {"stat_name": "데미지", "stat_value": ""}
        categories = [call.args[0] for call in upstream.fetch.await_args_list]
        assert categories == [Category.ID, Category.STAT]
        assert upstream.fetch.await_args_list[1].args[1] == "ocid-alice"

    def test_hyper_stat_filtered(self, http, store):
        store.set_identity("abc", "ocid-1")
        body = http.get("/api/character/hyper-stat", headers={"uuid": "abc"}).json()

        assert [s["stat_type"] for s in body["hyper_stat_preset_1"]] == ["INT"]
        assert body["hyper_stat_preset_3"] == []
        assert body["hyper_stat_preset_3_remain_point"] == 1000

    def test_set_effect_filtered(self, http, store):
        store.set_identity("abc", "ocid-1")
        body = http.get("/api/character/set-effect", headers={"uuid": "abc"}).json()
        assert [s["set_name"] for s in body["set_effect"]] == ["보스 장신구 세트", "루타비스 세트"]

    def test_skill_with_level(self, http, store, upstream):
        store.set_identity("abc", "ocid-1")
        response = http.post("/api/character/skill", json={"level": 5}, headers={"uuid": "abc"})

        assert response.status_code == 200
        assert response.json()["character_skill"][0]["skill_effect"] == ""
        upstream.fetch.assert_awaited_with(Category.SKILL, "ocid-1", character_skill_grade=5)

    def test_negative_skill_level(self, http, store, upstream):
        store.set_identity("abc", "ocid-1")
        response = http.post("/api/character/skill", json={"level": -1}, headers={"uuid": "abc"})

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid request"}
        upstream.fetch.assert_not_awaited()

    def test_unresolved_token(self, http, upstream):
        response = http.get("/api/character/stat", headers={"uuid": "fresh"})

        assert response.status_code == 400
        assert response.json() == {"detail": "Character not resolved"}
        upstream.fetch.assert_not_awaited()

    def test_missing_header(self, http):
        response = http.get("/api/character/stat")
        assert response.status_code == 400
        assert response.json()["detail"] == "Missing or invalid uuid header"

    def test_unknown_category(self, http, store):
        store.set_identity("abc", "ocid-1")
        assert http.get("/api/character/pets", headers={"uuid": "abc"}).status_code == 404
        assert http.get("/api/character/id", headers={"uuid": "abc"}).status_code == 404

    def test_unreachable_upstream(self, http, store, upstream):
        store.set_identity("abc", "ocid-1")
        upstream.fetch.side_effect = UpstreamUnreachableError("connection refused")

        response = http.get("/api/character/basic", headers={"uuid": "abc"})

        assert response.status_code == 400
        assert response.json() == {"detail": "Failed to fetch OCID"}

    def test_malformed_upstream_payload(self, http, store, upstream):
        store.set_identity("abc", "ocid-1")
        upstream.fetch.side_effect = MalformedPayloadError("upstream returned invalid JSON")

        response = http.get("/api/character/basic", headers={"uuid": "abc"})

        assert response.status_code == 400
        assert response.json() == {"detail": "Failed to fetch OCID"}

    def test_schema_mismatch_is_not_internal_error(self, http, store, upstream):
        store.set_identity("abc", "ocid-1")
        upstream.fetch.side_effect = None
        upstream.fetch.return_value = {"final_stat": "not a list"}

        response = http.get("/api/character/stat", headers={"uuid": "abc"})

        assert response.status_code == 400
        assert response.json() == {"detail": "Failed to fetch OCID"}

    def test_repeated_fetch_is_stable(self, http, store):
        store.set_identity("abc", "ocid-1")
        first = http.get("/api/character/set-effect", headers={"uuid": "abc"}).json()
        second = http.get("/api/character/set-effect", headers={"uuid": "abc"}).json()
        assert first == second
