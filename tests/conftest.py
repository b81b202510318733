"""
Shared pytest fixtures for the gateway test suite.

Provides:
  - ``store``: a fresh ``CredentialStore`` with a test key.
  - ``fake_nexon``: a local aiohttp server that stands in for the Nexon Open
    API, recording every call it receives.
  - Sample upstream payloads used by several test modules.
"""

from __future__ import annotations

import asyncio
import json
from datetime import datetime, timezone
from typing import Any

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from maple_gateway.identity import CredentialStore
from maple_gateway.upstream import NexonApiClient

TEST_API_KEY = "test-api-key"

# 2024-05-01 00:30 UTC → one day back → 2024-04-30 09:30 KST
FIXED_NOW = datetime(2024, 5, 1, 0, 30, tzinfo=timezone.utc)


@pytest.fixture
def store() -> CredentialStore:
    return CredentialStore(TEST_API_KEY)


# ── Fake upstream ─────────────────────────────────────────────────────────────

class FakeNexon:
    """Records requests and replies with canned (status, body) per path."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.responses: dict[str, tuple[int, bytes]] = {}
        self.delays: dict[str, float] = {}
        self.base_url = ""

    def reply(self, path: str, payload: Any, status: int = 200) -> None:
        if isinstance(payload, bytes):
            body = payload
        elif isinstance(payload, str):
            body = payload.encode("utf-8")
        else:
            body = json.dumps(payload).encode("utf-8")
        self.responses[path] = (status, body)

    def delay(self, path: str, seconds: float) -> None:
        self.delays[path] = seconds

    def calls_to(self, path: str) -> list[dict[str, Any]]:
        return [c for c in self.calls if c["path"] == path]

    async def handle(self, request: web.Request) -> web.Response:
        path = request.match_info["path"]
        self.calls.append({
            "path": path,
            "query": dict(request.query),
            "api_key": request.headers.get("x-nxopen-api-key"),
        })
        if path in self.delays:
            await asyncio.sleep(self.delays[path])
        status, body = self.responses.get(
            path, (400, json.dumps({"error": {"name": "OPENAPI00004"}}).encode("utf-8"))
        )
        return web.Response(status=status, body=body, content_type="application/json")


@pytest_asyncio.fixture
async def fake_nexon():
    fake = FakeNexon()
    app = web.Application()
    app.router.add_get("/maplestory/v1/{path:.*}", fake.handle)
    server = TestServer(app)
    await server.start_server()
    fake.base_url = str(server.make_url("/maplestory/v1"))
    yield fake
    await server.close()


@pytest_asyncio.fixture
async def nexon_client(store, fake_nexon):
    client = NexonApiClient(store, base_url=fake_nexon.base_url, clock=lambda: FIXED_NOW)
    yield client
    await client.close()


# ── Sample payloads ───────────────────────────────────────────────────────────

@pytest.fixture
def hyper_stat_payload() -> dict[str, Any]:
    return {
        "date": "2024-04-30T00:00+09:00",
        "character_class": "아크메이지(불,독)",
        "use_preset_no": "1",
        "hyper_stat_preset_1": [
            {"stat_type": "STR", "stat_point": None, "stat_level": 0, "stat_increase": "힘 30 증가"},
            {"stat_type": "INT", "stat_point": 3, "stat_level": 2, "stat_increase": "지력 60 증가"},
            {"stat_type": "DEX", "stat_point": 5, "stat_level": 0, "stat_increase": None},
        ],
        "hyper_stat_preset_1_remain_point": 12,
        "hyper_stat_preset_2": [
            {"stat_type": "보스 몬스터 공격 시 데미지 증가", "stat_point": 50, "stat_level": 10,
             "stat_increase": "보스 몬스터 공격 시 데미지 35% 증가"},
        ],
        "hyper_stat_preset_2_remain_point": 0,
        "hyper_stat_preset_3": [
            {"stat_type": "LUK", "stat_point": None, "stat_level": 0, "stat_increase": None},
        ],
        "hyper_stat_preset_3_remain_point": 1000,
    }


@pytest.fixture
def set_effect_payload() -> dict[str, Any]:
    return {
        "date": None,
        "set_effect": [
            {
                "set_name": "보스 장신구 세트",
                "total_set_count": 3,
                "set_effect_info": [],
                "set_option_full": [
                    {"set_count": 2, "set_option": "HP +10%"},
                    {"set_count": 4, "set_option": "공격력 +10"},
                ],
            },
            {
                "set_name": "앱솔랩스 세트",
                "total_set_count": 1,
                "set_option_full": [
                    {"set_count": 2, "set_option": "최대 HP +1500"},
                    {"set_count": 3, "set_option": "공격력 +20"},
                ],
            },
            {
                "set_name": "루타비스 세트",
                "total_set_count": 4,
                "set_option_full": [
                    {"set_count": 2, "set_option": "STR +20"},
                    {"set_count": 3, "set_option": "HP +1000"},
                    {"set_count": 4, "set_option": "보공 +30%"},
                ],
            },
        ],
    }


@pytest.fixture
def stat_payload() -> dict[str, Any]:
    return {
        "date": None,
        "character_class": "아크메이지(불,독)",
        "final_stat": [
            {"stat_name": "최소 스탯공격력", "stat_value": "1000"},
            {"stat_name": "데미지", "stat_value": None},
        ],
        "remain_ap": 0,
    }
