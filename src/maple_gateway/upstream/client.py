"""Nexon Open API 클라이언트

카테고리 하나당 정확히 한 번의 GET 요청을 보내고,
디코딩된 JSON 객체 또는 타입이 있는 예외를 돌려줍니다.
재시도는 하지 않습니다.
"""

import asyncio
import json
import logging
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any, Callable
from zoneinfo import ZoneInfo

import aiohttp

from ..common.errors import (
    MalformedPayloadError,
    UpstreamRejectedError,
    UpstreamUnreachableError,
)
from .categories import Category, get_spec

if TYPE_CHECKING:
    from ..identity.credential_store import CredentialStore

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://open.api.nexon.com/maplestory/v1"
API_KEY_HEADER = "x-nxopen-api-key"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def query_date(
    now: datetime,
    tz: str = "Asia/Seoul",
    offset_days: int = 1,
) -> str:
    """조회 기준 날짜 (YYYY-MM-DD)

    당일 데이터는 업스트림에 아직 반영되지 않았을 수 있어 offset_days만큼 이전 날짜를 씁니다.
    """
    shifted = now - timedelta(days=offset_days)
    return shifted.astimezone(ZoneInfo(tz)).strftime("%Y-%m-%d")


class NexonApiClient:
    """카테고리 기반 업스트림 요청 어댑터

    aiohttp 세션은 처음 요청할 때 만들고 close()에서 닫습니다.
    """

    def __init__(
        self,
        store: "CredentialStore",
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        date_timezone: str = "Asia/Seoul",
        date_offset_days: int = 1,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._store = store
        self.base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._date_timezone = date_timezone
        self._date_offset_days = date_offset_days
        self._clock = clock
        self._session: aiohttp.ClientSession | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """HTTP 세션 가져오기"""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session

    async def close(self) -> None:
        """리소스 정리"""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    def build_request(
        self, category: Category, ocid: str | None = None, **params: Any
    ) -> tuple[str, dict[str, str]]:
        """카테고리에 맞는 URL과 쿼리 파라미터 생성"""
        spec = get_spec(category)
        query: dict[str, str] = {}

        if spec.requires_ocid:
            if not ocid:
                raise ValueError(f"{category.value} 조회에는 ocid가 필요합니다")
            query["ocid"] = ocid

        if spec.dated:
            query["date"] = query_date(
                self._clock(), self._date_timezone, self._date_offset_days
            )

        unknown = set(params) - set(spec.params)
        if unknown:
            raise ValueError(
                f"{category.value}에서 지원하지 않는 파라미터: {sorted(unknown)}"
            )
        for key in spec.params:
            if params.get(key) is not None:
                query[key] = str(params[key])

        return f"{self.base_url}/{spec.path}", query

    async def fetch(
        self, category: Category, ocid: str | None = None, **params: Any
    ) -> dict[str, Any]:
        """업스트림 조회

        Returns:
            dict: 디코딩된 응답 JSON 객체

        Raises:
            UpstreamRejectedError: 2xx 이외의 응답
            UpstreamUnreachableError: 연결/DNS/타임아웃 오류
            MalformedPayloadError: JSON 객체가 아닌 응답
        """
        url, query = self.build_request(category, ocid, **params)
        headers = {API_KEY_HEADER: self._store.api_key}
        session = await self._get_session()

        try:
            async with session.get(url, params=query, headers=headers) as resp:
                raw = await resp.read()
                if not 200 <= resp.status < 300:
                    preview = raw[:200].decode("utf-8", errors="replace")
                    logger.warning(
                        f"[{category.value}] 업스트림 거부 HTTP {resp.status}: {preview}"
                    )
                    raise UpstreamRejectedError(resp.status)
        except asyncio.TimeoutError as e:
            logger.warning(f"[{category.value}] 업스트림 시간 초과")
            raise UpstreamUnreachableError("upstream timed out") from e
        except aiohttp.ClientError as e:
            logger.warning(f"[{category.value}] 업스트림 연결 실패: {type(e).__name__}: {e}")
            raise UpstreamUnreachableError(f"{type(e).__name__}: {e}") from e

        try:
            payload = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"[{category.value}] 응답 디코딩 실패: {e}")
            raise MalformedPayloadError("upstream returned invalid JSON") from e

        if not isinstance(payload, dict):
            raise MalformedPayloadError(
                f"expected JSON object, got {type(payload).__name__}"
            )
        return payload
