"""캐릭터 조회 서비스

해석기 → 업스트림 클라이언트 → 정규화 순서로 한 요청을 처리합니다.
"""

import logging
from typing import Any

from pydantic import BaseModel

from ..common.errors import InvalidRequestError
from ..identity import CredentialStore, IdentityResolver
from ..normalizer import normalize
from ..upstream import Category, NexonApiClient

logger = logging.getLogger(__name__)


class CharacterService:
    """카테고리 단위 캐릭터 데이터 조회"""

    def __init__(
        self,
        store: CredentialStore,
        client: NexonApiClient,
        resolver: IdentityResolver | None = None,
    ):
        self.store = store
        self.client = client
        self.resolver = resolver or IdentityResolver(store, client)

    async def lookup_ocid(self, token: str, nick_name: str) -> dict[str, str]:
        """닉네임으로 ocid 조회 후 토큰에 연결"""
        ocid = await self.resolver.resolve(token, nick_name)
        return {"ocid": ocid}

    async def fetch(self, token: str, category: Category, **params: Any) -> BaseModel:
        """캐시된 ocid로 카테고리 데이터 조회

        Raises:
            MissingSessionError: 토큰 없음
            UnresolvedIdentityError: ocid 조회 전 토큰
            UpstreamError: 업스트림 실패 / 스키마 불일치
        """
        if category is Category.ID:
            raise InvalidRequestError("id 카테고리는 lookup_ocid로 조회합니다")

        ocid = self.resolver.require(token)
        payload = await self.client.fetch(category, ocid, **params)
        return normalize(category, payload)

    async def close(self) -> None:
        await self.client.close()
