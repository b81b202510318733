"""세션 토큰 → ocid 해석기"""

import logging
from typing import TYPE_CHECKING

from ..common.errors import (
    IdentityResolutionError,
    InvalidRequestError,
    MissingSessionError,
    UnresolvedIdentityError,
    UpstreamError,
)
from ..normalizer import normalize
from ..upstream.categories import Category
from .credential_store import CredentialStore

if TYPE_CHECKING:
    from ..upstream.client import NexonApiClient

logger = logging.getLogger(__name__)


class IdentityResolver:
    """토큰에 캐시된 ocid가 있으면 그대로 쓰고, 없을 때만 업스트림에 조회합니다.

    같은 토큰으로 동시에 들어온 요청이 모두 캐시를 놓치면 둘 다 조회할 수 있습니다.
    id 조회는 멱등이라 결과는 같은 값으로 수렴합니다.
    """

    def __init__(self, store: CredentialStore, client: "NexonApiClient"):
        self._store = store
        self._client = client

    async def resolve(self, token: str, nick_name: str) -> str:
        """닉네임으로 ocid 확보 (캐시 우선)

        Args:
            token: uuid 헤더 값
            nick_name: 캐릭터 닉네임

        Returns:
            str: ocid

        Raises:
            MissingSessionError: 토큰이 비어 있음
            InvalidRequestError: 닉네임이 비어 있음
            IdentityResolutionError: 업스트림 조회 실패
        """
        if not token:
            raise MissingSessionError()
        if not nick_name or not nick_name.strip():
            raise InvalidRequestError("닉네임이 비어 있습니다")

        cached = self._store.get_identity(token)
        if cached is not None:
            logger.debug(f"ocid 캐시 적중: token={token}")
            return cached

        logger.debug(f"ocid 캐시 없음, 업스트림 조회: token={token}, name={nick_name}")
        try:
            payload = await self._client.fetch(Category.ID, character_name=nick_name)
            ocid = normalize(Category.ID, payload).ocid
        except UpstreamError as e:
            logger.warning(f"ocid 조회 실패 ({nick_name}): {e}")
            raise IdentityResolutionError(str(e)) from e

        self._store.set_identity(token, ocid)
        return ocid

    def require(self, token: str) -> str:
        """이미 해석된 ocid 반환

        Raises:
            MissingSessionError: 토큰이 비어 있음
            UnresolvedIdentityError: 아직 ocid 조회를 하지 않은 토큰
        """
        if not token:
            raise MissingSessionError()
        ocid = self._store.get_identity(token)
        if ocid is None:
            raise UnresolvedIdentityError(f"해석되지 않은 토큰: {token}")
        return ocid
