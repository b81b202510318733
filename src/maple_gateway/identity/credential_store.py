"""API 키와 세션 토큰 → ocid 매핑 저장소"""

import logging
import threading

logger = logging.getLogger(__name__)


class CredentialStore:
    """업스트림 API 키와 토큰별 ocid 매핑을 보관하는 저장소

    프로세스 시작 시 한 번 생성되어 앱 상태(app.state)로 공유됩니다.
    API 키는 생성 후 변경되지 않으므로 잠금 없이 읽습니다.
    매핑은 동시 요청에서 읽고 쓰므로 Lock으로 보호합니다.
    """

    def __init__(self, api_key: str):
        if not api_key:
            raise ValueError("API 키가 비어 있습니다")
        self._api_key = api_key
        self._identities: dict[str, str] = {}
        self._lock = threading.Lock()

    @property
    def api_key(self) -> str:
        return self._api_key

    def set_identity(self, token: str, identity: str) -> None:
        """토큰에 ocid 매핑 (기존 값은 덮어씀)"""
        with self._lock:
            previous = self._identities.get(token)
            self._identities[token] = identity
        if previous is not None and previous != identity:
            logger.info(f"ocid 매핑 갱신: token={token}")

    def get_identity(self, token: str) -> str | None:
        """토큰에 매핑된 ocid 조회 (없으면 None)"""
        with self._lock:
            return self._identities.get(token)

    def __contains__(self, token: object) -> bool:
        with self._lock:
            return token in self._identities

    def __len__(self) -> int:
        with self._lock:
            return len(self._identities)
