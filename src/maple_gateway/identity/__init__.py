"""세션 토큰과 업스트림 ocid 매핑

- credential_store: API 키 + 토큰별 ocid 저장소
- resolver: 캐시 우선 ocid 해석기
"""

from .credential_store import CredentialStore
from .resolver import IdentityResolver

__all__ = ["CredentialStore", "IdentityResolver"]
