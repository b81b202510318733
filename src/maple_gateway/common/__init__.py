"""공통 모듈

프로젝트 전체에서 공유하는 예외 타입을 제공합니다.
"""

from .errors import (
    GatewayError,
    IdentityResolutionError,
    InvalidRequestError,
    MalformedPayloadError,
    MissingSessionError,
    UnresolvedIdentityError,
    UpstreamError,
    UpstreamRejectedError,
    UpstreamUnreachableError,
)

__all__ = [
    "GatewayError",
    "IdentityResolutionError",
    "InvalidRequestError",
    "MalformedPayloadError",
    "MissingSessionError",
    "UnresolvedIdentityError",
    "UpstreamError",
    "UpstreamRejectedError",
    "UpstreamUnreachableError",
]
