"""게이트웨이 예외 계층

모든 예외는 클라이언트에 돌려줄 상태 코드와 짧은 사유 문자열을 가집니다.
업스트림 응답 본문은 절대 detail에 담지 않습니다.
"""


class GatewayError(Exception):
    """게이트웨이 예외 기본 클래스"""

    status_code: int = 400
    detail: str = "Bad request"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.detail)


class MissingSessionError(GatewayError):
    """uuid 헤더 누락 또는 빈 값"""

    detail = "Missing or invalid uuid header"


class InvalidRequestError(GatewayError):
    """요청 본문 값이 유효하지 않음 (빈 닉네임 등)"""

    detail = "Invalid request"


class UnresolvedIdentityError(GatewayError):
    """토큰에 매핑된 ocid가 없음 (먼저 ocid 조회 필요)"""

    detail = "Character not resolved"


class IdentityResolutionError(GatewayError):
    """닉네임 → ocid 조회 실패"""

    detail = "Failed to fetch OCID"


class UpstreamError(GatewayError):
    """업스트림(Nexon Open API) 호출 실패"""

    detail = "Failed to fetch OCID"


class UpstreamRejectedError(UpstreamError):
    """업스트림이 2xx 이외의 상태 코드로 응답"""

    def __init__(self, status: int, message: str | None = None):
        self.status = status
        super().__init__(message or f"upstream responded with HTTP {status}")


class UpstreamUnreachableError(UpstreamError):
    """연결 실패, DNS 실패, 타임아웃 등 전송 계층 오류"""


class MalformedPayloadError(UpstreamError):
    """응답 본문을 해석할 수 없음 (JSON 아님, 스키마 불일치)"""
