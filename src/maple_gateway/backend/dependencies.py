"""라우트 공용 의존성

서비스 인스턴스는 create_app()에서 조립되어 app.state에 보관됩니다.
라우트는 모듈 전역 싱글톤 대신 이 의존성으로 받아 씁니다.
"""

from fastapi import Header, Request

from ..common.errors import MissingSessionError
from ..services import CharacterService


def get_character_service(request: Request) -> CharacterService:
    """앱에 등록된 캐릭터 서비스 반환"""
    return request.app.state.character_service


def get_session_token(uuid: str | None = Header(default=None)) -> str:
    """uuid 헤더 값 그대로 반환 (없거나 공백뿐이면 MissingSessionError)"""
    if uuid is None or not uuid.strip():
        raise MissingSessionError()
    return uuid
