"""헬스 체크 라우터"""

from fastapi import APIRouter, Depends

from ...services import CharacterService
from ..dependencies import get_character_service

router = APIRouter()


@router.get("/health")
async def health_check(service: CharacterService = Depends(get_character_service)):
    """서버 상태 확인"""
    return {
        "status": "ok",
        "service": "maple-gateway",
        "resolved_sessions": len(service.store),
    }
