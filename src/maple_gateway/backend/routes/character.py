"""캐릭터 조회 라우터"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from ...models import CharacterSkill, UserOcid
from ...services import CharacterService
from ...upstream.categories import SIMPLE_CATEGORIES, Category, category_from_slug
from ..dependencies import get_character_service, get_session_token

logger = logging.getLogger(__name__)

router = APIRouter()


class OcidRequest(BaseModel):
    """ocid 조회 요청"""

    nick_name: str


class SkillRequest(BaseModel):
    """스킬 조회 요청 (전직 차수 등급)"""

    level: int = Field(ge=0)


@router.post("/ocid", response_model=UserOcid)
async def lookup_ocid(
    request: OcidRequest,
    token: str = Depends(get_session_token),
    service: CharacterService = Depends(get_character_service),
):
    """닉네임으로 ocid 조회 후 uuid에 연결"""
    return await service.lookup_ocid(token, request.nick_name)


@router.post("/skill", response_model=CharacterSkill)
async def get_skill(
    request: SkillRequest,
    token: str = Depends(get_session_token),
    service: CharacterService = Depends(get_character_service),
):
    """등급별 스킬 정보 조회"""
    return await service.fetch(
        token, Category.SKILL, character_skill_grade=request.level
    )


@router.get("/{slug}")
async def get_category(
    slug: str,
    token: str = Depends(get_session_token),
    service: CharacterService = Depends(get_character_service),
):
    """카테고리 데이터 조회 (basic, stat, hyper-stat, set-effect 등)"""
    category = category_from_slug(slug)
    if category is None or category not in SIMPLE_CATEGORIES:
        raise HTTPException(status_code=404, detail=f"Unknown category: {slug}")
    return await service.fetch(token, category)
