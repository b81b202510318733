"""업스트림 조회 카테고리

카테고리별 엔드포인트 경로와 쿼리 파라미터 규칙을 한 테이블에 모읍니다.
새 카테고리는 Category와 CATEGORY_SPECS에 한 줄씩 추가하면 됩니다.
"""

from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    """조회 카테고리 (값은 클라이언트 라우트 슬러그)"""

    ID = "id"
    BASIC = "basic"
    STAT = "stat"
    HYPER_STAT = "hyper-stat"
    PROPENSITY = "propensity"
    ABILITY = "ability"
    ITEM_EQUIPMENT = "item-equipment"
    SYMBOL_EQUIPMENT = "symbol-equipment"
    SET_EFFECT = "set-effect"
    SKILL = "skill"
    LINK_SKILL = "link-skill"
    VMATRIX = "vmatrix"
    HEXAMATRIX = "hexamatrix"
    DOJANG = "dojang"


@dataclass(frozen=True)
class CategorySpec:
    """카테고리별 업스트림 요청 규칙"""

    path: str  # base URL 이하 경로
    requires_ocid: bool = True
    dated: bool = True  # 하루 전 날짜(date) 파라미터 사용
    params: tuple[str, ...] = ()  # 허용되는 추가 쿼리 파라미터


CATEGORY_SPECS: dict[Category, CategorySpec] = {
    Category.ID: CategorySpec(
        "id", requires_ocid=False, dated=False, params=("character_name",)
    ),
    Category.BASIC: CategorySpec("character/basic"),
    Category.STAT: CategorySpec("character/stat"),
    Category.HYPER_STAT: CategorySpec("character/hyper-stat"),
    Category.PROPENSITY: CategorySpec("character/propensity"),
    Category.ABILITY: CategorySpec("character/ability"),
    Category.ITEM_EQUIPMENT: CategorySpec("character/item-equipment"),
    Category.SYMBOL_EQUIPMENT: CategorySpec("character/symbol-equipment"),
    Category.SET_EFFECT: CategorySpec("character/set-effect"),
    Category.SKILL: CategorySpec(
        "character/skill", params=("character_skill_grade",)
    ),
    Category.LINK_SKILL: CategorySpec("character/link-skill"),
    Category.VMATRIX: CategorySpec("character/vmatrix"),
    Category.HEXAMATRIX: CategorySpec("character/hexamatrix"),
    Category.DOJANG: CategorySpec("character/dojang"),
}

# 별도 본문이 필요 없는 GET 라우트로 노출되는 카테고리
SIMPLE_CATEGORIES: tuple[Category, ...] = tuple(
    c for c in Category if c not in (Category.ID, Category.SKILL)
)


def get_spec(category: Category) -> CategorySpec:
    return CATEGORY_SPECS[category]


def category_from_slug(slug: str) -> Category | None:
    """라우트 슬러그 → Category (없으면 None)"""
    try:
        return Category(slug)
    except ValueError:
        return None
