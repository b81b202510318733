"""카테고리별 응답 정규화 규칙

업스트림 payload(dict)를 카테고리 모델로 검증하고 필터를 적용합니다.
새 규칙은 @register(Category.X)로 추가합니다. 해석기나 클라이언트는 바뀌지 않습니다.
"""

import logging
from typing import Any, Callable

from pydantic import BaseModel, ValidationError

from ..common.errors import MalformedPayloadError
from ..models import character as m
from ..upstream.categories import Category

logger = logging.getLogger(__name__)

Rule = Callable[[dict[str, Any]], BaseModel]

_RULES: dict[Category, Rule] = {}

HYPER_STAT_PRESETS = (1, 2, 3)


def register(category: Category) -> Callable[[Rule], Rule]:
    """정규화 규칙 등록 데코레이터"""

    def decorator(func: Rule) -> Rule:
        _RULES[category] = func
        return func

    return decorator


def _passthrough(model: type[BaseModel]) -> Rule:
    def rule(payload: dict[str, Any]) -> BaseModel:
        return model.model_validate(payload)

    return rule


# 디코딩과 null 기본값 처리 외에 별도 변환이 없는 카테고리
for _category, _model in (
    (Category.ID, m.UserOcid),
    (Category.BASIC, m.CharacterBasic),
    (Category.STAT, m.CharacterStat),
    (Category.PROPENSITY, m.CharacterPropensity),
    (Category.ABILITY, m.CharacterAbility),
    (Category.ITEM_EQUIPMENT, m.CharacterItemEquipment),
    (Category.SYMBOL_EQUIPMENT, m.CharacterSymbolEquipment),
    (Category.SKILL, m.CharacterSkill),
    (Category.LINK_SKILL, m.CharacterLinkSkill),
    (Category.VMATRIX, m.CharacterVMatrix),
    (Category.HEXAMATRIX, m.CharacterHexaMatrix),
    (Category.DOJANG, m.CharacterDojang),
):
    register(_category)(_passthrough(_model))


def filter_hyper_stats(stats: list[m.HyperStat]) -> list[m.HyperStat]:
    """포인트나 증가량이 없는(미투자) 항목 제거"""
    return [
        s for s in stats if s.stat_point is not None and s.stat_increase is not None
    ]


@register(Category.HYPER_STAT)
def normalize_hyper_stat(payload: dict[str, Any]) -> m.CharacterHyperStat:
    """프리셋 1~3 각각 필터링 (remain_point는 그대로 유지)"""
    data = m.CharacterHyperStat.model_validate(payload)
    updates = {
        f"hyper_stat_preset_{n}": filter_hyper_stats(
            getattr(data, f"hyper_stat_preset_{n}")
        )
        for n in HYPER_STAT_PRESETS
    }
    return data.model_copy(update=updates)


def match_set_options(info: m.SetEffectInfo) -> m.SetEffectInfo | None:
    """현재 착용 수로 활성화된 세트 단계만 남김 (남는 단계가 없으면 None)"""
    matched = [
        option
        for option in info.set_option_full
        if option.set_count <= info.total_set_count
    ]
    if not matched:
        return None
    return info.model_copy(update={"set_option_full": matched})


@register(Category.SET_EFFECT)
def normalize_set_effect(payload: dict[str, Any]) -> m.CharacterSetEffect:
    data = m.CharacterSetEffect.model_validate(payload)
    matched = [match_set_options(info) for info in data.set_effect]
    return data.model_copy(
        update={"set_effect": [info for info in matched if info is not None]}
    )


def get_rule(category: Category) -> Rule:
    try:
        return _RULES[category]
    except KeyError:
        raise LookupError(f"정규화 규칙 없음: {category.value}") from None


def normalize(category: Category, payload: dict[str, Any]) -> BaseModel:
    """업스트림 payload를 카테고리 응답 모델로 변환

    Raises:
        MalformedPayloadError: payload가 카테고리 스키마와 맞지 않음
    """
    rule = get_rule(category)
    try:
        return rule(payload)
    except ValidationError as e:
        logger.warning(
            f"[{category.value}] 응답 스키마 불일치: {e.error_count()}개 오류"
        )
        raise MalformedPayloadError(
            f"{category.value} payload failed validation"
        ) from e
