"""응답 데이터 모델"""

from .character import (
    CharacterAbility,
    CharacterBasic,
    CharacterDojang,
    CharacterHexaMatrix,
    CharacterHyperStat,
    CharacterItemEquipment,
    CharacterLinkSkill,
    CharacterPropensity,
    CharacterSetEffect,
    CharacterSkill,
    CharacterStat,
    CharacterSymbolEquipment,
    CharacterVMatrix,
    HyperStat,
    SetEffectInfo,
    SetOption,
    UpstreamModel,
    UserOcid,
)

__all__ = [
    "CharacterAbility",
    "CharacterBasic",
    "CharacterDojang",
    "CharacterHexaMatrix",
    "CharacterHyperStat",
    "CharacterItemEquipment",
    "CharacterLinkSkill",
    "CharacterPropensity",
    "CharacterSetEffect",
    "CharacterSkill",
    "CharacterStat",
    "CharacterSymbolEquipment",
    "CharacterVMatrix",
    "HyperStat",
    "SetEffectInfo",
    "SetOption",
    "UpstreamModel",
    "UserOcid",
]
