"""캐릭터 조회 응답 모델

업스트림 JSON에서 클라이언트가 쓰는 필드만 남깁니다.
클라이언트가 처리할 수 없는 null 값은 필드 기본값("" 또는 0)으로 바꿉니다.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class UpstreamModel(BaseModel):
    """null → 기본값 변환을 하는 공통 베이스

    기본값이 None인 필드(Optional)는 null을 그대로 유지합니다.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _default_on_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is not None:
            return value
        field = cls.model_fields[info.field_name]
        if field.is_required():
            return value
        return field.get_default(call_default_factory=True)


class UserOcid(BaseModel):
    ocid: str = Field(min_length=1)


class CharacterBasic(UpstreamModel):
    character_name: str = ""
    world_name: str = ""
    character_gender: str = ""
    character_class: str = ""
    character_class_level: str = ""
    character_level: int = 0
    character_exp: int = 0
    character_exp_rate: str = ""
    character_guild_name: str = ""
    character_image: str = ""
    character_date_create: str = ""


class Stat(UpstreamModel):
    stat_name: str = ""
    stat_value: str = ""


class CharacterStat(UpstreamModel):
    final_stat: list[Stat] = Field(default_factory=list)


class HyperStat(UpstreamModel):
    """하이퍼 스탯 항목 (포인트 미투자 항목은 stat_point/stat_increase가 null)"""

    stat_type: str = ""
    stat_point: int | None = None
    stat_level: int = 0
    stat_increase: str | None = None


class CharacterHyperStat(UpstreamModel):
    hyper_stat_preset_1: list[HyperStat] = Field(default_factory=list)
    hyper_stat_preset_1_remain_point: int = 0
    hyper_stat_preset_2: list[HyperStat] = Field(default_factory=list)
    hyper_stat_preset_2_remain_point: int = 0
    hyper_stat_preset_3: list[HyperStat] = Field(default_factory=list)
    hyper_stat_preset_3_remain_point: int = 0


class CharacterPropensity(UpstreamModel):
    charisma_level: int = 0
    sensibility_level: int = 0
    insight_level: int = 0
    willingness_level: int = 0
    handicraft_level: int = 0
    charm_level: int = 0


class AbilityInfo(UpstreamModel):
    ability_no: str = ""
    ability_grade: str = ""
    ability_value: str = ""


class CharacterAbility(UpstreamModel):
    ability_grade: str = ""
    ability_info: list[AbilityInfo] = Field(default_factory=list)


class ItemOption(UpstreamModel):
    """장비 기본/합계 옵션"""

    # str/int 필드는 내장 타입 이름과 겹쳐 alias로 받습니다
    str_: str = Field("", alias="str")
    dex: str = ""
    int_: str = Field("", alias="int")
    luk: str = ""
    max_hp: str = ""
    max_mp: str = ""
    attack_power: str = ""
    magic_power: str = ""
    armor: str = ""
    speed: str = ""
    jump: str = ""
    boss_damage: str = ""
    ignore_monster_armor: str = ""
    all_stat: str = ""
    damage: str = ""
    equipment_level_decrease: int = 0
    max_hp_rate: str = ""
    max_mp_rate: str = ""
    base_equipment_level: int = 0


class ItemExceptionalOption(UpstreamModel):
    """익셉셔널/추가 옵션"""

    str_: str = Field("", alias="str")
    dex: str = ""
    int_: str = Field("", alias="int")
    luk: str = ""
    max_hp: str = ""
    max_mp: str = ""
    attack_power: str = ""
    magic_power: str = ""
    exceptional_upgrade: int = 0
    armor: str = ""
    speed: str = ""
    jump: str = ""
    damage: str = ""
    all_stat: str = ""
    equipment_level_decrease: int = 0


class ItemStatOption(UpstreamModel):
    """기타/스타포스 옵션"""

    str_: str = Field("", alias="str")
    dex: str = ""
    int_: str = Field("", alias="int")
    luk: str = ""
    max_hp: str = ""
    max_mp: str = ""
    attack_power: str = ""
    magic_power: str = ""
    armor: str = ""
    speed: str = ""
    jump: str = ""


class ItemEquipmentInfo(UpstreamModel):
    item_equipment_part: str = ""
    item_equipment_slot: str = ""
    item_name: str = ""
    item_icon: str = ""
    item_shape_name: str = ""
    item_shape_icon: str = ""
    item_total_option: ItemOption = Field(default_factory=ItemOption)
    item_base_option: ItemOption = Field(default_factory=ItemOption)
    potential_option_grade: str = ""
    additional_potential_option_grade: str = ""
    potential_option_1: str = ""
    potential_option_2: str = ""
    potential_option_3: str = ""
    additional_potential_option_1: str = ""
    additional_potential_option_2: str = ""
    additional_potential_option_3: str = ""
    item_exceptional_option: ItemExceptionalOption = Field(
        default_factory=ItemExceptionalOption
    )
    item_add_option: ItemExceptionalOption = Field(
        default_factory=ItemExceptionalOption
    )
    scroll_upgrade: str = ""
    cuttable_count: str = ""
    golden_hammer_flag: str = ""
    scroll_resilience_count: str = ""
    scroll_upgradeable_count: str = ""
    soul_name: str = ""
    soul_option: str = ""
    starforce: str = ""
    item_etc_option: ItemStatOption = Field(default_factory=ItemStatOption)
    item_starforce_option: ItemStatOption = Field(default_factory=ItemStatOption)
    special_ring_level: int = 0


class CharacterItemEquipment(UpstreamModel):
    item_equipment: list[ItemEquipmentInfo] = Field(default_factory=list)


class SymbolInfo(UpstreamModel):
    symbol_name: str = ""
    symbol_icon: str = ""
    symbol_force: str = ""
    symbol_level: int = 0
    symbol_str: str = ""
    symbol_dex: str = ""
    symbol_int: str = ""
    symbol_luk: str = ""
    symbol_hp: str = ""
    symbol_drop_rate: str = ""
    symbol_meso_rate: str = ""
    symbol_exp_rate: str = ""
    symbol_growth_count: int = 0
    symbol_require_growth_count: int = 0


class CharacterSymbolEquipment(UpstreamModel):
    symbol: list[SymbolInfo] = Field(default_factory=list)


class SetOption(UpstreamModel):
    """세트 효과 단계 (set_count개 이상 착용 시 활성)"""

    set_count: int = 0
    set_option: str = ""


class SetEffectInfo(UpstreamModel):
    set_name: str = ""
    total_set_count: int = 0
    set_option_full: list[SetOption] = Field(default_factory=list)


class CharacterSetEffect(UpstreamModel):
    set_effect: list[SetEffectInfo] = Field(default_factory=list)


class SkillInfo(UpstreamModel):
    skill_name: str = ""
    skill_description: str = ""
    skill_level: int = 0
    skill_effect: str = ""
    skill_icon: str = ""
    skill_effect_next: str = ""


class CharacterSkill(UpstreamModel):
    character_skill: list[SkillInfo] = Field(default_factory=list)


class CharacterLinkSkill(UpstreamModel):
    character_link_skill: list[SkillInfo] = Field(default_factory=list)


class VCoreInfo(UpstreamModel):
    slot_id: str = ""
    slot_level: int = 0
    v_core_name: str = ""
    v_core_level: int = 0
    v_core_skill_1: str = ""
    v_core_skill_2: str = ""
    v_core_skill_3: str = ""
    v_core_type: str = ""


class CharacterVMatrix(UpstreamModel):
    character_v_core_equipment: list[VCoreInfo] = Field(default_factory=list)
    character_v_matrix_remain_slot_upgrade_point: int = 0


class HexaSkillInfo(UpstreamModel):
    hexa_skill_id: str = ""


class HexaCoreInfo(UpstreamModel):
    hexa_core_name: str = ""
    hexa_core_level: int = 0
    hexa_core_type: str = ""
    linked_skill: list[HexaSkillInfo] = Field(default_factory=list)


class CharacterHexaMatrix(UpstreamModel):
    character_hexa_core_equipment: list[HexaCoreInfo] = Field(default_factory=list)


class CharacterDojang(UpstreamModel):
    dojang_best_floor: int = 0
    date_dojang_record: str = ""
    dojang_best_time: int = 0
