"""
This module defines the enumerated categories used throughout the combat
model: stat names, status kinds, affliction types, skill roles and
formation rows.
"""

from enum import Enum, IntEnum
from typing import Type, TypeVar, Union

from src.combat.core.errors import InvalidArgumentError

E = TypeVar("E", bound=Enum)


class StatType(Enum):
    """
    Names accepted by `Card.get_stat`.

    DEFAULT is an alias for the stat generic skill-power formulas scale
    with, which is WIS.
    """

    HP = "HP"
    ATK = "ATK"
    DEF = "DEF"
    WIS = "WIS"
    AGI = "AGI"
    DEFAULT = "DEFAULT"


class StatusType(Enum):
    """Kinds of buff/debuff that can be applied to a card's Status."""

    ATK = "ATK"
    DEF = "DEF"
    WIS = "WIS"
    AGI = "AGI"
    ATTACK_RESISTANCE = "ATTACK_RESISTANCE"
    MAGIC_RESISTANCE = "MAGIC_RESISTANCE"
    BREATH_RESISTANCE = "BREATH_RESISTANCE"
    SKILL_PROBABILITY = "SKILL_PROBABILITY"

    @property
    def is_resistance(self) -> bool:
        """Resistances follow the ceiling rule instead of stacking."""
        return self in (
            StatusType.ATTACK_RESISTANCE,
            StatusType.MAGIC_RESISTANCE,
            StatusType.BREATH_RESISTANCE,
        )


class AfflictionType(Enum):
    POISON = "POISON"
    PARALYSIS = "PARALYSIS"
    FROZEN = "FROZEN"
    SILENT = "SILENT"
    BLIND = "BLIND"


class SkillType(Enum):
    """
    The declared role of a skill. Only the first four are classified onto
    a card's role slots; the rest are carried but never assigned a role.
    """

    OPENING = "OPENING"
    ATTACK = "ATTACK"
    PROTECT = "PROTECT"
    DEFENSE = "DEFENSE"
    PASSIVE = "PASSIVE"
    FIELD = "FIELD"


class FormationRow(IntEnum):
    FRONT = 1
    MID = 2
    REAR = 3


def parse_enum(enum_cls: Type[E], value: Union[E, str]) -> E:
    """
    Resolves `value` to a member of `enum_cls`.

    Members are returned unchanged and strings are looked up by member name.
    Anything else raises InvalidArgumentError.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls[value]
        except KeyError:
            pass
    raise InvalidArgumentError(
        f"Invalid {enum_cls.__name__} '{value}'. "
        f"Expected one of: {', '.join(m.name for m in enum_cls)}."
    )
