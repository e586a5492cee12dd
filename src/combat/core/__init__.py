from .collaborators import Formation, Player, Skill
from .enums import (
    AfflictionType,
    FormationRow,
    SkillType,
    StatType,
    StatusType,
    parse_enum,
)
from .errors import InvalidArgumentError

__all__ = [
    "AfflictionType",
    "Formation",
    "FormationRow",
    "InvalidArgumentError",
    "Player",
    "Skill",
    "SkillType",
    "StatType",
    "StatusType",
    "parse_enum",
]
