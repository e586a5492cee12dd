"""
Structural types for the objects a Card reads from but does not own.

Players, formations and skills are defined by the battle engine. The combat
model only relies on the attributes listed here.
"""

from typing import Any, Dict, Protocol

from src.combat.core.enums import FormationRow, SkillType


class Formation(Protocol):
    def get_card_row(self, column: int) -> FormationRow: ...


class Player(Protocol):
    id: int
    name: str
    formation: Formation


class Skill(Protocol):
    skill_type: SkillType

    def get_serializable_object(self) -> Dict[str, Any]: ...
