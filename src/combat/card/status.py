from dataclasses import dataclass
from typing import Dict, Union

from src.combat.core.enums import StatusType, parse_enum
from src.combat.core.errors import InvalidArgumentError


@dataclass
class Status:
    """
    The amount a card's stats are changed by buffs and debuffs.

    The four stat fields and `skill_probability` stack additively and may go
    negative. The three resistances do not stack: each keeps the highest
    value applied so far.
    """

    ADDITIVE_FIELDS = {
        StatusType.ATK: "atk",
        StatusType.DEF: "def_",
        StatusType.WIS: "wis",
        StatusType.AGI: "agi",
        StatusType.SKILL_PROBABILITY: "skill_probability",
    }
    CEILING_FIELDS = {
        StatusType.ATTACK_RESISTANCE: "attack_resistance",
        StatusType.MAGIC_RESISTANCE: "magic_resistance",
        StatusType.BREATH_RESISTANCE: "breath_resistance",
    }

    atk: int = 0
    def_: int = 0
    wis: int = 0
    agi: int = 0

    attack_resistance: int = 0
    magic_resistance: int = 0
    breath_resistance: int = 0

    skill_probability: int = 0

    def apply_delta(self, kind: Union[StatusType, str], amount: int) -> None:
        """Adds `amount` to an additive field. No bounds are enforced."""
        field_name = self._field_for(kind, self.ADDITIVE_FIELDS)
        setattr(self, field_name, getattr(self, field_name) + amount)

    def apply_ceiling(self, kind: Union[StatusType, str], amount: int) -> None:
        """Raises a resistance to `amount` if it is higher than the current one."""
        field_name = self._field_for(kind, self.CEILING_FIELDS)
        setattr(self, field_name, max(getattr(self, field_name), amount))

    def get(self, kind: Union[StatusType, str]) -> int:
        status_type = parse_enum(StatusType, kind)
        field_name = self.ADDITIVE_FIELDS.get(status_type) or self.CEILING_FIELDS[
            status_type
        ]
        return getattr(self, field_name)

    @staticmethod
    def _field_for(
        kind: Union[StatusType, str], fields: Dict[StatusType, str]
    ) -> str:
        status_type = parse_enum(StatusType, kind)
        if status_type not in fields:
            raise InvalidArgumentError(
                f"Status type '{status_type.name}' cannot be applied this way."
            )
        return fields[status_type]

    def to_dict(self) -> Dict[str, int]:
        return {
            "atk": self.atk,
            "def": self.def_,
            "wis": self.wis,
            "agi": self.agi,
            "attack_resistance": self.attack_resistance,
            "magic_resistance": self.magic_resistance,
            "breath_resistance": self.breath_resistance,
            "skill_probability": self.skill_probability,
        }
