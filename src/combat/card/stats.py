from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Stats:
    """Holds the base attributes of a card. `def_` is serialized as "def"."""

    hp: int = 0
    atk: int = 0
    def_: int = 0
    wis: int = 0
    agi: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "hp": self.hp,
            "atk": self.atk,
            "def": self.def_,
            "wis": self.wis,
            "agi": self.agi,
        }

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "Stats":
        return cls(
            hp=record.get("hp", 0),
            atk=record.get("atk", 0),
            def_=record.get("def", 0),
            wis=record.get("wis", 0),
            agi=record.get("agi", 0),
        )
