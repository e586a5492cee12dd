import logging
import warnings
from dataclasses import replace
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

import numpy as np

from src.combat.affliction.affliction import Affliction, PoisonAffliction
from src.combat.affliction.affliction_factory import get_affliction
from src.combat.card.stats import Stats
from src.combat.card.status import Status
from src.combat.config.combat_config import CombatConfig
from src.combat.core.collaborators import Player, Skill
from src.combat.core.enums import (
    AfflictionType,
    FormationRow,
    SkillType,
    StatType,
    StatusType,
    parse_enum,
)
from src.combat.logger import get_combat_logger


class Card:
    """
    Represents a card taking part in a battle.

    A card keeps its live stats, a frozen copy of the stats it started with,
    the buffs and debuffs applied to it and at most one affliction. The
    battle engine reads effective stats from it and drives every change to
    its state; the card never calls back into the engine.
    """

    ROLE_ATTRIBUTES = {
        SkillType.OPENING: "opening_skill",
        SkillType.ATTACK: "attack_skill",
        SkillType.PROTECT: "protect_skill",
        SkillType.DEFENSE: "defense_skill",
    }

    _STAT_GETTERS: Dict[StatType, Callable[["Card"], int]] = {
        StatType.HP: lambda card: card.get_hp(),
        StatType.ATK: lambda card: card.get_atk(),
        StatType.DEF: lambda card: card.get_def(),
        StatType.WIS: lambda card: card.get_wis(),
        StatType.AGI: lambda card: card.get_agi(),
        StatType.DEFAULT: lambda card: card.get_wis(),
    }

    def __init__(
        self,
        name: str,
        stats: Stats,
        skills: Sequence[Optional[Skill]],
        player: Player,
        formation_column: int,
        image_link: str,
        auto_attack: Skill,
        config: Optional[CombatConfig] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        `stats` becomes the card's live stats. Stats are frozen, so the first
        HP change swaps in a new instance and the object passed here goes
        stale; read `card.stats` for current values. `original_stats` is an
        independent copy that never changes.
        """
        self.name = name
        self.stats: Stats = stats
        self.original_stats: Stats = replace(stats)
        self.status = Status()
        self.skills: List[Optional[Skill]] = list(skills)
        self.player = player
        self.is_dead: bool = False
        self.affliction: Optional[Affliction] = None

        self._config = config or CombatConfig()
        self.logger = logger or get_combat_logger()

        self._formation_column = formation_column
        self.formation_row: FormationRow = player.formation.get_card_row(
            formation_column
        )

        self.opening_skill: Optional[Skill] = None
        self.attack_skill: Optional[Skill] = None
        self.protect_skill: Optional[Skill] = None
        self.defense_skill: Optional[Skill] = None
        self._classify_skills()

        self.image_link = image_link
        self.auto_attack = auto_attack

        self.id: int = player.id * 100 + formation_column

    def _classify_skills(self) -> None:
        """Assigns each skill to the role slot matching its skill type."""
        for skill in self.skills:
            if not skill:
                continue
            attribute = self.ROLE_ATTRIBUTES.get(skill.skill_type)
            if attribute is None:
                continue
            if getattr(self, attribute) is not None:
                warnings.warn(
                    f"Card '{self.name}' has more than one {skill.skill_type.name} skill. "
                    f"Using the last one."
                )
            setattr(self, attribute, skill)

    @property
    def formation_column(self) -> int:
        return self._formation_column

    @property
    def player_id(self) -> int:
        return self.player.id

    @property
    def player_name(self) -> str:
        return self.player.name

    # --- Stats ---

    def get_stat(self, stat_type: Union[StatType, str]) -> int:
        """Returns an effective stat by name. DEFAULT resolves to WIS."""
        return self._STAT_GETTERS[parse_enum(StatType, stat_type)](self)

    def get_hp(self) -> int:
        return self.stats.hp

    def change_hp(self, amount: int) -> None:
        """Adds `amount` to the live HP. Clamping and death are left to the caller."""
        self.stats = replace(self.stats, hp=self.stats.hp + amount)

    def get_atk(self) -> int:
        return self.stats.atk + self.status.atk

    def get_def(self) -> int:
        return self.stats.def_ + self.status.def_

    def get_wis(self) -> int:
        return self.stats.wis + self.status.wis

    def get_agi(self) -> int:
        return self.stats.agi + self.status.agi

    def change_status(self, status_type: Union[StatusType, str], amount: int) -> None:
        status_type = parse_enum(StatusType, status_type)
        if status_type.is_resistance:
            self.status.apply_ceiling(status_type, amount)
        else:
            self.status.apply_delta(status_type, amount)

    # --- Affliction ---

    def set_affliction(
        self,
        affliction_type: Union[AfflictionType, str],
        params: Optional[Any] = None,
    ) -> None:
        """
        Applies an affliction to the card.

        Reapplying the active type merges `params` into the existing
        affliction. A different type replaces the current one once the new
        affliction has accepted `params`.
        """
        affliction_type = parse_enum(AfflictionType, affliction_type)
        if self.affliction and self.affliction.get_type() == affliction_type:
            self.affliction.add(params)
            self.logger.debug(
                "%s: %s refreshed (%r).", self.name, affliction_type.name, self.affliction
            )
            return

        # Invalid params must leave the current affliction in place.
        affliction = get_affliction(affliction_type, self._config)
        affliction.add(params)

        if self.affliction:
            self.logger.info(
                "%s: %s replaced by %s.",
                self.name,
                self.affliction.get_type().name,
                affliction_type.name,
            )
            self.clear_affliction()
        self.affliction = affliction
        self.logger.info("%s is afflicted with %s.", self.name, affliction_type.name)

    def clear_affliction(self) -> None:
        if not self.affliction:
            return
        self.logger.debug("%s: %s cleared.", self.name, self.affliction.get_type().name)
        self.affliction.clear()
        self.affliction = None

    def can_attack(self) -> bool:
        return self.affliction.can_attack() if self.affliction else True

    def can_use_skill(self) -> bool:
        return self.affliction.can_use_skill() if self.affliction else True

    def can_miss(self) -> bool:
        return self.affliction.can_miss() if self.affliction else False

    def roll_miss(self, random_state: np.random.Generator) -> bool:
        """
        Rolls whether this card's next attack misses because of its affliction.

        No random number is drawn when the card cannot miss.
        """
        if not self.can_miss():
            return False
        return random_state.random() < self.affliction.miss_probability

    def get_affliction_type(self) -> Optional[AfflictionType]:
        return self.affliction.get_type() if self.affliction else None

    def get_poison_percent(self) -> Optional[float]:
        """Returns the active poison percent, or None if the card is not poisoned."""
        if not isinstance(self.affliction, PoisonAffliction):
            return None
        return self.affliction.percent

    def update_affliction(self) -> bool:
        """
        Advances the active affliction by one turn.

        Returns True if the affliction finished (and was cleared) during this
        call.
        """
        if not self.affliction:
            return False

        self.affliction.update(self)

        if self.affliction and self.affliction.is_finished():
            self.logger.info(
                "%s recovered from %s.", self.name, self.affliction.get_type().name
            )
            self.clear_affliction()
            return True

        return False

    # --- Serialization ---

    @staticmethod
    def _serialize_skill(skill: Optional[Skill]) -> Optional[Dict[str, Any]]:
        return skill.get_serializable_object() if skill else None

    def get_serializable_object(self) -> Dict[str, Any]:
        """Returns a snapshot of the card built from fresh, unshared objects."""
        return {
            "name": self.name,
            "stats": self.stats.to_dict(),
            "id": self.id,
            "original_stats": self.original_stats.to_dict(),
            "status": self.status.to_dict(),
            "skills": [self._serialize_skill(skill) for skill in self.skills],
            "player": {"id": self.player.id, "name": self.player.name},
            "is_dead": self.is_dead,
            "affliction": self.affliction.to_dict() if self.affliction else None,
            "auto_attack": self._serialize_skill(self.auto_attack),
            "opening_skill": self._serialize_skill(self.opening_skill),
            "attack_skill": self._serialize_skill(self.attack_skill),
            "protect_skill": self._serialize_skill(self.protect_skill),
            "defense_skill": self._serialize_skill(self.defense_skill),
            "formation_column": self.formation_column,
            "formation_row": int(self.formation_row),
            "image_link": self.image_link,
        }

    def __repr__(self) -> str:
        """Provides a multi-line summary of the card's battle state."""
        header = f"<Card id={self.id} name='{self.name}' player='{self.player_name}'>"
        stats_line = (
            f"  - Stats (HP/ATK/DEF/WIS/AGI): {self.get_hp()}/{self.get_atk()}/"
            f"{self.get_def()}/{self.get_wis()}/{self.get_agi()}"
        )
        affliction = self.get_affliction_type()
        affliction_line = (
            f"  - Affliction: {affliction.name if affliction else 'None'}"
        )
        return "\n".join([header, stats_line, affliction_line])
