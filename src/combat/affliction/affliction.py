"""
This module defines the status ailments a card can suffer from.

Each affliction variant is a subclass of `Affliction` with its own
parameter record. A card holds at most one affliction at a time; the
transitions between variants are driven by `Card.set_affliction`,
`Card.clear_affliction` and `Card.update_affliction`.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Optional, Type

from src.combat.config.combat_config import CombatConfig
from src.combat.core.enums import AfflictionType
from src.combat.core.errors import InvalidArgumentError

if TYPE_CHECKING:
    from src.combat.card.card import Card


@dataclass(frozen=True)
class DurationParams:
    """Parameters for afflictions that only last a number of turns."""

    turns: Optional[int] = None


@dataclass(frozen=True)
class PoisonParams:
    """
    Attributes:
        percent (Optional[float]): Percent of the card's original HP dealt as
                                   damage each turn. Stacks on reapplication.
        turns (Optional[int]): Number of turns the poison lasts.
    """

    percent: Optional[float] = None
    turns: Optional[int] = None


@dataclass(frozen=True)
class BlindParams:
    turns: Optional[int] = None
    miss_probability: Optional[float] = None


class Affliction(ABC):
    """
    Base class for all afflictions.

    Every affliction lasts a number of turns and consumes one of them per
    `update`. By default an afflicted card may still attack and use skills
    and is not forced to miss; subclasses override the capabilities they
    restrict.
    """

    type: ClassVar[AfflictionType]
    params_class: ClassVar[Type[Any]] = DurationParams

    def __init__(self, config: CombatConfig):
        self._config = config
        self.turns_left: int = 0

    @property
    @abstractmethod
    def default_turns(self) -> int: ...

    def add(self, params: Optional[Any] = None) -> None:
        """
        Feeds the parameters of a new application into this affliction.

        Reapplying never shortens the remaining duration.
        """
        params = self._check_params(params)
        turns = params.turns if params.turns is not None else self.default_turns
        self.turns_left = max(self.turns_left, turns)

    def _check_params(self, params: Optional[Any]) -> Any:
        if params is None:
            return self.params_class()
        if not isinstance(params, self.params_class):
            raise InvalidArgumentError(
                f"{type(self).__name__} expects {self.params_class.__name__}, "
                f"got {type(params).__name__}."
            )
        turns = getattr(params, "turns", None)
        if turns is not None and turns < 1:
            raise InvalidArgumentError(f"Affliction turns must be at least 1, got {turns}.")
        percent = getattr(params, "percent", None)
        if percent is not None and not 0 <= percent <= 100:
            raise InvalidArgumentError(
                f"Poison percent must be between 0 and 100, got {percent}."
            )
        miss_probability = getattr(params, "miss_probability", None)
        if miss_probability is not None and not 0.0 <= miss_probability <= 1.0:
            raise InvalidArgumentError(
                f"Miss probability must be between 0.0 and 1.0, got {miss_probability}."
            )
        return params

    def update(self, card: "Card") -> None:
        """Advances the affliction by one battle turn."""
        self.turns_left -= 1

    def is_finished(self) -> bool:
        return self.turns_left <= 0

    def can_attack(self) -> bool:
        return True

    def can_use_skill(self) -> bool:
        return True

    def can_miss(self) -> bool:
        return False

    @property
    def miss_probability(self) -> float:
        return 0.0

    def clear(self) -> None:
        self.turns_left = 0

    def get_type(self) -> AfflictionType:
        return self.type

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.name, "turns_left": self.turns_left}

    def __repr__(self) -> str:
        return f"<{type(self).__name__} turns_left={self.turns_left}>"


class PoisonAffliction(Affliction):
    """
    Deals a percentage of the card's original HP as damage every turn.

    Reapplying poison adds the new percent to the current one, up to
    `CombatConfig.poison_max_percent`.
    """

    type = AfflictionType.POISON
    params_class = PoisonParams

    def __init__(self, config: CombatConfig):
        super().__init__(config)
        self.percent: float = 0

    @property
    def default_turns(self) -> int:
        return self._config.poison_default_turns

    def add(self, params: Optional[PoisonParams] = None) -> None:
        params = self._check_params(params)
        percent = (
            params.percent
            if params.percent is not None
            else self._config.poison_default_percent
        )
        self.percent = min(self.percent + percent, self._config.poison_max_percent)
        super().add(params)

    def get_damage(self, card: "Card") -> int:
        damage = math.floor(card.original_stats.hp * self.percent / 100)
        return min(damage, self._config.poison_damage_cap)

    def update(self, card: "Card") -> None:
        card.change_hp(-self.get_damage(card))
        super().update(card)

    def can_miss(self) -> bool:
        return True

    @property
    def miss_probability(self) -> float:
        return self._config.poison_miss_probability

    def clear(self) -> None:
        super().clear()
        self.percent = 0

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "percent": self.percent}

    def __repr__(self) -> str:
        return f"<PoisonAffliction percent={self.percent} turns_left={self.turns_left}>"


class ParalysisAffliction(Affliction):
    type = AfflictionType.PARALYSIS

    @property
    def default_turns(self) -> int:
        return self._config.paralysis_default_turns

    def can_attack(self) -> bool:
        return False

    def can_use_skill(self) -> bool:
        return False


class FrozenAffliction(Affliction):
    type = AfflictionType.FROZEN

    @property
    def default_turns(self) -> int:
        return self._config.frozen_default_turns

    def can_attack(self) -> bool:
        return False

    def can_use_skill(self) -> bool:
        return False


class SilentAffliction(Affliction):
    """Prevents skill use; normal attacks are still allowed."""

    type = AfflictionType.SILENT

    @property
    def default_turns(self) -> int:
        return self._config.silent_default_turns

    def can_use_skill(self) -> bool:
        return False


class BlindAffliction(Affliction):
    """Makes the card's attacks miss with `miss_probability`."""

    type = AfflictionType.BLIND
    params_class = BlindParams

    def __init__(self, config: CombatConfig):
        super().__init__(config)
        self._miss_probability: float = 0.0

    @property
    def default_turns(self) -> int:
        return self._config.blind_default_turns

    def add(self, params: Optional[BlindParams] = None) -> None:
        params = self._check_params(params)
        probability = (
            params.miss_probability
            if params.miss_probability is not None
            else self._config.blind_default_miss_probability
        )
        self._miss_probability = max(self._miss_probability, probability)
        super().add(params)

    def can_miss(self) -> bool:
        return True

    @property
    def miss_probability(self) -> float:
        return self._miss_probability

    def clear(self) -> None:
        super().clear()
        self._miss_probability = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {**super().to_dict(), "miss_probability": self._miss_probability}
