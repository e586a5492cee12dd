from .core.enums import (
    AfflictionType,
    FormationRow,
    SkillType,
    StatType,
    StatusType,
)
from .core.errors import InvalidArgumentError
from .config.combat_config import CombatConfig, load_combat_config
from .affliction.affliction import (
    Affliction,
    BlindParams,
    DurationParams,
    PoisonParams,
)
from .affliction.affliction_factory import get_affliction
from .card.stats import Stats
from .card.status import Status
from .card.card import Card
from .logger import setup_combat_logger

__all__ = [
    "AfflictionType",
    "FormationRow",
    "SkillType",
    "StatType",
    "StatusType",
    "InvalidArgumentError",
    "CombatConfig",
    "load_combat_config",
    "Affliction",
    "BlindParams",
    "DurationParams",
    "PoisonParams",
    "get_affliction",
    "Stats",
    "Status",
    "Card",
    "setup_combat_logger",
]
