from typing import Dict, Optional, Type

from src.combat.affliction.affliction import (
    Affliction,
    BlindAffliction,
    FrozenAffliction,
    ParalysisAffliction,
    PoisonAffliction,
    SilentAffliction,
)
from src.combat.config.combat_config import CombatConfig
from src.combat.core.enums import AfflictionType, parse_enum
from src.combat.core.errors import InvalidArgumentError

AFFLICTION_CLASSES: Dict[AfflictionType, Type[Affliction]] = {
    AfflictionType.POISON: PoisonAffliction,
    AfflictionType.PARALYSIS: ParalysisAffliction,
    AfflictionType.FROZEN: FrozenAffliction,
    AfflictionType.SILENT: SilentAffliction,
    AfflictionType.BLIND: BlindAffliction,
}


def get_affliction(
    affliction_type: AfflictionType, config: Optional[CombatConfig] = None
) -> Affliction:
    """Creates a fresh, not yet applied affliction of the given type."""
    affliction_type = parse_enum(AfflictionType, affliction_type)
    affliction_class = AFFLICTION_CLASSES.get(affliction_type)
    if affliction_class is None:
        raise InvalidArgumentError(
            f"No affliction is registered for type '{affliction_type.name}'."
        )
    return affliction_class(config or CombatConfig())
