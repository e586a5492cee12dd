from .affliction import (
    Affliction,
    BlindAffliction,
    BlindParams,
    DurationParams,
    FrozenAffliction,
    ParalysisAffliction,
    PoisonAffliction,
    PoisonParams,
    SilentAffliction,
)
from .affliction_factory import AFFLICTION_CLASSES, get_affliction

__all__ = [
    "AFFLICTION_CLASSES",
    "Affliction",
    "BlindAffliction",
    "BlindParams",
    "DurationParams",
    "FrozenAffliction",
    "ParalysisAffliction",
    "PoisonAffliction",
    "PoisonParams",
    "SilentAffliction",
    "get_affliction",
]
