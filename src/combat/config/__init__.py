from .combat_config import CombatConfig, load_combat_config

__all__ = [
    "CombatConfig",
    "load_combat_config",
]
