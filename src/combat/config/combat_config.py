"""
This module defines the tuning parameters for the combat model and a loader
for reading them from a JSON file.
"""

import json
import warnings
from dataclasses import dataclass, fields
from typing import Any, Dict


@dataclass(frozen=True)
class CombatConfig:
    """
    Holds the tuning values used by afflictions and the combat logger.

    Attributes:
        poison_default_percent (float): Percent of original HP a poison deals
                                        per tick when applied without an
                                        explicit percent. Defaults to 10.
        poison_max_percent (float): Upper bound for stacked poison percent.
                                    Defaults to 50.
        poison_default_turns (int): Ticks a poison lasts. Defaults to 3.
        poison_damage_cap (int): Maximum damage a single poison tick can
                                 deal. Defaults to 99999.
        poison_miss_probability (float): Chance a poisoned card's attack
                                         misses. Defaults to 0.1.
        paralysis_default_turns (int): Defaults to 1.
        frozen_default_turns (int): Defaults to 1.
        silent_default_turns (int): Defaults to 2.
        blind_default_turns (int): Defaults to 2.
        blind_default_miss_probability (float): Defaults to 0.5.
        enable_logging (bool): Whether to write combat logs to file.
                               Defaults to False.
        log_level (int): The logging level to use when logging is enabled.
                         Defaults to logging.INFO.
        log_dir (str): Directory log files are written to.
    """

    poison_default_percent: float = 10
    poison_max_percent: float = 50
    poison_default_turns: int = 3
    poison_damage_cap: int = 99999
    poison_miss_probability: float = 0.1

    paralysis_default_turns: int = 1
    frozen_default_turns: int = 1
    silent_default_turns: int = 2
    blind_default_turns: int = 2
    blind_default_miss_probability: float = 0.5

    enable_logging: bool = False
    log_level: int = 20
    log_dir: str = "./logs"

    def __post_init__(self):
        """Validate parameters after initialization."""
        if not 0 <= self.poison_default_percent <= self.poison_max_percent <= 100:
            raise ValueError(
                "Poison percents must satisfy 0 <= default <= max <= 100."
            )
        if self.poison_damage_cap < 0:
            raise ValueError("Poison damage cap must not be negative.")
        for name in (
            "poison_default_turns",
            "paralysis_default_turns",
            "frozen_default_turns",
            "silent_default_turns",
            "blind_default_turns",
        ):
            if getattr(self, name) < 1:
                raise ValueError(f"{name} must be at least 1.")
        for name in ("poison_miss_probability", "blind_default_miss_probability"):
            if not 0.0 <= getattr(self, name) <= 1.0:
                raise ValueError(f"{name} must be between 0.0 and 1.0.")


def load_combat_config(filepath: str) -> CombatConfig:
    """
    Builds a CombatConfig from a JSON object of overrides.

    A missing or malformed file falls back to the defaults with a warning.
    Keys that are not CombatConfig fields are ignored with a warning.
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            raw_config = json.load(f)
        if not isinstance(raw_config, dict):
            raise TypeError("Combat config file must be a JSON object.")
    except (FileNotFoundError, json.JSONDecodeError, TypeError) as e:
        warnings.warn(f"Could not load combat config from '{filepath}': {e}.")
        return CombatConfig()

    known_fields = {f.name for f in fields(CombatConfig)}
    overrides: Dict[str, Any] = {}
    for key, value in raw_config.items():
        if key in known_fields:
            overrides[key] = value
        else:
            warnings.warn(f"Ignoring unknown combat config key '{key}'.")

    return CombatConfig(**overrides)
