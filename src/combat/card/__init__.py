from .card import Card
from .stats import Stats
from .status import Status

__all__ = [
    "Card",
    "Stats",
    "Status",
]
