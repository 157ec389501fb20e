"""
Core engine for EconOPS.

`GameState` applies player commands and advances simulated time one tick at
a time; `ConsumerSector` runs the market; `TickDriver` paces ticks for a
headless loop.
"""

from .game import (
    AllocateWorker,
    DeallocateWorker,
    GameAction,
    GameState,
    Produce,
    Sell,
    TogglePause,
)
from .market import ConsumerSector

__all__ = [
    "AllocateWorker",
    "ConsumerSector",
    "DeallocateWorker",
    "GameAction",
    "GameState",
    "Produce",
    "Sell",
    "TogglePause",
]
