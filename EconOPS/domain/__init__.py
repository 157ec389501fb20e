"""
Domain objects for EconOPS.

The domain layer holds the value objects of the economy: resources and
resource amounts, workers, production items, market trades and players.
These classes are plain dataclasses or enums backed by JSON catalogs and
perform no I/O beyond loading those catalogs.
"""

from .resource import Resource, ResourceAmount
from .worker import Worker, WorkerAction
from .production import ProductionItem
from .market import SellItem, Trade
from .player import Player, PlayerId

__all__ = [
    "Resource",
    "ResourceAmount",
    "Worker",
    "WorkerAction",
    "ProductionItem",
    "SellItem",
    "Trade",
    "Player",
    "PlayerId",
]
