"""Vues en lecture seule de l'état du jeu (consommées par l'interface)."""

from typing import Dict, List, Optional

from pydantic import BaseModel

from EconOPS.domain.market import SellItem
from EconOPS.domain.production import ProductionItem
from EconOPS.domain.resource import Resource


class ProductionStatus(BaseModel):
    item: ProductionItem
    remaining: int


class PriceSnapshot(BaseModel):
    give: Dict[Resource, int]
    receive: int


class PlayerSnapshot(BaseModel):
    """Snapshot d'un joueur : stock, ouvriers par affectation, trésorerie, production."""

    id: int
    money: int
    stockpile: Dict[Resource, int]
    workers: Dict[str, int]
    production_head: Optional[ProductionStatus] = None
    queue_length: int = 0

    @property
    def total_workers(self) -> int:
        return sum(self.workers.values())


class GameSnapshot(BaseModel):
    tick: int
    paused: bool
    players: List[PlayerSnapshot]
    prices: Dict[SellItem, PriceSnapshot]
