"""
Primitives du marché : items vendables et prix affichés (échanges).

Les prix de départ viennent de `data/sell_catalog.json` ; ils dérivent ensuite
dans `EconOPS.core.market.ConsumerSector`.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, NonNegativeInt, RootModel

from EconOPS.domain.resource import Resource, ResourceAmount
from EconOPS.utils import DATA_DIR, load_and_validate


class SellItem(Enum):
    IRON = "Iron"
    STONE = "Stone"
    COPPER = "Copper"

    def __str__(self) -> str:
        return self.value

    def get_default_trade(self) -> "Trade":
        return SELL_CATALOG[self].to_trade()


@dataclass(frozen=True)
class Trade:
    """Échange affiché : on donne `give`, on reçoit `receive` unités de monnaie."""

    give: ResourceAmount
    receive: int

    def copy(self) -> "Trade":
        return Trade(give=self.give.copy(), receive=self.receive)


class SellEntry(BaseModel):
    give: Dict[Resource, NonNegativeInt]
    receive: NonNegativeInt

    def to_trade(self) -> Trade:
        return Trade(give=ResourceAmount.of(self.give), receive=self.receive)


class SellCatalogModel(RootModel[Dict[SellItem, SellEntry]]):
    pass


def load_sell_catalog(json_path: Optional[Path] = None) -> Dict[SellItem, SellEntry]:
    """Charge les prix de départ et vérifie que chaque SellItem y figure."""
    path = Path(json_path) if json_path else DATA_DIR / "sell_catalog.json"
    catalog = load_and_validate(path, SellCatalogModel).root
    missing = [str(item) for item in SellItem if item not in catalog]
    if missing:
        raise ValueError(f"Sell catalog {path} is missing items: {missing}")
    return catalog


SELL_CATALOG: Dict[SellItem, SellEntry] = load_sell_catalog()
