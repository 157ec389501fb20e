"""
Catalogue de production : chaque item a un coût en ressources et une durée
de fabrication (en ticks). Les valeurs viennent de `data/production_catalog.json`.
"""

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Optional

from pydantic import BaseModel, Field, NonNegativeInt, RootModel

from EconOPS.domain.resource import Resource, ResourceAmount
from EconOPS.domain.worker import Worker
from EconOPS.utils import DATA_DIR, load_and_validate

# Pas d'import de player ici (cycle) : typage uniquement.
if TYPE_CHECKING:
    from EconOPS.domain.player import Player


class ProductionItem(Enum):
    WORKER_IRON = "WorkerIron"
    WORKER_STONE = "WorkerStone"

    def __str__(self) -> str:
        return self.value

    def get_cost(self) -> ResourceAmount:
        return PRODUCTION_CATALOG[self].cost_amount()

    def get_production_time(self) -> int:
        return PRODUCTION_CATALOG[self].production_time

    def complete(self, player: "Player") -> None:
        """Effet de fin de production : un nouvel ouvrier rejoint l'équipe."""
        # tous les items du catalogue actuel sont des ouvriers
        player.workers.append(Worker(current_action=player.produced_worker_action))


class ProductionEntry(BaseModel):
    cost: Dict[Resource, NonNegativeInt]
    production_time: int = Field(ge=1, description="Durée de fabrication (ticks)")

    def cost_amount(self) -> ResourceAmount:
        return ResourceAmount.of(self.cost)


class ProductionCatalogModel(RootModel[Dict[ProductionItem, ProductionEntry]]):
    pass


def load_production_catalog(
    json_path: Optional[Path] = None,
) -> Dict[ProductionItem, ProductionEntry]:
    """Charge le catalogue et vérifie que chaque ProductionItem y figure."""
    path = Path(json_path) if json_path else DATA_DIR / "production_catalog.json"
    catalog = load_and_validate(path, ProductionCatalogModel).root
    missing = [str(item) for item in ProductionItem if item not in catalog]
    if missing:
        raise ValueError(f"Production catalog {path} is missing items: {missing}")
    return catalog


PRODUCTION_CATALOG: Dict[ProductionItem, ProductionEntry] = load_production_catalog()
