"""
Paramètres de partie (effectif de départ, dérive des prix, cadence du driver).

Les valeurs par défaut sont lues depuis `settings.json` et validées via Pydantic.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from EconOPS.domain.resource import Resource
from EconOPS.domain.worker import WorkerAction
from EconOPS.utils import DATA_DIR, load_and_validate


class GameSettings(BaseModel):
    initial_worker_count: int = Field(
        default=3, ge=0, description="Ouvriers à l'inscription"
    )
    # None => ouvrier inactif
    initial_worker_resource: Optional[Resource] = Resource.IRON
    produced_worker_resource: Optional[Resource] = None
    initial_money: int = Field(default=0, ge=0)
    drift_mean: float = -0.01
    drift_std: float = Field(default=0.01, ge=0.0)
    frames_per_tick: int = Field(default=10, ge=1)

    @property
    def initial_worker_action(self) -> WorkerAction:
        return WorkerAction(resource=self.initial_worker_resource)

    @property
    def produced_worker_action(self) -> WorkerAction:
        return WorkerAction(resource=self.produced_worker_resource)


def load_settings(json_path: Optional[Path] = None) -> GameSettings:
    """Charge les paramètres de partie (par défaut `data/settings.json`)."""
    path = Path(json_path) if json_path else DATA_DIR / "settings.json"
    return load_and_validate(path, GameSettings)


DEFAULT_SETTINGS: GameSettings = load_settings()
