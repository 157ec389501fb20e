"""Ouvriers et leur affectation (inactif ou récolte d'une ressource)."""

from dataclasses import dataclass
from typing import Optional

from EconOPS.domain.resource import Resource


@dataclass(frozen=True)
class WorkerAction:
    """Affectation d'un ouvrier : `Idle` (resource=None) ou `Gather(resource)`."""

    resource: Optional[Resource] = None

    @classmethod
    def idle(cls) -> "WorkerAction":
        return cls()

    @classmethod
    def gather(cls, resource: Resource) -> "WorkerAction":
        return cls(resource=resource)

    @property
    def is_idle(self) -> bool:
        return self.resource is None

    def __str__(self) -> str:
        if self.resource is None:
            return "Idle"
        return f"Gather({self.resource})"


IDLE = WorkerAction.idle()


@dataclass
class Worker:
    current_action: WorkerAction = IDLE

    def gathered(self) -> Optional[Resource]:
        """Ressource récoltée à ce tick, None si l'ouvrier est inactif."""
        return self.current_action.resource
