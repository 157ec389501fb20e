"""Joueur : ouvriers, stock de ressources, trésorerie et file de production."""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, List, Optional

from EconOPS.domain.production import ProductionItem
from EconOPS.domain.resource import Resource, ResourceAmount
from EconOPS.domain.worker import IDLE, Worker, WorkerAction

PlayerId = int


@dataclass
class ProductionJob:
    """Item en file ; seul l'item en tête voit `remaining` décroître."""

    item: ProductionItem
    remaining: int


@dataclass
class Player:
    id: PlayerId
    workers: List[Worker] = field(default_factory=list)
    stockpile: ResourceAmount = field(default_factory=ResourceAmount)
    money: int = 0
    production_queue: Deque[ProductionJob] = field(default_factory=deque)
    # affectation des ouvriers sortis de production
    produced_worker_action: WorkerAction = IDLE

    @classmethod
    def new(
        cls,
        player_id: PlayerId,
        worker_count: int = 3,
        worker_action: WorkerAction = WorkerAction.gather(Resource.IRON),
        money: int = 0,
        produced_worker_action: WorkerAction = IDLE,
    ) -> "Player":
        return cls(
            id=player_id,
            workers=[Worker(current_action=worker_action) for _ in range(worker_count)],
            money=money,
            produced_worker_action=produced_worker_action,
        )

    def step(self) -> Optional[ProductionItem]:
        """Avance d'un tick.

        1) La tête de file de production perd un tick ; à 0 elle sort de la
           file et son effet s'applique (nouvel ouvrier).
        2) Chaque ouvrier en récolte ajoute 1 à sa ressource. Un ouvrier
           produit à ce tick ne récolte pas encore.

        Returns:
            L'item terminé à ce tick, ou None.
        """
        gatherers = [w.gathered() for w in self.workers]

        completed = None
        if self.production_queue:
            head = self.production_queue[0]
            assert head.remaining > 0, "production job left at 0 ticks"
            head.remaining -= 1
            if head.remaining == 0:
                self.production_queue.popleft()
                head.item.complete(self)
                completed = head.item

        for resource in gatherers:
            if resource is not None:
                self.stockpile.add(resource)
        return completed

    def add_money(self, amount: int) -> None:
        self.money += int(amount)

    def enqueue_production(self, item: ProductionItem) -> bool:
        """Paie le coût de l'item (tout ou rien) puis le met en file."""
        if not self.stockpile.consume(item.get_cost()):
            return False
        self.production_queue.append(
            ProductionJob(item=item, remaining=item.get_production_time())
        )
        return True

    def allocate_worker(self, resource: Resource) -> bool:
        """Le premier ouvrier inactif part récolter `resource`."""
        worker = next((w for w in self.workers if w.current_action.is_idle), None)
        if worker is None:
            return False
        worker.current_action = WorkerAction.gather(resource)
        return True

    def deallocate_worker(self, resource: Resource) -> bool:
        """Le premier ouvrier qui récolte `resource` redevient inactif."""
        target = WorkerAction.gather(resource)
        worker = next((w for w in self.workers if w.current_action == target), None)
        if worker is None:
            return False
        worker.current_action = IDLE
        return True

    def idle_count(self) -> int:
        return sum(1 for w in self.workers if w.current_action.is_idle)

    def gathering_count(self, resource: Resource) -> int:
        target = WorkerAction.gather(resource)
        return sum(1 for w in self.workers if w.current_action == target)

    def worker_histogram(self) -> Dict[str, int]:
        """{"Idle": n, "Iron": n, "Copper": n, "Stone": n}"""
        histogram = {"Idle": self.idle_count()}
        for resource in Resource:
            histogram[str(resource)] = self.gathering_count(resource)
        return histogram

    def production_head(self) -> Optional[ProductionJob]:
        return self.production_queue[0] if self.production_queue else None

    def __str__(self) -> str:
        return f"{self.id}: {self.stockpile}"
