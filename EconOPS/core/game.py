import logging
from dataclasses import dataclass
from typing import List, Optional, Union

import numpy as np

from EconOPS.core.market import ConsumerSector
from EconOPS.core.results import (
    GameSnapshot,
    PlayerSnapshot,
    PriceSnapshot,
    ProductionStatus,
)
from EconOPS.data.settings import DEFAULT_SETTINGS, GameSettings
from EconOPS.domain.market import SellItem, Trade
from EconOPS.domain.player import Player, PlayerId
from EconOPS.domain.production import ProductionItem
from EconOPS.domain.resource import Resource

logger = logging.getLogger(__name__)


# ---------- Commandes ----------


@dataclass(frozen=True)
class AllocateWorker:
    player: PlayerId
    resource: Resource


@dataclass(frozen=True)
class DeallocateWorker:
    player: PlayerId
    resource: Resource


@dataclass(frozen=True)
class TogglePause:
    pass


@dataclass(frozen=True)
class Produce:
    player: PlayerId
    item: ProductionItem


@dataclass(frozen=True)
class Sell:
    player: PlayerId
    item: SellItem


GameAction = Union[AllocateWorker, DeallocateWorker, TogglePause, Produce, Sell]


class GameState:
    def __init__(
        self,
        settings: Optional[GameSettings] = None,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ):
        """Racine de l'état du jeu : joueurs, pause, marché et compteur de ticks.

        Args:
            settings: Paramètres de partie (par défaut `DEFAULT_SETTINGS`)
            rng: Générateur numpy injecté dans le marché
            seed: Graine du marché si `rng` est absent
        """
        self.settings = settings if settings is not None else DEFAULT_SETTINGS
        self.players: List[Player] = []
        self.paused = False
        self.tick = 0
        self.consumer_sector = ConsumerSector(
            rng=rng,
            seed=seed,
            drift_mean=self.settings.drift_mean,
            drift_std=self.settings.drift_std,
        )

    # ---------- Cycle de vie ----------

    def register_player(self) -> PlayerId:
        """Ajoute un joueur avec l'effectif de départ et renvoie son id (séquentiel)."""
        player_id = len(self.players)
        self.players.append(
            Player.new(
                player_id,
                worker_count=self.settings.initial_worker_count,
                worker_action=self.settings.initial_worker_action,
                money=self.settings.initial_money,
                produced_worker_action=self.settings.produced_worker_action,
            )
        )
        logger.info(
            "Registered player %d with %d workers",
            player_id,
            self.settings.initial_worker_count,
        )
        return player_id

    def step(self) -> None:
        """Avance la simulation d'un tick pour tous les joueurs.

        La pause n'est pas vérifiée ici : c'est le driver qui décide d'appeler
        `step()` ou non.
        """
        self.tick += 1
        logger.debug("Tick %d", self.tick)
        for player in self.players:
            completed = player.step()
            if completed is not None:
                logger.info(
                    "Player %d finished %s at tick %d", player.id, completed, self.tick
                )

    # ---------- Accès ----------

    def get_player(self, player: PlayerId) -> Player:
        if not 0 <= player < len(self.players):
            raise IndexError(f"Unknown player id: {player}")
        return self.players[player]

    def is_paused(self) -> bool:
        return self.paused

    def get_sell_trade(self, item: SellItem) -> Trade:
        return self.consumer_sector.get_trade(item)

    # ---------- Commandes ----------

    def allocate_player_worker(self, player: PlayerId, resource: Resource) -> bool:
        allocated = self.get_player(player).allocate_worker(resource)
        if not allocated:
            logger.debug("Player %d has no idle worker for %s", player, resource)
        return allocated

    def deallocate_player_worker(self, player: PlayerId, resource: Resource) -> bool:
        deallocated = self.get_player(player).deallocate_worker(resource)
        if not deallocated:
            logger.debug("Player %d has no worker gathering %s", player, resource)
        return deallocated

    def toggle_paused(self) -> None:
        self.paused = not self.paused
        logger.info("Game %s", "paused" if self.paused else "resumed")

    def produce(self, player: PlayerId, item: ProductionItem) -> bool:
        queued = self.get_player(player).enqueue_production(item)
        if queued:
            logger.info(
                "Player %d started %s (%d ticks)",
                player,
                item,
                item.get_production_time(),
            )
        else:
            logger.debug("Player %d cannot afford %s", player, item)
        return queued

    def sell(self, player: PlayerId, item: SellItem) -> Optional[int]:
        seller = self.get_player(player)
        money = self.consumer_sector.trade(seller.stockpile, item)
        if money is not None:
            seller.add_money(money)
        return money

    def handle_action(self, action: GameAction) -> None:
        """Applique une commande. Une commande impossible est ignorée sans erreur."""
        match action:
            case AllocateWorker(player=player, resource=resource):
                self.allocate_player_worker(player, resource)
            case DeallocateWorker(player=player, resource=resource):
                self.deallocate_player_worker(player, resource)
            case TogglePause():
                self.toggle_paused()
            case Produce(player=player, item=item):
                self.produce(player, item)
            case Sell(player=player, item=item):
                self.sell(player, item)
            case _:
                raise TypeError(f"Unknown game action: {action!r}")

    # ---------- Vues ----------

    def player_snapshot(self, player: PlayerId) -> PlayerSnapshot:
        p = self.get_player(player)
        head = p.production_head()
        return PlayerSnapshot(
            id=p.id,
            money=p.money,
            stockpile=p.stockpile.to_dict(),
            workers=p.worker_histogram(),
            production_head=(
                ProductionStatus(item=head.item, remaining=head.remaining)
                if head
                else None
            ),
            queue_length=len(p.production_queue),
        )

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            tick=self.tick,
            paused=self.paused,
            players=[self.player_snapshot(p.id) for p in self.players],
            prices={
                item: PriceSnapshot(give=trade.give.to_dict(), receive=trade.receive)
                for item, trade in self.consumer_sector.prices().items()
            },
        )

    def __str__(self) -> str:
        return "".join(f"{p}\n" for p in self.players)
