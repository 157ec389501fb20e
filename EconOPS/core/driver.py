import logging
from typing import Iterable, Optional

from EconOPS.core.game import GameAction, GameState

logger = logging.getLogger(__name__)


class TickDriver:
    """Boucle de pilotage sans affichage.

    Chaque appel à `frame()` représente une image de l'interface : les
    commandes en attente sont appliquées, puis un tick est joué toutes les
    `frames_per_tick` images tant que la partie n'est pas en pause.
    """

    def __init__(self, state: GameState, frames_per_tick: Optional[int] = None):
        self.state = state
        self.frames_per_tick = (
            frames_per_tick
            if frames_per_tick is not None
            else state.settings.frames_per_tick
        )
        if self.frames_per_tick < 1:
            raise ValueError(f"frames_per_tick must be >= 1: {self.frames_per_tick}")
        self.counter = 0
        self.pending: list[GameAction] = []

    def submit(self, action: GameAction) -> None:
        self.pending.append(action)

    def frame(self) -> bool:
        """Joue une image ; renvoie True si un tick a été joué."""
        while self.pending:
            self.state.handle_action(self.pending.pop(0))
        if self.state.is_paused():
            return False
        self.counter = (self.counter + 1) % self.frames_per_tick
        if self.counter == 0:
            self.state.step()
            return True
        return False

    def run(self, frames: int, actions: Iterable[GameAction] = ()) -> int:
        """Soumet `actions` puis joue `frames` images ; renvoie le nombre de ticks."""
        for action in actions:
            self.submit(action)
        ticks = sum(1 for _ in range(frames) if self.frame())
        logger.debug("Ran %d frames, %d ticks", frames, ticks)
        return ticks
