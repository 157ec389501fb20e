import numpy as np
import pytest

from EconOPS.core.game import GameState


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def state(rng):
    """Partie avec un joueur (3 ouvriers sur le fer) et un marché seedé."""
    game = GameState(rng=rng)
    game.register_player()
    return game
