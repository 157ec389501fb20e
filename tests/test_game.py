import copy

import pytest

from EconOPS.core.game import (
    AllocateWorker,
    DeallocateWorker,
    GameState,
    Produce,
    Sell,
    TogglePause,
)
from EconOPS.data.settings import GameSettings
from EconOPS.domain.market import SellItem
from EconOPS.domain.production import ProductionItem
from EconOPS.domain.resource import Resource


def test_register_player_assigns_sequential_ids():
    game = GameState(seed=0)
    assert [game.register_player() for _ in range(3)] == [0, 1, 2]
    assert [p.id for p in game.players] == [0, 1, 2]


def test_register_player_uses_settings():
    settings = GameSettings(
        initial_worker_count=2, initial_worker_resource=None, initial_money=10
    )
    game = GameState(settings=settings, seed=0)
    player = game.get_player(game.register_player())
    assert player.idle_count() == 2
    assert player.money == 10


def test_end_to_end_scenario(state):
    state.step()
    snap = state.player_snapshot(0)
    assert snap.stockpile == {Resource.IRON: 3, Resource.COPPER: 0, Resource.STONE: 0}

    before = copy.deepcopy(state.get_player(0))
    state.handle_action(AllocateWorker(0, Resource.STONE))
    assert state.get_player(0) == before

    state.handle_action(DeallocateWorker(0, Resource.IRON))
    assert state.get_player(0).idle_count() == 1

    state.step()
    assert state.get_player(0).stockpile.get(Resource.IRON) == 5


def test_deallocate_without_gatherer_is_noop(state):
    before = copy.deepcopy(state.get_player(0))
    state.handle_action(DeallocateWorker(0, Resource.COPPER))
    assert state.get_player(0) == before


def test_commands_only_touch_named_player(state):
    state.register_player()
    other = copy.deepcopy(state.get_player(1))
    state.handle_action(DeallocateWorker(0, Resource.IRON))
    state.handle_action(AllocateWorker(0, Resource.COPPER))
    assert state.get_player(1) == other
    assert state.get_player(0).gathering_count(Resource.COPPER) == 1


def test_toggle_pause_keeps_commands_working(state):
    assert not state.is_paused()
    state.handle_action(TogglePause())
    assert state.is_paused()
    state.handle_action(DeallocateWorker(0, Resource.IRON))
    assert state.get_player(0).idle_count() == 1
    state.handle_action(TogglePause())
    assert not state.is_paused()


def test_step_advances_tick_and_every_player(state):
    state.register_player()
    state.step()
    state.step()
    assert state.tick == 2
    assert all(p.stockpile.get(Resource.IRON) == 6 for p in state.players)


def test_produce_queues_and_completes(state):
    player = state.get_player(0)
    player.stockpile.add(Resource.IRON, 100)
    state.handle_action(Produce(0, ProductionItem.WORKER_IRON))
    assert player.stockpile.get(Resource.IRON) == 0
    assert state.player_snapshot(0).production_head.remaining == 10

    for _ in range(ProductionItem.WORKER_IRON.get_production_time()):
        state.step()
    assert len(player.workers) == 4
    assert player.idle_count() == 1
    assert state.player_snapshot(0).production_head is None


def test_produce_without_resources_is_noop(state):
    before = copy.deepcopy(state.get_player(0))
    state.handle_action(Produce(0, ProductionItem.WORKER_STONE))
    assert state.get_player(0) == before


def test_sell_credits_money(state):
    player = state.get_player(0)
    player.stockpile.add(Resource.IRON, 100)
    price = state.get_sell_trade(SellItem.IRON).receive
    state.handle_action(Sell(0, SellItem.IRON))
    assert player.money == price
    assert player.stockpile.get(Resource.IRON) == 0


def test_failed_sell_changes_nothing(state):
    before = copy.deepcopy(state.get_player(0))
    price = state.get_sell_trade(SellItem.STONE)
    state.handle_action(Sell(0, SellItem.STONE))
    assert state.get_player(0) == before
    assert state.get_sell_trade(SellItem.STONE) == price


def test_unknown_player_is_a_programming_error(state):
    with pytest.raises(IndexError):
        state.handle_action(AllocateWorker(5, Resource.IRON))
    with pytest.raises(IndexError):
        state.get_player(-1)


def test_unknown_action_is_rejected(state):
    with pytest.raises(TypeError):
        state.handle_action("produce")


def test_snapshot(state):
    state.step()
    snap = state.snapshot()
    assert snap.tick == 1
    assert snap.paused is False
    assert len(snap.players) == 1
    assert snap.players[0].workers == {"Idle": 0, "Iron": 3, "Copper": 0, "Stone": 0}
    assert snap.players[0].total_workers == 3
    assert snap.prices[SellItem.IRON].receive == 5
    assert snap.prices[SellItem.IRON].give[Resource.IRON] == 100


def test_str_lists_players(state):
    state.step()
    assert str(state) == "0: Iron: 3\tCopper: 0\tStone: 0\t\n"
