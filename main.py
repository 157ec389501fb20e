import argparse
import logging

from EconOPS.console_style import bold, cyan, green, yellow
from EconOPS.core.driver import TickDriver
from EconOPS.core.game import (
    AllocateWorker,
    DeallocateWorker,
    GameState,
    Produce,
    Sell,
)
from EconOPS.core.results import GameSnapshot
from EconOPS.domain.production import ProductionItem
from EconOPS.domain.market import SellItem
from EconOPS.domain.resource import Resource


def print_snapshot(snapshot: GameSnapshot) -> None:
    state = yellow("en pause") if snapshot.paused else green("en cours")
    print(bold(f"\n=== Tick {snapshot.tick} ({state}) ==="))
    header = ["Joueur", "Argent", *Resource.names()]
    print(cyan("\t".join(header)))
    for p in snapshot.players:
        row = [str(p.id), str(p.money), *(str(n) for n in p.stockpile.values())]
        print("\t".join(row))
    for p in snapshot.players:
        workers = ", ".join(f"{k}: {v}" for k, v in p.workers.items())
        line = f"Joueur {p.id} — ouvriers ({workers})"
        if p.production_head:
            line += (
                f" — production {p.production_head.item}"
                f" ({p.production_head.remaining} ticks, file: {p.queue_length})"
            )
        print(line)
    print(bold("Marché :"))
    for item, price in snapshot.prices.items():
        give = ", ".join(f"{n} {r}" for r, n in price.give.items() if n)
        print(f" - {item}: {give} -> {price.receive}")


def run(ticks: int, seed: int | None) -> GameState:
    state = GameState(seed=seed)
    state.register_player()
    state.register_player()

    # Joueur 1 : un ouvrier par ressource
    for resource in (Resource.COPPER, Resource.STONE):
        state.handle_action(DeallocateWorker(1, Resource.IRON))
        state.handle_action(AllocateWorker(1, resource))

    driver = TickDriver(state)
    frames = ticks * driver.frames_per_tick
    half = frames // 2
    driver.run(half)
    driver.run(
        frames - half,
        actions=[
            Sell(0, SellItem.IRON),
            Produce(0, ProductionItem.WORKER_IRON),
        ],
    )
    print_snapshot(state.snapshot())
    return state


def main() -> None:
    parser = argparse.ArgumentParser(description="Partie EconOPS sans affichage")
    parser.add_argument("--ticks", type=int, default=120, help="Nombre de ticks")
    parser.add_argument("--seed", type=int, default=None, help="Graine du marché")
    parser.add_argument("--verbose", action="store_true", help="Logs détaillés")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    run(args.ticks, args.seed)


if __name__ == "__main__":
    main()
