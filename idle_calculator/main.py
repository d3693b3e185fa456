"""
Main entry point for the idle calculator.

Creates the process-wide store, wires the battle simulator and the auto
battler to it and hands control to the console panel.
"""

import argparse
import logging
import random

from idle_calculator.core.constants import AUTO_BATTLE_INTERVAL
from idle_calculator.core.logging import log_info, setup_logging
from idle_calculator.core.utils import cprint, crule
from idle_calculator.simulation import AutoBattler, BattleSimulator
from idle_calculator.store import init_store
from idle_calculator.ui import ControlPanel


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="idle-calculator",
        description="Idle game calculator: win battles and watch skills level up.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed for the level-up rolls, for reproducible sessions",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=AUTO_BATTLE_INTERVAL,
        help="seconds between two auto-battle ticks (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: %(default)s)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    if args.interval <= 0:
        build_parser().error("--interval must be positive")

    setup_logging(getattr(logging, args.log_level))

    store = init_store()
    simulator = BattleSimulator(store, random.Random(args.seed))
    auto_battler = AutoBattler(simulator, interval=args.interval)
    log_info(
        "Calculator initialized",
        {"seed": args.seed, "interval": args.interval, "items": len(store.items)},
    )

    crule("Idle Calculator", style="bold green")
    cprint(
        "Win battles to give every skill and weapon a chance to level up. "
        "The higher the level, the lower the chance.",
        style="bold blue",
    )
    ControlPanel(simulator, auto_battler).run()


if __name__ == "__main__":
    main()
