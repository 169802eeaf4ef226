"""Zurts - terminal game entry point.

Each round you move (n/e/s/w), stand (x) or press Enter to take the
advisor's suggestion; then you throw a color and a direction, and every
zurt of that color has an even chance of following the throw.
"""
from __future__ import annotations

import argparse
import sys

from zurts.chronicle import ChronicleRecorder
from zurts.config import GameConfig
from zurts.game import Game
from zurts.signals import SignalBus
from zurts.types import ZurtsError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="zurts", description="Zurts - dodge the zurts")
    p.add_argument("--rows", type=int, default=10, help="Arena rows (1-20, default: 10)")
    p.add_argument("--cols", type=int, default=12, help="Arena columns (1-20, default: 12)")
    p.add_argument("--zurts", type=int, default=50, help="Starting zurts (0-100, default: 50)")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--mini", action="store_true",
                   help="Play a 3x5 mini-game with 2 zurts")
    p.add_argument("--chronicle", type=str, default=None,
                   metavar="FILE", help="Save JSONL chronicle to FILE on exit")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.mini:
        config = GameConfig.mini(seed=args.seed)
    else:
        config = GameConfig(
            rows=args.rows, cols=args.cols, zurts=args.zurts, seed=args.seed
        )

    bus = SignalBus()
    try:
        game = Game(config, bus=bus)
    except ZurtsError as exc:
        print(f"***** {exc}", file=sys.stderr)
        return 1

    chronicle = None
    if args.chronicle:
        chronicle = ChronicleRecorder(bus, lambda: game.turn)

    try:
        won = game.play()
    except (EOFError, KeyboardInterrupt):
        print()
        won = False
    finally:
        if chronicle is not None:
            n = chronicle.write(args.chronicle)
            print(f"Chronicle: {n} events written to {args.chronicle} (seed {game.seed})")
    return 0 if won else 2


if __name__ == "__main__":
    sys.exit(main())
