"""Command-line tools for headless play and config files."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Grid Snake headless simulation and config tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play headless games with a random policy.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override it).",
    )
    sim_p.add_argument("--games", type=int, default=10)
    sim_p.add_argument("--max-ticks", type=int, default=500)
    sim_p.add_argument("--turn-probability", type=float, default=0.2)
    sim_p.add_argument("--grid-size", type=int, default=None)
    sim_p.add_argument("--seed", type=int, default=None)

    # --- config ---
    cfg_p = sub.add_parser("config", help="Write a config file.")
    cfg_p.add_argument("output", help="Path for the JSON config.")
    cfg_p.add_argument("--grid-size", type=int, default=None)
    cfg_p.add_argument("--tick-ms", type=int, default=None)
    cfg_p.add_argument("--swipe-threshold", type=float, default=None)
    cfg_p.add_argument("--seed", type=int, default=None)

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    from grid_snake.config import GameConfig
    from grid_snake.simulate import run_simulation

    config = GameConfig.load(args.config) if args.config else GameConfig()
    config = config.with_overrides(grid_size=args.grid_size, seed=args.seed)

    result = run_simulation(
        config,
        games=args.games,
        max_ticks=args.max_ticks,
        turn_probability=args.turn_probability,
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_config(args: argparse.Namespace) -> int:
    from grid_snake.config import GameConfig

    config = GameConfig().with_overrides(
        grid_size=args.grid_size,
        tick_ms=args.tick_ms,
        swipe_threshold=args.swipe_threshold,
        seed=args.seed,
    )
    config.save(args.output)
    print(f"Wrote config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "simulate": _run_simulate,
        "config": _run_config,
    }
    try:
        return handlers[args.command](args)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
