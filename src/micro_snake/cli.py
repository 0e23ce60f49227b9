"""Command-line tools for headless Micro Snake runs."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from micro_snake.autoplay import ALL_DIFFICULTIES

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="micro-snake",
        description="Micro Snake autoplay simulation and preset tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play autoplay games headlessly and report scores.",
    )
    sim_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON game config (flags override it).",
    )
    sim_p.add_argument("--games", type=int, default=100)
    sim_p.add_argument("--columns", type=int, default=None)
    sim_p.add_argument("--rows", type=int, default=None)
    sim_p.add_argument(
        "--presets", type=str, default=None,
        help="Path to a JSON preset table (see the presets command).",
    )
    sim_p.add_argument(
        "--difficulty", type=str, default=None,
        help=(
            "Preset name, e.g. "
            + ", ".join(d.value for d in ALL_DIFFICULTIES) + "."
        ),
    )
    sim_p.add_argument("--seed", type=int, default=None)
    sim_p.add_argument("--max-ticks", type=int, default=2_000)

    # --- presets ---
    presets_p = sub.add_parser(
        "presets", help="Print or save the default autoplay presets.",
    )
    presets_p.add_argument(
        "--output", type=str, default=None,
        help="Write presets to this JSON file instead of stdout.",
    )

    return parser


def _run_simulate(args: argparse.Namespace) -> int:
    from micro_snake.autoplay import AutoplayConfig
    from micro_snake.benchmark import simulate
    from micro_snake.config import GameConfig

    config = GameConfig.load(args.config) if args.config else GameConfig()
    presets = (
        AutoplayConfig.load(args.presets)
        if args.presets else AutoplayConfig.default()
    )
    difficulty = args.difficulty or config.difficulty
    if difficulty not in presets.presets:
        logger.error(
            "Unknown difficulty %r; available: %s",
            difficulty, ", ".join(sorted(presets.presets)),
        )
        return 1
    seed = args.seed if args.seed is not None else config.seed

    result = simulate(
        num_games=args.games,
        columns=args.columns if args.columns is not None else config.columns,
        rows=args.rows if args.rows is not None else config.rows,
        difficulty=difficulty,
        seed=seed,
        max_ticks=args.max_ticks,
        presets=presets,
    )
    print(result.summary())  # noqa: T201
    return 0


def _run_presets(args: argparse.Namespace) -> int:
    from micro_snake.autoplay import AutoplayConfig

    config = AutoplayConfig.default()
    if args.output:
        config.save(args.output)
        print(f"Saved presets to {args.output}")  # noqa: T201
    else:
        print(json.dumps(config.to_dict(), indent=2))  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``micro-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "simulate" and args.games < 1:
        parser.error("--games must be at least 1")

    handlers = {
        "simulate": _run_simulate,
        "presets": _run_presets,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
