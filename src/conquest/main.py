"""Console entrypoint for the Conquest game."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence

from pydantic import ValidationError
from rich.console import Console

from conquest.cli import ConsoleUI, play
from conquest.config import Settings, get_settings
from conquest.domain.errors import AllocationFailure, NoValidTarget
from conquest.factory import create_session

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play a game of Conquest in the terminal")
    parser.add_argument("--seed", help="Seed for a reproducible game")
    parser.add_argument("--player-color", help="Army the player controls")
    parser.add_argument("--territories", type=int, help="Number of territories on the map")
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Print army names without colors",
    )
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser


def resolve_settings(args: argparse.Namespace, base: Settings | None = None) -> Settings:
    """Apply command-line overrides on top of environment settings."""

    settings = base or get_settings()
    overrides: dict[str, object] = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.player_color is not None:
        overrides["player_color"] = args.player_color
    if args.territories is not None:
        overrides["territory_count"] = args.territories
    if args.no_color:
        overrides["color_output"] = False
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if not overrides:
        return settings
    return Settings.model_validate(settings.model_dump() | overrides)


def main(
    argv: Sequence[str] | None = None,
    *,
    console: Console | None = None,
    read: Callable[[], str] = input,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = resolve_settings(args)
    except ValidationError as exc:
        parser.error(str(exc))
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        session = create_session(settings=settings)
    except (AllocationFailure, NoValidTarget, ValueError) as exc:
        logger.error("Could not start the game: %s", exc)
        return 1

    ui = ConsoleUI(console, read=read, color_output=settings.color_output)
    final_state = play(session, ui)
    logger.info("Game finished in state %s", final_state)
    return 0


if __name__ == "__main__":  # pragma: no cover - manual launch helper
    sys.exit(main())
