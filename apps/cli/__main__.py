"""Entry point: python -m apps.cli

Environment:
    GAMEPLANNER_GAME       game id to plan for (default: chess)
    GAMEPLANNER_LOG_LEVEL  logging level (default: WARNING)
"""

import logging
import os
import sys

from gameplanner.games import GAMES, create_game, sample_sequences

from apps.cli.menu import PlannerMenu

DEFAULT_GAME = "chess"
DEFAULT_LOG_LEVEL = "WARNING"


def _log_level() -> str:
    """GAMEPLANNER_LOG_LEVEL if it names a logging level, else the default."""
    level = os.environ.get("GAMEPLANNER_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if level not in logging.getLevelNamesMapping():
        print(f"Unknown log level {level!r}, using {DEFAULT_LOG_LEVEL}", file=sys.stderr)
        return DEFAULT_LOG_LEVEL
    return level


def main() -> int:
    logging.basicConfig(
        level=_log_level(),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    game_id = os.environ.get("GAMEPLANNER_GAME", DEFAULT_GAME).strip().lower()
    try:
        catalog = create_game(game_id)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(f"Available games: {', '.join(GAMES)}", file=sys.stderr)
        return 2

    menu = PlannerMenu(catalog, sample_sequences(game_id))
    try:
        menu.run()
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Interrupted")
    return 0


if __name__ == "__main__":
    sys.exit(main())
