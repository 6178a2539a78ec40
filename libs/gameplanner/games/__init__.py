"""Built-in games: catalog builders and sample build orders by game id."""

from collections.abc import Callable

from gameplanner.games import chess, hoi4, starcraft2
from gameplanner.games.chess import SAMPLE_OPENINGS, create_chess_game
from gameplanner.games.hoi4 import create_hoi4_game
from gameplanner.games.starcraft2 import create_starcraft2_game
from gameplanner.models.catalog import Catalog

GAMES: dict[str, Callable[[], Catalog]] = {
    chess.GAME_ID: create_chess_game,
    starcraft2.GAME_ID: create_starcraft2_game,
    hoi4.GAME_ID: create_hoi4_game,
}

SAMPLES: dict[str, dict[str, list[str]]] = {
    chess.GAME_ID: SAMPLE_OPENINGS,
    starcraft2.GAME_ID: starcraft2.SAMPLE_BUILDS,
    hoi4.GAME_ID: hoi4.SAMPLE_BUILDS,
}


def create_game(game_id: str) -> Catalog:
    """Build the catalog for a game id.

    Raises:
        ValueError: If no game is registered under `game_id`.
    """
    builder = GAMES.get(game_id)
    if builder is None:
        raise ValueError(f"Unknown game: {game_id!r} (known: {', '.join(GAMES)})")
    return builder()


def sample_sequences(game_id: str) -> dict[str, list[str]]:
    """Return a fresh copy of sample name -> action keys for a game (empty if none)."""
    return {name: list(keys) for name, keys in SAMPLES.get(game_id, {}).items()}


__all__ = [
    "GAMES",
    "SAMPLES",
    "SAMPLE_OPENINGS",
    "create_chess_game",
    "create_game",
    "create_hoi4_game",
    "create_starcraft2_game",
    "sample_sequences",
]
