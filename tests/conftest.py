"""Shared test fixtures."""

import pytest
from gameplanner import Action, Catalog, build_catalog, create_chess_game


@pytest.fixture
def small_catalog() -> Catalog:
    """e4, e5, nf3 at cost 1.0 each."""
    return build_catalog(
        "test",
        "Test",
        actions=[
            Action(key="e4", display_name="e4", category="Pawn", cost=1.0),
            Action(key="e5", display_name="e5", category="Pawn", cost=1.0),
            Action(key="nf3", display_name="Nf3", category="Knight", cost=1.0),
        ],
    )


@pytest.fixture
def chess_catalog() -> Catalog:
    return create_chess_game()
