"""Chess catalog: opening moves and sample opening lines.

Moves are keyed by lower-case algebraic notation. Every move costs one
tempo; no legality checking is done.
"""

from gameplanner.models.catalog import Action, Catalog, build_catalog

GAME_ID = "chess"

CHESS_ACTIONS: list[Action] = [
    # Pawns
    Action(
        key="e4",
        display_name="e4",
        category="Pawn Opening",
        description="King's pawn opening - advance pawn to e4",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
    Action(
        key="d4",
        display_name="d4",
        category="Pawn Opening",
        description="Queen's pawn opening - advance pawn to d4",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
    Action(
        key="c4",
        display_name="c4",
        category="Pawn Opening",
        description="English Opening - advance pawn to c4",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
    Action(
        key="e5",
        display_name="e5",
        category="Pawn Response",
        description="Symmetrical response - advance pawn to e5",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
    Action(
        key="d5",
        display_name="d5",
        category="Pawn Response",
        description="Advance pawn to d5",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
    Action(
        key="c5",
        display_name="c5",
        category="Pawn Response",
        description="Sicilian Defense - advance pawn to c5",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
    # Knights
    Action(
        key="nf3",
        display_name="Nf3",
        category="Knight Development",
        description="Develop knight to f3",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
    Action(
        key="nc3",
        display_name="Nc3",
        category="Knight Development",
        description="Develop knight to c3",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
    Action(
        key="nf6",
        display_name="Nf6",
        category="Knight Development",
        description="Develop knight to f6",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
    Action(
        key="nc6",
        display_name="Nc6",
        category="Knight Development",
        description="Develop knight to c6",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
    # Bishops
    Action(
        key="bc4",
        display_name="Bc4",
        category="Bishop Development",
        description="Italian Game - develop bishop to c4",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
    Action(
        key="bb5",
        display_name="Bb5",
        category="Bishop Development",
        description="Ruy Lopez - develop bishop to b5",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
    Action(
        key="bc5",
        display_name="Bc5",
        category="Bishop Development",
        description="Develop bishop to c5",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
    Action(
        key="be7",
        display_name="Be7",
        category="Bishop Development",
        description="Develop bishop to e7",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
    # Rooks
    Action(
        key="re1",
        display_name="Re1",
        category="Rook Activation",
        description="Move rook to e1",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
    Action(
        key="rd1",
        display_name="Rd1",
        category="Rook Activation",
        description="Move rook to d1",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
    # Queen
    Action(
        key="qe2",
        display_name="Qe2",
        category="Queen Development",
        description="Move queen to e2",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
    Action(
        key="qd2",
        display_name="Qd2",
        category="Queen Development",
        description="Move queen to d2",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
    # King
    Action(
        key="ke2",
        display_name="Ke2",
        category="King Move",
        description="Move king to e2 (unusual)",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
    # Special
    Action(
        key="o-o",
        display_name="O-O",
        category="Castling",
        description="Castle kingside",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
    Action(
        key="o-o-o",
        display_name="O-O-O",
        category="Castling",
        description="Castle queenside",
        cost=1.0,
        tags={"Move Number": 1.0},
    ),
]


# Opening name -> move keys, White and Black alternating.
# The Sicilian line plays d6, which the catalog does not carry.
SAMPLE_OPENINGS: dict[str, list[str]] = {
    "Italian Game": ["e4", "e5", "nf3", "nc6", "bc4", "bc5"],
    "Ruy Lopez": ["e4", "e5", "nf3", "nc6", "bb5"],
    "Sicilian Defense": ["e4", "c5", "nf3", "d6", "d4"],
}


def create_chess_game() -> Catalog:
    return build_catalog(
        GAME_ID,
        "Chess",
        "Classic chess game - plan your move sequences and opening strategies",
        CHESS_ACTIONS,
    )


def side_to_move(index: int) -> tuple[int, str]:
    """Return (move number, colour) for the 0-based ply `index`."""
    return index // 2 + 1, "White" if index % 2 == 0 else "Black"
