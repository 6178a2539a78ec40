"""Game Planner: catalogs of game actions and editable build orders."""

from gameplanner.games import (
    GAMES,
    SAMPLE_OPENINGS,
    SAMPLES,
    create_chess_game,
    create_game,
    create_hoi4_game,
    create_starcraft2_game,
    sample_sequences,
)
from gameplanner.helpers.factory import sequence_from_keys
from gameplanner.helpers.grouping import group_by_category
from gameplanner.helpers.interchange import (
    dump_catalog,
    dump_sequence,
    parse_catalog,
    parse_sequence,
)
from gameplanner.helpers.suggest import find_suggestions
from gameplanner.helpers.validation import validate_sequence_document
from gameplanner.models.catalog import Action, Catalog, build_catalog
from gameplanner.models.documents import (
    FORMAT_VERSION,
    CatalogDocument,
    SequenceDocument,
    StepRecord,
)
from gameplanner.models.sequence import SequenceEntry, Sequencer

__all__ = [
    # Models
    "Action",
    "Catalog",
    "CatalogDocument",
    "FORMAT_VERSION",
    "SequenceDocument",
    "SequenceEntry",
    "Sequencer",
    "StepRecord",
    "build_catalog",
    # Games
    "GAMES",
    "SAMPLES",
    "SAMPLE_OPENINGS",
    "create_chess_game",
    "create_game",
    "create_hoi4_game",
    "create_starcraft2_game",
    "sample_sequences",
    # Helpers
    "dump_catalog",
    "dump_sequence",
    "find_suggestions",
    "group_by_category",
    "parse_catalog",
    "parse_sequence",
    "sequence_from_keys",
    "validate_sequence_document",
]
