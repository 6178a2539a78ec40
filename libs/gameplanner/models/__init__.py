from gameplanner.models.catalog import Action, Catalog, build_catalog
from gameplanner.models.documents import (
    FORMAT_VERSION,
    CatalogDocument,
    SequenceDocument,
    StepRecord,
)
from gameplanner.models.sequence import SequenceEntry, Sequencer

__all__ = [
    "Action",
    "Catalog",
    "CatalogDocument",
    "FORMAT_VERSION",
    "SequenceDocument",
    "SequenceEntry",
    "Sequencer",
    "StepRecord",
    "build_catalog",
]
