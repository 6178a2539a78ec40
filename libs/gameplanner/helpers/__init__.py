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

__all__ = [
    "dump_catalog",
    "dump_sequence",
    "find_suggestions",
    "group_by_category",
    "parse_catalog",
    "parse_sequence",
    "sequence_from_keys",
    "validate_sequence_document",
]
