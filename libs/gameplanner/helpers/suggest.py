"""'Did you mean' suggestions for keys that are not in a catalog."""

import difflib

from gameplanner.models.catalog import Catalog

DEFAULT_SUGGESTION_LIMIT = 5

# Minimum similarity ratio for difflib to consider a key close
SUGGESTION_CUTOFF = 0.5


def find_suggestions(
    catalog: Catalog, key: str, limit: int = DEFAULT_SUGGESTION_LIMIT
) -> list[str]:
    """Return up to `limit` catalog keys that look like `key`, best first.

    Keys starting with `key` come first, then fuzzy matches. An exact match
    is never suggested (the caller already has it).
    """
    if limit <= 0:
        return []
    keys = catalog.keys()
    suggestions = [k for k in keys if key and k.startswith(key) and k != key]
    for match in difflib.get_close_matches(key, keys, n=limit, cutoff=SUGGESTION_CUTOFF):
        if match != key and match not in suggestions:
            suggestions.append(match)
    return suggestions[:limit]
