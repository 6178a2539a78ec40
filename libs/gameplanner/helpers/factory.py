"""Factory functions for building sequences from lists of action keys."""

import logging
from collections.abc import Iterable

from gameplanner.models.catalog import Catalog
from gameplanner.models.sequence import Sequencer

logger = logging.getLogger(__name__)


def sequence_from_keys(
    name: str,
    keys: Iterable[str],
    catalog: Catalog,
) -> tuple[Sequencer, list[str]]:
    """Build a Sequencer by looking up each key in `catalog`.

    Keys the catalog does not know are skipped, so sample data that
    mentions an uncatalogued move still produces a usable sequence.

    Args:
        name: Name of the new build order.
        keys: Action keys, in order.
        catalog: The catalog to resolve keys against.

    Returns:
        The sequence and the list of skipped keys (in input order).
    """
    sequencer = Sequencer(name=name)
    missing: list[str] = []
    for key in keys:
        action = catalog.lookup(key)
        if action is None:
            missing.append(key)
            continue
        sequencer.append(action)
    if missing:
        logger.warning(
            "Sequence '%s': %d key(s) not in catalog '%s': %s",
            name,
            len(missing),
            catalog.id,
            ", ".join(missing),
        )
    return sequencer, missing
