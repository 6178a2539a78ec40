"""Convert catalogs and build orders to and from interchange documents.

Serialize a document with `doc.model_dump_json()`; the parse functions
accept a JSON string, bytes, or an already-decoded dict.
"""

import json
import logging
from typing import Any

from gameplanner.models.catalog import Catalog, build_catalog
from gameplanner.models.documents import (
    CatalogDocument,
    SequenceDocument,
    StepRecord,
)
from gameplanner.models.sequence import Sequencer

logger = logging.getLogger(__name__)


def _decode(data: str | bytes | dict[str, Any]) -> dict[str, Any]:
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    if isinstance(data, str):
        data = json.loads(data)
    return data


def dump_catalog(catalog: Catalog) -> CatalogDocument:
    """Capture a catalog, actions in registration order."""
    return CatalogDocument(
        id=catalog.id,
        name=catalog.name,
        description=catalog.description,
        actions=list(catalog.all_actions()),
    )


def parse_catalog(data: str | bytes | dict[str, Any]) -> Catalog:
    """Parse a catalog document and build the Catalog.

    Raises:
        ValueError: If the JSON is malformed or two actions share a key.
        ValidationError: If the data doesn't match the CatalogDocument schema.
    """
    doc = CatalogDocument.model_validate(_decode(data))
    return build_catalog(doc.id, doc.name, doc.description, doc.actions)


def dump_sequence(sequencer: Sequencer, catalog_id: str) -> SequenceDocument:
    """Capture a build order. Steps store action keys, not action data."""
    return SequenceDocument(
        name=sequencer.name,
        catalog_id=catalog_id,
        steps=[
            StepRecord(position=entry.position, key=entry.action.key, notes=entry.notes)
            for entry in sequencer
        ],
    )


def parse_sequence(data: str | bytes | dict[str, Any], catalog: Catalog) -> Sequencer:
    """Parse a build order document against the catalog it was built from.

    Steps are appended in document order and renumbered; stored positions
    are not trusted. Every step references the catalog's own Action.

    Raises:
        ValueError: If the document targets another catalog or references
            keys the catalog does not have.
        ValidationError: If the data doesn't match the SequenceDocument schema.
    """
    doc = SequenceDocument.model_validate(_decode(data))
    if doc.catalog_id != catalog.id:
        raise ValueError(
            f"Build order '{doc.name}' is for catalog {doc.catalog_id!r}, "
            f"not {catalog.id!r}"
        )
    resolved = [(catalog.lookup(step.key), step) for step in doc.steps]
    unknown = [step.key for action, step in resolved if action is None]
    if unknown:
        raise ValueError(
            f"Build order '{doc.name}' references unknown keys: {', '.join(unknown)}"
        )

    sequencer = Sequencer(name=doc.name)
    for action, step in resolved:
        sequencer.append(action, notes=step.notes)
    logger.info("Loaded build order '%s' (%d steps)", doc.name, len(sequencer))
    return sequencer
