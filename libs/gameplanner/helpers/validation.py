"""Build order document validation."""

from gameplanner.models.catalog import Catalog
from gameplanner.models.documents import FORMAT_VERSION, SequenceDocument


def validate_sequence_document(doc: SequenceDocument, catalog: Catalog) -> list[str]:
    """Check a build order document against a catalog.

    Stricter than parse_sequence(): stored positions must also be 1..n.
    Returns a list of error strings. Empty list means valid.
    """
    errors: list[str] = []

    if doc.version != FORMAT_VERSION:
        errors.append(f"Unsupported format version: {doc.version}")

    if not doc.name or not doc.name.strip():
        errors.append("'name' field must not be empty")

    if doc.catalog_id != catalog.id:
        errors.append(
            f"Document is for catalog {doc.catalog_id!r}, not {catalog.id!r}"
        )

    for i, step in enumerate(doc.steps):
        if step.key not in catalog:
            errors.append(f"steps.{i}.key: unknown action {step.key!r}")
        if step.position != i + 1:
            errors.append(
                f"steps.{i}.position: expected {i + 1}, got {step.position}"
            )

    return errors
