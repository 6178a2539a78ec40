"""Interchange documents: the JSON shape of catalogs and build orders.

Steps reference actions by key only. Loading a build order resolves the
keys against a catalog, so the loaded steps share the catalog's actions.
"""

from pydantic import BaseModel, Field

from gameplanner.models.catalog import Action

FORMAT_VERSION = 1


class CatalogDocument(BaseModel):
    """A whole catalog, actions inline."""

    version: int = FORMAT_VERSION
    id: str
    name: str
    description: str = ""
    actions: list[Action] = Field(default_factory=list)


class StepRecord(BaseModel):
    """One build order step. `position` is informational; list order wins."""

    position: int = Field(ge=1)
    key: str
    notes: str = ""


class SequenceDocument(BaseModel):
    """A build order bound to the catalog it was built from."""

    version: int = FORMAT_VERSION
    name: str
    catalog_id: str
    steps: list[StepRecord] = Field(default_factory=list)
