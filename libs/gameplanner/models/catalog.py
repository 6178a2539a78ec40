"""Catalog data: actions and the per-game registry that owns them."""

import logging
from collections.abc import Iterable, Mapping, ValuesView
from dataclasses import dataclass, field
from types import MappingProxyType

from pydantic import BaseModel, Field, field_serializer, field_validator

logger = logging.getLogger(__name__)


class Action(BaseModel):
    """A single selectable unit of work in a game (a move, a unit, a building).

    Frozen once constructed, tags included. Sequences hold references to the
    catalog's instance, so `is` tells whether two steps use the same action.
    """

    key: str = Field(min_length=1)
    display_name: str
    category: str = ""
    description: str = ""
    cost: float = Field(ge=0, default=1.0)  # time/effort
    # e.g. {"Minerals": 50}; stored as a read-only mapping
    tags: Mapping[str, float] = Field(default_factory=dict, validate_default=True)

    model_config = {"frozen": True}

    @field_validator("tags")
    @classmethod
    def tags_read_only(cls, v: Mapping[str, float]) -> Mapping[str, float]:
        return MappingProxyType(dict(v))

    @field_serializer("tags")
    def serialize_tags(self, v: Mapping[str, float]) -> dict[str, float]:
        return dict(v)

    def __hash__(self) -> int:
        return hash(
            (self.key, self.display_name, self.category, self.description, self.cost,
             tuple(self.tags.items()))
        )


@dataclass
class Catalog:
    """Registry of all actions for one game.

    Built once by a game module, read-only afterwards. Keys are unique and
    case-sensitive; callers normalize user input before calling lookup().
    """

    id: str
    name: str
    description: str = ""
    _actions: dict[str, Action] = field(default_factory=dict, init=False, repr=False)  # key -> Action

    def register(self, action: Action) -> None:
        """Add an action. Raises ValueError if the key is already registered."""
        if action.key in self._actions:
            raise ValueError(
                f"Duplicate action key {action.key!r} in catalog {self.id!r}"
            )
        self._actions[action.key] = action
        logger.debug("Registered '%s' in catalog '%s'", action.key, self.id)

    def lookup(self, key: str) -> Action | None:
        """Return the action with exactly this key, or None if absent."""
        return self._actions.get(key)

    def all_actions(self) -> ValuesView[Action]:
        """Live read-only view of every action, in registration order."""
        return self._actions.values()

    def keys(self) -> list[str]:
        return list(self._actions)

    def categories(self) -> list[str]:
        """Distinct categories, sorted."""
        return sorted({action.category for action in self._actions.values()})

    def __len__(self) -> int:
        return len(self._actions)

    def __contains__(self, key: object) -> bool:
        return key in self._actions


def build_catalog(
    id: str,
    name: str,
    description: str = "",
    actions: Iterable[Action] = (),
) -> Catalog:
    """Create a catalog and register `actions` in order.

    Raises:
        ValueError: If two actions share a key.
    """
    catalog = Catalog(id=id, name=name, description=description)
    for action in actions:
        catalog.register(action)
    logger.info("Built catalog '%s' with %d actions", id, len(catalog))
    return catalog
