"""Build orders: ordered, annotated sequences of catalog actions.

A Sequencer owns its entries; the actions they point at belong to the
catalog and are shared, never copied. Positions are derived from list
order and rewritten only by `_renumber()`.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from gameplanner.models.catalog import Action

logger = logging.getLogger(__name__)


@dataclass
class SequenceEntry:
    """One step of a build order."""

    position: int  # 1-based
    action: Action
    notes: str = ""


@dataclass(eq=False)
class Sequencer:
    """A named build order the user edits step by step.

    Mutations with an out-of-range index are no-ops that return False and
    leave the entries untouched.
    """

    name: str
    _entries: list[SequenceEntry] = field(default_factory=list, init=False, repr=False)

    @property
    def entries(self) -> tuple[SequenceEntry, ...]:
        """Snapshot of the current entries, in order."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SequenceEntry]:
        return iter(self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def _in_range(self, index: int) -> bool:
        # Negative indices are rejected, not counted from the end
        return 0 <= index < len(self._entries)

    def _renumber(self) -> None:
        for i, entry in enumerate(self._entries):
            entry.position = i + 1

    # --- Mutations ---

    def append(self, action: Action, notes: str = "") -> SequenceEntry:
        """Add a step at the end and return it."""
        entry = SequenceEntry(position=len(self._entries) + 1, action=action, notes=notes)
        self._entries.append(entry)
        return entry

    def remove_at(self, index: int) -> bool:
        """Remove the step at `index` (0-based). Returns False if out of range."""
        if not self._in_range(index):
            logger.debug(
                "remove_at(%d) ignored on '%s' (%d entries)", index, self.name, len(self)
            )
            return False
        del self._entries[index]
        self._renumber()
        return True

    def move_to(self, from_index: int, to_index: int) -> bool:
        """Move a step so it ends up at `to_index` (0-based).

        Entries between the two indices shift by one. Returns False when
        either index is out of range or both are equal.
        """
        if not (self._in_range(from_index) and self._in_range(to_index)):
            logger.debug(
                "move_to(%d, %d) ignored on '%s' (%d entries)",
                from_index,
                to_index,
                self.name,
                len(self),
            )
            return False
        if from_index == to_index:
            return False
        entry = self._entries.pop(from_index)
        self._entries.insert(to_index, entry)
        self._renumber()
        return True

    def set_notes(self, index: int, notes: str) -> bool:
        """Replace the notes of one step. Returns False if out of range."""
        if not self._in_range(index):
            logger.debug(
                "set_notes(%d) ignored on '%s' (%d entries)", index, self.name, len(self)
            )
            return False
        self._entries[index].notes = notes
        return True

    def rename(self, name: str) -> None:
        self.name = name

    def clear(self) -> None:
        """Remove every step."""
        self._entries.clear()

    # --- Aggregates ---

    def total_cost(self) -> float:
        """Sum of action costs, accumulated in list order."""
        total = 0.0
        for entry in self._entries:
            total += entry.action.cost
        return total

    def tag_totals(self) -> dict[str, float]:
        """Sum each tag across all steps, keyed in first-seen order."""
        totals: dict[str, float] = {}
        for entry in self._entries:
            for tag, amount in entry.action.tags.items():
                totals[tag] = totals.get(tag, 0.0) + amount
        return totals
