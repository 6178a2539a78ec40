"""PlannerMenu: interactive text menu over a catalog and its build orders.

All input is parsed and validated here; the core only ever sees
normalized keys and in-range intent. Input and output are injectable
so the menu can be driven from tests.
"""

import logging
from collections.abc import Callable

from gameplanner.helpers.factory import sequence_from_keys
from gameplanner.helpers.interchange import dump_sequence
from gameplanner.helpers.suggest import find_suggestions
from gameplanner.models.catalog import Catalog
from gameplanner.models.sequence import Sequencer

from apps.cli.render import (
    RULE,
    describe_action,
    render_action_preview,
    render_catalog,
    render_sample,
    render_sequence,
)

logger = logging.getLogger(__name__)

# How many actions to list when a key is not found and nothing looks close
PREVIEW_LIMIT = 10


def normalize_key(raw: str) -> str:
    """User-typed key -> catalog key (trimmed, lower-case)."""
    return raw.strip().lower()


def parse_step_number(raw: str, length: int) -> int | None:
    """Parse a 1-based step number typed by the user into a 0-based index.

    Returns None if the text is not a number in 1..length.
    """
    try:
        number = int(raw.strip())
    except ValueError:
        return None
    if not 1 <= number <= length:
        return None
    return number - 1


class PlannerMenu:
    """Main menu: samples, custom build orders, catalog listing."""

    def __init__(
        self,
        catalog: Catalog,
        samples: dict[str, list[str]] | None = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        self._catalog = catalog
        self._samples = samples or {}
        self._input = input_fn
        self._output = output_fn
        self.saved: list[Sequencer] = []

    # --- I/O ---

    def _say(self, *lines: str) -> None:
        for line in lines:
            self._output(line)

    def _ask(self, prompt: str) -> str | None:
        """Read one line. None means input is exhausted (EOF / Ctrl+D)."""
        try:
            return self._input(prompt)
        except EOFError:
            return None

    # --- Main loop ---

    def run(self) -> None:
        self._say(RULE, f"    Game Planner - {self._catalog.name}", RULE, "")
        self._say(*render_catalog(self._catalog))

        while True:
            self._say(
                "",
                "--- Menu ---",
                "1. View sample build orders",
                "2. Create custom build order",
                "3. Show catalog",
                "4. Exit",
            )
            choice = self._ask("\nChoose an option: ")
            if choice is None:
                break
            choice = choice.strip()
            if choice == "1":
                self.view_samples()
            elif choice == "2":
                self.create_custom()
            elif choice == "3":
                self._say(*render_catalog(self._catalog))
            elif choice == "4":
                break
            else:
                self._say("Invalid option. Please try again.")

        self._say("", "Thank you for using Game Planner!")

    def view_samples(self) -> None:
        if not self._samples:
            self._say("", f"No sample build orders for {self._catalog.name}.")
            return
        self._say("", f"=== Sample {self._catalog.name} Build Orders ===")
        for number, (name, keys) in enumerate(self._samples.items(), start=1):
            sequencer, missing = sequence_from_keys(name, keys, self._catalog)
            self._say("", f"{number}. {name}:")
            self._say(*render_sample(self._catalog, sequencer))
            if missing:
                self._say(f"   (skipped, not in catalog: {', '.join(missing)})")

    # --- Custom build order ---

    def create_custom(self) -> Sequencer | None:
        """Edit a new build order until the user saves it.

        Returns the saved build order, or None if input ran out first.
        """
        self._say("", "=== Create Custom Build Order ===")
        name = self._ask("Enter build order name: ")
        if name is None:
            return None
        sequencer = Sequencer(name=name.strip() or "Untitled")

        while True:
            self._say("", "Current sequence:")
            self._say(*render_sequence(sequencer))
            self._say(
                "",
                "Options:",
                "  1. Add step",
                "  2. Remove step",
                "  3. Move step",
                "  4. Edit notes",
                "  5. Clear all",
                "  6. Show as JSON",
                "  7. Save and return",
            )
            choice = self._ask("\nChoose: ")
            if choice is None:
                return None
            choice = choice.strip()
            if choice == "1":
                self._add_step(sequencer)
            elif choice == "2":
                self._remove_step(sequencer)
            elif choice == "3":
                self._move_step(sequencer)
            elif choice == "4":
                self._edit_notes(sequencer)
            elif choice == "5":
                sequencer.clear()
                self._say("Cleared all steps.")
            elif choice == "6":
                self._say(dump_sequence(sequencer, self._catalog.id).model_dump_json(indent=2))
            elif choice == "7":
                self.saved.append(sequencer)
                logger.info("Saved build order '%s' (%d steps)", sequencer.name, len(sequencer))
                self._say("", f"Final Build Order: {sequencer.name}")
                self._say(*render_sequence(sequencer))
                return sequencer
            else:
                self._say("Invalid option.")

    def _add_step(self, sequencer: Sequencer) -> None:
        raw = self._ask("\nEnter action key (e.g. " + ", ".join(self._catalog.keys()[:3]) + "): ")
        if raw is None:
            return
        key = normalize_key(raw)
        action = self._catalog.lookup(key)
        if action is None:
            self._say(f"'{key}' not found.")
            suggestions = find_suggestions(self._catalog, key)
            if suggestions:
                self._say(f"Did you mean: {', '.join(suggestions)}?")
            else:
                self._say("Available actions:")
                self._say(*render_action_preview(self._catalog, PREVIEW_LIMIT))
            return
        notes = self._ask("Notes (optional): ")
        entry = sequencer.append(action, notes=(notes or "").strip())
        self._say(f"Added step {entry.position}: {describe_action(action)}")

    def _remove_step(self, sequencer: Sequencer) -> None:
        if sequencer.is_empty():
            self._say("Build order is empty.")
            return
        raw = self._ask(f"Step to remove (1-{len(sequencer)}, blank = last): ")
        if raw is None:
            return
        if not raw.strip():
            index = len(sequencer) - 1
        else:
            index = parse_step_number(raw, len(sequencer))
            if index is None:
                self._say("Invalid step number.")
                return
        removed = sequencer.entries[index]
        sequencer.remove_at(index)
        self._say(f"Removed {removed.action.display_name}.")

    def _move_step(self, sequencer: Sequencer) -> None:
        if len(sequencer) < 2:
            self._say("Need at least two steps to reorder.")
            return
        raw_from = self._ask(f"Move step (1-{len(sequencer)}): ")
        if raw_from is None:
            return
        raw_to = self._ask(f"To position (1-{len(sequencer)}): ")
        if raw_to is None:
            return
        from_index = parse_step_number(raw_from, len(sequencer))
        to_index = parse_step_number(raw_to, len(sequencer))
        if from_index is None or to_index is None:
            self._say("Invalid step number.")
            return
        if sequencer.move_to(from_index, to_index):
            self._say(f"Moved step {from_index + 1} to {to_index + 1}.")
        else:
            self._say("Nothing to move.")

    def _edit_notes(self, sequencer: Sequencer) -> None:
        if sequencer.is_empty():
            self._say("Build order is empty.")
            return
        raw = self._ask(f"Step to annotate (1-{len(sequencer)}): ")
        if raw is None:
            return
        index = parse_step_number(raw, len(sequencer))
        if index is None:
            self._say("Invalid step number.")
            return
        notes = self._ask("Notes: ")
        if notes is None:
            return
        sequencer.set_notes(index, notes.strip())
        self._say(f"Updated notes for step {index + 1}.")
