"""Group catalog actions by category for display."""

from collections.abc import Iterable

from gameplanner.models.catalog import Action


def group_by_category(actions: Iterable[Action]) -> dict[str, list[Action]]:
    """Return category -> actions, categories sorted, catalog order kept within each.

    Args:
        actions: Usually `catalog.all_actions()`.
    """
    groups: dict[str, list[Action]] = {}
    for action in actions:
        groups.setdefault(action.category, []).append(action)
    return {category: groups[category] for category in sorted(groups)}
