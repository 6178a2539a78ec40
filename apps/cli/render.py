"""Text rendering for the planner menu: pure functions, no I/O."""

from gameplanner.games import chess
from gameplanner.helpers.grouping import group_by_category
from gameplanner.models.catalog import Action, Catalog
from gameplanner.models.sequence import Sequencer

RULE = "=" * 50


def format_tags(tags: dict[str, float]) -> str:
    """`{"Minerals": 100.0, "Gas": 25.0}` -> `100 Minerals, 25 Gas`"""
    return ", ".join(f"{amount:g} {name}" for name, amount in tags.items())


def render_catalog(catalog: Catalog) -> list[str]:
    """Catalog header plus every action, grouped by sorted category."""
    lines = [
        f"Game: {catalog.name}",
        catalog.description,
        "",
        f"Available Moves ({len(catalog)} total):",
        "",
    ]
    for category, actions in group_by_category(catalog.all_actions()).items():
        lines.append(f"  [{category}]")
        for action in actions:
            lines.append(f"    {action.display_name} - {action.description}")
        lines.append("")
    return lines


def render_action_preview(catalog: Catalog, limit: int) -> list[str]:
    """First `limit` actions as `key - name`, with a count of the rest."""
    actions = list(catalog.all_actions())
    lines = [f"  {action.key} - {action.display_name}" for action in actions[:limit]]
    remaining = len(actions) - limit
    if remaining > 0:
        lines.append(f"  ... and {remaining} more")
    return lines


def render_sample(catalog: Catalog, sequencer: Sequencer) -> list[str]:
    """One sample line. Chess samples are numbered by move and colour."""
    lines: list[str] = []
    for i, entry in enumerate(sequencer):
        action = entry.action
        if catalog.id == chess.GAME_ID:
            move_number, colour = chess.side_to_move(i)
            lines.append(
                f"   {move_number}. {colour} - {action.display_name} ({action.description})"
            )
        else:
            lines.append(
                f"   {entry.position}. {action.display_name} ({action.description})"
            )
    lines.append(f"   Total steps: {len(sequencer)}")
    return lines


def render_sequence(sequencer: Sequencer) -> list[str]:
    """Numbered steps with notes and totals, or `(empty)`."""
    if sequencer.is_empty():
        return ["  (empty)"]
    lines = []
    for entry in sequencer:
        line = f"  {entry.position}. {entry.action.display_name}"
        if entry.notes:
            line += f" - {entry.notes}"
        lines.append(line)
    lines.append(f"  Total cost: {sequencer.total_cost():.1f}")
    totals = sequencer.tag_totals()
    if totals:
        lines.append(f"  Totals: {format_tags(totals)}")
    return lines


def describe_action(action: Action) -> str:
    return f"{action.display_name} [{action.category}] - {action.description}"
