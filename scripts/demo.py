"""Demo: walk every built-in game through a scripted build order.

Run with: python scripts/demo.py
"""

import sys

from gameplanner import (
    GAMES,
    Sequencer,
    create_game,
    dump_sequence,
    group_by_category,
    parse_sequence,
    sample_sequences,
    sequence_from_keys,
    validate_sequence_document,
)


def show_game(game_id: str) -> bool:
    catalog = create_game(game_id)
    print()
    print(f"=== {catalog.name} ===")
    print(catalog.description)

    print(f"[1/4] Catalog: {len(catalog)} actions in {len(catalog.categories())} categories")
    for category, actions in group_by_category(catalog.all_actions()).items():
        print(f"       {category}: {', '.join(a.display_name for a in actions)}")

    print("[2/4] Sample build orders")
    for name, keys in sample_sequences(game_id).items():
        sequencer, missing = sequence_from_keys(name, keys, catalog)
        steps = " > ".join(e.action.display_name for e in sequencer)
        print(f"       {name}: {steps} (cost {sequencer.total_cost():g})")
        if missing:
            print(f"       skipped: {', '.join(missing)}")

    print("[3/4] Editing a custom build order...", end=" ")
    custom = Sequencer(name="Custom")
    for action in list(catalog.all_actions())[:4]:
        custom.append(action)
    custom.set_notes(0, "first")
    custom.move_to(0, len(custom) - 1)
    custom.remove_at(0)
    print(" > ".join(f"{e.position}:{e.action.key}" for e in custom))

    print("[4/4] Round-tripping through JSON...", end=" ")
    doc = dump_sequence(custom, catalog.id)
    errors = validate_sequence_document(doc, catalog)
    if errors:
        print(f"FAILED: {errors}")
        return False
    loaded = parse_sequence(doc.model_dump_json(), catalog)
    same = all(a.action is b.action for a, b in zip(loaded, custom)) and len(loaded) == len(custom)
    print("OK" if same else "MISMATCH")
    return same


def main() -> int:
    print("=" * 60)
    print("  GAME PLANNER - Demo")
    print("=" * 60)

    ok = all([show_game(game_id) for game_id in GAMES])

    print()
    print("=" * 60)
    print("  SUCCESS!" if ok else "  Something went wrong.")
    print("=" * 60)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
