"""Hearts of Iron 4 catalog: division training and production lines.

Cost is training or production time in days.
"""

from gameplanner.models.catalog import Action, Catalog, build_catalog

GAME_ID = "hoi4"

HOI4_ACTIONS: list[Action] = [
    # Divisions
    Action(
        key="infantry-division",
        display_name="Infantry Division",
        category="Division",
        description="Train an Infantry Division",
        cost=90.0,
        tags={"Manpower": 10000, "Infantry Equipment": 100},
    ),
    Action(
        key="motorized-division",
        display_name="Motorized Division",
        category="Division",
        description="Train a Motorized Infantry Division",
        cost=90.0,
        tags={"Manpower": 12000, "Motorized Equipment": 50},
    ),
    Action(
        key="mechanized-division",
        display_name="Mechanized Division",
        category="Division",
        description="Train a Mechanized Infantry Division",
        cost=90.0,
        tags={"Manpower": 12000, "Mechanized Equipment": 50},
    ),
    # Armor
    Action(
        key="light-tank-division",
        display_name="Light Tank Division",
        category="Armor",
        description="Train a Light Tank Division",
        cost=120.0,
        tags={"Manpower": 6000, "Light Tanks": 50},
    ),
    Action(
        key="medium-tank-division",
        display_name="Medium Tank Division",
        category="Armor",
        description="Train a Medium Tank Division",
        cost=120.0,
        tags={"Manpower": 6000, "Medium Tanks": 50},
    ),
    Action(
        key="heavy-tank-division",
        display_name="Heavy Tank Division",
        category="Armor",
        description="Train a Heavy Tank Division",
        cost=120.0,
        tags={"Manpower": 6000, "Heavy Tanks": 50},
    ),
    # Equipment
    Action(
        key="infantry-equipment",
        display_name="Infantry Equipment",
        category="Equipment Production",
        description="Produce Infantry Equipment",
        cost=30.0,
        tags={"Production": 0.5},
    ),
    Action(
        key="artillery",
        display_name="Artillery",
        category="Equipment Production",
        description="Produce Artillery",
        cost=45.0,
        tags={"Production": 1.5},
    ),
    Action(
        key="anti-tank",
        display_name="Anti-Tank Gun",
        category="Equipment Production",
        description="Produce Anti-Tank Guns",
        cost=45.0,
        tags={"Production": 1.5},
    ),
    Action(
        key="support-equipment",
        display_name="Support Equipment",
        category="Equipment Production",
        description="Produce Support Equipment",
        cost=30.0,
        tags={"Production": 0.5},
    ),
    # Vehicles
    Action(
        key="light-tank",
        display_name="Light Tank",
        category="Armor Production",
        description="Produce Light Tanks",
        cost=60.0,
        tags={"Production": 2.5},
    ),
    Action(
        key="medium-tank",
        display_name="Medium Tank",
        category="Armor Production",
        description="Produce Medium Tanks",
        cost=90.0,
        tags={"Production": 5.0},
    ),
    Action(
        key="heavy-tank",
        display_name="Heavy Tank",
        category="Armor Production",
        description="Produce Heavy Tanks",
        cost=120.0,
        tags={"Production": 7.5},
    ),
    # Air
    Action(
        key="fighter",
        display_name="Fighter",
        category="Air Production",
        description="Produce Fighter aircraft",
        cost=60.0,
        tags={"Production": 2.0},
    ),
    Action(
        key="cas",
        display_name="Close Air Support",
        category="Air Production",
        description="Produce Close Air Support aircraft",
        cost=60.0,
        tags={"Production": 2.0},
    ),
    Action(
        key="tactical-bomber",
        display_name="Tactical Bomber",
        category="Air Production",
        description="Produce Tactical Bomber",
        cost=75.0,
        tags={"Production": 3.0},
    ),
    Action(
        key="strategic-bomber",
        display_name="Strategic Bomber",
        category="Air Production",
        description="Produce Strategic Bomber",
        cost=90.0,
        tags={"Production": 4.0},
    ),
    # Navy
    Action(
        key="destroyer",
        display_name="Destroyer",
        category="Naval Production",
        description="Produce Destroyer",
        cost=365.0,
        tags={"Production": 3.5},
    ),
    Action(
        key="submarine",
        display_name="Submarine",
        category="Naval Production",
        description="Produce Submarine",
        cost=365.0,
        tags={"Production": 2.5},
    ),
    Action(
        key="battleship",
        display_name="Battleship",
        category="Naval Production",
        description="Produce Battleship",
        cost=1095.0,
        tags={"Production": 10.0},
    ),
]

SAMPLE_BUILDS: dict[str, list[str]] = {
    "Early Army": [
        "infantry-equipment",
        "support-equipment",
        "artillery",
        "infantry-division",
        "infantry-division",
    ],
}


def create_hoi4_game() -> Catalog:
    return build_catalog(
        GAME_ID,
        "Hearts of Iron 4",
        "Grand strategy game - plan your production and division templates",
        HOI4_ACTIONS,
    )
