"""StarCraft 2 catalog: Terran units and structures.

Cost is build time in game seconds; tags carry mineral and gas prices.
"""

from gameplanner.models.catalog import Action, Catalog, build_catalog

GAME_ID = "starcraft2"

STARCRAFT2_ACTIONS: list[Action] = [
    Action(
        key="scv",
        display_name="SCV",
        category="Worker",
        description="Build a Supply Collection Vehicle (worker unit)",
        cost=17.0,
        tags={"Minerals": 50},
    ),
    Action(
        key="supply-depot",
        display_name="Supply Depot",
        category="Supply",
        description="Build a Supply Depot to increase supply cap",
        cost=21.0,
        tags={"Minerals": 100},
    ),
    Action(
        key="barracks",
        display_name="Barracks",
        category="Military Structure",
        description="Build a Barracks to train infantry units",
        cost=46.0,
        tags={"Minerals": 150},
    ),
    Action(
        key="marine",
        display_name="Marine",
        category="Infantry",
        description="Train a Marine infantry unit",
        cost=18.0,
        tags={"Minerals": 50},
    ),
    Action(
        key="marauder",
        display_name="Marauder",
        category="Infantry",
        description="Train a Marauder infantry unit",
        cost=21.0,
        tags={"Minerals": 100, "Gas": 25},
    ),
    Action(
        key="reaper",
        display_name="Reaper",
        category="Infantry",
        description="Train a Reaper infantry unit",
        cost=32.0,
        tags={"Minerals": 50, "Gas": 50},
    ),
    Action(
        key="factory",
        display_name="Factory",
        category="Military Structure",
        description="Build a Factory to produce mechanical units",
        cost=43.0,
        tags={"Minerals": 150, "Gas": 100},
    ),
    Action(
        key="hellion",
        display_name="Hellion",
        category="Mechanical",
        description="Train a Hellion light vehicle",
        cost=21.0,
        tags={"Minerals": 100},
    ),
    Action(
        key="siege-tank",
        display_name="Siege Tank",
        category="Mechanical",
        description="Train a Siege Tank heavy vehicle",
        cost=32.0,
        tags={"Minerals": 150, "Gas": 125},
    ),
    Action(
        key="starport",
        display_name="Starport",
        category="Military Structure",
        description="Build a Starport to produce air units",
        cost=36.0,
        tags={"Minerals": 150, "Gas": 100},
    ),
    Action(
        key="medivac",
        display_name="Medivac",
        category="Air",
        description="Train a Medivac dropship",
        cost=30.0,
        tags={"Minerals": 100, "Gas": 100},
    ),
    Action(
        key="viking",
        display_name="Viking",
        category="Air",
        description="Train a Viking fighter",
        cost=30.0,
        tags={"Minerals": 150, "Gas": 75},
    ),
    Action(
        key="banshee",
        display_name="Banshee",
        category="Air",
        description="Train a Banshee bomber",
        cost=43.0,
        tags={"Minerals": 150, "Gas": 100},
    ),
    Action(
        key="refinery",
        display_name="Refinery",
        category="Resource",
        description="Build a Refinery to harvest vespene gas",
        cost=21.0,
        tags={"Minerals": 75},
    ),
    Action(
        key="command-center",
        display_name="Command Center",
        category="Base",
        description="Build a Command Center (expansion)",
        cost=71.0,
        tags={"Minerals": 400},
    ),
    Action(
        key="orbital-command",
        display_name="Orbital Command",
        category="Base Upgrade",
        description="Upgrade Command Center to Orbital Command",
        cost=25.0,
        tags={"Minerals": 150},
    ),
]

SAMPLE_BUILDS: dict[str, list[str]] = {
    "Opening Build": [
        "scv",
        "scv",
        "supply-depot",
        "scv",
        "barracks",
        "marine",
        "marine",
    ],
    "Reaper Expand": [
        "scv",
        "supply-depot",
        "barracks",
        "refinery",
        "reaper",
        "orbital-command",
        "command-center",
    ],
}


def create_starcraft2_game() -> Catalog:
    return build_catalog(
        GAME_ID,
        "StarCraft 2",
        "Real-time strategy game - plan your build orders and unit compositions",
        STARCRAFT2_ACTIONS,
    )
