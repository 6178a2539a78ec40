"""Tests for the built-in game catalogs and sample build orders."""

import pytest
from gameplanner import (
    Action,
    GAMES,
    SAMPLE_OPENINGS,
    create_chess_game,
    create_game,
    create_hoi4_game,
    create_starcraft2_game,
    sample_sequences,
    sequence_from_keys,
)
from gameplanner.games.chess import CHESS_ACTIONS, side_to_move
from gameplanner.games.hoi4 import HOI4_ACTIONS
from gameplanner.games.starcraft2 import STARCRAFT2_ACTIONS


class TestRegistry:
    def test_known_games(self):
        assert set(GAMES) == {"chess", "starcraft2", "hoi4"}

    @pytest.mark.parametrize("game_id", ["chess", "starcraft2", "hoi4"])
    def test_catalog_id_matches_registry_key(self, game_id):
        assert create_game(game_id).id == game_id

    def test_unknown_game_raises(self):
        with pytest.raises(ValueError, match="Unknown game: 'go'"):
            create_game("go")

    def test_each_call_builds_fresh_catalog(self):
        assert create_game("chess") is not create_game("chess")

    @pytest.mark.parametrize("game_id", list(GAMES))
    def test_fresh_catalog_tags_unchanged_after_edit_attempt(self, game_id):
        first = create_game(game_id)
        action = next(iter(first.all_actions()))
        before = dict(action.tags)
        with pytest.raises(TypeError):
            action.tags["Injected"] = 1.0  # type: ignore[index]
        assert dict(create_game(game_id).lookup(action.key).tags) == before

    def test_sample_sequences_unknown_game(self):
        assert sample_sequences("go") == {}

    def test_sample_sequences_returns_copies(self):
        samples = sample_sequences("chess")
        samples["Italian Game"].append("o-o")
        samples["Mine"] = ["e4"]
        assert SAMPLE_OPENINGS["Italian Game"] == ["e4", "e5", "nf3", "nc6", "bc4", "bc5"]
        assert "Mine" not in sample_sequences("chess")

    @pytest.mark.parametrize("game_id", list(GAMES))
    def test_samples_resolve(self, game_id):
        catalog = create_game(game_id)
        for name, keys in sample_sequences(game_id).items():
            _, missing = sequence_from_keys(name, keys, catalog)
            if name != "Sicilian Defense":
                assert missing == [], f"{game_id}/{name} has unknown keys {missing}"

class TestUniqueness:
    @pytest.mark.parametrize("actions", [CHESS_ACTIONS, STARCRAFT2_ACTIONS, HOI4_ACTIONS])
    def test_entries_are_actions(self, actions):
        assert all(isinstance(a, Action) for a in actions)

    @pytest.mark.parametrize("actions", [CHESS_ACTIONS, STARCRAFT2_ACTIONS, HOI4_ACTIONS])
    def test_keys_unique(self, actions):
        keys = [a.key for a in actions]
        assert len(keys) == len(set(keys))

    @pytest.mark.parametrize("game_id", list(GAMES))
    def test_catalog_holds_every_action(self, game_id):
        catalog = create_game(game_id)
        assert len(catalog) == len(set(catalog.keys()))

    @pytest.mark.parametrize("game_id", list(GAMES))
    def test_costs_non_negative(self, game_id):
        for action in create_game(game_id).all_actions():
            assert action.cost >= 0, f"{action.key} has negative cost"


class TestChess:
    def test_size(self):
        assert len(create_chess_game()) == 21

    def test_keys_are_lower_case(self):
        for action in CHESS_ACTIONS:
            assert action.key == action.key.lower()

    def test_every_move_costs_one_tempo(self):
        for action in CHESS_ACTIONS:
            assert action.cost == 1.0
            assert action.tags == {"Move Number": 1.0}

    def test_castling(self):
        catalog = create_chess_game()
        assert catalog.lookup("o-o").display_name == "O-O"
        assert catalog.lookup("o-o-o").category == "Castling"

    def test_italian_game(self, chess_catalog):
        seq, missing = sequence_from_keys(
            "Italian Game", SAMPLE_OPENINGS["Italian Game"], chess_catalog
        )
        assert missing == []
        assert [e.action.display_name for e in seq] == ["e4", "e5", "Nf3", "Nc6", "Bc4", "Bc5"]

    def test_sicilian_skips_uncatalogued_move(self, chess_catalog):
        seq, missing = sequence_from_keys(
            "Sicilian", SAMPLE_OPENINGS["Sicilian Defense"], chess_catalog
        )
        assert missing == ["d6"]
        assert [e.action.key for e in seq] == ["e4", "c5", "nf3", "d4"]
        assert [e.position for e in seq] == [1, 2, 3, 4]

    @pytest.mark.parametrize(
        "index,expected",
        [(0, (1, "White")), (1, (1, "Black")), (2, (2, "White")), (5, (3, "Black"))],
    )
    def test_side_to_move(self, index, expected):
        assert side_to_move(index) == expected


class TestStarCraft2:
    def test_marauder_costs(self):
        marauder = create_starcraft2_game().lookup("marauder")
        assert marauder.cost == 21.0
        assert marauder.tags == {"Minerals": 100.0, "Gas": 25.0}

    def test_opening_build_totals(self):
        catalog = create_starcraft2_game()
        seq, missing = sequence_from_keys(
            "Opening Build", sample_sequences("starcraft2")["Opening Build"], catalog
        )
        assert missing == []
        # 3 SCV + depot + barracks + 2 marines
        assert seq.total_cost() == 3 * 17.0 + 21.0 + 46.0 + 2 * 18.0
        assert seq.tag_totals() == {"Minerals": 3 * 50.0 + 100.0 + 150.0 + 2 * 50.0}


class TestHoi4:
    def test_battleship_is_slowest(self):
        catalog = create_hoi4_game()
        slowest = max(catalog.all_actions(), key=lambda a: a.cost)
        assert slowest.key == "battleship"
