"""Unit tests for Action and Catalog."""

import json

import pytest
from pydantic import ValidationError
from gameplanner import Action, Catalog, build_catalog


def _action(key: str, category: str = "Test", cost: float = 1.0) -> Action:
    return Action(key=key, display_name=key.upper(), category=category, cost=cost)


class TestAction:
    def test_defaults(self):
        a = Action(key="e4", display_name="e4")
        assert a.category == ""
        assert a.description == ""
        assert a.cost == 1.0
        assert a.tags == {}

    def test_tags_are_floats(self):
        a = Action(key="scv", display_name="SCV", tags={"Minerals": 50})
        assert a.tags == {"Minerals": 50.0}
        assert isinstance(a.tags["Minerals"], float)

    def test_negative_cost_rejected(self):
        with pytest.raises(ValidationError):
            Action(key="bad", display_name="Bad", cost=-1.0)

    def test_zero_cost_allowed(self):
        assert Action(key="free", display_name="Free", cost=0.0).cost == 0.0

    def test_empty_key_rejected(self):
        with pytest.raises(ValidationError):
            Action(key="", display_name="Nothing")

    def test_frozen(self):
        a = _action("e4")
        with pytest.raises(ValidationError):
            a.cost = 5.0  # type: ignore[misc]

    def test_equal_values_are_distinct_objects(self):
        a = _action("e4")
        b = _action("e4")
        assert a == b
        assert a is not b


class TestRegister:
    def test_register_and_lookup(self):
        catalog = Catalog(id="c", name="C")
        a = _action("e4")
        catalog.register(a)
        assert catalog.lookup("e4") is a
        assert len(catalog) == 1

    def test_duplicate_key_raises(self):
        catalog = Catalog(id="c", name="C")
        catalog.register(_action("e4"))
        with pytest.raises(ValueError, match="Duplicate action key 'e4'"):
            catalog.register(_action("e4", cost=2.0))

    def test_duplicate_leaves_original(self):
        catalog = Catalog(id="c", name="C")
        original = _action("e4")
        catalog.register(original)
        with pytest.raises(ValueError):
            catalog.register(_action("e4", cost=2.0))
        assert catalog.lookup("e4") is original
        assert len(catalog) == 1

    def test_build_catalog_rejects_duplicates(self):
        with pytest.raises(ValueError):
            build_catalog("c", "C", actions=[_action("e4"), _action("e4")])


class TestLookup:
    def test_missing_key_returns_none(self, small_catalog):
        assert small_catalog.lookup("zz") is None

    def test_lookup_is_case_sensitive(self, small_catalog):
        assert small_catalog.lookup("NF3") is None
        assert small_catalog.lookup("nf3") is not None

    def test_lookup_does_not_trim(self, small_catalog):
        assert small_catalog.lookup(" e4") is None

    def test_empty_catalog(self):
        assert Catalog(id="c", name="C").lookup("e4") is None

    def test_contains(self, small_catalog):
        assert "e4" in small_catalog
        assert "zz" not in small_catalog

    def test_same_instance_every_time(self, small_catalog):
        assert small_catalog.lookup("e4") is small_catalog.lookup("e4")


class TestAllActions:
    def test_registration_order(self, small_catalog):
        assert [a.key for a in small_catalog.all_actions()] == ["e4", "e5", "nf3"]

    def test_restartable(self, small_catalog):
        view = small_catalog.all_actions()
        assert list(view) == list(view)

    def test_view_is_live(self):
        catalog = Catalog(id="c", name="C")
        view = catalog.all_actions()
        catalog.register(_action("e4"))
        assert len(view) == 1

    def test_keys(self, small_catalog):
        assert small_catalog.keys() == ["e4", "e5", "nf3"]

    def test_categories_sorted_and_distinct(self, small_catalog):
        assert small_catalog.categories() == ["Knight", "Pawn"]


class TestActionTags:
    def test_tags_cannot_be_changed(self):
        a = Action(key="scv", display_name="SCV", tags={"Minerals": 50})
        with pytest.raises(TypeError):
            a.tags["Minerals"] = 0  # type: ignore[index]
        assert a.tags["Minerals"] == 50.0

    def test_default_tags_cannot_be_changed(self):
        a = Action(key="e4", display_name="e4")
        with pytest.raises(TypeError):
            a.tags["Move Number"] = 1.0  # type: ignore[index]

    def test_source_dict_is_copied(self):
        source = {"Minerals": 50.0}
        a = Action(key="scv", display_name="SCV", tags=source)
        source["Minerals"] = 0.0
        assert a.tags == {"Minerals": 50.0}

    def test_hashable(self):
        a = Action(key="scv", display_name="SCV", tags={"Minerals": 50})
        b = Action(key="scv", display_name="SCV", tags={"Minerals": 50})
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_json_keeps_tags_as_object(self):
        a = Action(key="reaper", display_name="Reaper", tags={"Minerals": 50, "Gas": 50})
        data = json.loads(a.model_dump_json())
        assert data["tags"] == {"Minerals": 50.0, "Gas": 50.0}
        assert Action.model_validate(data) == a

    def test_model_dump_gives_plain_dict(self):
        a = Action(key="scv", display_name="SCV", tags={"Minerals": 50})
        assert type(a.model_dump()["tags"]) is dict


class TestCatalogFields:
    def test_actions_not_accepted_by_constructor(self):
        with pytest.raises(TypeError):
            Catalog(id="c", name="C", _actions={})  # type: ignore[call-arg]

    def test_repr_hides_actions(self, small_catalog):
        assert "_actions" not in repr(small_catalog)
