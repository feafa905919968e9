"""Tests for blueprint parsing."""

import logging

from smartclass import Blueprint, Class, create, parse_blueprint
from smartclass.core.blueprint import normalize_whitelist


def test_mapping_split_into_reserved_parts():
    def initialize(self):
        pass

    def talk(self):
        return "hi"

    mixin = {"fly": lambda self: "flying"}
    bp = parse_blueprint(
        {
            "Extends": Class,
            "Implements": [mixin],
            "Statics": {"COLOR": "red"},
            "StaticsWhiteList": ["COLOR"],
            "initialize": initialize,
            "talk": talk,
        }
    )

    assert bp.parent is Class
    assert bp.mixins == [mixin]
    assert bp.statics == {"COLOR": "red"}
    assert bp.statics_whitelist == ["COLOR"]
    assert bp.initializer is initialize
    assert bp.members == {"initialize": initialize, "talk": talk}


def test_defaults_for_missing_keys():
    bp = parse_blueprint({})
    assert bp.parent is None
    assert bp.mixins == []
    assert bp.statics == {}
    assert bp.statics_whitelist is None
    assert bp.initializer is None
    assert bp.members == {}
    assert parse_blueprint(None) == Blueprint()


def test_bare_function_is_initializer():
    def initialize(self, name):
        self.name = name

    bp = parse_blueprint(initialize)
    assert bp.parent is None
    assert bp.mixins == []
    assert bp.members == {"initialize": initialize}


def test_class_means_parent():
    class Animal:
        pass

    assert parse_blueprint(Animal).parent is Animal


def test_record_passes_through():
    bp = Blueprint(members={"a": 1})
    assert parse_blueprint(bp) is bp


def test_malformed_values_degrade(caplog):
    with caplog.at_level(logging.DEBUG, logger="smartclass"):
        bp = parse_blueprint(
            {
                "Extends": 42,
                "Implements": {"fly": None},
                "Statics": "not a mapping",
                "StaticsWhiteList": 7,
            }
        )

    assert bp.parent is None
    assert bp.mixins == [{"fly": None}]
    assert bp.statics == {}
    assert bp.statics_whitelist is None
    assert any("Extends" in record.getMessage() for record in caplog.records)


def test_implements_accepts_tuple_and_drops_none():
    a, b = {"x": 1}, {"y": 2}
    assert parse_blueprint({"Implements": (a, None, b)}).mixins == [a, b]


def test_unsupported_source_is_empty():
    assert parse_blueprint(42) == Blueprint()


def test_record_initializer_field():
    def initialize(self, value):
        self.value = value

    Box = create(Blueprint(initializer=initialize, statics={"KIND": "box"}))
    assert Box(5).value == 5
    assert Box.KIND == "box"


def test_record_with_parent_and_mixins():
    Base = create({"base": lambda self: "base"})
    Dog = create(Blueprint(parent=Base, mixins=[{"m": lambda self: "m"}]))
    dog = Dog()
    assert Dog.superclass is Base
    assert dog.base() == "base"
    assert dog.m() == "m"


def test_malformed_blueprint_still_builds():
    Dog = create({"Extends": "nope", "Implements": None, "Statics": 3})
    assert Dog.superclass is Class
    assert Dog() is not None


def test_normalize_whitelist():
    assert normalize_whitelist(None) is None
    assert normalize_whitelist("a") == ["a"]
    assert normalize_whitelist(("a", 1, "b")) == ["a", "b"]
    assert normalize_whitelist({"a": True}) is None
    assert parse_blueprint({"StaticsWhiteList": {"a": True}}).statics_whitelist is None
