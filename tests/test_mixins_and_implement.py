"""Tests for mixin precedence and in-place implement."""

from smartclass import Class, create, implement
from smartclass.core.mixins import compose, harvest


def m1(self):
    return "m1"


def m2(self):
    return "m2"


def test_later_mixin_wins():
    Dog = create({"Implements": [{"m": m1}, {"m": m2}]})
    assert Dog().m() == "m2"
    assert vars(Dog)["m"] is m2


def test_own_members_win_over_mixins():
    Dog = create({"Implements": [{"m": m1}], "m": m2})
    assert Dog().m() == "m2"


def test_mixins_win_over_inherited():
    Parent = create({"m": m1})
    Child = Parent.extend({"Implements": {"m": m2}})
    assert Child().m() == "m2"
    assert Parent().m() == "m1"


def test_entity_mixin_contributes_own_members_only():
    Grand = create({"deep": lambda self: "deep"})
    Source = Grand.extend({"shallow": lambda self: "shallow"})
    Dog = create({"Implements": [Source]})

    dog = Dog()
    assert dog.shallow() == "shallow"
    assert not hasattr(dog, "deep")


def test_harvest_shapes():
    class Plain:
        attr = 1

        def method(self):
            return 2

        def __repr__(self):
            return "plain"

    harvested = harvest(Plain)
    assert set(harvested) == {"attr", "method"}

    class Holder:
        pass

    holder = Holder()
    holder.tool = m1
    assert harvest(holder) == {"tool": m1}
    assert harvest(None) == {}
    assert harvest(42) == {}
    assert harvest({"initialize": m1, "m": m2}) == {"m": m2}
    assert harvest({"initialize": m1}, skip_initializer=False) == {"initialize": m1}


def test_compose_orders_sources():
    assert compose([{"a": 1, "b": 1}, {"b": 2}]) == {"a": 1, "b": 2}


def test_implement_returns_same_entity():
    C = create()
    before = C
    assert C.implement({}) is before
    assert C.implement(None) is before
    assert C.implement(42) is before


def test_implement_overwrites_members_in_place():
    Dog = create({"m": m1})
    dog = Dog()
    Dog.implement({"m": m2, "extra": lambda self: "extra"})

    assert dog.m() == "m2"
    assert dog.extra() == "extra"


def test_implement_visible_to_existing_children():
    Parent = create()
    Child = Parent.extend()
    Parent.implement({"late": m1})
    assert Child().late() == "m1"


def test_implement_from_class_source():
    class Talkable:
        def __init__(self):
            self.never = True

        def initialize(self):
            self.never = True

        def talk(self):
            return "talking"

    Dog = create()
    Dog.implement(Talkable)
    dog = Dog()

    assert dog.talk() == "talking"
    assert not hasattr(dog, "never")


def test_implement_honours_reserved_keys():
    Other = create()
    Dog = create({"Statics": {"a": 1}})
    implement(
        Dog,
        {
            "Extends": Other,
            "Implements": [{"fly": lambda self: "fly"}],
            "Statics": {"b": 2},
            "StaticsWhiteList": ["b"],
            "run": lambda self: "run",
        },
    )

    dog = Dog()
    assert Dog.superclass is Class
    assert dog.fly() == "fly"
    assert dog.run() == "run"
    assert (Dog.a, Dog.b) == (1, 2)
    assert Dog.StaticsWhiteList == ["b"]
    assert not hasattr(Dog.extend(), "a")


def test_implement_skips_read_only_members():
    Dog = create()
    Dog.implement({"superclass": "x", "m": m1})
    assert Dog.superclass is Class
    assert Dog().m() == "m1"


def test_implement_on_root_reaches_everyone():
    Dog = create()
    Class.implement({"everywhere": lambda self: "here"})
    try:
        assert Dog().everywhere() == "here"
    finally:
        type.__delattr__(Class, "everywhere")
