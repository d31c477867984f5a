# encoding: utf-8

import logging
import types

import pytest

from swizzle import replace, add, original, is_patched, UnresolvableOperation


def test_replace_stores_original(hierarchy, config):
    Base, Derived, _, _ = hierarchy
    orig = vars(Base)["greet"]

    @replace(Derived, "greet")
    def greet(self):
        return Derived._orig_greet(self) + " patched"

    assert is_patched(greet)
    assert Derived._orig_greet is orig
    assert original(Derived, "greet") is orig
    assert Derived().greet() == "base patched"
    assert Base().greet() == "base"


def test_replace_name_defaults_to_function_name(hierarchy, config):
    Base, _, _, _ = hierarchy

    @replace(Base)
    def greet(self):
        return "hello"

    assert Base().greet() == "hello"
    assert Base._orig_greet(Base()) == "base"


def test_replace_module_function(config):
    module = types.ModuleType("mod")
    module.compute = lambda x: x * 2

    @replace(module)
    def compute(x):
        return module._orig_compute(x) + 1

    assert module.compute(3) == 7


def test_replace_missing_operation(hierarchy, config):
    Base, _, _, _ = hierarchy

    with pytest.raises(UnresolvableOperation):
        @replace(Base)
        def gret(self):
            return "typo"

    assert not hasattr(Base, "gret")
    assert not hasattr(Base, "_orig_gret")


def test_configured_prefix(hierarchy, config):
    Base, _, _, _ = hierarchy
    config.set_("orig_prefix", "_before_")

    @replace(Base)
    def greet(self):
        return "x"

    assert Base._before_greet(Base()) == "base"
    assert original(Base, "greet")(Base()) == "base"
    assert not hasattr(Base, "_orig_greet")


def test_do_not_store_original(hierarchy, config):
    Base, _, _, _ = hierarchy
    config.set_("store_original", False)

    @replace(Base)
    def greet(self):
        return "x"

    with pytest.raises(UnresolvableOperation):
        original(Base, "greet")


def test_add(hierarchy, caplog, config):
    Base, Derived, _, _ = hierarchy

    @add(Derived)
    def farewell(self):
        return "bye"

    assert Derived().farewell() == "bye"
    assert not hasattr(Base, "farewell")

    with caplog.at_level(logging.WARNING, logger="swizzle"):
        @add(Derived)
        def greet(self):
            return "shadowed"

    assert Derived().greet() == "shadowed"
    assert any("shadows" in r.getMessage() for r in caplog.records)


def test_replace_keeps_slot_kind_of_original(hierarchy, config):
    Base, Derived, _, _ = hierarchy

    @replace(Derived)
    def kind():
        return "new " + Derived._orig_kind()

    @replace(Derived)
    def create(cls):
        obj = cls._orig_create()
        obj.created_by = cls
        return obj

    assert Derived.kind() == "new static"
    assert Derived()._orig_kind() == "static"
    assert isinstance(vars(Derived)["_orig_kind"], staticmethod)

    obj = Derived.create()
    assert type(obj) is Derived
    assert obj.created_by is Derived
    assert type(Derived._orig_create()) is Derived
