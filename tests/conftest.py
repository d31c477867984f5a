import pytest

import swizzle


@pytest.fixture
def hierarchy():
    """ fresh classes for every test, interception modifies them for good """

    class Base(object):

        def greet(self):
            return "base"

        @staticmethod
        def kind():
            return "static"

        @classmethod
        def create(cls):
            return cls()

    class Derived(Base):
        pass

    class Sibling(Base):
        pass

    class GrandChild(Derived):
        pass

    return Base, Derived, Sibling, GrandChild


@pytest.fixture
def registry():
    reg = swizzle.TypeRegistry()
    reg.register("base")
    reg.register("derived", parent="base")
    reg.register("sibling", parent="base")
    reg.define("base", "greet", lambda receiver, op: "base")
    return reg


@pytest.fixture
def config():
    swizzle.config.set_defaults()
    yield swizzle.config
    swizzle.config.set_defaults()
