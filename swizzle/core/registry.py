# encoding: utf-8
"""
Explicit dispatch tables for hierarchies which are not python classes.

Every registered type tag owns a table operation -> implementation and at
most one parent tag. Receivers carry their tag in the attribute ``type_tag``.
Implementations are called as ``impl(receiver, operation, *args, **kw)``.
"""

import logging
import threading

from .config import global_config
from .errors import InvalidTarget, UnresolvableOperation

logger = logging.getLogger(__name__)


class _TypeEntry(object):

    __slots__ = ("tag", "parent", "table")

    def __init__(self, tag, parent):
        self.tag = tag
        self.parent = parent
        self.table = dict()


class TypeRegistry(object):

    def __init__(self):
        self._types = dict()
        self._lock = threading.RLock()

    def __contains__(self, tag):
        return tag in self._types

    def __len__(self):
        return len(self._types)

    def _entry(self, tag):
        try:
            return self._types[tag]
        except KeyError:
            raise InvalidTarget(tag, "type tag is not registered") from None

    def register(self, tag, parent=None):
        with self._lock:
            if tag in self._types:
                raise InvalidTarget(tag, "type tag is already registered")
            if parent is not None:
                self._entry(parent)
            self._types[tag] = _TypeEntry(tag, parent)
        logger.debug("registered type %r (parent %r)", tag, parent)
        return tag

    def parents(self, tag):
        """ returns the ancestor chain of tag, tag itself first """
        chain = []
        while tag is not None:
            chain.append(tag)
            tag = self._entry(tag).parent
        return chain

    def define(self, tag, operation, impl):
        with self._lock:
            self._entry(tag).table[operation] = impl

    def resolve(self, tag, operation):
        for owner in self.parents(tag):
            table = self._types[owner].table
            if operation in table:
                return owner, table[operation]
        raise UnresolvableOperation(tag, operation)

    def intercept(self, tag, operation, new_impl, verbose=None):
        """ same contract as swizzle.intercept: the entry is written on tag
        itself and the implementation in effect before is returned.
        """
        if verbose is None:
            verbose = global_config.get_bool("verbose")
        with self._lock:
            owner, previous = self.resolve(tag, operation)
            # single dict assignment, dispatchers see old or new value
            self._types[tag].table[operation] = new_impl
        logger.log(logging.INFO if verbose else logging.DEBUG,
                   "intercepted %r on type %r (previous implementation from %r)",
                   operation, tag, owner)
        return previous

    def dispatch(self, receiver, operation, *args, **kw):
        tag = getattr(receiver, "type_tag", None)
        if tag is None:
            raise InvalidTarget(receiver, "receiver has no type_tag")
        _, impl = self.resolve(tag, operation)
        return impl(receiver, operation, *args, **kw)


class Instance(object):

    """ minimal receiver for a TypeRegistry, any object with a type_tag
    attribute works as well.
    """

    def __init__(self, type_tag, **state):
        self.type_tag = type_tag
        self.__dict__.update(state)

    def __repr__(self):
        return "<Instance of %r>" % (self.type_tag,)


default_registry = TypeRegistry()
