# encoding: utf-8
"""
ready made interceptions which chain to the original implementation.
"""

import functools
import logging

from .core.interceptor import Interception, resolve
from .core.errors import InvalidTarget

logger = logging.getLogger(__name__)


def notify_on_change(cls, setter, getter, callback, verbose=None):
    """ wraps cls.<setter> such that callback(receiver, new_value) is called
    after the original setter ran and the value reported by getter(receiver)
    changed.

    getter is either a callable taking the receiver or the name of an
    attribute. returns the previous implementation of the setter.
    """
    if isinstance(getter, str):
        attr_name = getter

        def getter(receiver):
            return getattr(receiver, attr_name)

    _, entry = resolve(cls, setter)
    if isinstance(entry, (staticmethod, classmethod)):
        raise InvalidTarget(cls, "%s is not an instance method" % setter)

    def new_setter(self, value, *a, **kw):
        old_value = getter(self)
        result = once.original(self, value, *a, **kw)
        new_value = getter(self)
        if new_value != old_value:
            callback(self, new_value)
        return result

    new_setter.__name__ = setter
    new_setter.__qualname__ = "%s.%s" % (cls.__qualname__, setter)
    once = Interception(cls, setter, new_setter, verbose=verbose)
    return once.install()


def trace_calls(cls, name, log=None, level=logging.DEBUG, verbose=None):
    """ logs every call of cls.<name>: arguments, result or exception """
    if log is None:
        log = logger

    _, entry = resolve(cls, name)
    # staticmethods get no receiver
    skip = 0 if isinstance(entry, staticmethod) else 1

    def traced(*a, **kw):
        log.log(level, "call %s.%s args=%r kw=%r", cls.__name__, name, a[skip:], kw)
        try:
            result = once.original(*a, **kw)
        except Exception:
            log.log(level, "%s.%s raised", cls.__name__, name, exc_info=True)
            raise
        log.log(level, "%s.%s returned %r", cls.__name__, name, result)
        return result

    impl = entry.__func__ if isinstance(entry, (staticmethod, classmethod)) else entry
    if callable(impl):
        functools.update_wrapper(traced, impl)
    once = Interception(cls, name, traced, verbose=verbose)
    return once.install()
