# encoding: utf-8
"""
Interception of operations on live classes.

A class' ``__dict__`` is its dispatch table and attribute lookup along
``__mro__`` is the ancestor resolution. ``intercept`` reads the entry which
is currently in effect and writes the new implementation into the dict of
the target class itself, so siblings and the ancestor which owned the entry
keep their behaviour::

    >>> class Base(object):
    ...     def greet(self):
    ...         return "base"
    >>> def greet(self):
    ...     return _previous(self) + "!"
    >>> _previous = intercept(Base, "greet", greet)
    >>> Base().greet()
    'base!'
"""

import inspect
import logging
import threading
import types

from .config import global_config
from .errors import InvalidTarget, UnresolvableOperation

logger = logging.getLogger(__name__)

# serializes resolve + install, the write itself is a single setattr
_lock = threading.RLock()


def _check_target(target):
    if isinstance(target, type) or isinstance(target, types.ModuleType):
        return
    raise InvalidTarget(target, "can only intercept operations of classes and modules")


def _namespaces(target):
    if isinstance(target, types.ModuleType):
        return (target,)
    return inspect.getmro(target)


def resolve(target, name):
    """ returns (owner, entry) where owner is the first class in the mro of
    target which holds a local entry for name. the entry is returned as it is
    stored, descriptors like staticmethod are not unwrapped here.
    """
    _check_target(target)
    for owner in _namespaces(target):
        ns = vars(owner)
        if name in ns:
            return owner, ns[name]
    raise UnresolvableOperation(target, name)


def _unwrap(entry):
    if isinstance(entry, (staticmethod, classmethod)):
        return entry.__func__
    return entry


def _rewrap(entry, new_impl):
    # keep the kind of slot, so receivers keep their calling convention
    if isinstance(new_impl, (staticmethod, classmethod)):
        return new_impl
    if isinstance(entry, staticmethod):
        return staticmethod(new_impl)
    if isinstance(entry, classmethod):
        return classmethod(new_impl)
    return new_impl


def intercept(target, name, new_impl, verbose=None):
    """ installs new_impl as local entry of target for operation name and
    returns the implementation which was in effect before, no matter if it
    was defined on target or inherited.

    the returned handle is a plain callable: for methods call it as
    ``previous(receiver, *args)``, for classmethods as ``previous(cls, ...)``.

    raises UnresolvableOperation if name can not be resolved and
    InvalidTarget if target is not a class or can not be modified. in both
    cases nothing is changed.
    """
    if verbose is None:
        verbose = global_config.get_bool("verbose")
    with _lock:
        owner, entry = resolve(target, name)
        try:
            setattr(target, name, _rewrap(entry, new_impl))
        except (TypeError, AttributeError) as e:
            raise InvalidTarget(target, "dispatch table is read only (%s)" % e) from e
    logger.log(logging.INFO if verbose else logging.DEBUG,
               "intercepted %s.%s (previous implementation from %s)",
               target.__name__, name, owner.__name__)
    return _unwrap(entry)


class Interception(object):

    """ interception which is installed at most once, when first needed.

    intended for module level definitions::

        _set_state = Interception(Task, "set_state", set_state)

        def set_state(self, value):
            _set_state.original(self, value)
            ...

    the first call of install() or the first access of original performs the
    interception, later calls return the same handle.
    """

    def __init__(self, target, name, new_impl, verbose=None):
        self.target = target
        self.name = name
        self.new_impl = new_impl
        self.verbose = verbose
        self._previous = None
        self._installed = False
        self._installing = False

    @property
    def installed(self):
        return self._installed

    def install(self):
        if self._installed:
            return self._previous
        # _previous is set before the slot is written. reentrant calls from
        # this thread get it, other threads wait on _lock.
        with _lock:
            if self._installed or self._installing:
                return self._previous
            self._installing = True
            try:
                _, entry = resolve(self.target, self.name)
                self._previous = _unwrap(entry)
                intercept(self.target, self.name, self.new_impl, verbose=self.verbose)
                self._installed = True
            finally:
                self._installing = False
        return self._previous

    @property
    def original(self):
        return self.install()

    def __repr__(self):
        state = "installed" if self._installed else "pending"
        return "<Interception %s.%s %s>" % (self.target.__name__, self.name, state)
