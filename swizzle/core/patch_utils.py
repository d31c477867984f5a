# -*- coding: utf-8 -*-
"""
monkey patching decorators on top of intercept.

    @replace(NamespaceBrowser, "setup")
    def setup(self, *a, **kw):
        NamespaceBrowser._orig_setup(self, *a, **kw)
        ...

the original implementation is stored on the target as _orig_<name>, the
prefix can be configured with the orig_prefix setting.
"""
import logging

from .config import global_config
from .errors import UnresolvableOperation
from .interceptor import intercept, resolve, _check_target, _lock, _rewrap

logger = logging.getLogger(__name__)


def _orig_name(name):
    return "%s%s" % (global_config.get("orig_prefix", "_orig_"), name)


def replace(target, name=None, verbose=None):
    """ monkey patching decorator: replaces target.<name> by the decorated
    function. name defaults to the name of the decorated function.

    the original is stored as target._orig_<name> in the same kind of slot,
    so a staticmethod original is called as self._orig_<name>(...) and a
    classmethod original as cls._orig_<name>(...).
    """

    def decorator(new_func, name=name):
        if name is None:
            name = new_func.__name__
        with _lock:
            _, entry = resolve(target, name)
            previous = intercept(target, name, new_func, verbose=verbose)
        if global_config.get_bool("store_original", True):
            setattr(target, _orig_name(name), _rewrap(entry, previous))
        new_func.patched = True
        return new_func
    return decorator


def add(target, verbose=None):
    """ monkey patching decorator: adds the decorated function to target """

    _check_target(target)
    if verbose is None:
        verbose = global_config.get_bool("verbose")

    def decorator(new_func):
        name = new_func.__name__
        try:
            owner, _ = resolve(target, name)
        except UnresolvableOperation:
            pass
        else:
            logger.warning("%s.%s shadows existing implementation from %s",
                           target.__name__, name, owner.__name__)
        setattr(target, name, new_func)
        logger.log(logging.INFO if verbose else logging.DEBUG,
                   "added %s.%s", target.__name__, name)
        return new_func
    return decorator


def original(target, name):
    """ returns the implementation replaced by @replace(target, name) """
    try:
        return getattr(target, _orig_name(name))
    except AttributeError:
        raise UnresolvableOperation(target, _orig_name(name)) from None


def is_patched(func):
    return getattr(func, "patched", False)
