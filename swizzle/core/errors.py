# encoding: utf-8


class SwizzleError(Exception):
    pass


class UnresolvableOperation(SwizzleError, AttributeError):

    """ the named operation is not defined anywhere in the ancestor chain of
    the target. raised before anything is modified.

    callers usually intercept once during start up, where this error means a
    typo or an api which changed underneath, so the usual reaction is to let
    it propagate and abort.
    """

    def __init__(self, target, name):
        self.target = target
        self.name = name
        SwizzleError.__init__(self, "can not resolve %r on %s" % (name, _describe(target)))


class InvalidTarget(SwizzleError, TypeError):

    """ the target is not something we can intercept on: not a class, not a
    registered type tag, or a type whose dispatch table is read only.
    """

    def __init__(self, target, reason):
        self.target = target
        self.reason = reason
        SwizzleError.__init__(self, "%s: %s" % (_describe(target), reason))


def _describe(target):
    name = getattr(target, "__qualname__", None) or getattr(target, "__name__", None)
    if name is None:
        return repr(target)
    module = getattr(target, "__module__", None)
    if module and module != "builtins":
        return "%s.%s" % (module, name)
    return name
