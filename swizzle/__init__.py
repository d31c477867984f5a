# encoding: utf-8

from .core.interceptor import intercept, resolve, Interception
from .core.registry import TypeRegistry, Instance, default_registry
from .core.patch_utils import replace, add, original, is_patched
from .core.errors import SwizzleError, UnresolvableOperation, InvalidTarget
from .core.config import global_config as config

from .version import version
__version__ = ".".join(map(str, version))
