# encoding: utf-8

import configparser
import os


_SECTION = "swizzle"

_TRUE_VALUES = ("1", "true", "yes", "on")


class _Config(object):

    """ settings for the patching helpers.

    every key can be overridden from the environment, e.g. SWIZZLE_VERBOSE=1
    """

    defaults = dict(verbose="0",
                    orig_prefix="_orig_",
                    store_original="1",
                    )

    def __init__(self):
        self.parameters = dict(self.defaults)

    def get(self, key, default=None):
        env_key = "SWIZZLE_%s" % key.upper()
        if env_key in os.environ:
            return os.environ[env_key]
        return self.parameters.get(key, default)

    def get_bool(self, key, default=False):
        val = self.get(key)
        if val is None:
            return default
        if isinstance(val, bool):
            return val
        return str(val).strip().lower() in _TRUE_VALUES

    def set_(self, key, value):
        if isinstance(value, bool):
            value = "1" if value else "0"
        self.parameters[key] = str(value)

    def set_defaults(self):
        self.parameters = dict(self.defaults)

    def store(self, path=None):
        if path is None:
            path = _Config.config_file_path()
        cf = configparser.ConfigParser()
        cf[_SECTION] = self.parameters
        dir_name = os.path.dirname(path)
        if dir_name and not os.path.exists(dir_name):
            os.makedirs(dir_name)
        with open(path, "wt") as fp:
            cf.write(fp)

    def load(self, path=None):
        if path is None:
            path = _Config.config_file_path()
        if not os.path.exists(path):
            return False
        cf = configparser.ConfigParser()
        with open(path, "rt") as fp:
            cf.read_file(fp)
        if not cf.has_section(_SECTION):
            return False
        self.parameters.update(cf.items(_SECTION))
        return True

    @staticmethod
    def config_file_path():
        home = os.environ.get("HOME") or os.path.expanduser("~")
        return os.path.join(home, ".swizzle", "config.ini")


global_config = _Config()
