# aptree/modules/config.py
import configparser
import os

DEFAULT_LOCATIONS = [
    "/etc/aptree/aptree.conf",
    os.path.expanduser("~/.config/aptree/aptree.conf"),
]


class ConfigError(Exception):
    pass


def default_locations():
    env = os.environ.get("APTREE_CONF")
    if env:
        return [env] + DEFAULT_LOCATIONS
    return list(DEFAULT_LOCATIONS)


class AptreeConfig:
    def __init__(self, locations=None):
        self.locations = locations or default_locations()
        self.config = configparser.ConfigParser()
        self.loaded_from = None
        self.reload()

    def reload(self, locations=None):
        """(Re)load configuration from the first existing file, if any."""
        if locations is not None:
            self.locations = locations
        self.config = configparser.ConfigParser()
        self.loaded_from = None
        for path in self.locations:
            if os.path.isfile(path):
                self.config.read(path, encoding="utf-8")
                self.loaded_from = path
                return path
        return None

    def load_file(self, path):
        """Load exactly one file; unlike reload() a missing file is an error."""
        if not os.path.isfile(path):
            raise ConfigError(f"Config file not found: {path}")
        return self.reload([path])

    def get(self, section, option, fallback=None):
        try:
            return self.config.get(section, option, fallback=fallback)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback

    def getboolean(self, section, option, fallback=False):
        try:
            return self.config.getboolean(section, option, fallback=fallback)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return fallback

    def getint(self, section, option, fallback=0):
        try:
            return self.config.getint(section, option, fallback=fallback)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return fallback


# Shared default instance
config = AptreeConfig()
