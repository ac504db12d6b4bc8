"""Exceptions raised while loading a board or reading settings."""


class LoadError(Exception):
    """A board could not be loaded. No partial board is ever returned."""


class NetworkError(LoadError):
    """A catalog request failed or timed out."""


class ShapeError(LoadError):
    """A catalog response is missing fields or has inconsistent clue counts."""


class ConfigError(Exception):
    """The settings file could not be read or is not valid JSON."""
