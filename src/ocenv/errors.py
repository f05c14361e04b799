"""Exceptions raised while preparing an environment."""


class OcEnvError(Exception):
    """Base class for fatal ocenv errors."""


class ConfigurationError(OcEnvError, ValueError):
    """Required options are missing or inconsistent."""


class SetupError(OcEnvError):
    """A required directory or file could not be created or written."""
