"""Model package for ocenv."""

from ocenv.models.ocenv_config import ACTIVATION_KINDS, DEFAULT_ACTIVATION, OcEnvConfig
from ocenv.models.ocm_config import OcmConfig
from ocenv.models.session_options import SessionOptions
from ocenv.models.shell_launch_config import ShellLaunchConfig

__all__ = [
    "ACTIVATION_KINDS",
    "DEFAULT_ACTIVATION",
    "OcEnvConfig",
    "OcmConfig",
    "SessionOptions",
    "ShellLaunchConfig",
]
