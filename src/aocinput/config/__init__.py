"""Configuration models and loaders for aocinput."""

from .loader import ConfigError, dump_example_config, load_config
from .models import AocInputConfig, DEFAULT_USER_AGENT, LayoutConfig, RemoteConfig, RuntimeConfig

__all__ = [
    "AocInputConfig",
    "ConfigError",
    "DEFAULT_USER_AGENT",
    "LayoutConfig",
    "RemoteConfig",
    "RuntimeConfig",
    "dump_example_config",
    "load_config",
]
