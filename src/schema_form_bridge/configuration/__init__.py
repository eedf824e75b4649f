"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration, parse_bridge_options
from .runtime_settings import BridgeOptions, Configuration, SchemaConfig

__all__ = [
    "BridgeOptions",
    "Configuration",
    "SchemaConfig",
    "ConfigurationError",
    "load_configuration",
    "parse_bridge_options",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
