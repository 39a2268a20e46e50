"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import (
    DEFAULT_CONFIGURATION,
    OUTPUT_FORMATS,
    Configuration,
    OutputSettings,
)

__all__ = [
    "Configuration",
    "OutputSettings",
    "OUTPUT_FORMATS",
    "DEFAULT_CONFIGURATION",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
