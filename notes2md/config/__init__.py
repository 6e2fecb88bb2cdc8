"""Configuration management for notes2md.

This module handles loading and validating configuration from .notes2md/config.yaml files.
"""

from .loader import default_config_path, load_config, save_config
from .schema import Config, ConversionConfig, FrontmatterConfig, OutputConfig

__all__ = [
    "Config",
    "OutputConfig",
    "FrontmatterConfig",
    "ConversionConfig",
    "default_config_path",
    "load_config",
    "save_config",
]
