"""
Configuration module for vecdist.

Loads settings from YAML files and the VECDIST_CONFIG environment
variable.

Example:
    >>> from config import load_config
    >>> from vecdist import BatchDistanceCalculator
    >>>
    >>> settings = load_config()
    >>> calc = BatchDistanceCalculator.from_settings(settings)
"""

from .settings import (
    Settings,
    load_config,
    get_default_config_path,
)

__all__ = [
    "Settings",
    "load_config",
    "get_default_config_path",
]
