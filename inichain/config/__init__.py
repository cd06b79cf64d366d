"""Module de configuration."""

from inichain.config.settings import IniSettings
from inichain.config.schema import IniSettingsSchema
from inichain.config.loader import (
    ConfigLoader,
    FileConfigLoader,
    load_settings,
    validate_with_schema
)

__all__ = [
    "IniSettings",
    "IniSettingsSchema",
    "ConfigLoader",
    "FileConfigLoader",
    "load_settings",
    "validate_with_schema",
]
