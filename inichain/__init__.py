"""
inichain - Modèle en mémoire et sérialiseur fidèle de fichiers INI.

Modules disponibles:
- model: Propriétés, sections et dictionnaire ordonné indexé
- dotconf: Document INI (chargement, sauvegarde, accès typés)
- config: Réglages (IniSettings) et chargement TOML/JSON
- logging: Gestion des logs (Logger, FileLogger, StdLogger)
- filesystem: Copie brute de fichiers (FileBackup)
- errors: Exceptions (IniError et dérivées)
"""

__version__ = "1.0.0"

from inichain.logging import Logger, FileLogger, StdLogger
from inichain.config import (
    IniSettings,
    ConfigLoader,
    FileConfigLoader,
    load_settings
)
from inichain.errors import (
    IniError,
    ConfigurationError,
    DuplicateKeyError,
    MissingKeyError,
    InvalidSectionError,
    InvalidPropertyError,
    ValueParseError,
    IniFileNotFoundError,
)
from inichain.filesystem import FileBackup, LinuxFileBackup
from inichain.model import (
    IndexedOrderedMap,
    IniProperty,
    LineKind,
    SyntheticKey,
    IniSection,
    HEADER_SECTION,
)
from inichain.dotconf import (
    IniDocument,
    IniParser,
    StandardIniParser,
    IniFormatter,
    StandardIniFormatter,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    "StdLogger",
    # Config
    "IniSettings",
    "ConfigLoader",
    "FileConfigLoader",
    "load_settings",
    # Errors
    "IniError",
    "ConfigurationError",
    "DuplicateKeyError",
    "MissingKeyError",
    "InvalidSectionError",
    "InvalidPropertyError",
    "ValueParseError",
    "IniFileNotFoundError",
    # Filesystem
    "FileBackup",
    "LinuxFileBackup",
    # Model
    "IndexedOrderedMap",
    "IniProperty",
    "LineKind",
    "SyntheticKey",
    "IniSection",
    "HEADER_SECTION",
    # DotConf
    "IniDocument",
    "IniParser",
    "StandardIniParser",
    "IniFormatter",
    "StandardIniFormatter",
]
