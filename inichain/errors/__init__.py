"""Module de gestion des erreurs."""

from inichain.errors.exceptions import (ConfigurationError,
                                        DuplicateKeyError,
                                        IniError,
                                        IniFileNotFoundError,
                                        InvalidPropertyError,
                                        InvalidSectionError,
                                        MissingKeyError,
                                        ValueParseError)


__all__ = [
    "IniError",
    "ConfigurationError",
    "DuplicateKeyError",
    "MissingKeyError",
    "InvalidSectionError",
    "InvalidPropertyError",
    "ValueParseError",
    "IniFileNotFoundError",
]
