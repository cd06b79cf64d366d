"""Réglages d'un IniDocument.

Ce module fournit une dataclass immuable regroupant les options qui
influencent la lecture, l'écriture et l'accès aux fichiers INI.

Example:
    Création de réglages personnalisés:

        settings = IniSettings(
            comment_prefix="# ",
            return_default_if_empty=True,
        )
        document = IniDocument("app.ini", settings=settings)
"""

import codecs
import logging
from dataclasses import dataclass, fields

from inichain.errors.exceptions import ConfigurationError

COMMENT_MARKERS = (";", "#")

DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class IniSettings:
    """Réglages de lecture/écriture d'un document INI.

    Attributes:
        encoding: Encodage texte des fichiers lus et écrits.
        comment_prefix: Préfixe ajouté à l'écriture aux commentaires
            qui n'en ont pas encore.
        return_default_if_empty: Si True, les accesseurs typés
            retournent la valeur par défaut pour une valeur vide.
        blank_line_between_sections: Si True, put() insère une ligne
            vide avant chaque nouvelle section créée.
        log_level: Niveau de logging (nom du module logging).
        log_format: Format des messages pour FileLogger.
    """

    encoding: str = "utf-8"
    comment_prefix: str = "; "
    return_default_if_empty: bool = False
    blank_line_between_sections: bool = True
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT

    def __post_init__(self) -> None:
        """Valide les champs après initialisation.

        Raises:
            ConfigurationError: Si un champ est invalide.
        """
        for field in fields(self):
            value = getattr(self, field.name)
            if not isinstance(value, field.type):
                raise ConfigurationError(
                    f"{field.name}={value!r} doit être de type "
                    f"{field.type.__name__}"
                )
        if not self.encoding:
            raise ConfigurationError("encoding est requis")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigurationError(
                f"encoding={self.encoding!r} n'est pas un encodage connu"
            ) from e
        if not self.comment_prefix.startswith(COMMENT_MARKERS):
            raise ConfigurationError(
                f"comment_prefix={self.comment_prefix!r} doit commencer "
                f"par ';' ou '#'"
            )
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(
                f"log_level={self.log_level!r} n'est pas un niveau valide"
            )
