"""Représentation d'une ligne d'un fichier INI."""

from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple


class LineKind(StrEnum):
    """Rôle d'une ligne dans un fichier INI."""

    PROPERTY = "Property"
    COMMENT = "Comment"
    EMPTY_LINE = "EmptyLine"
    INVALID = "Invalid"


class SyntheticKey(NamedTuple):
    """Clé interne des lignes sans clé (commentaire, vide, invalide).

    Un tuple n'est jamais égal à une chaîne : ces clés ne peuvent pas
    entrer en collision avec la clé d'une vraie propriété.
    """

    kind: LineKind
    number: int


@dataclass
class IniProperty:
    """Contenu sémantique d'une ligne INI.

    Attributes:
        section: Nom de la section propriétaire, copié à la création.
            Renommer la section ne met pas ce champ à jour.
        kind: Rôle de la ligne.
        value: Valeur après '=' pour une propriété, ligne complète
            (sans espaces autour) pour les autres types.
        key: Clé de la propriété, None pour les autres types.
    """

    section: str
    kind: LineKind
    value: str
    key: str | None = None

    @classmethod
    def key_value(cls, section: str, key: str, value: str) -> "IniProperty":
        """Crée une ligne clé=valeur."""
        return cls(section, LineKind.PROPERTY, value, key)

    @classmethod
    def line(cls, section: str, kind: LineKind, value: str) -> "IniProperty":
        """Crée une ligne sans clé (commentaire, vide ou invalide)."""
        return cls(section, kind, value)

    @property
    def is_property(self) -> bool:
        return self.kind is LineKind.PROPERTY
