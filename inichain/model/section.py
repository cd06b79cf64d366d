"""Section INI : collection ordonnée de lignes à clés uniques."""

from collections.abc import Iterator

from inichain.config.settings import COMMENT_MARKERS
from inichain.errors.exceptions import (DuplicateKeyError,
                                        InvalidPropertyError,
                                        InvalidSectionError,
                                        MissingKeyError)
from inichain.model.ordered import IndexedOrderedMap
from inichain.model.property import IniProperty, LineKind, SyntheticKey

# Nom réservé de la section implicite qui précède le premier en-tête.
HEADER_SECTION = ""

EntryKey = str | SyntheticKey

# Fins de ligne reconnues à la lecture (mode texte, newlines universels)
_LINE_BREAKS = ("\n", "\r")


def _has_line_break(text: str) -> bool:
    return any(mark in text for mark in _LINE_BREAKS)


def check_section_name(name: str) -> None:
    """Vérifie qu'un en-tête '[name]' se relit sous le même nom.

    Args:
        name: Nom de section. HEADER_SECTION est toujours accepté.

    Raises:
        InvalidSectionError: Si le nom contient ']' ou une fin de
            ligne, ou s'il a des espaces autour (retirés à la relecture).
    """
    if name == HEADER_SECTION:
        return
    if name != name.strip() or "]" in name or _has_line_break(name):
        raise InvalidSectionError(
            f"Nom de section non représentable : {name!r}"
        )


def check_property(section: str, key: str, value: str) -> None:
    """Vérifie qu'une ligne 'key=value' se relit à l'identique.

    Le format n'a pas d'échappement : la clé s'arrête au premier '=',
    les espaces autour de la clé et de la valeur sont retirés, et une
    ligne commençant par ';' ou '#' est un commentaire.

    Raises:
        MissingKeyError: Si key est vide.
        InvalidPropertyError: Si la ligne écrite serait relue
            autrement (autre clé, autre valeur, commentaire, en-tête).
    """
    if not key:
        raise MissingKeyError(section)

    reason = None
    if "=" in key:
        reason = "la clé ne peut pas contenir '='"
    elif key.startswith(COMMENT_MARKERS):
        reason = "la clé ne peut pas commencer par ';' ou '#'"
    elif key != key.strip() or value != value.strip():
        reason = "espaces autour de la clé ou de la valeur"
    elif _has_line_break(key) or _has_line_break(value):
        reason = "fin de ligne dans la clé ou la valeur"
    elif key.startswith("[") and value.endswith("]"):
        reason = "la ligne serait relue comme un en-tête de section"

    if reason is not None:
        raise InvalidPropertyError(section, key, reason)


class IniSection:
    """Bloc [nom] d'un fichier INI, lignes comprises.

    Les propriétés sont indexées par leur clé ; les commentaires,
    lignes vides et lignes invalides reçoivent une SyntheticKey afin
    d'occuper leur position sans collision. Une ligne chargée depuis
    un fichier utilise son numéro de ligne ; une ligne ajoutée par
    programme utilise un compteur propre à la section, toujours
    supérieur aux numéros déjà attribués.

    La section d'en-tête (HEADER_SECTION) n'accepte que des lignes
    sans clé : une propriété y serait relue comme ligne invalide.
    """

    def __init__(self, name: str) -> None:
        """Initialise une section vide.

        Args:
            name: Nom de la section, fixé à la création.

        Raises:
            InvalidSectionError: Si l'en-tête '[name]' ne peut pas
                être relu sous ce nom.
        """
        check_section_name(name)
        self._name = name
        self._entries: IndexedOrderedMap[EntryKey, IniProperty] = (
            IndexedOrderedMap()
        )
        self._next_number = 1

    @property
    def name(self) -> str:
        """Nom de la section (lecture seule)."""
        return self._name

    def add(
        self,
        prop: IniProperty,
        line_number: int | None = None
    ) -> IniProperty:
        """Ajoute une ligne en fin de section.

        Args:
            prop: Ligne à ajouter.
            line_number: Numéro de ligne source, pour les diagnostics
                et la clé des lignes sans clé.

        Returns:
            La ligne ajoutée.

        Raises:
            MissingKeyError: Si une propriété n'a pas de clé.
            InvalidSectionError: Si une propriété est ajoutée à la
                section d'en-tête.
            InvalidPropertyError: Si la propriété ne peut pas être
                écrite puis relue à l'identique.
            DuplicateKeyError: Si la clé existe déjà dans la section.
        """
        if prop.kind is LineKind.PROPERTY:
            if self._name == HEADER_SECTION and prop.key:
                raise InvalidSectionError(
                    "La section d'en-tête ne peut pas contenir de "
                    "propriétés"
                )
            check_property(self._name, prop.key, prop.value)
            if prop.key in self._entries:
                raise DuplicateKeyError(self._name, prop.key, line_number)
            self._entries[prop.key] = prop
        else:
            self._entries[self._synthetic_key(prop.kind, line_number)] = prop
        return prop

    def add_property(
        self,
        key: str,
        value: str,
        line_number: int | None = None
    ) -> IniProperty:
        """Ajoute une ligne clé=valeur en fin de section."""
        return self.add(
            IniProperty.key_value(self._name, key, value), line_number
        )

    def add_line(
        self,
        kind: LineKind,
        value: str,
        line_number: int | None = None
    ) -> IniProperty:
        """Ajoute un commentaire, une ligne vide ou une ligne invalide.

        Raises:
            MissingKeyError: Si kind vaut PROPERTY (une propriété
                exige une clé, utiliser add_property).
        """
        if kind is LineKind.PROPERTY:
            raise MissingKeyError(self._name)
        return self.add(
            IniProperty.line(self._name, kind, value), line_number
        )

    def _synthetic_key(
        self,
        kind: LineKind,
        line_number: int | None
    ) -> SyntheticKey:
        if line_number is not None:
            key = SyntheticKey(kind, line_number)
            if key not in self._entries:
                self._next_number = max(self._next_number, line_number + 1)
                return key
        key = SyntheticKey(kind, self._next_number)
        self._next_number += 1
        return key

    def contains(self, key: str) -> bool:
        """Indique si une propriété de cette clé existe."""
        return key in self._entries

    def get(self, key: str) -> IniProperty | None:
        """Retourne la propriété de cette clé, ou None."""
        return self._entries.get(key)

    def remove(self, key: str) -> None:
        """Supprime la propriété de cette clé si elle existe."""
        if key in self._entries:
            del self._entries[key]

    def clear(self) -> None:
        self._entries.clear()

    def keys(self) -> tuple[str, ...]:
        """Clés des propriétés, dans l'ordre, sans les lignes sans clé."""
        return tuple(
            prop.key for prop in self._entries.values() if prop.is_property
        )

    def properties(self) -> tuple[IniProperty, ...]:
        """Toutes les lignes de la section, en lecture seule."""
        return tuple(self._entries.values())

    def last(self) -> IniProperty | None:
        """Dernière ligne de la section, ou None si elle est vide."""
        if not self._entries:
            return None
        return self._entries.value_at(-1)

    def __getitem__(self, index: int) -> IniProperty:
        return self._entries.value_at(index)

    def __iter__(self) -> Iterator[IniProperty]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"IniSection(name={self._name!r}, entries={len(self)})"
