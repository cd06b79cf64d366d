"""Document INI lié à un fichier : chargement, sauvegarde et accès typés.

IniDocument conserve chaque ligne du fichier (commentaires, lignes
vides, lignes invalides) dans l'ordre, de sorte qu'un cycle
load() / save() ne modifie que ce que l'application a changé.

Example:
    >>> document = IniDocument("/etc/myapp/app.ini")
    >>> document.load()
    >>> port = document.get_integer("Net", "port", 8080)
    >>> document.put("Net", "timeout", "30")
    >>> document.save()
"""

import io
import re
from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path
from typing import Any, Optional, TypeVar, Union

from inichain.config.settings import IniSettings
from inichain.dotconf.formatter import IniFormatter, StandardIniFormatter
from inichain.dotconf.parser import IniParser, StandardIniParser
from inichain.errors.exceptions import (IniError,
                                        InvalidSectionError,
                                        ValueParseError)
from inichain.filesystem.backup import FileBackup, LinuxFileBackup
from inichain.logging.base import Logger
from inichain.logging.std_logger import StdLogger
from inichain.model.ordered import IndexedOrderedMap
from inichain.model.property import IniProperty, LineKind
from inichain.model.section import (HEADER_SECTION, IniSection,
                                    check_property, check_section_name)

T = TypeVar("T")

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Bornes des entiers signés 32 et 64 bits
INT32_RANGE = (-2**31, 2**31 - 1)
INT64_RANGE = (-2**63, 2**63 - 1)


class IniDocument:
    """
    Fichier INI en mémoire, ordonné et fidèle au texte d'origine.

    Le document est lié à un chemin mais ne lit rien à la création :
    load() remplace tout l'état en mémoire par le contenu du fichier,
    save() écrit l'état courant sans le modifier.

    La section d'en-tête (HEADER_SECTION) contient les lignes situées
    avant le premier [nom] ; elle existe toujours et n'est jamais
    écrite avec une ligne d'en-tête.

    Aucun verrou interne : un appelant multi-thread doit sérialiser
    lui-même les appels (un verrou par document suffit).

    Attributes:
        settings: Réglages de lecture/écriture.
        logger: Logger des opérations.
        return_default_if_empty: Si True, une valeur vide est traitée
            comme absente par les accesseurs typés.
    """

    def __init__(
        self,
        file_path: Union[str, PathLike],
        logger: Optional[Logger] = None,
        settings: Optional[IniSettings] = None,
        parser: Optional[IniParser] = None,
        formatter: Optional[IniFormatter] = None,
        file_backup: Optional[FileBackup] = None
    ) -> None:
        """Initialise le document sans lire le fichier.

        Args:
            file_path: Chemin du fichier INI lu par load() et écrit
                par save().
            logger: Logger injectable. StdLogger par défaut.
            settings: Réglages. IniSettings() par défaut.
            parser: Analyseur injectable. StandardIniParser par défaut.
            formatter: Formateur injectable. StandardIniFormatter
                (préfixe de commentaire des réglages) par défaut.
            file_backup: Copieur utilisé par backup(). LinuxFileBackup
                par défaut.
        """
        self._file_path = Path(file_path)
        self.settings = settings or IniSettings()
        self.logger = logger or StdLogger()
        self.return_default_if_empty = self.settings.return_default_if_empty
        self._parser = parser or StandardIniParser()
        self._formatter = formatter or StandardIniFormatter(
            self.settings.comment_prefix
        )
        self._file_backup = file_backup or LinuxFileBackup(self.logger)

        self._sections: IndexedOrderedMap[str, IniSection] = (
            IndexedOrderedMap()
        )
        self._sections[HEADER_SECTION] = IniSection(HEADER_SECTION)

    # Propriétés

    @property
    def file_path(self) -> Path:
        """Chemin du fichier lié au document."""
        return self._file_path

    @property
    def header_section(self) -> IniSection:
        """Section implicite des lignes précédant le premier en-tête."""
        return self._sections[HEADER_SECTION]

    @property
    def count_sections(self) -> int:
        """Nombre de sections, section d'en-tête comprise."""
        return len(self._sections)

    @property
    def count_properties(self) -> int:
        """Nombre de lignes de toutes les sections.

        Les commentaires, lignes vides et lignes invalides comptent.
        """
        return sum(len(section) for section in self._sections.values())

    # Chargement / écriture

    def load(self) -> None:
        """Charge le fichier et remplace tout l'état en mémoire.

        Un fichier absent n'est pas une erreur : l'état reste inchangé.
        En cas d'erreur d'analyse, l'état précédent est conservé.

        Raises:
            DuplicateKeyError: Si une clé apparaît deux fois dans une
                même section.
            OSError: Si le fichier ne peut pas être lu.
        """
        if not self._file_path.exists():
            self.logger.log_warning(
                f"Fichier {self._file_path} absent, rien à charger."
            )
            return

        with open(self._file_path, "r",
                  encoding=self.settings.encoding) as fp:
            self._sections = self._parse(fp, str(self._file_path))

        self.logger.log_info(
            f"Fichier {self._file_path} chargé : "
            f"{self.count_sections} section(s), "
            f"{self.count_properties} ligne(s)."
        )

    def load_text(self, text: str) -> None:
        """Remplace l'état en mémoire par le contenu INI de text.

        Mêmes règles que load(), sans accès au fichier.

        Raises:
            DuplicateKeyError: Si une clé apparaît deux fois dans une
                même section.
        """
        # Mêmes fins de ligne que la lecture du fichier en mode texte
        lines = io.StringIO(text, newline=None)
        self._sections = self._parse(lines, "<texte>")

    def _parse(
        self,
        lines: Iterable[str],
        source: str
    ) -> IndexedOrderedMap[str, IniSection]:
        try:
            return self._parser.parse(lines)
        except IniError as e:
            self.logger.log_error(f"Erreur d'analyse de {source} : {e}")
            raise

    def to_ini(self) -> str:
        """Génère le contenu INI du document, tel que save() l'écrit."""
        return self._formatter.format(self._sections.values())

    def save(self, path: Union[str, PathLike, None] = None) -> None:
        """Écrit le document dans son fichier ou dans path.

        L'état en mémoire n'est pas modifié (les préfixes de
        commentaire sont ajoutés au texte écrit seulement).

        Args:
            path: Destination. Fichier lié au document si None.
        """
        target = Path(path) if path is not None else self._file_path
        content = self.to_ini()

        with open(target, "w", encoding=self.settings.encoding) as fp:
            fp.write(content)

        self.logger.log_info(f"Fichier {target} écrit avec succès.")

    def backup(
        self,
        path: Union[str, PathLike],
        apply_changes: bool
    ) -> None:
        """Sauvegarde le document.

        Args:
            path: Chemin du fichier de sauvegarde.
            apply_changes: True pour écrire l'état en mémoire (save),
                False pour copier le fichier lié octet par octet.

        Raises:
            IniFileNotFoundError: Si apply_changes vaut False et que le
                fichier lié n'existe pas.
        """
        if apply_changes:
            self.save(path)
        else:
            self._file_backup.backup(str(self._file_path), str(path))

    # Lecture

    def contains(self, section: str, key: Optional[str] = None) -> bool:
        """Indique si une section (ou une propriété) existe.

        Ne crée jamais de section.
        """
        found = self._sections.get(section)
        if found is None:
            return False
        return key is None or found.contains(key)

    def get(self, section: str, key: str) -> Optional[IniProperty]:
        """Retourne la propriété, ou None si elle est introuvable."""
        found = self._sections.get(section)
        if found is None:
            return None
        return found.get(key)

    def find_section(self, section: str) -> Optional[IniSection]:
        """Retourne la section, ou None. Ne crée jamais de section."""
        return self._sections.get(section)

    def get_section(self, section: str) -> IniSection:
        """Retourne la section, créée vide en fin de document si absente.

        Raises:
            InvalidSectionError: Si la section à créer a un nom que
                l'en-tête '[nom]' ne peut pas représenter.
        """
        found = self._sections.get(section)
        if found is None:
            found = IniSection(section)
            self._sections[section] = found
        return found

    def get_section_names(self) -> tuple[str, ...]:
        """Noms des sections dans l'ordre du document."""
        return tuple(self._sections)

    def get_sections(self) -> tuple[IniSection, ...]:
        """Sections dans l'ordre du document."""
        return tuple(self._sections.values())

    def _raw_value(
        self,
        section: str,
        key: str,
        default_if_empty: Optional[bool]
    ) -> Optional[str]:
        """Valeur stockée, ou None si la valeur par défaut s'applique."""
        prop = self.get(section, key)
        if prop is None:
            return None
        if default_if_empty is None:
            default_if_empty = self.return_default_if_empty
        if default_if_empty and prop.value == "":
            return None
        return prop.value

    def get_value(
        self,
        section: str,
        key: str,
        default: T,
        default_if_empty: Optional[bool] = None
    ) -> Union[str, T]:
        """Retourne la valeur brute d'une propriété.

        Args:
            section: Nom de la section.
            key: Clé de la propriété.
            default: Valeur retournée si la section ou la clé manque.
            default_if_empty: Retourner aussi default pour une valeur
                vide. Si None, utilise return_default_if_empty.

        Returns:
            La valeur stockée ou default.
        """
        raw = self._raw_value(section, key, default_if_empty)
        return default if raw is None else raw

    def get_string(
        self,
        section: str,
        key: str,
        default: str,
        default_if_empty: Optional[bool] = None
    ) -> str:
        """Retourne la valeur texte d'une propriété (voir get_value)."""
        return self.get_value(section, key, default, default_if_empty)

    def get_boolean(
        self,
        section: str,
        key: str,
        default: bool,
        default_if_empty: Optional[bool] = None
    ) -> bool:
        """Retourne la valeur booléenne d'une propriété.

        Seuls 'true' et 'false' (casse indifférente) sont acceptés.

        Raises:
            ValueParseError: Si la valeur stockée n'est pas booléenne.
                default n'est jamais substitué dans ce cas.
        """
        raw = self._raw_value(section, key, default_if_empty)
        if raw is None:
            return default

        normalized = raw.strip().lower()
        if normalized == "true":
            return True
        if normalized == "false":
            return False
        raise self._parse_error(section, key, raw, "bool")

    def get_integer(
        self,
        section: str,
        key: str,
        default: int,
        default_if_empty: Optional[bool] = None
    ) -> int:
        """Retourne la valeur entière (32 bits signés) d'une propriété.

        Raises:
            ValueParseError: Si la valeur n'est pas un entier décimal
                ou sort de l'intervalle 32 bits.
        """
        raw = self._raw_value(section, key, default_if_empty)
        if raw is None:
            return default
        return self._parse_integer(section, key, raw, INT32_RANGE, "int32")

    def get_long(
        self,
        section: str,
        key: str,
        default: int,
        default_if_empty: Optional[bool] = None
    ) -> int:
        """Retourne la valeur entière (64 bits signés) d'une propriété.

        Raises:
            ValueParseError: Si la valeur n'est pas un entier décimal
                ou sort de l'intervalle 64 bits.
        """
        raw = self._raw_value(section, key, default_if_empty)
        if raw is None:
            return default
        return self._parse_integer(section, key, raw, INT64_RANGE, "int64")

    def _parse_integer(
        self,
        section: str,
        key: str,
        raw: str,
        bounds: tuple[int, int],
        type_name: str
    ) -> int:
        text = raw.strip()
        if _INTEGER_PATTERN.fullmatch(text):
            number = int(text)
            if bounds[0] <= number <= bounds[1]:
                return number
        raise self._parse_error(section, key, raw, type_name)

    def _parse_error(
        self,
        section: str,
        key: str,
        raw: str,
        type_name: str
    ) -> ValueParseError:
        error = ValueParseError(section, key, raw, type_name)
        self.logger.log_error(str(error))
        return error

    # Modification

    def put(self, section: str, key: str, value: Any) -> None:
        """Ajoute ou met à jour une propriété.

        Une section absente est créée en fin de document. Si
        settings.blank_line_between_sections est actif et que la
        dernière ligne de la dernière section a une valeur non vide,
        une ligne vide y est d'abord ajoutée comme séparateur.
        Une clé existante garde sa position.

        Args:
            section: Nom de la section.
            key: Clé de la propriété.
            value: Valeur, stockée sous forme de texte (str(value)).

        Raises:
            InvalidSectionError: Si section est la section d'en-tête
                ou si '[section]' ne peut pas être relu sous ce nom.
            MissingKeyError: Si key est vide.
            InvalidPropertyError: Si 'key=value' ne peut pas être
                relu à l'identique (voir check_property).

        Aucune modification n'est faite si une erreur est levée.
        """
        if section == HEADER_SECTION:
            raise InvalidSectionError(
                "La section d'en-tête ne peut pas contenir de propriétés"
            )
        check_section_name(section)
        text = str(value)
        check_property(section, key, text)

        target = self._sections.get(section)
        if target is None:
            if self.settings.blank_line_between_sections:
                self._separate_last_section()
            target = IniSection(section)
            self._sections[section] = target

        existing = target.get(key)
        if existing is not None:
            existing.value = text
        else:
            target.add_property(key, text)

    def _separate_last_section(self) -> None:
        last_section = self._sections.value_at(-1)
        last_line = last_section.last()
        if last_line is not None and last_line.value:
            last_section.add_line(LineKind.EMPTY_LINE, "")

    def delete(self, section: str, key: str) -> None:
        """Supprime une propriété.

        Si c'était la seule ligne de la section, la section entière
        est supprimée (la section d'en-tête est seulement vidée).
        Section ou clé absente : aucune action.
        """
        found = self._sections.get(section)
        if found is None or not found.contains(key):
            return

        if len(found) == 1 and section != HEADER_SECTION:
            del self._sections[section]
        else:
            found.remove(key)

    def delete_section(self, section: str) -> None:
        """Supprime une section si elle existe.

        La section d'en-tête n'est jamais supprimée, seulement vidée.
        """
        if section == HEADER_SECTION:
            self.header_section.clear()
        elif section in self._sections:
            del self._sections[section]

    # Protocoles Python

    def __contains__(self, section: object) -> bool:
        return section in self._sections

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_section_names())

    def __repr__(self) -> str:
        return (
            f"IniDocument(file_path={str(self._file_path)!r}, "
            f"sections={self.count_sections})"
        )
