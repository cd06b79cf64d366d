"""Analyse ligne à ligne d'un texte INI.

Chaque ligne reçoit un rôle (propriété, commentaire, vide, invalide)
et rejoint la section courante, de sorte qu'un formatage ultérieur
restitue le fichier ligne pour ligne.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from inichain.config.settings import COMMENT_MARKERS
from inichain.model.ordered import IndexedOrderedMap
from inichain.model.property import LineKind
from inichain.model.section import HEADER_SECTION, IniSection


class IniParser(ABC):
    """Interface pour la conversion de lignes de texte en sections."""

    @abstractmethod
    def parse(
        self,
        lines: Iterable[str]
    ) -> IndexedOrderedMap[str, IniSection]:
        """Analyse des lignes INI.

        Args:
            lines: Lignes brutes (fin de ligne incluse ou non).

        Returns:
            Sections dans l'ordre de première apparition, la section
            d'en-tête (HEADER_SECTION) toujours en premier.

        Raises:
            DuplicateKeyError: Si une clé apparaît deux fois dans
                une même section.
        """
        pass


class StandardIniParser(IniParser):
    """Analyseur INI en une seule passe.

    Règles, dans l'ordre, après suppression des espaces autour de la
    ligne :

    - vide : EMPTY_LINE ;
    - premier caractère ';' ou '#' : COMMENT ;
    - '[nom]' fermé sur la même ligne, nom non vide : change la
      section courante (une section déjà vue est réutilisée) ;
    - contient '=' hors section d'en-tête, clé non vide : propriété,
      découpée sur le premier '=' ;
    - sinon : INVALID, conservée telle quelle.
    """

    def parse(
        self,
        lines: Iterable[str]
    ) -> IndexedOrderedMap[str, IniSection]:
        sections: IndexedOrderedMap[str, IniSection] = IndexedOrderedMap()
        current = IniSection(HEADER_SECTION)
        sections[HEADER_SECTION] = current

        for line_number, raw_line in enumerate(lines, start=1):
            line = raw_line.strip()

            if not line:
                current.add_line(LineKind.EMPTY_LINE, line, line_number)
                continue

            if line.startswith(COMMENT_MARKERS):
                current.add_line(LineKind.COMMENT, line, line_number)
                continue

            name = self.section_name(line)
            if name is not None:
                if name not in sections:
                    sections[name] = IniSection(name)
                current = sections[name]
                continue

            key, separator, value = line.partition("=")
            key = key.strip()
            if separator and key and current.name != HEADER_SECTION:
                current.add_property(key, value.strip(), line_number)
            else:
                current.add_line(LineKind.INVALID, line, line_number)

        return sections

    @staticmethod
    def section_name(line: str) -> str | None:
        """Extrait le nom d'un en-tête de section.

        Args:
            line: Ligne déjà débarrassée de ses espaces.

        Returns:
            Le nom sans espaces autour, ou None si la ligne n'est pas
            un en-tête valide ('[' non fermé en fin de ligne, nom vide).
        """
        if not (line.startswith("[") and line.endswith("]")):
            return None
        name = line[1:line.index("]")].strip()
        return name or None
