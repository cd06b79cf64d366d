"""Génération du texte INI à partir des sections en mémoire."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

from inichain.config.settings import COMMENT_MARKERS
from inichain.model.property import IniProperty, LineKind
from inichain.model.section import HEADER_SECTION, IniSection


class IniFormatter(ABC):
    """Interface pour la conversion de sections en texte INI."""

    @abstractmethod
    def format_lines(self, sections: Iterable[IniSection]) -> Iterator[str]:
        """Produit les lignes du fichier, sans fin de ligne.

        Args:
            sections: Sections dans l'ordre du document.

        Yields:
            Une ligne de texte par en-tête ou par ligne de section.
        """
        pass

    def format(self, sections: Iterable[IniSection]) -> str:
        """Génère le contenu complet, chaque ligne terminée par '\\n'."""
        return "".join(f"{line}\n" for line in self.format_lines(sections))


class StandardIniFormatter(IniFormatter):
    """Formateur INI respectant les lignes d'origine.

    La section d'en-tête n'a pas de ligne [nom]. Les commentaires sans
    marqueur reçoivent comment_prefix à l'écriture uniquement : la
    valeur stockée n'est jamais modifiée.
    """

    def __init__(self, comment_prefix: str = "; ") -> None:
        """Initialise le formateur.

        Args:
            comment_prefix: Préfixe des commentaires sans ';' ni '#'.
        """
        self.comment_prefix = comment_prefix

    def format_lines(self, sections: Iterable[IniSection]) -> Iterator[str]:
        for section in sections:
            if section.name != HEADER_SECTION:
                yield f"[{section.name}]"
            for prop in section:
                yield self.format_property(prop)

    def format_property(self, prop: IniProperty) -> str:
        """Retourne la ligne de texte d'une propriété."""
        if prop.kind is LineKind.PROPERTY:
            return f"{prop.key}={prop.value}"
        if (prop.kind is LineKind.COMMENT
                and not prop.value.startswith(COMMENT_MARKERS)):
            return f"{self.comment_prefix}{prop.value}"
        return prop.value
