"""Modèle en mémoire d'un fichier INI (propriétés, sections)."""

from inichain.model.ordered import IndexedOrderedMap
from inichain.model.property import IniProperty, LineKind, SyntheticKey
from inichain.model.section import (HEADER_SECTION, IniSection,
                                    check_property, check_section_name)

__all__ = [
    "IndexedOrderedMap",
    "IniProperty",
    "LineKind",
    "SyntheticKey",
    "IniSection",
    "HEADER_SECTION",
    "check_section_name",
    "check_property",
]
