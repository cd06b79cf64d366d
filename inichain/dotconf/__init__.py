"""Module DotConf : lecture et écriture fidèles de fichiers INI.

Ce module fournit :
- IniDocument : document lié à un fichier, avec accès typés
  (texte, booléen, entier 32/64 bits) et mise à jour en place
- IniParser / StandardIniParser : analyse ligne à ligne
- IniFormatter / StandardIniFormatter : génération du texte

Example:
    >>> from inichain.dotconf import IniDocument
    >>>
    >>> document = IniDocument("/etc/myapp/app.ini")
    >>> document.load()
    >>> document.put("Net", "host", "localhost")
    >>> document.get_string("Net", "host", "127.0.0.1")
    'localhost'
    >>> document.save()
"""

from inichain.dotconf.document import IniDocument
from inichain.dotconf.formatter import IniFormatter, StandardIniFormatter
from inichain.dotconf.parser import IniParser, StandardIniParser

__all__ = [
    "IniDocument",
    "IniParser",
    "StandardIniParser",
    "IniFormatter",
    "StandardIniFormatter",
]
