"""Logger adossé au logging standard, sans handler imposé."""

import logging

from inichain.logging.base import Logger


class StdLogger(Logger):
    """
    Logger par défaut d'IniDocument.

    Délègue à ``logging.getLogger(name)`` sans ajouter de handler :
    la configuration (niveau, destination) reste à la charge de
    l'application hôte.
    """

    def __init__(self, name: str = "inichain") -> None:
        """
        Initialise le logger.

        Args:
            name: Nom du logger standard à utiliser
        """
        self.logger = logging.getLogger(name)

    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        self.logger.info(message)

    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        self.logger.warning(message)

    def log_error(self, message: str) -> None:
        """Log une erreur."""
        self.logger.error(message)
