"""Implémentation concrète du logger avec fichier."""

import logging
import os
from typing import Optional

from inichain.config.settings import IniSettings
from inichain.logging.base import Logger


class FileLogger(Logger):
    """
    Logger qui écrit dans un fichier avec option console.

    Caractéristiques:
    - Logger unique par fichier (évite les conflits)
    - Encodage UTF-8 explicite
    - Flush immédiat après chaque log
    - Pas de propagation (évite les logs en double)
    - Niveau et format lus depuis IniSettings
    """

    def __init__(
        self,
        log_file: str,
        settings: Optional[IniSettings] = None,
        console_output: bool = False
    ) -> None:
        """
        Initialise le logger.

        Args:
            log_file: Chemin du fichier de log
            settings: Réglages inichain (log_level, log_format).
                      Valeurs par défaut si None.
            console_output: Activer la sortie console en plus du fichier
        """
        self.log_file = log_file
        settings = settings or IniSettings()

        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir, exist_ok=True)

        log_level = getattr(logging, settings.log_level, logging.INFO)

        self.logger = logging.getLogger(f"inichain.file.{log_file}")
        self.logger.setLevel(log_level)

        if not self.logger.handlers:
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(log_level)
            formatter = logging.Formatter(settings.log_format)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
            self.handler = file_handler

            if console_output:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(log_level)
                console_handler.setFormatter(formatter)
                self.logger.addHandler(console_handler)
        else:
            self.handler = self.logger.handlers[0]

        self.logger.propagate = False

    def _flush(self) -> None:
        """Force l'écriture immédiate sur le disque."""
        if self.handler:
            self.handler.flush()

    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        self.logger.info(message)
        self._flush()

    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        self.logger.warning(message)
        self._flush()

    def log_error(self, message: str) -> None:
        """Log une erreur."""
        self.logger.error(message)
        self._flush()
