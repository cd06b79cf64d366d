"""Copie brute de fichiers INI pour les sauvegardes."""

import os
import shutil
from abc import ABC, abstractmethod

from inichain.errors.exceptions import IniFileNotFoundError
from inichain.logging.base import Logger


class FileBackup(ABC):
    """Interface pour la sauvegarde octet par octet d'un fichier."""

    @abstractmethod
    def backup(self, file_path: str, backup_path: str) -> None:
        """
        Crée une sauvegarde d'un fichier.

        Args:
            file_path: Chemin du fichier à sauvegarder
            backup_path: Chemin de la sauvegarde

        Raises:
            IniFileNotFoundError: Si le fichier source n'existe pas
        """
        pass


class LinuxFileBackup(FileBackup):
    """
    Implémentation Linux de la sauvegarde de fichiers.

    Utilise shutil.copy2 pour préserver les métadonnées
    (permissions, timestamps) lors de la copie.
    """

    def __init__(self, logger: Logger) -> None:
        """
        Initialise le gestionnaire de sauvegarde.

        Args:
            logger: Instance de Logger pour le logging
        """
        self.logger = logger

    def backup(self, file_path: str, backup_path: str) -> None:
        """
        Copie le fichier tel quel vers backup_path.

        Aucune copie n'est tentée si la source est absente.

        Args:
            file_path: Chemin du fichier à sauvegarder
            backup_path: Chemin de la sauvegarde

        Raises:
            IniFileNotFoundError: Si le fichier source n'existe pas
            OSError: Si la copie échoue
        """
        if not os.path.exists(file_path):
            error = IniFileNotFoundError(str(file_path))
            self.logger.log_error(str(error))
            raise error

        try:
            shutil.copy2(file_path, backup_path)
        except OSError as e:
            self.logger.log_error(
                f"Erreur lors de la sauvegarde de {file_path}: {e}"
            )
            raise

        self.logger.log_info(
            f"Sauvegarde de {file_path} vers {backup_path}"
        )
