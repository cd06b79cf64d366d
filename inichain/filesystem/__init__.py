"""Module de gestion des fichiers."""

from inichain.filesystem.backup import FileBackup, LinuxFileBackup

__all__ = [
    "FileBackup",
    "LinuxFileBackup"
]
