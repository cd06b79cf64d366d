"""Tests pour le module filesystem."""

from unittest.mock import MagicMock

import pytest

from inichain.errors import IniFileNotFoundError
from inichain.filesystem import FileBackup, LinuxFileBackup


@pytest.fixture
def logger():
    """Crée un logger factice."""
    return MagicMock()


class TestLinuxFileBackup:
    """Tests pour LinuxFileBackup."""

    def test_implements_interface(self, logger):
        """Vérifie que LinuxFileBackup implémente FileBackup."""
        assert isinstance(LinuxFileBackup(logger), FileBackup)

    def test_backup_copies_bytes(self, tmp_path, logger):
        """La copie est identique octet par octet."""
        source = tmp_path / "app.ini"
        source.write_bytes(b"; c\r\n[A]\r\nx = 1\r\n")
        target = tmp_path / "app.ini.bak"

        LinuxFileBackup(logger).backup(str(source), str(target))

        assert target.read_bytes() == source.read_bytes()
        logger.log_info.assert_called_once()

    def test_backup_missing_source(self, tmp_path, logger):
        """Une source absente lève IniFileNotFoundError et est loggée."""
        target = tmp_path / "app.ini.bak"

        with pytest.raises(IniFileNotFoundError):
            LinuxFileBackup(logger).backup(
                str(tmp_path / "absent.ini"), str(target)
            )

        assert not target.exists()
        logger.log_error.assert_called_once()

    def test_backup_copy_failure_is_logged(self, tmp_path, logger):
        """Une erreur de copie est loggée puis propagée."""
        source = tmp_path / "app.ini"
        source.write_text("[A]\n")
        target = tmp_path / "missing_dir" / "app.ini.bak"

        with pytest.raises(OSError):
            LinuxFileBackup(logger).backup(str(source), str(target))

        logger.log_error.assert_called_once()
