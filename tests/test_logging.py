"""Tests pour le module logging."""

import logging

from inichain.config import IniSettings
from inichain.logging import FileLogger, Logger, StdLogger


class TestFileLogger:
    """Tests pour FileLogger."""

    def test_implements_logger_interface(self, tmp_path):
        """Vérifie que FileLogger implémente l'interface Logger."""
        logger = FileLogger(str(tmp_path / "test.log"))

        assert isinstance(logger, Logger)

    def test_log_levels(self, tmp_path):
        """Les trois niveaux sont écrits dans le fichier."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_info("Info message")
        logger.log_warning("Warning message")
        logger.log_error("Error message")

        content = log_file.read_text(encoding="utf-8")
        assert "INFO - Info message" in content
        assert "WARNING - Warning message" in content
        assert "ERROR - Error message" in content

    def test_creates_log_directory(self, tmp_path):
        """Le répertoire de log est créé si nécessaire."""
        log_file = tmp_path / "subdir" / "test.log"

        logger = FileLogger(str(log_file))
        logger.log_info("Test")

        assert log_file.exists()

    def test_settings_format(self, tmp_path):
        """Le format des messages vient des réglages."""
        log_file = tmp_path / "test.log"
        settings = IniSettings(log_format="%(levelname)s | %(message)s")

        logger = FileLogger(str(log_file), settings=settings)
        logger.log_info("Test")

        assert "INFO | Test" in log_file.read_text(encoding="utf-8")

    def test_settings_level(self, tmp_path):
        """Les messages sous le niveau configuré sont ignorés."""
        log_file = tmp_path / "test.log"
        settings = IniSettings(log_level="WARNING")

        logger = FileLogger(str(log_file), settings=settings)
        logger.log_info("hidden")
        logger.log_warning("shown")

        content = log_file.read_text(encoding="utf-8")
        assert "hidden" not in content
        assert "shown" in content

    def test_utf8_encoding(self, tmp_path):
        """Les caractères non ASCII sont écrits en UTF-8."""
        log_file = tmp_path / "test.log"
        logger = FileLogger(str(log_file))

        logger.log_info("Fichier chargé : clé réécrite")

        content = log_file.read_text(encoding="utf-8")
        assert "clé réécrite" in content

    def test_same_file_reuses_handler(self, tmp_path):
        """Deux loggers sur le même fichier ne dupliquent pas les lignes."""
        log_file = tmp_path / "test.log"
        FileLogger(str(log_file))
        logger = FileLogger(str(log_file))

        logger.log_info("once")

        assert log_file.read_text(encoding="utf-8").count("once") == 1


class TestStdLogger:
    """Tests pour StdLogger."""

    def test_implements_logger_interface(self):
        """Vérifie que StdLogger implémente l'interface Logger."""
        assert isinstance(StdLogger(), Logger)

    def test_delegates_to_standard_logging(self, caplog):
        """Les messages passent par logging.getLogger('inichain')."""
        caplog.set_level(logging.INFO, logger="inichain")
        logger = StdLogger()

        logger.log_info("loaded")
        logger.log_warning("missing")
        logger.log_error("broken")

        records = [
            (record.name, record.levelname, record.getMessage())
            for record in caplog.records
        ]
        assert records == [
            ("inichain", "INFO", "loaded"),
            ("inichain", "WARNING", "missing"),
            ("inichain", "ERROR", "broken"),
        ]

    def test_custom_name(self, caplog):
        """Le nom du logger standard est configurable."""
        caplog.set_level(logging.INFO, logger="myapp.ini")

        StdLogger("myapp.ini").log_info("hello")

        assert caplog.records[0].name == "myapp.ini"
