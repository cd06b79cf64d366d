"""Interface abstraite pour le logging des opérations INI."""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Interface pour le système de logging.

    IniDocument ne dépend que de cette abstraction : les tests
    injectent un MagicMock, les applications un FileLogger ou
    un StdLogger.
    """

    @abstractmethod
    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Log une erreur."""
        pass
