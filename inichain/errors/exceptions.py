"""
Exceptions personnalisées pour inichain.

Chaque exception hérite d'IniError et, lorsque c'est pertinent, de
l'exception standard équivalente (KeyError, ValueError,
FileNotFoundError) pour rester capturable par du code générique.
"""


class IniError(Exception):
    """Exception de base pour toutes les erreurs inichain."""
    pass


class ConfigurationError(IniError):
    """Paramètres inichain invalides (fichier de réglages, valeurs)."""
    pass


class DuplicateKeyError(IniError, KeyError):
    """Une section contient déjà une propriété avec cette clé."""

    def __init__(
        self,
        section: str,
        key: str,
        line_number: int | None = None
    ) -> None:
        """Initialise l'erreur de clé dupliquée.

        Args:
            section: Nom de la section concernée.
            key: Clé déjà présente.
            line_number: Numéro de ligne (1-indexé) lors d'un chargement.
        """
        self.section = section
        self.key = key
        self.line_number = line_number
        message = (
            f"La section '{section}' contient déjà la propriété '{key}'"
        )
        if line_number is not None:
            message += f" (ligne {line_number})"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ ajoute des guillemets autour du message
        return str(self.args[0])


class MissingKeyError(IniError, ValueError):
    """Une propriété de type PROPERTY doit avoir une clé non vide."""

    def __init__(self, section: str) -> None:
        self.section = section
        super().__init__(
            f"Une propriété INI ne peut pas avoir de clé vide "
            f"(section '{section}')"
        )


class InvalidSectionError(IniError, ValueError):
    """Nom de section réservé ou inutilisable pour l'opération."""
    pass


class ValueParseError(IniError, ValueError):
    """Une valeur ne peut pas être convertie dans le type demandé."""

    def __init__(
        self,
        section: str,
        key: str,
        value: str,
        type_name: str
    ) -> None:
        """Initialise l'erreur de conversion.

        Args:
            section: Nom de la section.
            key: Clé de la propriété.
            value: Valeur brute stockée.
            type_name: Type attendu (bool, int32, int64).
        """
        self.section = section
        self.key = key
        self.value = value
        self.type_name = type_name
        super().__init__(
            f"[{section}] {key}={value!r} n'est pas une valeur "
            f"{type_name} valide"
        )


class IniFileNotFoundError(IniError, FileNotFoundError):
    """Le fichier INI source est introuvable."""

    def __init__(self, file_path: str) -> None:
        self.file_path = file_path
        super().__init__(f"Fichier INI non trouvé : {file_path}")

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidPropertyError(IniError, ValueError):
    """Une propriété ne peut pas être écrite puis relue à l'identique."""

    def __init__(self, section: str, key: str, reason: str) -> None:
        """Initialise l'erreur de propriété non représentable.

        Args:
            section: Nom de la section.
            key: Clé de la propriété.
            reason: Ce qui empêche la relecture à l'identique.
        """
        self.section = section
        self.key = key
        self.reason = reason
        super().__init__(f"[{section}] {key!r} : {reason}")
