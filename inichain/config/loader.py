"""Chargement des réglages inichain depuis un fichier TOML ou JSON."""

import dataclasses
import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

from pydantic import BaseModel, ValidationError

from inichain.config.schema import IniSettingsSchema
from inichain.config.settings import IniSettings
from inichain.errors.exceptions import ConfigurationError


def _read_toml(path: Path) -> Dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _read_json(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


# Lecteur de chaque extension reconnue
READERS: Dict[str, Callable[[Path], Dict[str, Any]]] = {
    ".toml": _read_toml,
    ".json": _read_json,
}


def validate_with_schema(data: Dict[str, Any], schema: type) -> Any:
    """Valide un dict via un modèle Pydantic.

    Args:
        data: Données brutes.
        schema: Sous-classe de pydantic.BaseModel.

    Returns:
        Instance validée du modèle.

    Raises:
        TypeError: Si schema n'est pas un BaseModel.
        ValidationError: Si les données ne respectent pas le modèle.
    """
    if not (isinstance(schema, type) and issubclass(schema, BaseModel)):
        raise TypeError(
            f"Le schema doit être une sous-classe de "
            f"pydantic.BaseModel, reçu: {schema}"
        )
    return schema.model_validate(data)


class ConfigLoader(ABC):
    """Source de réglages, substituable par un mock dans les tests."""

    @abstractmethod
    def load(
        self,
        config_path: Union[str, Path],
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """Lit un fichier de réglages.

        Args:
            config_path: Chemin du fichier.
            schema: Modèle Pydantic optionnel. Sans modèle, le contenu
                est retourné tel quel (dict).

        Returns:
            Contenu brut ou instance validée du modèle.
        """
        pass


class FileConfigLoader(ConfigLoader):
    """Lit un fichier dont le format (TOML, JSON) dépend de l'extension."""

    def load(
        self,
        config_path: Union[str, Path],
        schema: type | None = None
    ) -> Union[Dict[str, Any], Any]:
        """
        Lit un fichier TOML ou JSON.

        Raises:
            ValueError: Si l'extension n'est ni .toml ni .json.
            FileNotFoundError: Si le fichier n'existe pas.
            TypeError: Si schema n'est pas un BaseModel.
            ValidationError: Si le contenu ne respecte pas schema.
        """
        path = Path(config_path)

        reader = READERS.get(path.suffix.lower())
        if reader is None:
            raise ValueError(
                f"Extension non supportée: {path.suffix}. "
                "Utilisez .toml ou .json"
            )
        if not path.exists():
            raise FileNotFoundError(
                f"Fichier de configuration non trouvé: {path}"
            )

        raw_config = reader(path)
        if schema is None:
            return raw_config
        return validate_with_schema(raw_config, schema)


def load_settings(
    config_path: Union[str, Path],
    section: str = "inichain",
    loader: Optional[ConfigLoader] = None
) -> IniSettings:
    """
    Construit des IniSettings depuis une table d'un fichier TOML/JSON.

    La table est validée par IniSettingsSchema (types stricts) puis par
    IniSettings (valeurs).

    Exemple de fichier TOML:

        [inichain]
        encoding = "latin-1"
        comment_prefix = "# "
        return_default_if_empty = true

    Args:
        config_path: Chemin du fichier de réglages
        section: Nom de la table à lire. Si absente, réglages par défaut.
        loader: Chargeur injectable (DIP). FileConfigLoader si None.

    Returns:
        Réglages validés

    Raises:
        FileNotFoundError: Si le fichier n'existe pas
        ConfigurationError: Si la table contient des clés inconnues
            ou des valeurs invalides
    """
    loader = loader or FileConfigLoader()
    raw_config = loader.load(config_path)

    data = raw_config.get(section, {})
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"La section '{section}' de {config_path} doit être une table"
        )

    known = {f.name for f in dataclasses.fields(IniSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(
            f"Clés inconnues dans [{section}] : {', '.join(unknown)}"
        )

    try:
        schema = validate_with_schema(data, IniSettingsSchema)
    except ValidationError as e:
        raise ConfigurationError(
            f"Réglages invalides dans [{section}] de {config_path} : {e}"
        ) from e
    return schema.to_settings()
