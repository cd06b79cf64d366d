"""Modèle Pydantic d'une table de réglages lue depuis un fichier."""

from pydantic import BaseModel, ConfigDict

from inichain.config.settings import IniSettings


class IniSettingsSchema(BaseModel):
    """Table [inichain] d'un fichier TOML ou JSON.

    Les types sont stricts : "no" n'est pas un booléen et 5 n'est pas
    une chaîne. Les règles métier (encodage connu, préfixe de
    commentaire, niveau de log) restent dans IniSettings.
    """

    model_config = ConfigDict(strict=True, extra="forbid", frozen=True)

    encoding: str = IniSettings.encoding
    comment_prefix: str = IniSettings.comment_prefix
    return_default_if_empty: bool = IniSettings.return_default_if_empty
    blank_line_between_sections: bool = (
        IniSettings.blank_line_between_sections
    )
    log_level: str = IniSettings.log_level
    log_format: str = IniSettings.log_format

    def to_settings(self) -> IniSettings:
        """Construit les réglages immuables correspondants.

        Raises:
            ConfigurationError: Si une valeur est refusée par
                IniSettings.
        """
        return IniSettings(**self.model_dump())
