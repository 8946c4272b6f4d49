"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use MDREL_ prefix (e.g., MDREL_STRICT_MODE=true).

Settings can also be loaded from a .env file or an mdrel.yaml file in the
current working directory.
"""

from typing import Dict, Tuple, Type

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use MDREL_ prefix.

    Examples:
        MDREL_STRICT_MODE=true
        MDREL_LANGUAGE_OVERRIDES='{"py": "python"}'
        MDREL_ENCODING=latin-1
    """

    model_config = SettingsConfigDict(
        env_prefix="MDREL_",
        env_file=".env",
        env_file_encoding="utf-8",
        yaml_file="mdrel.yaml",
        case_sensitive=False,
    )

    # Directive configuration
    directive_prefix: str = Field(
        default="^code",
        description="Literal line prefix that marks a candidate inclusion directive",
    )

    section_marker: str = Field(
        default="// section ",
        description="Comment prefix that opens or closes a named section in a referenced file",
    )

    fence: str = Field(
        default="```",
        description="Code fence emitted around extracted content",
    )

    language_overrides: Dict[str, str] = Field(
        default_factory=dict,
        description="Extra extension -> fence language mappings (added to the built-in table)",
    )

    # Path configuration
    dev_suffix: str = Field(
        default=".dev.md",
        description="Suffix stripped from a source document to derive its output path",
    )

    output_suffix: str = Field(
        default=".md",
        description="Suffix appended when deriving the output path",
    )

    encoding: str = Field(
        default="utf-8",
        description="Text encoding for documents and referenced files",
    )

    # Validation configuration
    strict_mode: bool = Field(
        default=False,
        description="Strict mode: malformed directives, missing sections and short files become errors",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """
        Add mdrel.yaml as the lowest-priority settings source.

        Priority (highest first): constructor arguments, environment,
        .env file, mdrel.yaml.
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
        )

    def outputPath_derive(self, source: str) -> str:
        """
        Derive the destination path for a source document.

        An exact dev_suffix is stripped before output_suffix is appended;
        any other path gets output_suffix appended unchanged.

        Args:
            source: Path of the source document

        Returns:
            Destination path

        Example:
            >>> settings = AppSettings()
            >>> settings.outputPath_derive('guide.dev.md')
            'guide.md'
            >>> settings.outputPath_derive('notes.md')
            'notes.md.md'
        """
        base = source
        if self.dev_suffix and source.endswith(self.dev_suffix):
            base = source[: -len(self.dev_suffix)]
        return f"{base}{self.output_suffix}"


# Singleton instance - import this in your code
appsettings = AppSettings()
