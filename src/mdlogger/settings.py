"""Central application settings using Pydantic."""

import os
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)


class Settings(BaseSettings):
    """Configuration loaded from ``MDLOGGER_*`` variables, ``.env`` and ``mdlogger.yaml``."""

    # Core application
    log_level: str = Field("INFO", description="Logging level name")

    # Workspace and vault layout
    workspace_root: str = Field(
        default_factory=lambda: str(Path.cwd()),
        description="Workspace root: a local path or a scheme://authority/path URI",
    )
    vault_root: str = Field(
        "", description="Vault root: empty, relative to the workspace, or absolute"
    )
    note_extension: str = Field(".md", description="Extension of note files")
    slug_strategy: Literal["passthrough", "kebab-case", "snake_case"] = Field(
        "passthrough", description="Page name to file name transform"
    )
    search_subdirectories: bool = Field(
        False, description="Search the whole vault tree when following links"
    )
    note_template: str = Field("", description="Content of notes created from links")

    # Daily notes and quick capture
    daily_note_path: str = Field("dailynotes", description="Daily note folder")
    daily_note_template: str = Field(
        "", description="Vault-relative path of the daily note template file"
    )
    capture_section_name: str = Field("Quick Notes", description="Capture section")
    date_format: str = Field("%Y-%m-%d", description="strftime format of file names")
    time_format: str = Field("%H:%M", description="strftime format of capture times")

    # Task panel
    max_task_files: int = Field(200, ge=1, description="Cap on files scanned")

    model_config = SettingsConfigDict(
        env_prefix="MDLOGGER_",
        env_file=".env",
        yaml_file="mdlogger.yaml",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return str(v).upper()

    @field_validator("workspace_root", mode="before")
    @classmethod
    def expand_workspace_root(cls, v: str | Path) -> str:
        value = str(v)
        if "://" in value:
            return value
        return str(Path(value).expanduser().resolve())

    @field_validator("vault_root", mode="before")
    @classmethod
    def expand_vault_root(cls, v: str | Path | None) -> str:
        if v is None:
            return ""
        value = str(v).strip()
        if value.startswith("~"):
            return os.path.expanduser(value)
        return value

    @field_validator("note_extension", mode="before")
    @classmethod
    def ensure_leading_dot(cls, v: str) -> str:
        value = str(v).strip()
        if value and not value.startswith("."):
            return "." + value
        return value


def get_settings(**overrides) -> Settings:
    """Return settings loaded from the environment, with optional overrides."""
    return Settings(**overrides)
