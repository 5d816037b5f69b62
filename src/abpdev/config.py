"""Configuration models and loading logic."""

from __future__ import annotations

import os
from pathlib import Path
from typing import ClassVar, Literal

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

APP_NAME = "abpdev"
SETTINGS_FILE_NAME = "settings.yaml"
SETTINGS_FILE_ENV = "ABPDEV_SETTINGS_FILE"

DEFAULT_RUNNABLE_PROJECTS = [
    ".HttpApi.Host",
    ".HttpApi.HostWithIds",
    ".AuthServer",
    ".IdentityServer",
    ".Web",
    ".Web.Host",
    ".Web.Public",
    ".PublicWeb",
    ".PublicWebGateway",
    ".WebGateway",
    ".Blazor",
    ".Blazor.Host",
    ".Blazor.Server",
    ".Blazor.Server.Host",
    ".Blazor.Server.Tiered",
    ".Blazor.WebApp",
    ".Blazor.WebApp.Tiered",
    ".DbMigrator",
    ".HttpApi.HostApp",
]


class RunConfig(BaseModel):
    """Which projects are eligible for log lookup."""

    runnable_projects: list[str] = Field(default_factory=lambda: list(DEFAULT_RUNNABLE_PROJECTS))
    manifest_suffix: str = ".csproj"


class NotificationConfig(BaseModel):
    """Desktop notification gate and interpreter selection."""

    enabled: bool = True
    interpreter_key: str = "powershell"
    script_suffix: str = ".ps1"


class LoggingConfig(BaseModel):
    """Levels and rotation for the per-user log file."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    max_bytes: int = Field(default=1_000_000, ge=1024)
    backup_count: int = Field(default=3, ge=0)


class PathsConfig(BaseModel):
    """Per-user directories owned by the tool."""

    app_data_root: Path = Field(default_factory=lambda: Path(user_data_dir(APP_NAME, appauthor=False)))
    logs_root: Path | None = None

    def resolved(self, base_dir: Path) -> "PathsConfig":
        """Return a copy with relative paths resolved against ``base_dir``."""

        app_data_root = self.app_data_root
        if not app_data_root.is_absolute():
            app_data_root = (base_dir / app_data_root).resolve()
        logs_root = self.logs_root if self.logs_root is not None else app_data_root / "logs"
        if not logs_root.is_absolute():
            logs_root = (base_dir / logs_root).resolve()
        return self.model_copy(update={"app_data_root": app_data_root, "logs_root": logs_root})

    @property
    def log_file(self) -> Path:
        return (self.logs_root or self.app_data_root / "logs") / f"{APP_NAME}.log"


class AppSettings(BaseSettings):
    """Top-level application settings."""

    _yaml_file_override: ClassVar[Path | None] = None

    run: RunConfig = Field(default_factory=RunConfig)
    notifications: NotificationConfig = Field(default_factory=NotificationConfig)
    tools: dict[str, str] = Field(default_factory=lambda: {"powershell": "powershell"})
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="ABPDEV_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
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
        """Use YAML defaults while allowing env vars to override values."""

        yaml_file = resolve_settings_file(cls._yaml_file_override)
        yaml_settings = YamlConfigSettingsSource(settings_cls, yaml_file=yaml_file)
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            yaml_settings,
            file_secret_settings,
        )

    def as_dict(self) -> dict[str, object]:
        """Return settings as a standard nested dictionary."""

        return self.model_dump(mode="json")


def resolve_settings_file(override: Path | None = None) -> Path:
    """Resolve settings file from explicit override, env var, or the user config dir."""

    chosen = override
    if chosen is None:
        env_value = os.getenv(SETTINGS_FILE_ENV)
        if env_value:
            chosen = Path(env_value)
    if chosen is None:
        chosen = Path(user_config_dir(APP_NAME, appauthor=False)) / SETTINGS_FILE_NAME
    return chosen.expanduser().resolve()


def load_settings(config_file: Path | None = None) -> AppSettings:
    """Load settings with YAML defaults and environment variable overrides.

    A missing settings file is not an error: every field has a default.
    """

    settings_file = resolve_settings_file(config_file)
    AppSettings._yaml_file_override = settings_file
    try:
        settings = AppSettings()
    finally:
        AppSettings._yaml_file_override = None
    resolved_paths = settings.paths.resolved(base_dir=settings_file.parent)
    return settings.model_copy(update={"paths": resolved_paths})
