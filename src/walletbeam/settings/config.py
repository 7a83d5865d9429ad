"""Configuration loader for WalletBeam using Pydantic settings."""

from __future__ import annotations

import os
import tomllib
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

ENV_VAR_NAME = "WALLETBEAM_ENV"
DEFAULT_ENV = "local"
PROJECT_ROOT = Path(os.getenv("WALLETBEAM_PROJECT_ROOT") or Path(__file__).resolve().parents[3])
CONFIG_DIR = PROJECT_ROOT / "config"
DEFAULT_CONFIG_FILE = CONFIG_DIR / "settings.default.toml"
LOCAL_CONFIG_FILE = CONFIG_DIR / "settings.local.toml"
SETTINGS_FILE_ENV_VAR = "WALLETBEAM_SETTINGS_FILE"
EXPORT_FORMATS = ("gmgn", "axiom")


def _resolve_env(explicit_env: str | None = None) -> str:
    """Return the active environment name.

    Args:
        explicit_env: Environment value supplied directly by the caller.

    Returns:
        A stripped environment name, falling back to ``DEFAULT_ENV``.
    """

    env = explicit_env or os.getenv(ENV_VAR_NAME) or DEFAULT_ENV
    return env.strip()


def _env_file_candidates(env: str) -> list[Path]:
    """List candidate ``.env`` files used during settings resolution."""

    return [
        PROJECT_ROOT / ".env",
        PROJECT_ROOT / f".env.{env}",
        PROJECT_ROOT / ".env.local",
    ]


def _resolve_config_path(raw_path: str | None) -> Path | None:
    """Return an absolute config path from user input."""

    if not raw_path:
        return None
    candidate = Path(raw_path).expanduser()
    if not candidate.is_absolute():
        candidate = (PROJECT_ROOT / candidate).resolve()
    return candidate


def _config_file_priority() -> tuple[Path, ...]:
    """Return config files in descending precedence order."""

    ordered: list[Path] = []
    env_override = _resolve_config_path(os.getenv(SETTINGS_FILE_ENV_VAR))
    if env_override:
        ordered.append(env_override)
    ordered.append(LOCAL_CONFIG_FILE)
    ordered.append(DEFAULT_CONFIG_FILE)
    return tuple(path for path in ordered if path.exists())


class TomlConfigSettingsSource(PydanticBaseSettingsSource):
    """Pydantic settings source that loads values from a TOML file."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path) -> None:
        super().__init__(settings_cls)
        self.path = path
        self._data: dict[str, Any] | None = None

    def _load(self) -> dict[str, Any]:
        if self._data is not None:
            return self._data
        if not self.path.exists():
            self._data = {}
            return self._data
        try:
            with self.path.open("rb") as handle:
                self._data = tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:  # pragma: no cover - invalid files surface immediately
            raise ValueError(f"Invalid TOML syntax in {self.path}") from exc
        return self._data

    def __call__(self) -> dict[str, Any]:  # pragma: no cover - trivial wrapper
        return self._load()

    def get_field_value(self, field_name: str, field):  # pragma: no cover - passthrough helper
        data = self._load()
        return data.get(field_name), field_name in data


def _read_env_value(*keys: str) -> str | None:
    """Return the first present environment variable from ``keys``."""

    for key in keys:
        value = os.getenv(key)
        if value is not None:
            return value
    return None


class RuntimeSettings(BaseSettings):
    """Process-level runtime controls."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "RUNTIME__LOG_LEVEL"),
    )


class ObservabilitySettings(BaseSettings):
    """Structured logging switches."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    structured_logging: bool = Field(
        default=False,
        validation_alias=AliasChoices("OBS_STRUCTURED_LOGGING", "OBSERVABILITY__STRUCTURED_LOGGING"),
    )
    service_name: str = Field(
        default="walletbeam",
        validation_alias=AliasChoices("OBS_SERVICE_NAME", "OBSERVABILITY__SERVICE_NAME"),
    )


class ExportSettings(BaseSettings):
    """Export sink configuration (clipboard + file downloads)."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    output_dir: Path = Field(
        default=PROJECT_ROOT / "data" / "exports",
        validation_alias=AliasChoices("EXPORT_OUTPUT_DIR", "EXPORT__OUTPUT_DIR"),
    )
    default_format: str = Field(
        default="gmgn",
        validation_alias=AliasChoices("EXPORT_DEFAULT_FORMAT", "EXPORT__DEFAULT_FORMAT"),
    )
    clipboard_command: str | None = Field(
        default=None,
        validation_alias=AliasChoices("CLIPBOARD_COMMAND", "EXPORT__CLIPBOARD_COMMAND"),
    )
    clipboard_timeout_seconds: float = Field(
        default=5.0,
        validation_alias=AliasChoices("CLIPBOARD_TIMEOUT_SECONDS", "EXPORT__CLIPBOARD_TIMEOUT_SECONDS"),
    )


class Settings(BaseSettings):
    """Top-level configuration model with nested sections for each subsystem."""

    env: str = Field(
        default_factory=lambda: _resolve_env(),
        validation_alias=AliasChoices("ENV", "ENVIRONMENT", "RUNTIME__ENV"),
    )
    project_root: Path = Field(default=PROJECT_ROOT)
    runtime: RuntimeSettings = Field(default_factory=RuntimeSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)
    export: ExportSettings = Field(default_factory=ExportSettings)
    env_files: tuple[Path, ...] = Field(default_factory=tuple, exclude=True)
    config_files: tuple[Path, ...] = Field(default_factory=tuple, exclude=True)

    model_config = SettingsConfigDict(
        env_prefix="WALLETBEAM_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """Extend settings sources with TOML-based config files."""

        config_sources = [TomlConfigSettingsSource(settings_cls, path) for path in _config_file_priority()]
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            *config_sources,
            file_secret_settings,
        )

    @model_validator(mode="after")
    def _resolve_paths(self) -> "Settings":
        """Normalize relative paths once the model is initialised."""

        if not self.export.output_dir.is_absolute():
            export_updates = {"output_dir": (self.project_root / self.export.output_dir).resolve()}
            object.__setattr__(self, "export", self.export.model_copy(update=export_updates))
        return self

    @model_validator(mode="after")
    def _apply_env_aliases(self) -> "Settings":
        """Honour legacy/unprefixed aliases that nested env parsing misses."""

        export_updates: dict[str, object] = {}
        format_override = _read_env_value(
            "WALLETBEAM_EXPORT__DEFAULT_FORMAT",
            "WALLETBEAM_EXPORT_DEFAULT_FORMAT",
            "EXPORT__DEFAULT_FORMAT",
            "EXPORT_DEFAULT_FORMAT",
        )
        requested_format = (format_override or self.export.default_format).strip().lower()
        if requested_format not in EXPORT_FORMATS:
            raise ValueError(f"Unsupported export format: {requested_format}")
        if requested_format != self.export.default_format:
            export_updates["default_format"] = requested_format

        clipboard_override = _read_env_value(
            "WALLETBEAM_EXPORT__CLIPBOARD_COMMAND",
            "WALLETBEAM_CLIPBOARD_COMMAND",
            "EXPORT__CLIPBOARD_COMMAND",
            "CLIPBOARD_COMMAND",
        )
        if clipboard_override is not None:
            export_updates["clipboard_command"] = clipboard_override.strip() or None

        if export_updates:
            object.__setattr__(self, "export", self.export.model_copy(update=export_updates))
        return self

    @property
    def log_level(self) -> str:
        """str: Effective logging level for the running process."""

        return self.runtime.log_level


def _load_settings(env: str | None = None) -> Settings:
    """Load settings with optional environment override.

    Args:
        env: Environment name supplied programmatically.

    Returns:
        Fully parsed :class:`Settings` instance with env files applied.
    """

    resolved_env = _resolve_env(env)
    candidate_files = [path for path in _env_file_candidates(resolved_env) if path.exists()]
    config_files = _config_file_priority()
    return Settings(
        _env_file=[str(path) for path in candidate_files],
        _env_file_encoding="utf-8",
        env=resolved_env,
        env_files=tuple(candidate_files),
        config_files=config_files,
    )


@lru_cache(maxsize=1)
def get_settings(env: str | None = None) -> Settings:
    """Return cached settings for the requested environment."""

    return _load_settings(env)


def reload_settings(env: str | None = None) -> Settings:
    """Clear the cached settings and reload from disk."""

    get_settings.cache_clear()
    return get_settings(env)


__all__ = [
    "Settings",
    "get_settings",
    "reload_settings",
    "PROJECT_ROOT",
    "ENV_VAR_NAME",
]
