"""Credentials and runtime settings for the Astrology API node."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from pydantic import BaseModel, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from ..errors import ConfigurationError
from ..transport import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

__all__ = [
    "CONFIG_FILENAME",
    "Credentials",
    "Settings",
    "config_path",
    "get_config_home",
    "get_settings",
    "load_settings",
    "save_settings",
]

CONFIG_FILENAME = "config.yaml"


def _normalise_base_url(value: Any) -> str:
    if value is None:
        return DEFAULT_BASE_URL
    text = str(value).strip()
    if not text:
        return DEFAULT_BASE_URL
    return text.rstrip("/")


class Credentials(BaseModel):
    """API key and base URL, resolved once per batch."""

    api_key: SecretStr
    base_url: str = DEFAULT_BASE_URL

    @field_validator("api_key", mode="before")
    @classmethod
    def _require_key(cls, value: Any) -> Any:
        raw = value.get_secret_value() if isinstance(value, SecretStr) else value
        if raw is None or not str(raw).strip():
            raise ValueError("api_key must not be blank")
        return str(raw).strip()

    @field_validator("base_url", mode="before")
    @classmethod
    def _default_base_url(cls, value: Any) -> str:
        return _normalise_base_url(value)

    @property
    def token(self) -> str:
        return self.api_key.get_secret_value()


# -------------------- Settings --------------------


class Settings(BaseSettings):
    """Node settings resolved from the environment and the YAML config file.

    Environment variables take precedence over values passed to the
    constructor, which is how :func:`load_settings` lets the environment
    override the file.
    """

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    api_key: SecretStr | None = Field(default=None, alias="ASTROLOGY_API_KEY")
    base_url: str = Field(default=DEFAULT_BASE_URL, alias="ASTROLOGY_API_BASE_URL")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, alias="ASTROLOGY_API_TIMEOUT")
    simplify_max_keys: int = Field(default=10, ge=0, alias="ASTROLOGY_SIMPLIFY_MAX_KEYS")
    continue_on_error: bool = Field(default=False, alias="ASTROLOGY_CONTINUE_ON_ERROR")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, dotenv_settings, init_settings, file_secret_settings

    @field_validator("base_url", mode="before")
    @classmethod
    def _default_base_url(cls, value: Any) -> str:
        return _normalise_base_url(value)

    @field_validator("api_key", mode="before")
    @classmethod
    def _blank_key_is_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @classmethod
    def from_env(cls) -> "Settings":
        """Settings from environment variables only."""

        return cls()

    def credentials(self) -> Credentials:
        """Return :class:`Credentials`, raising :class:`ConfigurationError` without an API key."""

        if self.api_key is None:
            raise ConfigurationError(
                "No API key configured; set ASTROLOGY_API_KEY or api_key in "
                f"{config_path()}"
            )
        try:
            return Credentials(api_key=self.api_key, base_url=self.base_url)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid credentials: {exc}") from exc


# -------------------- Persistence --------------------


def get_config_home() -> Path:
    """Return the directory holding the node configuration file."""

    return Path(
        os.environ.get("ASTROLOGY_NODE_HOME", str(Path.home() / ".astrology-node"))
    ).expanduser()


def config_path() -> Path:
    return get_config_home() / CONFIG_FILENAME


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Persist ``settings`` as YAML and return the path written."""

    target_path = Path(path) if path else config_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)
    data: Dict[str, Any] = settings.model_dump(mode="json", exclude={"api_key"})
    if settings.api_key is not None:
        data["api_key"] = settings.api_key.get_secret_value()
    with target_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False, allow_unicode=True)
    return target_path


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from ``path`` (default :func:`config_path`) plus the environment.

    A missing file yields environment-only settings.
    """

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        return Settings.from_env()
    try:
        with source_path.open("r", encoding="utf-8") as handle:
            raw = yaml.safe_load(handle) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Could not parse {source_path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{source_path} must contain a mapping of settings")
    try:
        return Settings(**raw)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid settings in {source_path}: {exc}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
