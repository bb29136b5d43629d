"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. YAML config file (if loaded with ``Settings.from_yaml``)
  2. Environment variables (SEARCHLINK_ prefix) and ``.env``
  3. Default values
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class BackendSettings(BaseModel):
    """Search backend connection configuration."""

    root: str = Field(default="http://localhost:9200", description="Backend root URL")
    index: str = Field(default="objects", description="Index holding the domain object documents")
    username: str | None = Field(default=None, description="HTTP basic-auth username")
    password: str | None = Field(default=None, description="HTTP basic-auth password")
    request_timeout: float = Field(default=30.0, gt=0, description="HTTP client timeout in seconds")


class SearchSettings(BaseModel):
    """Query construction configuration."""

    default_max_results: int = Field(default=100, gt=0, description="Result cap when none is given")
    default_field: str = Field(default="name", description="Field searched when no selector is given")
    selector_fields: list[str] = Field(
        default_factory=lambda: ["name", "type"],
        description="Fields whose 'field:' selector disables default formatting",
    )
    edit_distance: int | None = Field(default=None, ge=0, le=2, description="Fuzziness edit distance")
    default_timeout_millis: int | None = Field(default=None, gt=0, description="Advisory backend timeout")

    @field_validator("selector_fields", mode="before")
    @classmethod
    def _parse_selector_fields(cls, v: Any) -> list[str]:
        """Parse selector fields from JSON string (env var), comma list or list."""
        if isinstance(v, str):
            import json

            try:
                parsed = json.loads(v)
                if isinstance(parsed, list):
                    return [str(f) for f in parsed]
            except (json.JSONDecodeError, TypeError):
                pass
            return [f.strip() for f in v.split(",") if f.strip()]
        return list(v)


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root application settings.

    Configuration is loaded from environment variables with the SEARCHLINK_ prefix.
    Nested settings use double underscores: SEARCHLINK_BACKEND__ROOT=http://es:9200

    Example:
        SEARCHLINK_BACKEND__INDEX=objects
        SEARCHLINK_SEARCH__EDIT_DISTANCE=1
        SEARCHLINK_OBSERVABILITY__LOG_FORMAT=console
    """

    model_config = {
        "env_prefix": "SEARCHLINK_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    backend: BackendSettings = Field(default_factory=BackendSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Values from the YAML file are passed as init arguments and take
        precedence over environment variables.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
