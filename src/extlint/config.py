"""Environment-based configuration for the lint tasks."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Reads from .env file and ``EXTLINT_*`` environment variables."""

    # Source layout
    src_dir: Path = Path("src")
    connectors_dir: str = "connectors"
    connectors_file: str = "connectors.json"
    manifest_file: str = "manifest.json"

    # Files considered by the unused-file check
    include_patterns: Annotated[list[str], NoDecode] = ["*.js"]

    # Logging
    log_level: str = "INFO"

    @field_validator("include_patterns", mode="before")
    @classmethod
    def _parse_patterns(cls, v: Any) -> Any:
        """Accept comma-separated string or JSON array."""
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("include_patterns")
    @classmethod
    def _validate_patterns(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError(
                "include_patterns must contain at least one pattern"
            )
        if len(set(v)) != len(v):
            logger.warning(
                "Duplicate patterns in EXTLINT_INCLUDE_PATTERNS: %s",
                ", ".join(v),
            )
        return v

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"Unknown log level: {v}. "
                f"Supported levels: {', '.join(_LOG_LEVELS)}"
            )
        return level

    @property
    def connectors_path(self) -> Path:
        """Directory holding the connector scripts."""
        return self.src_dir / self.connectors_dir

    @property
    def connectors_registry_path(self) -> Path:
        return self.src_dir / self.connectors_file

    @property
    def manifest_path(self) -> Path:
        return self.src_dir / self.manifest_file

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "EXTLINT_",
        "extra": "ignore",
    }
