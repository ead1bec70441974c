"""Configuration management for the library flat-file store.

Settings are read from ``LIBRARY_STORE_*`` environment variables or a
``.env`` file and validated with pydantic-settings:
1. Storage layout - data directory and one file name per entity kind
2. Validation knobs - bounds that entity rules read at validation time
3. Logging - level used by ``configure_logging``
"""

import logging
import sys
from pathlib import Path

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreConfig(BaseSettings):
    """Settings shared by the entities and the record stores."""

    model_config = SettingsConfigDict(
        env_prefix="LIBRARY_STORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Storage Layout ===

    data_dir: Path = Field(
        default=Path("data"),
        description="Directory holding one delimited file per entity kind",
    )

    authors_file: str = Field(default="authors.csv", description="Author records")
    books_file: str = Field(default="books.csv", description="Book records")
    clients_file: str = Field(default="clients.csv", description="Client records")
    employees_file: str = Field(default="employees.csv", description="Employee records")
    loans_file: str = Field(default="loans.csv", description="Loan records")

    file_encoding: str = Field(
        default="utf-8",
        description="Text encoding of the backing files",
    )

    # === Validation Rules ===

    employee_min_age: int = Field(
        default=18,
        description="Youngest allowed employee age (inclusive)",
        ge=0,
    )

    employee_max_age: int = Field(
        default=65,
        description="Oldest allowed employee age (inclusive)",
        ge=0,
    )

    # === Logging ===

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    @field_validator("authors_file", "books_file", "clients_file", "employees_file", "loans_file")
    @classmethod
    def validate_file_name(cls, v: str) -> str:
        """File names are resolved under ``data_dir`` and must not escape it."""
        if not v or Path(v).name != v:
            raise ValueError(f"{v!r} must be a bare file name")
        return v

    @model_validator(mode="after")
    def validate_age_bounds(self) -> "StoreConfig":
        if self.employee_min_age > self.employee_max_age:
            raise ValueError("employee_min_age cannot exceed employee_max_age")
        return self

    def file_path(self, kind: str) -> Path:
        """Backing file for an entity kind (``authors``, ``books``, ...)."""
        try:
            file_name = getattr(self, f"{kind}_file")
        except AttributeError:
            raise ValueError(f"Unknown entity kind: {kind}") from None
        return self.data_dir / file_name


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: StoreConfig | None = None


def get_config() -> StoreConfig:
    """Get or create the process-wide configuration."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = StoreConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]


def configure_logging(config: StoreConfig | None = None) -> None:
    """Send log records to stderr at the configured level."""
    config = config or get_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
