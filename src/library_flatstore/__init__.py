"""
Library Flat-File Store Package.

A small persistence layer for library records. Entities validate
themselves on construction and assignment, and each entity kind is kept
in its own delimited text file.

Key Components:
- models: Self-validating pydantic entities
- codec: Delimited row encoding with quote escaping
- storage: Whole-file record stores with foreign-key resolution
- config: Settings with pydantic-settings
- errors: Exception hierarchy shared by models and stores
"""

__version__ = "0.1.0"

from .config import StoreConfig, configure_logging, get_config, reset_config
from .errors import (
    CorruptStoreError,
    DuplicateKeyError,
    EntityValidationError,
    MalformedRecordError,
    NotFoundError,
    RecordStoreError,
    ReferenceNotFoundError,
)

__all__ = [
    "CorruptStoreError",
    "DuplicateKeyError",
    "EntityValidationError",
    "MalformedRecordError",
    "NotFoundError",
    "RecordStoreError",
    "ReferenceNotFoundError",
    "StoreConfig",
    "__version__",
    "configure_logging",
    "get_config",
    "reset_config",
]
