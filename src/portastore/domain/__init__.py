from .errors import (
    ConfigurationError,
    DirectoryNotFoundError,
    FileNotFoundInStorageError,
    InvalidCollisionOptionError,
    PortaStoreError,
    StorageConflictError,
    StorageNotFoundError,
)
from .options import (
    CreationCollisionOption,
    ExistenceCheckResult,
    NameCollisionOption,
    RootCategory,
)

__all__ = [
    "ConfigurationError",
    "CreationCollisionOption",
    "DirectoryNotFoundError",
    "ExistenceCheckResult",
    "FileNotFoundInStorageError",
    "InvalidCollisionOptionError",
    "NameCollisionOption",
    "PortaStoreError",
    "RootCategory",
    "StorageConflictError",
    "StorageNotFoundError",
]
