from .backend import (
    BackendError,
    BackendErrorKind,
    NativeCollisionOption,
    NativeEntry,
    StorageBackendPort,
)
from .roots import RootProviderPort

__all__ = [
    "BackendError",
    "BackendErrorKind",
    "NativeCollisionOption",
    "NativeEntry",
    "RootProviderPort",
    "StorageBackendPort",
]
