# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class BackendErrorKind(Enum):
    """Conditions a backend must report distinguishably."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"


class BackendError(Exception):
    """
    Raised by backends for not-found / already-exists conditions.

    Callers match on `kind`; every other backend failure surfaces as its
    native exception type.
    """

    def __init__(self, kind: BackendErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class NativeCollisionOption(Enum):
    """Collision behaviour as understood at the backend boundary."""

    GENERATE_UNIQUE_NAME = 0
    REPLACE_EXISTING = 1
    FAIL_IF_EXISTS = 2
    OPEN_IF_EXISTS = 3


@dataclass(frozen=True)
class NativeEntry:
    """Backend reference to a single file or folder."""

    name: str
    path: str
    is_folder: bool


class StorageBackendPort(ABC):
    """Abstract interface for a native storage backend."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name of the backend (used in configuration)."""
        raise NotImplementedError

    @abstractmethod
    def open_root(self, path: str) -> NativeEntry:
        """Return the entry for a well-known root folder, provisioning it if needed."""
        raise NotImplementedError

    @abstractmethod
    async def get_folder_from_path(self, path: str) -> NativeEntry:
        """Resolve a folder by absolute path. NOT_FOUND if missing or not a folder."""
        raise NotImplementedError

    @abstractmethod
    async def get_file_from_path(self, path: str) -> NativeEntry:
        """Resolve a file by absolute path. NOT_FOUND if missing or not a file."""
        raise NotImplementedError

    @abstractmethod
    async def create_file(
        self, folder: NativeEntry, name: str, option: NativeCollisionOption
    ) -> NativeEntry:
        raise NotImplementedError

    @abstractmethod
    async def create_folder(
        self, folder: NativeEntry, name: str, option: NativeCollisionOption
    ) -> NativeEntry:
        raise NotImplementedError

    @abstractmethod
    async def get_file(self, folder: NativeEntry, name: str) -> NativeEntry:
        raise NotImplementedError

    @abstractmethod
    async def get_folder(self, folder: NativeEntry, name: str) -> NativeEntry:
        raise NotImplementedError

    @abstractmethod
    async def list_files(self, folder: NativeEntry) -> list[NativeEntry]:
        raise NotImplementedError

    @abstractmethod
    async def list_folders(self, folder: NativeEntry) -> list[NativeEntry]:
        raise NotImplementedError

    @abstractmethod
    async def delete_folder(self, folder: NativeEntry) -> None:
        """Remove a folder and everything below it."""
        raise NotImplementedError

    @abstractmethod
    async def delete_file(self, file: NativeEntry) -> None:
        raise NotImplementedError

    @abstractmethod
    async def read_bytes(self, file: NativeEntry) -> bytes:
        raise NotImplementedError

    @abstractmethod
    async def write_bytes(self, file: NativeEntry, data: bytes) -> None:
        """Replace the whole content of an existing file."""
        raise NotImplementedError

    @abstractmethod
    async def rename_file(
        self, file: NativeEntry, new_name: str, option: NativeCollisionOption
    ) -> NativeEntry:
        raise NotImplementedError

    @abstractmethod
    async def move_file(
        self, file: NativeEntry, new_path: str, option: NativeCollisionOption
    ) -> NativeEntry:
        """Move to an absolute path whose parent folder must already exist."""
        raise NotImplementedError
