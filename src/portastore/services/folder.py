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

import logging
from typing import Optional

from ..domain.errors import (
    DirectoryNotFoundError,
    FileNotFoundInStorageError,
    StorageConflictError,
)
from ..domain.options import CreationCollisionOption, ExistenceCheckResult, RootCategory
from ..ports.backend import (
    BackendError,
    BackendErrorKind,
    NativeEntry,
    StorageBackendPort,
)
from .collision import map_creation_option
from .file import File
from .translation import translate

logger = logging.getLogger(__name__)

NOT_FOUND = BackendErrorKind.NOT_FOUND
ALREADY_EXISTS = BackendErrorKind.ALREADY_EXISTS


class Folder:
    """
    Handle to a folder in a storage backend.

    Every operation first re-resolves the folder's own path (the existence
    check) and fails with DirectoryNotFoundError if the folder has gone away.
    Root-flagged folders (the well-known roots handed out by FileSystem)
    refuse to be deleted.
    """

    def __init__(
        self,
        backend: StorageBackendPort,
        entry: NativeEntry,
        *,
        is_root: bool = False,
        category: Optional[RootCategory] = None,
    ) -> None:
        self._backend = backend
        self._entry = entry
        self._is_root = bool(is_root)
        self._category = category

    @property
    def name(self) -> str:
        return self._entry.name

    @property
    def path(self) -> str:
        return self._entry.path

    @property
    def is_root(self) -> bool:
        return self._is_root

    @property
    def category(self) -> Optional[RootCategory]:
        return self._category

    def __repr__(self) -> str:
        return f"Folder(name={self.name!r})"

    def _child_file(self, entry: NativeEntry) -> File:
        return File(self._backend, entry, category=self._category)

    def _child_folder(self, entry: NativeEntry) -> Folder:
        return Folder(self._backend, entry, is_root=False, category=self._category)

    async def _ensure_exists(self) -> None:
        with translate(NOT_FOUND, DirectoryNotFoundError):
            await self._backend.get_folder_from_path(self.path)

    # --- files --------------------------------------------------------------

    async def create_file(
        self, desired_name: str, option: CreationCollisionOption
    ) -> File:
        native = map_creation_option(option)
        await self._ensure_exists()
        logger.debug("Folder.create_file: %s in %s (%s)", desired_name, self.path, native.name)
        with translate(ALREADY_EXISTS, StorageConflictError):
            with translate(NOT_FOUND, DirectoryNotFoundError):
                entry = await self._backend.create_file(self._entry, desired_name, native)
        return self._child_file(entry)

    async def get_file(self, name: str) -> File:
        await self._ensure_exists()
        with translate(NOT_FOUND, FileNotFoundInStorageError):
            entry = await self._backend.get_file(self._entry, name)
        return self._child_file(entry)

    async def list_files(self) -> list[File]:
        await self._ensure_exists()
        with translate(NOT_FOUND, DirectoryNotFoundError):
            entries = await self._backend.list_files(self._entry)
        return [self._child_file(e) for e in entries]

    # --- folders ------------------------------------------------------------

    async def create_folder(
        self, desired_name: str, option: CreationCollisionOption
    ) -> Folder:
        native = map_creation_option(option)
        await self._ensure_exists()
        logger.debug("Folder.create_folder: %s in %s (%s)", desired_name, self.path, native.name)
        with translate(ALREADY_EXISTS, StorageConflictError):
            with translate(NOT_FOUND, DirectoryNotFoundError):
                entry = await self._backend.create_folder(self._entry, desired_name, native)
        return self._child_folder(entry)

    async def get_folder(self, name: str) -> Folder:
        await self._ensure_exists()
        with translate(NOT_FOUND, DirectoryNotFoundError):
            entry = await self._backend.get_folder(self._entry, name)
        return self._child_folder(entry)

    async def list_folders(self) -> list[Folder]:
        await self._ensure_exists()
        with translate(NOT_FOUND, DirectoryNotFoundError):
            entries = await self._backend.list_folders(self._entry)
        return [self._child_folder(e) for e in entries]

    async def check_exists(self, name: str) -> ExistenceCheckResult:
        """Report whether `name` is a file, a folder, or absent in this folder."""
        await self._ensure_exists()
        for lookup, found in (
            (self._backend.get_file, ExistenceCheckResult.FILE_EXISTS),
            (self._backend.get_folder, ExistenceCheckResult.FOLDER_EXISTS),
        ):
            try:
                await lookup(self._entry, name)
            except BackendError as e:
                if e.kind is not NOT_FOUND:
                    raise
                continue
            return found
        return ExistenceCheckResult.NOT_FOUND

    # --- lifecycle ----------------------------------------------------------

    async def delete(self) -> None:
        """
        Delete the folder and everything below it.

        Raises:
            StorageConflictError: the folder is a storage root; the backend is not contacted.
            DirectoryNotFoundError: the folder no longer exists.
        """
        if self._is_root:
            raise StorageConflictError("Cannot delete root storage folder.")
        await self._ensure_exists()
        logger.debug("Folder.delete: %s", self.path)
        with translate(NOT_FOUND, DirectoryNotFoundError):
            await self._backend.delete_folder(self._entry)
