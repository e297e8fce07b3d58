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
from ..domain.options import NameCollisionOption, RootCategory
from ..ports.backend import (
    BackendError,
    BackendErrorKind,
    NativeEntry,
    StorageBackendPort,
)
from .collision import map_name_option
from .translation import translate

logger = logging.getLogger(__name__)

NOT_FOUND = BackendErrorKind.NOT_FOUND
ALREADY_EXISTS = BackendErrorKind.ALREADY_EXISTS


class File:
    """
    Handle to a single file in a storage backend.

    The handle is not durable: every operation first re-resolves the file's
    path and fails with FileNotFoundInStorageError if it has gone away.
    """

    def __init__(
        self,
        backend: StorageBackendPort,
        entry: NativeEntry,
        *,
        category: Optional[RootCategory] = None,
    ) -> None:
        self._backend = backend
        self._entry = entry
        self._category = category

    @property
    def name(self) -> str:
        return self._entry.name

    @property
    def path(self) -> str:
        return self._entry.path

    @property
    def category(self) -> Optional[RootCategory]:
        return self._category

    def __repr__(self) -> str:
        return f"File(name={self.name!r})"

    def _wrap(self, entry: NativeEntry) -> File:
        return File(self._backend, entry, category=self._category)

    async def _ensure_exists(self) -> None:
        with translate(NOT_FOUND, FileNotFoundInStorageError):
            await self._backend.get_file_from_path(self.path)

    async def read_bytes(self) -> bytes:
        await self._ensure_exists()
        with translate(NOT_FOUND, FileNotFoundInStorageError):
            return await self._backend.read_bytes(self._entry)

    async def read_text(self, encoding: str = "utf-8") -> str:
        data = await self.read_bytes()
        return data.decode(encoding)

    async def write_bytes(self, data: bytes) -> None:
        """Replace the whole content of the file."""
        await self._ensure_exists()
        logger.debug("File.write_bytes: %s (%d bytes)", self.path, len(data))
        with translate(NOT_FOUND, FileNotFoundInStorageError):
            await self._backend.write_bytes(self._entry, data)

    async def write_text(self, text: str, encoding: str = "utf-8") -> None:
        await self.write_bytes(text.encode(encoding))

    async def delete(self) -> None:
        await self._ensure_exists()
        logger.debug("File.delete: %s", self.path)
        with translate(NOT_FOUND, FileNotFoundInStorageError):
            await self._backend.delete_file(self._entry)

    async def rename(
        self,
        new_name: str,
        option: NameCollisionOption = NameCollisionOption.FAIL_IF_EXISTS,
    ) -> File:
        """
        Rename the file inside its current folder.

        Returns a handle to the renamed file; this handle keeps pointing at
        the old path.
        """
        native = map_name_option(option)
        await self._ensure_exists()
        logger.debug("File.rename: %s -> %s", self.path, new_name)
        with translate(ALREADY_EXISTS, StorageConflictError):
            with translate(NOT_FOUND, FileNotFoundInStorageError):
                entry = await self._backend.rename_file(self._entry, new_name, native)
        return self._wrap(entry)

    async def move(
        self,
        new_path: str,
        option: NameCollisionOption = NameCollisionOption.REPLACE_EXISTING,
    ) -> File:
        """
        Move the file to `new_path` (a full backend path).

        Raises:
            FileNotFoundInStorageError: the file itself no longer exists.
            DirectoryNotFoundError: the destination folder does not exist.
            StorageConflictError: the destination is taken and `option` forbids replacing it.
        """
        native = map_name_option(option)
        await self._ensure_exists()
        logger.debug("File.move: %s -> %s", self.path, new_path)
        with translate(ALREADY_EXISTS, StorageConflictError):
            try:
                entry = await self._backend.move_file(self._entry, new_path, native)
            except BackendError as e:
                if e.kind is not NOT_FOUND:
                    raise
                # a vanished source is reported before a missing destination
                await self._ensure_exists()
                raise DirectoryNotFoundError(str(e)) from e
        return File(self._backend, entry)
