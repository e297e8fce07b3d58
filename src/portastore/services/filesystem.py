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
from typing import TYPE_CHECKING, Optional

from ..domain.options import RootCategory
from ..ports.backend import BackendError, BackendErrorKind, StorageBackendPort
from ..ports.roots import RootProviderPort
from .file import File
from .folder import Folder

if TYPE_CHECKING:
    from ..config import StorageSettings

logger = logging.getLogger(__name__)


class FileSystem:
    """
    Entry point to a storage backend:
      - hands out the two well-known root folders (local, roaming)
      - resolves files/folders by backend path, returning None when absent

    Both collaborators are explicit; there is no process-wide default.
    """

    def __init__(self, backend: StorageBackendPort, roots: RootProviderPort) -> None:
        self._backend = backend
        self._roots = roots

    @classmethod
    def from_settings(cls, settings: StorageSettings) -> FileSystem:
        """Composition root: build the configured backend and root provider."""
        from ..config import build_backend, build_root_provider

        return cls(build_backend(settings), build_root_provider(settings))

    @property
    def backend(self) -> StorageBackendPort:
        return self._backend

    def _root(self, category: RootCategory) -> Folder:
        path = self._roots.root_path(category)
        entry = self._backend.open_root(path)
        logger.debug("FileSystem root %s -> %s", category.value, entry.path)
        return Folder(self._backend, entry, is_root=True, category=category)

    def local_storage(self) -> Folder:
        """Folder for storage local to the current device."""
        return self._root(RootCategory.LOCAL)

    def roaming_storage(self) -> Folder:
        """Folder for storage that may be synced with other devices for the same user."""
        return self._root(RootCategory.ROAMING)

    async def file_from_path(self, path: str) -> Optional[File]:
        """Return a File for `path`, or None if no file exists there."""
        try:
            entry = await self._backend.get_file_from_path(path)
        except BackendError as e:
            if e.kind is not BackendErrorKind.NOT_FOUND:
                raise
            return None
        return File(self._backend, entry)

    async def folder_from_path(self, path: str) -> Optional[Folder]:
        """Return a Folder for `path`, or None if no folder exists there."""
        try:
            entry = await self._backend.get_folder_from_path(path)
        except BackendError as e:
            if e.kind is not BackendErrorKind.NOT_FOUND:
                raise
            return None
        return Folder(self._backend, entry)
