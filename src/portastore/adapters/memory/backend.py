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
from dataclasses import dataclass, field
from typing import Optional

from ...ports.backend import (
    BackendError,
    BackendErrorKind,
    NativeCollisionOption,
    NativeEntry,
    StorageBackendPort,
)
from ..naming import unique_candidates, validate_name

logger = logging.getLogger(__name__)

SEP = "/"


@dataclass
class _Node:
    name: str
    is_folder: bool
    children: dict[str, _Node] = field(default_factory=dict)
    data: bytes = b""


def _split(path: str) -> list[str]:
    if not path.startswith(SEP):
        raise ValueError(f"Memory backend paths must be absolute: {path!r}")
    return [p for p in path.split(SEP) if p]


def _join(parent: str, name: str) -> str:
    return parent.rstrip(SEP) + SEP + name


def _parent_of(path: str) -> tuple[str, str]:
    parts = _split(path)
    if not parts:
        raise ValueError("The memory root has no parent")
    return SEP + SEP.join(parts[:-1]), parts[-1]


def _not_found(what: str, path: str) -> BackendError:
    return BackendError(
        BackendErrorKind.NOT_FOUND, f"The system cannot find the {what} specified: {path}"
    )


def _exists(path: str) -> BackendError:
    return BackendError(
        BackendErrorKind.ALREADY_EXISTS,
        f"Cannot create a file when that file already exists: {path}",
    )


class MemoryBackend(StorageBackendPort):
    """
    Process-local storage tree with POSIX-style absolute paths ("/local/a.txt").

    Contents live only as long as the backend instance; useful for hosts
    without a writable disk and for tests.
    """

    def __init__(self) -> None:
        self._root = _Node(name="", is_folder=True)

    @property
    def name(self) -> str:
        return "memory"

    # --- helpers ------------------------------------------------------------

    def _lookup(self, path: str) -> Optional[_Node]:
        node = self._root
        for part in _split(path):
            if not node.is_folder:
                return None
            nxt = node.children.get(part)
            if nxt is None:
                return None
            node = nxt
        return node

    def _folder_node(self, path: str) -> _Node:
        node = self._lookup(path)
        if node is None or not node.is_folder:
            raise _not_found("path", path)
        return node

    def _file_node(self, path: str) -> _Node:
        node = self._lookup(path)
        if node is None or node.is_folder:
            raise _not_found("file", path)
        return node

    @staticmethod
    def _entry(path: str, node: _Node) -> NativeEntry:
        return NativeEntry(name=node.name, path=path, is_folder=node.is_folder)

    def _create(
        self, folder: NativeEntry, name: str, option: NativeCollisionOption, is_folder: bool
    ) -> NativeEntry:
        validate_name(name)
        parent = self._folder_node(folder.path)
        existing = parent.children.get(name)
        if existing is not None:
            if option is NativeCollisionOption.GENERATE_UNIQUE_NAME:
                name = next(c for c in unique_candidates(name) if c not in parent.children)
            elif option is NativeCollisionOption.FAIL_IF_EXISTS or existing.is_folder != is_folder:
                raise _exists(_join(folder.path, name))
            elif option is NativeCollisionOption.OPEN_IF_EXISTS:
                return self._entry(_join(folder.path, name), existing)
            else:
                # REPLACE_EXISTING: fall through and overwrite with a fresh node
                logger.debug("MemoryBackend: replacing %s", _join(folder.path, name))
        node = _Node(name=name, is_folder=is_folder)
        parent.children[name] = node
        return self._entry(_join(folder.path, name), node)

    def _relocate(
        self, file: NativeEntry, new_path: str, option: NativeCollisionOption
    ) -> NativeEntry:
        src_parent_path, src_name = _parent_of(file.path)
        src_parent = self._folder_node(src_parent_path)
        node = self._file_node(file.path)

        dst_parent_path, dst_name = _parent_of(new_path)
        validate_name(dst_name)
        dst_parent = self._folder_node(dst_parent_path)
        dst_path = _join(dst_parent_path, dst_name)
        if dst_path == file.path:
            return self._entry(dst_path, node)

        existing = dst_parent.children.get(dst_name)
        if existing is not None:
            if option is NativeCollisionOption.GENERATE_UNIQUE_NAME:
                dst_name = next(
                    c for c in unique_candidates(dst_name) if c not in dst_parent.children
                )
                dst_path = _join(dst_parent_path, dst_name)
            elif option is not NativeCollisionOption.REPLACE_EXISTING or existing.is_folder:
                raise _exists(dst_path)

        del src_parent.children[src_name]
        node.name = dst_name
        dst_parent.children[dst_name] = node
        return self._entry(dst_path, node)

    # --- port ---------------------------------------------------------------

    def open_root(self, path: str) -> NativeEntry:
        node = self._root
        for part in _split(path):
            child = node.children.get(part)
            if child is None:
                child = _Node(name=part, is_folder=True)
                node.children[part] = child
            elif not child.is_folder:
                raise NotADirectoryError(path)
            node = child
        return self._entry(path, node)

    async def get_folder_from_path(self, path: str) -> NativeEntry:
        return self._entry(path, self._folder_node(path))

    async def get_file_from_path(self, path: str) -> NativeEntry:
        return self._entry(path, self._file_node(path))

    async def create_file(
        self, folder: NativeEntry, name: str, option: NativeCollisionOption
    ) -> NativeEntry:
        return self._create(folder, name, option, is_folder=False)

    async def create_folder(
        self, folder: NativeEntry, name: str, option: NativeCollisionOption
    ) -> NativeEntry:
        return self._create(folder, name, option, is_folder=True)

    async def get_file(self, folder: NativeEntry, name: str) -> NativeEntry:
        validate_name(name)
        path = _join(folder.path, name)
        node = self._folder_node(folder.path).children.get(name)
        if node is None or node.is_folder:
            raise _not_found("file", path)
        return self._entry(path, node)

    async def get_folder(self, folder: NativeEntry, name: str) -> NativeEntry:
        validate_name(name)
        path = _join(folder.path, name)
        node = self._folder_node(folder.path).children.get(name)
        if node is None or not node.is_folder:
            raise _not_found("path", path)
        return self._entry(path, node)

    async def list_files(self, folder: NativeEntry) -> list[NativeEntry]:
        parent = self._folder_node(folder.path)
        return [
            self._entry(_join(folder.path, n.name), n)
            for n in parent.children.values()
            if not n.is_folder
        ]

    async def list_folders(self, folder: NativeEntry) -> list[NativeEntry]:
        parent = self._folder_node(folder.path)
        return [
            self._entry(_join(folder.path, n.name), n)
            for n in parent.children.values()
            if n.is_folder
        ]

    async def delete_folder(self, folder: NativeEntry) -> None:
        self._folder_node(folder.path)
        if not _split(folder.path):
            raise PermissionError(f"Cannot delete the memory backend root: {SEP}")
        parent_path, name = _parent_of(folder.path)
        del self._folder_node(parent_path).children[name]

    async def delete_file(self, file: NativeEntry) -> None:
        self._file_node(file.path)
        parent_path, name = _parent_of(file.path)
        del self._folder_node(parent_path).children[name]

    async def read_bytes(self, file: NativeEntry) -> bytes:
        return self._file_node(file.path).data

    async def write_bytes(self, file: NativeEntry, data: bytes) -> None:
        self._file_node(file.path).data = bytes(data)

    async def rename_file(
        self, file: NativeEntry, new_name: str, option: NativeCollisionOption
    ) -> NativeEntry:
        validate_name(new_name)
        parent_path, _ = _parent_of(file.path)
        return self._relocate(file, _join(parent_path, new_name), option)

    async def move_file(
        self, file: NativeEntry, new_path: str, option: NativeCollisionOption
    ) -> NativeEntry:
        return self._relocate(file, new_path, option)
