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

import asyncio
import logging
import os
import shutil
from contextlib import contextmanager
from typing import Iterator

import aiofiles
import aiofiles.os

from ...ports.backend import (
    BackendError,
    BackendErrorKind,
    NativeCollisionOption,
    NativeEntry,
    StorageBackendPort,
)
from ..naming import unique_candidates, validate_name

logger = logging.getLogger(__name__)

_SEPARATORS = "/\\" if os.sep == "\\" else "/"


def _entry(path: str, is_folder: bool) -> NativeEntry:
    return NativeEntry(name=os.path.basename(path), path=path, is_folder=is_folder)


@contextmanager
def _native_errors(path: str) -> Iterator[None]:
    """
    Map the OS's not-found / already-exists signals onto BackendError kinds.

    Permission problems and other OSErrors propagate as they are.
    """
    try:
        yield
    except (FileNotFoundError, NotADirectoryError) as e:
        raise BackendError(BackendErrorKind.NOT_FOUND, f"{e.strerror}: {path}") from e
    except FileExistsError as e:
        raise BackendError(BackendErrorKind.ALREADY_EXISTS, f"{e.strerror}: {path}") from e


class DiskBackend(StorageBackendPort):
    """
    Host filesystem backend. Paths are absolute host paths.

    File and directory I/O goes through aiofiles; recursive removal runs on
    the default executor since aiofiles has no rmtree.
    """

    @property
    def name(self) -> str:
        return "disk"

    # --- helpers ------------------------------------------------------------

    async def _rmtree(self, path: str) -> None:
        loop = asyncio.get_running_loop()
        with _native_errors(path):
            await loop.run_in_executor(None, shutil.rmtree, path)

    async def _free_name(self, parent: str, name: str) -> str:
        candidates = unique_candidates(name)
        while True:
            candidate = next(candidates)
            if not await aiofiles.os.path.exists(os.path.join(parent, candidate)):
                return candidate

    async def _list(self, folder: NativeEntry, want_folders: bool) -> list[NativeEntry]:
        with _native_errors(folder.path):
            names = await aiofiles.os.listdir(folder.path)
        out: list[NativeEntry] = []
        for n in names:
            p = os.path.join(folder.path, n)
            if want_folders and await aiofiles.os.path.isdir(p):
                out.append(_entry(p, True))
            elif not want_folders and await aiofiles.os.path.isfile(p):
                out.append(_entry(p, False))
        return out

    async def _create(
        self, folder: NativeEntry, name: str, option: NativeCollisionOption, is_folder: bool
    ) -> NativeEntry:
        validate_name(name, _SEPARATORS)
        if not await aiofiles.os.path.isdir(folder.path):
            raise BackendError(
                BackendErrorKind.NOT_FOUND, f"No such directory: {folder.path}"
            )
        target = os.path.join(folder.path, name)

        if await aiofiles.os.path.exists(target):
            existing_is_folder = await aiofiles.os.path.isdir(target)
            if option is NativeCollisionOption.GENERATE_UNIQUE_NAME:
                target = os.path.join(folder.path, await self._free_name(folder.path, name))
            elif option is NativeCollisionOption.FAIL_IF_EXISTS or existing_is_folder != is_folder:
                raise BackendError(
                    BackendErrorKind.ALREADY_EXISTS,
                    f"Cannot create a file when that file already exists: {target}",
                )
            elif option is NativeCollisionOption.OPEN_IF_EXISTS:
                return _entry(target, is_folder)
            elif is_folder:
                logger.debug("DiskBackend: replacing folder %s", target)
                await self._rmtree(target)
            else:
                logger.debug("DiskBackend: truncating %s", target)
                async with aiofiles.open(target, "wb"):
                    pass
                return _entry(target, False)

        with _native_errors(target):
            if is_folder:
                await aiofiles.os.mkdir(target)
            else:
                async with aiofiles.open(target, "xb"):
                    pass
        return _entry(target, is_folder)

    async def _relocate(
        self, file: NativeEntry, target: str, option: NativeCollisionOption
    ) -> NativeEntry:
        parent = os.path.dirname(target)
        if not await aiofiles.os.path.isdir(parent):
            raise BackendError(BackendErrorKind.NOT_FOUND, f"No such directory: {parent}")
        if os.path.normcase(target) == os.path.normcase(file.path):
            return _entry(target, False)

        if await aiofiles.os.path.exists(target):
            if option is NativeCollisionOption.GENERATE_UNIQUE_NAME:
                target = os.path.join(
                    parent, await self._free_name(parent, os.path.basename(target))
                )
            elif (
                option is not NativeCollisionOption.REPLACE_EXISTING
                or await aiofiles.os.path.isdir(target)
            ):
                raise BackendError(
                    BackendErrorKind.ALREADY_EXISTS,
                    f"Cannot create a file when that file already exists: {target}",
                )

        with _native_errors(file.path):
            await aiofiles.os.replace(file.path, target)
        return _entry(target, False)

    # --- port ---------------------------------------------------------------

    def open_root(self, path: str) -> NativeEntry:
        full = os.path.abspath(path)
        os.makedirs(full, exist_ok=True)
        return _entry(full, True)

    async def get_folder_from_path(self, path: str) -> NativeEntry:
        full = os.path.abspath(path)
        if not await aiofiles.os.path.isdir(full):
            raise BackendError(BackendErrorKind.NOT_FOUND, f"No such directory: {path}")
        return _entry(full, True)

    async def get_file_from_path(self, path: str) -> NativeEntry:
        full = os.path.abspath(path)
        if not await aiofiles.os.path.isfile(full):
            raise BackendError(BackendErrorKind.NOT_FOUND, f"No such file: {path}")
        return _entry(full, False)

    async def create_file(
        self, folder: NativeEntry, name: str, option: NativeCollisionOption
    ) -> NativeEntry:
        return await self._create(folder, name, option, is_folder=False)

    async def create_folder(
        self, folder: NativeEntry, name: str, option: NativeCollisionOption
    ) -> NativeEntry:
        return await self._create(folder, name, option, is_folder=True)

    async def get_file(self, folder: NativeEntry, name: str) -> NativeEntry:
        validate_name(name, _SEPARATORS)
        return await self.get_file_from_path(os.path.join(folder.path, name))

    async def get_folder(self, folder: NativeEntry, name: str) -> NativeEntry:
        validate_name(name, _SEPARATORS)
        return await self.get_folder_from_path(os.path.join(folder.path, name))

    async def list_files(self, folder: NativeEntry) -> list[NativeEntry]:
        return await self._list(folder, want_folders=False)

    async def list_folders(self, folder: NativeEntry) -> list[NativeEntry]:
        return await self._list(folder, want_folders=True)

    async def delete_folder(self, folder: NativeEntry) -> None:
        await self._rmtree(folder.path)

    async def delete_file(self, file: NativeEntry) -> None:
        with _native_errors(file.path):
            await aiofiles.os.remove(file.path)

    async def read_bytes(self, file: NativeEntry) -> bytes:
        with _native_errors(file.path):
            async with aiofiles.open(file.path, "rb") as f:
                data: bytes = await f.read()
        return data

    async def write_bytes(self, file: NativeEntry, data: bytes) -> None:
        if not await aiofiles.os.path.isfile(file.path):
            raise BackendError(BackendErrorKind.NOT_FOUND, f"No such file: {file.path}")
        with _native_errors(file.path):
            async with aiofiles.open(file.path, "wb") as f:
                await f.write(data)

    async def rename_file(
        self, file: NativeEntry, new_name: str, option: NativeCollisionOption
    ) -> NativeEntry:
        validate_name(new_name, _SEPARATORS)
        target = os.path.join(os.path.dirname(file.path), new_name)
        return await self._relocate(file, target, option)

    async def move_file(
        self, file: NativeEntry, new_path: str, option: NativeCollisionOption
    ) -> NativeEntry:
        return await self._relocate(file, os.path.abspath(new_path), option)
