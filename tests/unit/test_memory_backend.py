# tests/unit/test_memory_backend.py
import pytest

from portastore.adapters.memory.backend import MemoryBackend
from portastore.ports import BackendError, BackendErrorKind, NativeCollisionOption


def test_name():
    assert MemoryBackend().name == "memory"


def test_open_root_creates_intermediate_folders_once():
    b = MemoryBackend()
    first = b.open_root("/a/b/c")
    second = b.open_root("/a/b/c")
    assert first == second
    assert first.is_folder and first.name == "c"


@pytest.mark.asyncio
async def test_open_root_over_a_file_fails():
    b = MemoryBackend()
    root = b.open_root("/r")
    await b.create_file(root, "f", NativeCollisionOption.FAIL_IF_EXISTS)
    with pytest.raises(NotADirectoryError):
        b.open_root("/r/f")


def test_relative_paths_are_rejected():
    with pytest.raises(ValueError):
        MemoryBackend().open_root("relative/path")


@pytest.mark.asyncio
async def test_missing_entries_report_not_found_kind():
    b = MemoryBackend()
    root = b.open_root("/r")
    with pytest.raises(BackendError) as ei:
        await b.get_folder(root, "nope")
    assert ei.value.kind is BackendErrorKind.NOT_FOUND

    with pytest.raises(BackendError) as ei:
        await b.get_file_from_path("/r/nope")
    assert ei.value.kind is BackendErrorKind.NOT_FOUND


@pytest.mark.asyncio
async def test_fail_if_exists_reports_already_exists_kind():
    b = MemoryBackend()
    root = b.open_root("/r")
    await b.create_folder(root, "d", NativeCollisionOption.FAIL_IF_EXISTS)
    with pytest.raises(BackendError) as ei:
        await b.create_folder(root, "d", NativeCollisionOption.FAIL_IF_EXISTS)
    assert ei.value.kind is BackendErrorKind.ALREADY_EXISTS


@pytest.mark.asyncio
async def test_names_with_separators_are_rejected():
    b = MemoryBackend()
    root = b.open_root("/r")
    with pytest.raises(ValueError):
        await b.create_file(root, "a/b", NativeCollisionOption.FAIL_IF_EXISTS)


@pytest.mark.asyncio
async def test_write_to_missing_file_is_not_found():
    b = MemoryBackend()
    root = b.open_root("/r")
    f = await b.create_file(root, "f", NativeCollisionOption.FAIL_IF_EXISTS)
    await b.delete_file(f)
    with pytest.raises(BackendError) as ei:
        await b.write_bytes(f, b"x")
    assert ei.value.kind is BackendErrorKind.NOT_FOUND


@pytest.mark.asyncio
async def test_backend_root_cannot_be_deleted():
    b = MemoryBackend()
    b.open_root("/r")
    top = await b.get_folder_from_path("/")
    with pytest.raises(PermissionError, match="memory backend root"):
        await b.delete_folder(top)
    assert (await b.get_folder_from_path("/r")).is_folder
