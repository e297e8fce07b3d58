# tests/integration/test_backend_parity.py
from pathlib import Path

import pytest

from portastore.config import StorageSettings
from portastore.domain import CreationCollisionOption
from portastore.services import FileSystem

FAIL = CreationCollisionOption.FAIL_IF_EXISTS
BAD_NAMES = ["a/b", "", ".."]


def make_fs(kind: str, tmp_path: Path) -> FileSystem:
    if kind == "memory":
        settings = StorageSettings(
            backend="memory", local_root="/local", roaming_root="/roaming"
        )
    else:
        settings = StorageSettings(
            backend="disk",
            local_root=str(tmp_path / "Local"),
            roaming_root=str(tmp_path / "Roaming"),
        )
    return FileSystem.from_settings(settings)


@pytest.mark.asyncio
@pytest.mark.parametrize("kind", ["memory", "disk"])
@pytest.mark.parametrize("name", BAD_NAMES)
@pytest.mark.parametrize("lookup", ["get_file", "get_folder", "check_exists"])
async def test_invalid_lookup_names_are_rejected_by_every_backend(kind, name, lookup, tmp_path: Path):
    root = make_fs(kind, tmp_path).local_storage()
    await root.create_folder("a", FAIL)

    with pytest.raises(ValueError):
        await getattr(root, lookup)(name)
