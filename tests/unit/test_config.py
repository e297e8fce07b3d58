# tests/unit/test_config.py
import os

import pytest

from portastore.adapters.disk.backend import DiskBackend
from portastore.adapters.memory.backend import MemoryBackend
from portastore.adapters.roots import AppDataRootProvider, StaticRootProvider
from portastore.config import StorageSettings, build_backend, build_root_provider
from portastore.domain import ConfigurationError, RootCategory


def test_from_env_reads_portastore_variables():
    s = StorageSettings.from_env(
        {
            "PORTASTORE_BACKEND": " Memory ",
            "PORTASTORE_APP_NAME": "demo",
            "PORTASTORE_DATA_DIR": "/data",
            "PORTASTORE_LOCAL_ROOT": "",
        }
    )
    assert s.backend == "memory"
    assert s.app_name == "demo"
    assert s.data_dir == "/data"
    assert s.local_root is None
    assert s.roaming_root is None


def test_from_env_defaults():
    s = StorageSettings.from_env({})
    assert s == StorageSettings()
    assert s.backend == "disk"


def test_with_overrides_skips_none():
    s = StorageSettings(backend="memory").with_overrides(backend=None, local_root="/l")
    assert s.backend == "memory"
    assert s.local_root == "/l"


def test_build_backend_variants():
    assert isinstance(build_backend(StorageSettings(backend="disk")), DiskBackend)
    assert isinstance(build_backend(StorageSettings(backend="memory")), MemoryBackend)
    with pytest.raises(ConfigurationError, match="Unknown backend"):
        build_backend(StorageSettings(backend="ftp"))


def test_explicit_roots_win():
    provider = build_root_provider(StorageSettings(local_root="/l", roaming_root="/r"))
    assert isinstance(provider, StaticRootProvider)
    assert provider.root_path(RootCategory.LOCAL) == "/l"
    assert provider.root_path(RootCategory.ROAMING) == "/r"


def test_half_configured_roots_are_an_error():
    with pytest.raises(ConfigurationError):
        build_root_provider(StorageSettings(local_root="/l"))


def test_app_data_layout():
    provider = build_root_provider(
        StorageSettings(backend="memory", app_name="demo", data_dir="/data/")
    )
    assert isinstance(provider, AppDataRootProvider)
    assert provider.root_path(RootCategory.LOCAL) == "/data/demo/Local"
    assert provider.root_path(RootCategory.ROAMING) == "/data/demo/Roaming"


def test_disk_app_data_uses_os_separator(tmp_path):
    provider = build_root_provider(StorageSettings(data_dir=str(tmp_path), app_name="demo"))
    assert provider.root_path(RootCategory.LOCAL) == os.path.join(str(tmp_path), "demo", "Local")


def test_static_provider_requires_both_roots():
    with pytest.raises(ConfigurationError, match="roaming"):
        StaticRootProvider({RootCategory.LOCAL: "/l"})


def test_app_data_provider_requires_app_name():
    with pytest.raises(ConfigurationError):
        AppDataRootProvider("/data", "")
