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

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Mapping, Optional

from .adapters.disk.backend import DiskBackend
from .adapters.memory.backend import MemoryBackend
from .adapters.roots import AppDataRootProvider, StaticRootProvider
from .domain.errors import ConfigurationError
from .domain.options import RootCategory
from .ports.backend import StorageBackendPort
from .ports.roots import RootProviderPort

BACKENDS: set[str] = {"disk", "memory"}


@dataclass(frozen=True)
class StorageSettings:
    """
    Which backend to use and where the well-known roots live.

    If both `local_root` and `roaming_root` are set they are used verbatim;
    otherwise the roots are `<data_dir>/<app_name>/Local|Roaming`.
    """

    backend: str = "disk"
    app_name: str = "portastore"
    data_dir: Optional[str] = None
    local_root: Optional[str] = None
    roaming_root: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> StorageSettings:
        env = os.environ if environ is None else environ
        return cls(
            backend=env.get("PORTASTORE_BACKEND", "disk").strip().lower(),
            app_name=env.get("PORTASTORE_APP_NAME", "portastore"),
            data_dir=env.get("PORTASTORE_DATA_DIR") or None,
            local_root=env.get("PORTASTORE_LOCAL_ROOT") or None,
            roaming_root=env.get("PORTASTORE_ROAMING_ROOT") or None,
        )

    def with_overrides(self, **overrides: Optional[str]) -> StorageSettings:
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def _default_data_dir(backend: str) -> str:
    if backend == "memory":
        return "/"
    return str(Path.home() / ".local" / "share")


def build_backend(settings: StorageSettings) -> StorageBackendPort:
    if settings.backend == "disk":
        return DiskBackend()
    if settings.backend == "memory":
        return MemoryBackend()
    raise ConfigurationError(
        f"Unknown backend: {settings.backend}. Valid options: {', '.join(sorted(BACKENDS))}"
    )


def build_root_provider(settings: StorageSettings) -> RootProviderPort:
    if settings.local_root and settings.roaming_root:
        return StaticRootProvider(
            {
                RootCategory.LOCAL: settings.local_root,
                RootCategory.ROAMING: settings.roaming_root,
            }
        )
    if settings.local_root or settings.roaming_root:
        raise ConfigurationError("local_root and roaming_root must be set together")
    data_dir = settings.data_dir or _default_data_dir(settings.backend)
    sep = "/" if settings.backend == "memory" else os.sep
    return AppDataRootProvider(data_dir, settings.app_name, sep=sep)
