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

from typing import Mapping

from ..domain.errors import ConfigurationError
from ..domain.options import RootCategory
from ..ports.roots import RootProviderPort


class StaticRootProvider(RootProviderPort):
    """Root paths given up front, one per category."""

    def __init__(self, paths: Mapping[RootCategory, str]) -> None:
        missing = [c.value for c in RootCategory if not paths.get(c)]
        if missing:
            raise ConfigurationError(f"No root path configured for: {', '.join(missing)}")
        self._paths = dict(paths)

    def root_path(self, category: RootCategory) -> str:
        return self._paths[category]


class AppDataRootProvider(RootProviderPort):
    """
    Per-application roots below a shared data directory:

        <data_dir>/<app_name>/Local
        <data_dir>/<app_name>/Roaming

    `sep` joins the segments, so the same layout works for disk paths and
    for the memory backend's POSIX-style paths.
    """

    _FOLDERS = {RootCategory.LOCAL: "Local", RootCategory.ROAMING: "Roaming"}

    def __init__(self, data_dir: str, app_name: str, sep: str = "/") -> None:
        if not app_name:
            raise ConfigurationError("app_name must not be empty")
        self._base = data_dir.rstrip(sep) + sep + app_name
        self._sep = sep

    def root_path(self, category: RootCategory) -> str:
        return self._base + self._sep + self._FOLDERS[category]
