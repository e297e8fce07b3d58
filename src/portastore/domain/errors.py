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


class PortaStoreError(Exception):
    """Base exception for library errors."""


class StorageNotFoundError(PortaStoreError):
    """A file or folder an operation depends on does not exist."""


class DirectoryNotFoundError(StorageNotFoundError):
    """A folder is missing (stale handle, or a named child folder)."""


class FileNotFoundInStorageError(StorageNotFoundError):
    """A file is missing (stale handle, or a named child file)."""


class StorageConflictError(PortaStoreError):
    """Create/rename collided with an existing entry, or a root folder delete was attempted."""


class InvalidCollisionOptionError(PortaStoreError, ValueError):
    """A collision option outside the supported set was passed."""


class ConfigurationError(PortaStoreError):
    """Unknown backend name or unusable storage roots."""
