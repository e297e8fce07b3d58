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

from typing import Any

from ..domain.errors import InvalidCollisionOptionError
from ..domain.options import CreationCollisionOption, NameCollisionOption
from ..ports.backend import NativeCollisionOption

_CREATION_OPTIONS = {
    CreationCollisionOption.GENERATE_UNIQUE_NAME: NativeCollisionOption.GENERATE_UNIQUE_NAME,
    CreationCollisionOption.REPLACE_EXISTING: NativeCollisionOption.REPLACE_EXISTING,
    CreationCollisionOption.FAIL_IF_EXISTS: NativeCollisionOption.FAIL_IF_EXISTS,
    CreationCollisionOption.OPEN_IF_EXISTS: NativeCollisionOption.OPEN_IF_EXISTS,
}

_NAME_OPTIONS = {
    NameCollisionOption.GENERATE_UNIQUE_NAME: NativeCollisionOption.GENERATE_UNIQUE_NAME,
    NameCollisionOption.REPLACE_EXISTING: NativeCollisionOption.REPLACE_EXISTING,
    NameCollisionOption.FAIL_IF_EXISTS: NativeCollisionOption.FAIL_IF_EXISTS,
}


def map_creation_option(option: Any) -> NativeCollisionOption:
    """
    Translate a CreationCollisionOption into the backend's collision enum.

    Raises:
        InvalidCollisionOptionError: for anything but the four defined members.
    """
    # Only real enum members are accepted; bare values that happen to hash
    # like a member must not slip through.
    if not isinstance(option, CreationCollisionOption):
        raise InvalidCollisionOptionError(
            f"Unrecognized CreationCollisionOption value: {option!r}"
        )
    return _CREATION_OPTIONS[option]


def map_name_option(option: Any) -> NativeCollisionOption:
    """Translate a NameCollisionOption (rename/move) into the backend's collision enum."""
    if not isinstance(option, NameCollisionOption):
        raise InvalidCollisionOptionError(
            f"Unrecognized NameCollisionOption value: {option!r}"
        )
    return _NAME_OPTIONS[option]
