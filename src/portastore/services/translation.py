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

from contextlib import contextmanager
from typing import Iterator, Type

from ..domain.errors import PortaStoreError
from ..ports.backend import BackendError, BackendErrorKind


@contextmanager
def translate(
    kind: BackendErrorKind, error_type: Type[PortaStoreError]
) -> Iterator[None]:
    """
    Re-raise a BackendError of the given kind as `error_type`.

    The original message is kept and the backend error is chained as the
    cause. BackendErrors of another kind, and any other exception, pass
    through untouched.

    Usage:
        with translate(BackendErrorKind.NOT_FOUND, DirectoryNotFoundError):
            entry = await backend.get_folder(folder, name)
    """
    try:
        yield
    except BackendError as e:
        if e.kind is not kind:
            raise
        raise error_type(str(e)) from e
