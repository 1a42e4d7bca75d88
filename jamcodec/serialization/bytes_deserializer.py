# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from typing_extensions import override

from .deserializer import Deserializer
from .exceptions import TrailingDataError, TruncatedInputError
from .types import Buffer

_EMPTY_VIEW = memoryview(b'')


class BytesDeserializer(Deserializer):
    """Simple implementation of a Deserializer to parse values from a byte sequence.

    This implementation maintains a memoryview that is shortened as the bytes are read, the whole input has to be
    resident in memory.
    """

    def __init__(self, data: Buffer) -> None:
        self._view = memoryview(data).cast('B')

    @override
    def finalize(self) -> None:
        if not self.is_empty():
            raise TrailingDataError(len(self._view))
        del self._view

    @override
    def is_empty(self) -> bool:
        # XXX: least amount of OPs, "not" converts to bool with the correct semantics of "is empty"
        return not self._view

    @override
    def remaining(self) -> int:
        return len(self._view)

    @override
    def read_byte(self) -> int:
        if not self._view:
            raise TruncatedInputError('not enough bytes to read')
        b = self._view[0]
        self._view = self._view[1:]
        return b

    @override
    def read_bytes(self, n: int) -> memoryview:
        if n < 0:
            raise ValueError('value cannot be negative')
        if len(self._view) < n:
            raise TruncatedInputError(f'not enough bytes to read: {n} requested, {len(self._view)} left')
        b = self._view[:n]
        self._view = self._view[n:]
        return b

    @override
    def read_all(self) -> memoryview:
        b = self._view
        self._view = _EMPTY_VIEW
        return b
