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

from .serializer import Serializer
from .types import Buffer


class BytesSerializer(Serializer):
    """Simple implementation of Serializer to write to memory.

    Every write is appended to a single `bytearray` owned by this instance, which grows with amortized doubling, so
    callers never pre-size anything. Instances must not be shared between encode calls.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()

    @override
    def finalize(self) -> memoryview:
        result = memoryview(self._buffer)
        del self._buffer
        return result

    @override
    def cur_pos(self) -> int:
        return len(self._buffer)

    @override
    def write_byte(self, data: int) -> None:
        # bytearray.append checks for correct range
        self._buffer.append(data)

    @override
    def write_bytes(self, data: Buffer) -> None:
        self._buffer += data
