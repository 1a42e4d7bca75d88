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

from jamcodec.serialization import Deserializer, Serializer
from jamcodec.serialization.encoding.varint import decode_varint, encode_varint
from jamcodec.serialization.types import Buffer


def write_varint(value: int) -> bytes:
    """
    Receive a signed 64-bit integer and return its varint bytes (zig-zag + LEB128).

    >>> write_varint(0) == bytes([0x00])
    True
    >>> write_varint(-1) == bytes([0x01])
    True
    >>> write_varint(64) == bytes([0x80, 0x01])
    True
    """
    serializer = Serializer.build_bytes_serializer()
    encode_varint(serializer, value)
    return bytes(serializer.finalize())


def read_varint(data: Buffer) -> tuple[int, int]:
    """
    Read a varint from the start of the buffer and return the value and how many bytes it took.

    Bytes after the varint are ignored.

    >>> read_varint(bytes([0x00]))
    (0, 1)
    >>> read_varint(bytes([0x80, 0x01]) + b'test')
    (64, 2)
    >>> read_varint(bytes([0xff, 0x88, 0x0f]))
    (-123456, 3)
    """
    deserializer = Deserializer.build_bytes_deserializer(data)
    total = deserializer.remaining()
    value = decode_varint(deserializer)
    return value, total - deserializer.remaining()
