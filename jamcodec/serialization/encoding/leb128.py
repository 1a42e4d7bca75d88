#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

"""
This module implements unsigned LEB128, the base-128 layer of our varints.

LEB128 or Little Endian Base 128 is a variable-length code used to store arbitrarily large integers in a small number
of bytes. Each byte carries 7 bits of data, least-significant group first, and the high bit is set on every byte
except the last one to signal that more bytes follow. Zero still takes one byte.

Signed values never reach this module directly, they are mapped with zig-zag first (see `varint`).

References:
- https://en.wikipedia.org/wiki/LEB128

>>> se = Serializer.build_bytes_serializer()
>>> se.write_bytes(b'test')  # writes 74657374
>>> encode_leb128(se, 0)  # writes 00
>>> encode_leb128(se, 127)  # writes 7f
>>> encode_leb128(se, 128)  # writes 8001
>>> encode_leb128(se, 624485)  # writes e58e26
>>> bytes(se.finalize()).hex()
'74657374007f8001e58e26'

>>> data = bytes.fromhex('00 7f 8001 e58e26 74657374')
>>> de = Deserializer.build_bytes_deserializer(data)
>>> decode_leb128(de)  # reads 00
0
>>> decode_leb128(de)  # reads 7f
127
>>> decode_leb128(de)  # reads 8001
128
>>> decode_leb128(de)  # reads e58e26
624485
>>> bytes(de.read_all())  # reads 74657374
b'test'
>>> de.finalize()

A continuation bit on the last available byte means the input was cut short:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('e58e'))
>>> try:
...     decode_leb128(de)
... except TruncatedInputError as e:
...     print(*e.args)
not enough bytes to read
"""

from jamcodec.serialization import Deserializer, Serializer, TruncatedInputError  # noqa: F401


def encode_leb128(serializer: Serializer, value: int) -> None:
    """ Encodes a non-negative integer using LEB128.

    This module's docstring has more details on LEB128 and examples.
    """
    if value < 0:
        raise ValueError('cannot encode value <0 as unsigned')
    while True:
        byte = value & 0b0111_1111
        value >>= 7
        if value == 0:
            serializer.write_byte(byte)
            break
        serializer.write_byte(byte | 0b1000_0000)


def decode_leb128(deserializer: Deserializer) -> int:
    """ Decodes a LEB128-encoded non-negative integer.

    Reading stops at the first byte with the high bit clear, running out of input before that raises
    `TruncatedInputError`. Callers that must bound the length should wrap the deserializer with `with_max_bytes`.
    """
    result = 0
    shift = 0
    while True:
        byte = deserializer.read_byte()
        result |= (byte & 0b0111_1111) << shift
        shift += 7
        if (byte & 0b1000_0000) == 0:
            return result
