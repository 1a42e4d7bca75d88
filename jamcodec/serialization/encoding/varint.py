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

"""
This module implements the varint used for every whole number on the wire: integer values, lengths and counts.

A varint is the zig-zag mapping of a signed 64-bit integer, written as unsigned LEB128. Because lengths go through the
same zig-zag step, a length of 64 already needs two bytes.

>>> se = Serializer.build_bytes_serializer()
>>> encode_varint(se, 0)  # writes 00
>>> encode_varint(se, -1)  # writes 01
>>> encode_varint(se, 63)  # writes 7e
>>> encode_varint(se, 64)  # writes 8001
>>> encode_varint(se, -123456)  # writes ff880f
>>> bytes(se.finalize()).hex()
'00017e8001ff880f'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('00017e8001ff880f'))
>>> [decode_varint(de) for _ in range(5)]
[0, -1, 63, 64, -123456]
>>> de.finalize()

Decoding refuses chains longer than what a 64-bit value can need:

>>> de = Deserializer.build_bytes_deserializer(b'\\xff' * 10 + b'\\x01')
>>> try:
...     decode_varint(de)
... except BadDataError as e:
...     print(*e.args)
varint is longer than 10 bytes
"""

from jamcodec.serialization import BadDataError, Deserializer, Serializer, TruncatedInputError
from jamcodec.serialization.adapters import MaxBytesExceededError
from jamcodec.serialization.consts import MAX_VARINT_BYTES, UINT64_MAX
from jamcodec.serialization.encoding.leb128 import decode_leb128, encode_leb128
from jamcodec.serialization.encoding.zigzag import zigzag_decode, zigzag_encode


def encode_varint(serializer: Serializer, value: int) -> None:
    """ Encodes a signed 64-bit integer as zig-zag + LEB128.

    Raises `OutOfRangeError` if the value does not fit in 64 bits.
    """
    encode_leb128(serializer, zigzag_encode(value))


def decode_varint(deserializer: Deserializer) -> int:
    """ Decodes a zig-zag + LEB128 integer.

    This modules's docstring has more details and examples.
    """
    try:
        unsigned = decode_leb128(deserializer.with_max_bytes(MAX_VARINT_BYTES))
    except MaxBytesExceededError as e:
        # the cap trips before reading, so only a byte that is really there makes the varint too long
        if deserializer.is_empty():
            raise TruncatedInputError('not enough bytes to read') from e
        raise BadDataError(f'varint is longer than {MAX_VARINT_BYTES} bytes') from e
    if unsigned > UINT64_MAX:
        raise BadDataError('varint does not fit in 64 bits')
    return zigzag_decode(unsigned)


def encode_length(serializer: Serializer, length: int) -> None:
    """Lengths and counts are plain varints."""
    encode_varint(serializer, length)


def decode_length(deserializer: Deserializer) -> int:
    """ Decodes a length or count, which is a varint that must not be negative.
    """
    length = decode_varint(deserializer)
    if length < 0:
        raise BadDataError(f'invalid negative length: {length}')
    return length
