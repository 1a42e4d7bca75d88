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
This module implements encoding of integers with a fixed size, the size and signedness are parametrized.

The encoding format itself is a plain little-endian format, no varint involved.

>>> se = Serializer.build_bytes_serializer()
>>> encode_int(se, 1, length=4, signed=False)  # writes 01000000
>>> encode_int(se, 2, length=8, signed=False)  # writes 0200000000000000
>>> encode_int(se, -2, length=2, signed=True)  # writes feff
>>> bytes(se.finalize()).hex()
'010000000200000000000000feff'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('010000000200000000000000feff'))
>>> decode_int(de, length=4, signed=False)  # reads 01000000
1
>>> decode_int(de, length=8, signed=False)  # reads 0200000000000000
2
>>> decode_int(de, length=2, signed=True)  # reads feff
-2
>>> de.finalize()

>>> se = Serializer.build_bytes_serializer()
>>> try:
...     encode_int(se, 2**32, length=4, signed=False)
... except OutOfRangeError as e:
...     print(*e.args)
4294967296 does not fit in 4 unsigned bytes
"""

from jamcodec.serialization import Deserializer, OutOfRangeError, Serializer


def encode_int(serializer: Serializer, number: int, *, length: int, signed: bool) -> None:
    """ Encode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    try:
        data = int.to_bytes(number, length, byteorder='little', signed=signed)
    except OverflowError as e:
        signedness = 'signed' if signed else 'unsigned'
        raise OutOfRangeError(f'{number} does not fit in {length} {signedness} bytes') from e
    serializer.write_bytes(data)


def decode_int(deserializer: Deserializer, *, length: int, signed: bool) -> int:
    """ Decode an int using the given byte-length and signedness.

    This modules's docstring has more details and examples.
    """
    data = deserializer.read_bytes(length)
    return int.from_bytes(data, byteorder='little', signed=signed)
