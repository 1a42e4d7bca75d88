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

r"""
This module implements encoding a boolean value using 1 byte.

- `False` maps to `b'\x00'`
- `True` maps to `b'\x01'`

When decoding, only `b'\x01'` is true, every other byte value (including `b'\x02'`) is read as false. This is not
the usual "nonzero is true" rule and it is kept on purpose, data written by other implementations relies on it.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bool(se, True)
>>> encode_bool(se, False)
>>> bytes(se.finalize())
b'\x01\x00'

>>> de = Deserializer.build_bytes_deserializer(b'\x01\x00\x02\xff')
>>> [decode_bool(de) for _ in range(4)]
[True, False, False, False]
>>> de.finalize()
"""

from jamcodec.serialization import Deserializer, Serializer


def encode_bool(serializer: Serializer, value: bool) -> None:
    """ Encodes a boolean value using 1 byte.
    """
    assert isinstance(value, bool)
    serializer.write_byte(0x01 if value else 0x00)


def decode_bool(deserializer: Deserializer) -> bool:
    return deserializer.read_byte() == 0x01
