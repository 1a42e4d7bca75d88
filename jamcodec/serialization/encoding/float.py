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
This module implements encoding a float as a raw 8-byte little-endian IEEE-754 double.

>>> se = Serializer.build_bytes_serializer()
>>> encode_float(se, 1.5)  # writes 000000000000f83f
>>> encode_float(se, -2.0)  # writes 00000000000000c0
>>> bytes(se.finalize()).hex()
'000000000000f83f00000000000000c0'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('000000000000f83f00000000000000c0'))
>>> decode_float(de)
1.5
>>> decode_float(de)
-2.0
>>> de.finalize()
"""

from jamcodec.serialization import Deserializer, Serializer

_FORMAT = '<d'


def encode_float(serializer: Serializer, value: float) -> None:
    serializer.write_struct((value,), _FORMAT)


def decode_float(deserializer: Deserializer) -> float:
    value, = deserializer.read_struct(_FORMAT)
    return value
