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
Encoding a mapping is equivalent to encoding a collection of 2-tuples, entries are written in iteration order and
that order is part of the encoding.

Layout: [N: varint][key_0][value_0]...[key_N][value_N]

>>> from jamcodec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> from jamcodec.serialization.encoding.bool import encode_bool, decode_bool
>>> se = Serializer.build_bytes_serializer()
>>> value = {
...     'foo': False,
...     'bar': True,
... }
>>> encode_mapping(se, value, encode_utf8, encode_bool)
>>> bytes(se.finalize()).hex()
'0406666f6f000662617201'

Breakdown of the result:

    04: 2 as a varint, the total length
    06666f6f: 'foo' with length prefix
    00: False
    06626172: 'bar' with length prefix
    01: True

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0406666f6f000662617201'))
>>> decode_mapping(de, decode_utf8, decode_bool, dict)
{'foo': False, 'bar': True}
>>> de.finalize()

Repeated keys are not rejected, with a `dict` builder the last value wins and the key keeps the position where it was
first seen:

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0606666f6f01066261720106666f6f00'))
>>> decode_mapping(de, decode_utf8, decode_bool, dict)
{'foo': False, 'bar': True}
"""

from collections.abc import Iterable, Mapping
from typing import Callable, TypeVar

from jamcodec.serialization import Deserializer, Serializer
from jamcodec.serialization.encoding.varint import decode_length, encode_length

from . import Decoder, Encoder

KT = TypeVar('KT')
VT = TypeVar('VT')
R = TypeVar('R', bound=Mapping)


def encode_mapping(
    serializer: Serializer,
    values_mapping: Mapping[KT, VT],
    key_encoder: Encoder[KT],
    value_encoder: Encoder[VT],
) -> None:
    encode_length(serializer, len(values_mapping))
    for key, value in values_mapping.items():
        key_encoder(serializer, key)
        value_encoder(serializer, value)


def decode_mapping(
    deserializer: Deserializer,
    key_decoder: Decoder[KT],
    value_decoder: Decoder[VT],
    mapping_builder: Callable[[Iterable[tuple[KT, VT]]], R],
) -> R:
    size = decode_length(deserializer)
    return mapping_builder(
        (key_decoder(deserializer), value_decoder(deserializer))
        for _ in range(size)
    )
