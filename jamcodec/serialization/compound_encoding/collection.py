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
A collection is basically any value that has a known size and is iterable, it is what an array is made of.

Layout: [N: varint][value_0]...[value_N]

>>> from jamcodec.serialization.encoding.utf8 import encode_utf8, decode_utf8
>>> se = Serializer.build_bytes_serializer()
>>> value = ['foobar', 'π', '😎', 'test']
>>> encode_collection(se, value, encode_utf8)
>>> bytes(se.finalize()).hex()
'080c666f6f62617204cf8008f09f988e0874657374'

Breakdown of the result:

    08: 4 as a varint, the total length
    0c666f6f626172: 'foobar' (with length prefix)
    04cf80: 'π' (with length prefix)
    08f09f988e: '😎' (with length prefix)
    0874657374: 'test' (with length prefix)

When decoding, the builder can be any compatible collection, in the previous example a `list` was encoded, but when
decoding a `tuple` could be used, it only matters that the collection can be initialized with an `Iterable[T]`. Items
are decoded in order.

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('080c666f6f62617204cf8008f09f988e0874657374'))
>>> decode_collection(de, decode_utf8, tuple)
('foobar', 'π', '😎', 'test')
>>> de.finalize()
"""

from collections.abc import Collection, Iterable
from typing import Callable, TypeVar

from jamcodec.serialization import Deserializer, Serializer
from jamcodec.serialization.encoding.varint import decode_length, encode_length

from . import Decoder, Encoder

T = TypeVar('T')
R = TypeVar('R', bound=Collection)


def encode_collection(serializer: Serializer, values: Collection[T], encoder: Encoder[T]) -> None:
    encode_length(serializer, len(values))
    for value in values:
        encoder(serializer, value)


def decode_collection(
    deserializer: Deserializer,
    decoder: Decoder[T],
    builder: Callable[[Iterable[T]], R],
) -> R:
    length = decode_length(deserializer)
    return builder(decoder(deserializer) for _ in range(length))
