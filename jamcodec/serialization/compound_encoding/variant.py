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
A variant is written as its variant index (one byte) followed by the payload of its shape. The `Tag.ENUM` byte that
precedes it on the wire is written by the tagged value encoder, not here.

Payload fields are fixed-size little-endian integers, never varints:

- `VariantA`: nothing
- `VariantB`: u32 then u64, from the positional pair
- `VariantC`: u32 `a` then u64 `b`

>>> se = Serializer.build_bytes_serializer()
>>> encode_variant(se, VariantA())
>>> encode_variant(se, VariantB((1, 2)))
>>> encode_variant(se, VariantC(a=1, b=2))
>>> bytes(se.finalize()).hex()
'0f0101000000020000000000000002010000000200000000000000'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0f0101000000020000000000000002010000000200000000000000'))
>>> decode_variant(de)
VariantA()
>>> decode_variant(de)
VariantB(value=(1, 2))
>>> decode_variant(de)
VariantC(a=1, b=2)
>>> de.finalize()

>>> de = Deserializer.build_bytes_deserializer(b'\x00')
>>> try:
...     decode_variant(de)
... except UnknownVariantError as e:
...     print(e.index)
0
"""

from jamcodec.serialization import Deserializer, Serializer, UnknownVariantError, UnsupportedShapeError
from jamcodec.serialization.encoding.int import decode_int, encode_int
from jamcodec.variant import INDEX_BY_SHAPE, SHAPE_BY_INDEX, Variant, VariantA, VariantB, VariantC, VariantIndex


def _encode_pair(serializer: Serializer, a: int, b: int) -> None:
    encode_int(serializer, a, length=4, signed=False)
    encode_int(serializer, b, length=8, signed=False)


def _decode_pair(deserializer: Deserializer) -> tuple[int, int]:
    a = decode_int(deserializer, length=4, signed=False)
    b = decode_int(deserializer, length=8, signed=False)
    return a, b


def _check_field(field: object) -> None:
    # bool is an int subclass but never a valid u32/u64 field
    if not isinstance(field, int) or isinstance(field, bool):
        raise UnsupportedShapeError(type(field), f'variant fields must be int, not {type(field).__name__}')


def encode_variant(serializer: Serializer, variant: Variant) -> None:
    index = INDEX_BY_SHAPE.get(type(variant))
    if index is None:
        raise UnsupportedShapeError(type(variant))
    match variant:
        case VariantA():
            fields: tuple[int, ...] = ()
        case VariantB(value=(a, b)):
            fields = (a, b)
        case VariantC(a=a, b=b):
            fields = (a, b)
        case _:
            raise UnsupportedShapeError(type(variant), f'malformed payload: {variant!r}')
    for field in fields:
        _check_field(field)
    serializer.write_byte(index)
    if fields:
        _encode_pair(serializer, *fields)


def decode_variant(deserializer: Deserializer) -> Variant:
    raw_index = deserializer.read_byte()
    try:
        index = VariantIndex(raw_index)
    except ValueError:
        raise UnknownVariantError(raw_index) from None
    shape = SHAPE_BY_INDEX[index]
    if shape is VariantA:
        return VariantA()
    a, b = _decode_pair(deserializer)
    if shape is VariantB:
        return VariantB((a, b))
    return VariantC(a=a, b=b)
