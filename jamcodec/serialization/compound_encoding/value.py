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
This module implements the self-describing tagged encoding: every value is written as a one-byte `Tag` followed by a
payload that depends on the tag.

Layout per tag:

    NULL   [00]
    BOOL   [01][1 byte: 01 true, anything else false]
    INT    [02][varint]
    FLOAT  [03][8 bytes: IEEE-754 double, little-endian]
    STRING [04][N: varint][N bytes of utf-8]
    BYTES  [05][N: varint][N raw bytes]
    ARRAY  [06][N: varint][value_0]...[value_N]
    OBJECT [07][N: varint][key_0: varint length + utf-8][value_0]...
    ENUM   [08][variant index][payload of the shape]

Whether a number is written as INT or FLOAT depends on its value and not on its Python type, a float that is a whole
number in the signed 64-bit range goes through INT:

>>> se = Serializer.build_bytes_serializer()
>>> encode_value(se, [None, True, 1, 1.0, 0.5, 'a', b'a'], max_depth=8)
>>> bytes(se.finalize()).hex()
'060e0001010202020203000000000000e03f040261050261'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('060402040208'))
>>> decode_value(de, max_depth=8)
[2, 4]
>>> de.finalize()

Containers count towards a nesting limit, which also stops self-referencing values:

>>> loop = []
>>> loop.append(loop)
>>> try:
...     encode_value(Serializer.build_bytes_serializer(), loop, max_depth=8)
... except NestingTooDeepError as e:
...     print(*e.args)
nesting exceeds maximum depth of 8
"""

from collections.abc import Mapping
from typing import Union, assert_never

from jamcodec.serialization import (
    Deserializer,
    NestingTooDeepError,
    Serializer,
    UnknownTagError,
    UnsupportedShapeError,
)
from jamcodec.serialization.compound_encoding.collection import decode_collection, encode_collection
from jamcodec.serialization.compound_encoding.mapping import decode_mapping, encode_mapping
from jamcodec.serialization.compound_encoding.variant import decode_variant, encode_variant
from jamcodec.serialization.consts import INT64_MAX, INT64_MIN
from jamcodec.serialization.encoding.bool import decode_bool, encode_bool
from jamcodec.serialization.encoding.bytes import decode_bytes, encode_bytes
from jamcodec.serialization.encoding.float import decode_float, encode_float
from jamcodec.serialization.encoding.utf8 import decode_utf8, encode_utf8
from jamcodec.serialization.encoding.varint import decode_varint, encode_varint
from jamcodec.types import Tag, Value
from jamcodec.variant import Variant, VariantA, VariantB, VariantC


def _enter_container(depth: int, max_depth: int) -> int:
    """Return the depth for the children of a container at `depth`, fail if it is one level too many."""
    if depth >= max_depth:
        raise NestingTooDeepError(max_depth)
    return depth + 1


def _encode_key(serializer: Serializer, key: str) -> None:
    if not isinstance(key, str):
        raise UnsupportedShapeError(type(key), f'object keys must be str, not {type(key).__name__}')
    encode_utf8(serializer, key)


def _is_int64(number: Union[int, float]) -> bool:
    return INT64_MIN <= number <= INT64_MAX


def encode_value(serializer: Serializer, value: Union[Value, Variant], *, max_depth: int) -> None:
    """ Encode any supported value with its tag.

    This module's docstring has more details and examples.
    """
    _encode_value(serializer, value, max_depth, 0)


def _encode_value(serializer: Serializer, value: Union[Value, Variant], max_depth: int, depth: int) -> None:
    match value:
        case VariantA() | VariantB() | VariantC():
            serializer.write_byte(Tag.ENUM)
            encode_variant(serializer, value)
        case None:
            serializer.write_byte(Tag.NULL)
        case bool():
            # XXX: must come before int, bool is a subclass of int
            serializer.write_byte(Tag.BOOL)
            encode_bool(serializer, value)
        case int():
            serializer.write_byte(Tag.INT)
            encode_varint(serializer, value)
        case float() if value.is_integer() and _is_int64(value):
            serializer.write_byte(Tag.INT)
            encode_varint(serializer, int(value))
        case float():
            serializer.write_byte(Tag.FLOAT)
            encode_float(serializer, value)
        case str():
            serializer.write_byte(Tag.STRING)
            encode_utf8(serializer, value)
        case bytes() | bytearray() | memoryview():
            serializer.write_byte(Tag.BYTES)
            encode_bytes(serializer, value)
        case list() | tuple():
            child_depth = _enter_container(depth, max_depth)
            serializer.write_byte(Tag.ARRAY)
            encode_collection(
                serializer,
                value,
                lambda se, item: _encode_value(se, item, max_depth, child_depth),
            )
        case Mapping():
            child_depth = _enter_container(depth, max_depth)
            serializer.write_byte(Tag.OBJECT)
            encode_mapping(
                serializer,
                value,
                _encode_key,
                lambda se, item: _encode_value(se, item, max_depth, child_depth),
            )
        case _:
            raise UnsupportedShapeError(type(value))


def decode_value(deserializer: Deserializer, *, max_depth: int) -> Union[Value, Variant]:
    """ Decode one tagged value, consuming only its bytes.

    Checking that nothing is left after the value is up to the caller, see `Deserializer.finalize`.
    """
    return _decode_value(deserializer, max_depth, 0)


def _decode_value(deserializer: Deserializer, max_depth: int, depth: int) -> Union[Value, Variant]:
    raw_tag = deserializer.read_byte()
    try:
        tag = Tag(raw_tag)
    except ValueError:
        raise UnknownTagError(raw_tag) from None

    match tag:
        case Tag.ENUM:
            return decode_variant(deserializer)
        case Tag.NULL:
            return None
        case Tag.BOOL:
            return decode_bool(deserializer)
        case Tag.INT:
            return decode_varint(deserializer)
        case Tag.FLOAT:
            return decode_float(deserializer)
        case Tag.STRING:
            return decode_utf8(deserializer)
        case Tag.BYTES:
            return decode_bytes(deserializer)
        case Tag.ARRAY:
            child_depth = _enter_container(depth, max_depth)
            return decode_collection(
                deserializer,
                lambda de: _decode_value(de, max_depth, child_depth),
                list,
            )
        case Tag.OBJECT:
            child_depth = _enter_container(depth, max_depth)
            return decode_mapping(
                deserializer,
                decode_utf8,
                lambda de: _decode_value(de, max_depth, child_depth),
                dict,
            )
        case _:
            assert_never(tag)
