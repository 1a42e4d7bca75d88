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
This module implements utf-8 string encoding with a length prefix.

It works exactly like bytes-encoding but the encoded byte-sequence is utf-8 and it takes/returns a `str`. The length
prefix counts bytes, not characters.

>>> se = Serializer.build_bytes_serializer()
>>> encode_utf8(se, 'foobar')  # writes 0c666f6f626172
>>> encode_utf8(se, 'π')  # writes 04cf80
>>> encode_utf8(se, '😎')  # writes 08f09f988e
>>> bytes(se.finalize()).hex()
'0c666f6f62617204cf8008f09f988e'

>>> de = Deserializer.build_bytes_deserializer(bytes.fromhex('0c666f6f62617204cf8008f09f988e'))
>>> decode_utf8(de)  # reads 0c666f6f626172
'foobar'
>>> decode_utf8(de)  # reads 04cf80
'π'
>>> decode_utf8(de)  # reads 08f09f988e
'😎'
>>> de.finalize()

Decoding is strict, invalid sequences are never replaced:

>>> de = Deserializer.build_bytes_deserializer(b'\x04\xc3\x28')
>>> try:
...     decode_utf8(de)
... except InvalidTextError as e:
...     print(*e.args)
string payload is not valid utf-8
"""

from jamcodec.serialization import Deserializer, InvalidTextError, Serializer, UnsupportedShapeError

from .bytes import decode_bytes, encode_bytes


def encode_utf8(serializer: Serializer, value: str) -> None:
    """ Encodes a string using UTF-8 and adding a length prefix.

    This modules's docstring has more details and examples.
    """
    assert isinstance(value, str)
    try:
        data = value.encode('utf-8')
    except UnicodeEncodeError as e:
        # lone surrogates can exist in a str but have no utf-8 form
        raise UnsupportedShapeError(str, 'string cannot be encoded as utf-8') from e
    encode_bytes(serializer, data)


def decode_utf8(deserializer: Deserializer) -> str:
    """ Decodes a UTF-8 string with a length prefix.

    This modules's docstring has more details and examples.
    """
    data = decode_bytes(deserializer)
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise InvalidTextError('string payload is not valid utf-8') from e
