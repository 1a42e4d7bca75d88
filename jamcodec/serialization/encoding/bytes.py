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
This modules implements encoding of byte sequence by prefixing it with the length of the sequence encoded as a varint.

>>> se = Serializer.build_bytes_serializer()
>>> encode_bytes(se, b'test')  # will prepend b'\x08' (zig-zag of 4) before writing b'test'
>>> bytes(se.finalize()).hex()
'0874657374'

>>> se = Serializer.build_bytes_serializer()
>>> raw_data = b'test' * 16
>>> len(raw_data)
64
>>> encode_bytes(se, raw_data)  # prepends b'\x80\x01' before raw_data
>>> encoded_data = bytes(se.finalize())
>>> len(encoded_data)
66
>>> encoded_data[:6].hex()
'800174657374'

>>> de = Deserializer.build_bytes_deserializer(encoded_data)  # that we encoded before
>>> decoded_data = decode_bytes(de)
>>> de.finalize()  # called to assert we've consumed everything
>>> decoded_data == raw_data
True

>>> de = Deserializer.build_bytes_deserializer(b'\x08testfoo')
>>> decode_bytes(de)
b'test'
>>> try:
...     de.finalize()
... except TrailingDataError as e:
...     print(*e.args)
trailing data: 3 unconsumed byte(s)

>>> de = Deserializer.build_bytes_deserializer(b'\x08tes')
>>> try:
...     decode_bytes(de)
... except TruncatedInputError as e:
...     print(*e.args)
not enough bytes to read: 4 requested, 3 left
"""

from jamcodec.serialization import Deserializer, Serializer, TrailingDataError, TruncatedInputError  # noqa: F401
from jamcodec.serialization.types import Buffer

from .varint import decode_length, encode_length


def encode_bytes(serializer: Serializer, data: Buffer) -> None:
    """ Encodes a byte-sequence adding a length prefix.

    This modules's docstring has more details and examples.
    """
    view = memoryview(data).cast('B')
    encode_length(serializer, len(view))
    serializer.write_bytes(view)


def decode_bytes(deserializer: Deserializer) -> bytes:
    """ Decodes a byte-sequence with a length prefix.

    This modules's docstring has more details and examples.
    """
    size = decode_length(deserializer)
    return bytes(deserializer.read_bytes(size))
