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

from enum import IntEnum, unique
from typing import TypeAlias, Union

# These are the values that can be encoded, besides variants. Encoding also accepts `tuple` for arrays, and
# `bytearray`/`memoryview` for bytes, but decoding always produces the types listed here.
Value: TypeAlias = Union[None, bool, int, float, str, bytes, list['Value'], dict[str, 'Value']]


@unique
class Tag(IntEnum):
    """First byte of every encoded unit, it decides how the following bytes are read."""

    NULL = 0x00
    BOOL = 0x01
    INT = 0x02
    FLOAT = 0x03
    STRING = 0x04
    BYTES = 0x05
    ARRAY = 0x06
    OBJECT = 0x07
    ENUM = 0x08
