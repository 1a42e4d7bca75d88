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
Zig-zag mapping between signed and unsigned 64-bit integers.

Small magnitudes map to small unsigned values regardless of sign, which keeps them short once base-128 encoded:

>>> [zigzag_encode(n) for n in (0, -1, 1, -2, 2, -64, 63, 64)]
[0, 1, 2, 3, 4, 127, 126, 128]
>>> [zigzag_decode(n) for n in (0, 1, 2, 3, 4, 127, 126, 128)]
[0, -1, 1, -2, 2, -64, 63, 64]

The extremes of the signed range land on the extremes of the unsigned range:

>>> zigzag_encode(2**63 - 1) == 2**64 - 2
True
>>> zigzag_encode(-2**63) == 2**64 - 1
True
>>> zigzag_decode(2**64 - 1) == -2**63
True
"""

from jamcodec.serialization.consts import INT64_MAX, INT64_MIN, UINT64_MAX
from jamcodec.serialization.exceptions import OutOfRangeError


def zigzag_encode(value: int) -> int:
    if not (INT64_MIN <= value <= INT64_MAX):
        raise OutOfRangeError(f'{value} is outside of the signed 64-bit range')
    # python's >> is an arithmetic shift, so value >> 63 is either 0 or -1 in this range
    return (value << 1) ^ (value >> 63)


def zigzag_decode(value: int) -> int:
    assert 0 <= value <= UINT64_MAX
    return (value >> 1) ^ -(value & 1)
