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
Self-describing binary encoding for a small closed set of values and variant records.

>>> data = encode({'b': 1, 'a': [True, None, 'x']}, settings=CodecSettings())
>>> data.hex()
'07040262020202610606010100040278'
>>> decode(data, settings=CodecSettings())
{'b': 1, 'a': [True, None, 'x']}
"""

from jamcodec.codec import decode, encode
from jamcodec.conf import CodecSettings
from jamcodec.types import Tag, Value
from jamcodec.variant import Variant, VariantA, VariantB, VariantC, VariantIndex
from jamcodec.version import __version__

__all__ = [
    'encode',
    'decode',
    'CodecSettings',
    'Tag',
    'Value',
    'Variant',
    'VariantA',
    'VariantB',
    'VariantC',
    'VariantIndex',
    '__version__',
]
