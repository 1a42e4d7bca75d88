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
The closed set of variant records that travel inside the `Tag.ENUM` envelope.

Each shape is identified on the wire by its variant index, which is unrelated to the order in which the shapes are
declared here. The relation is kept in two explicit tables so reordering the classes can never change the format:

>>> INDEX_BY_SHAPE[VariantA], INDEX_BY_SHAPE[VariantB], INDEX_BY_SHAPE[VariantC]
(<VariantIndex.A: 15>, <VariantIndex.B: 1>, <VariantIndex.C: 2>)
>>> SHAPE_BY_INDEX[VariantIndex(2)].__name__
'VariantC'
>>> variant_index(VariantB((1, 2)))
<VariantIndex.B: 1>
"""

from dataclasses import dataclass
from enum import IntEnum, unique
from types import MappingProxyType
from typing import Mapping, TypeAlias, Union


@unique
class VariantIndex(IntEnum):
    A = 15
    B = 1
    C = 2


@dataclass(frozen=True, slots=True)
class VariantA:
    """Shape without payload."""


@dataclass(frozen=True, slots=True)
class VariantB:
    """Shape carrying a positional `(u32, u64)` pair."""

    value: tuple[int, int]


@dataclass(frozen=True, slots=True)
class VariantC:
    """Shape carrying a named pair, `a` is a u32 and `b` is a u64."""

    a: int
    b: int


Variant: TypeAlias = Union[VariantA, VariantB, VariantC]

INDEX_BY_SHAPE: Mapping[type[Variant], VariantIndex] = MappingProxyType({
    VariantA: VariantIndex.A,
    VariantB: VariantIndex.B,
    VariantC: VariantIndex.C,
})

SHAPE_BY_INDEX: Mapping[VariantIndex, type[Variant]] = MappingProxyType({
    index: shape for shape, index in INDEX_BY_SHAPE.items()
})


def variant_index(variant: Variant) -> VariantIndex:
    """Index of the shape of the given variant, `KeyError` if it is not one of the known shapes."""
    return INDEX_BY_SHAPE[type(variant)]
