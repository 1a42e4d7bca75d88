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

from typing import Optional


class SerializationError(Exception):
    """Base class for every error raised while encoding or decoding."""


class BadDataError(SerializationError):
    """The input is not a valid encoding, subclasses narrow down why."""


class TruncatedInputError(BadDataError):
    """The input ended before a complete field could be read."""


class TrailingDataError(BadDataError):
    """A complete value was decoded but there are still bytes left in the input."""

    def __init__(self, remaining: int) -> None:
        super().__init__(f'trailing data: {remaining} unconsumed byte(s)')
        self.remaining = remaining


class UnknownTagError(BadDataError):
    def __init__(self, tag: int) -> None:
        super().__init__(f'unknown tag: 0x{tag:02x}')
        self.tag = tag


class UnknownVariantError(BadDataError):
    def __init__(self, index: int) -> None:
        super().__init__(f'unknown variant index: {index}')
        self.index = index


class InvalidTextError(BadDataError):
    """String payload is not valid UTF-8."""


class NestingTooDeepError(SerializationError):
    def __init__(self, max_depth: int) -> None:
        super().__init__(f'nesting exceeds maximum depth of {max_depth}')
        self.max_depth = max_depth


class UnsupportedShapeError(SerializationError, TypeError):
    """The value given to the encoder is not one of the supported shapes."""

    def __init__(self, value_type: type, message: Optional[str] = None) -> None:
        super().__init__(message or f'unsupported value type: {value_type.__name__}')
        self.value_type = value_type


class OutOfRangeError(SerializationError, ValueError):
    """An integer does not fit in the encoding that was chosen for it."""
