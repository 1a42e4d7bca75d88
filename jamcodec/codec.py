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

from typing import Optional, Union

from structlog import get_logger

from jamcodec.conf import CodecSettings, get_global_settings
from jamcodec.serialization import Deserializer, SerializationError, Serializer
from jamcodec.serialization.compound_encoding.value import decode_value, encode_value
from jamcodec.serialization.types import Buffer
from jamcodec.types import Value
from jamcodec.variant import Variant

logger = get_logger()


def encode(value: Union[Value, Variant], *, settings: Optional[CodecSettings] = None) -> bytes:
    """ Encode a value or a variant into a new byte sequence.

    Raises `UnsupportedShapeError` for values that have no encoding, `OutOfRangeError` for integers that don't fit,
    `NestingTooDeepError` when containers go deeper than `MAX_NESTING_DEPTH` and `MaxBytesExceededError` if the result
    would be larger than `MAX_ENCODED_SIZE`.
    """
    if settings is None:
        settings = get_global_settings()
    serializer = Serializer.build_bytes_serializer()
    encode_value(
        serializer.with_optional_max_bytes(settings.MAX_ENCODED_SIZE),
        value,
        max_depth=settings.MAX_NESTING_DEPTH,
    )
    return bytes(serializer.finalize())


def decode(data: Buffer, *, settings: Optional[CodecSettings] = None) -> Union[Value, Variant]:
    """ Decode exactly one value or variant from the given bytes.

    The whole input must be consumed, any byte left after the value raises `TrailingDataError`. Every other failure
    is a subclass of `SerializationError`, see `jamcodec.serialization.exceptions`.
    """
    if settings is None:
        settings = get_global_settings()
    deserializer = Deserializer.build_bytes_deserializer(data)
    try:
        value = decode_value(deserializer, max_depth=settings.MAX_NESTING_DEPTH)
        deserializer.finalize()
    except SerializationError as e:
        log = logger.new(size=len(memoryview(data)))
        log.debug('decode failed', error=type(e).__name__, reason=str(e))
        raise
    return value
