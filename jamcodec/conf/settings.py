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

from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class CodecSettings(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)

    # Maximum number of nested containers (arrays and objects) accepted when encoding or decoding, a scalar at the top
    # level has no nesting and `[[]]` has 2 levels. Keep it well under the interpreter's recursion limit, each level
    # takes a few stack frames.
    MAX_NESTING_DEPTH: int = Field(default=128, gt=0)

    # Maximum size in bytes of a single encoded value, `None` means no limit.
    MAX_ENCODED_SIZE: Optional[int] = Field(default=None, gt=0)

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'CodecSettings':
        """Takes a filepath to a yaml file and returns a validated CodecSettings instance."""
        from jamcodec.utils.yaml import model_from_extended_yaml
        return model_from_extended_yaml(cls, filepath=filepath)
