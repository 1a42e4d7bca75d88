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
YAML loading for settings files.

A file can build on top of another one by naming it under the reserved `extends` key, the path is relative to the
extending file. The base is loaded first (and may itself extend another file) and each key of the extending file
replaces the same key of the base, so only the settings that change need to be written. Values are replaced as a
whole, nested mappings are not merged.
"""

from pathlib import Path
from typing import Any, Optional, TypeVar, Union

import yaml
from pydantic import BaseModel

_EXTENDS_KEY = 'extends'

T = TypeVar('T', bound=BaseModel)


def dict_from_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """Load a yaml file that must hold a mapping, an empty file counts as an empty mapping."""
    path = Path(filepath)
    if not path.is_file():
        raise ValueError(f"'{path}' is not a file")

    with path.open('r') as file:
        contents = yaml.safe_load(file)

    match contents:
        case None:
            return {}
        case dict():
            return contents
        case _:
            raise ValueError(f"'{path}' cannot be parsed as a dictionary")


def dict_from_extended_yaml(*, filepath: Union[Path, str], _seen: Optional[set[Path]] = None) -> dict[str, Any]:
    """
    Load a yaml file following its 'extends' chain.

    The 'extends' key itself is never present in the result, use dict_from_yaml() to read a file as is.
    """
    path = Path(filepath).resolve()
    seen = set() if _seen is None else _seen
    if path in seen:
        raise ValueError(f"'{path}' is extended more than once in the same chain")
    seen.add(path)

    contents = dict_from_yaml(filepath=path)
    base_file = contents.pop(_EXTENDS_KEY, None)
    if not base_file:
        return contents

    base = dict_from_extended_yaml(filepath=path.parent / str(base_file), _seen=seen)
    return {**base, **contents}


def model_from_extended_yaml(model: type[T], *, filepath: Union[Path, str]) -> T:
    """Takes a pydantic model and a filepath to a yaml file and returns a validated model instance."""
    return model.model_validate(dict_from_extended_yaml(filepath=filepath))
