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

A settings file may name another file in its `extends` key. The extended file is loaded first and the values of the
extending file are merged on top of it, nested mappings are merged key by key and anything else is replaced:

    # default.yml                      # testing.yml
    BUFFER_INITIAL_CAPACITY: 256       extends: default.yml
    MAX_REQUEST_BYTES: null            MAX_REQUEST_BYTES: 4096

`extends` is resolved relative to the extending file first and then relative to `custom_root`, which is how user files
extend the packaged `default.yml`.
"""

import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, TypeVar, Union

import yaml
from pydantic import BaseModel

_EXTENDS_KEY = 'extends'

T = TypeVar('T', bound=BaseModel)


def merge_settings_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """ Return a new dict with `override` merged on top of `base`, both inputs are left untouched.

    >>> base = {'A': 1, 'B': {'C': 2, 'D': 3}, 'E': {'F': 4}}
    >>> merge_settings_dicts(base, {'B': {'D': 5}, 'E': None})
    {'A': 1, 'B': {'C': 2, 'D': 5}, 'E': None}
    >>> base
    {'A': 1, 'B': {'C': 2, 'D': 3}, 'E': {'F': 4}}
    """
    merged = deepcopy(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = merge_settings_dicts(current, value)
        else:
            merged[key] = deepcopy(value)
    return merged


def dict_from_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """Read a yaml file that must hold a mapping, an empty file is an empty mapping."""
    if not os.path.isfile(filepath):
        raise ValueError(f"'{filepath}' is not a file")

    with open(filepath, 'r') as file:
        contents = yaml.safe_load(file)

    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")
    return contents


def _resolve_extends(filepath: Path, file_to_extend: str, custom_root: Optional[Path]) -> Path:
    candidate = filepath.parent / file_to_extend
    if not candidate.is_file() and custom_root is not None:
        candidate = custom_root / file_to_extend
    return candidate


def dict_from_extended_yaml(*, filepath: Union[Path, str], custom_root: Optional[Path] = None) -> dict[str, Any]:
    """ Read a yaml file following its `extends` chain, the `extends` key itself is not returned.

    A chain that goes back to a file already in it is rejected with ValueError.
    """
    chain: list[dict[str, Any]] = []
    seen: set[Path] = set()
    current: Optional[Path] = Path(filepath)

    while current is not None:
        resolved = current.resolve()
        if resolved in seen:
            raise ValueError(f"'{current}' is extended more than once, extensions cannot be recursive")
        seen.add(resolved)

        contents = dict_from_yaml(filepath=current)
        file_to_extend = contents.pop(_EXTENDS_KEY, None)
        chain.append(contents)
        current = _resolve_extends(current, str(file_to_extend), custom_root) if file_to_extend else None

    result: dict[str, Any] = {}
    for contents in reversed(chain):
        result = merge_settings_dicts(result, contents)
    return result


def model_from_extended_yaml(model: type[T], *, filepath: str, custom_root: Optional[Path] = None) -> T:
    """Read a yaml file following its `extends` chain and validate it into `model`."""
    return model.model_validate(dict_from_extended_yaml(filepath=filepath, custom_root=custom_root))
