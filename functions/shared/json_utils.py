# Copyright 2025 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================
"""Helpers for converting dictionary keys between camelCase and snake_case."""

import re
from typing import Any

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def camel_to_snake(name: str) -> str:
    """Converts e.g. "teacherUsername" to "teacher_username"."""
    return _CAMEL_BOUNDARY.sub(r"_\1", name).lower()


def snake_to_camel(name: str) -> str:
    """Converts e.g. "fcm_token" to "fcmToken"."""
    first, *rest = name.split("_")
    return first + "".join(part[:1].upper() + part[1:] for part in rest)


def convert_keys(obj: Any, direction: str) -> Any:
    """
    Recursively converts the keys of dictionaries nested in `obj`.

    Args:
        obj: A dict, list or scalar value.
        direction (str): Either "camel_to_snake" or "snake_to_camel".

    Returns:
        A copy of `obj` with converted keys. Values are left untouched.

    If two keys map to the same converted key (e.g. "fcmToken" and
    "fcm_token"), the key that was actually converted wins, regardless of
    the order of the keys in the dictionary.
    """
    if direction == "camel_to_snake":
        convert = camel_to_snake
    elif direction == "snake_to_camel":
        convert = snake_to_camel
    else:
        raise ValueError(f"Unknown key conversion direction: {direction}")

    def _convert(value: Any) -> Any:
        if isinstance(value, dict):
            result = {}
            for k, v in value.items():
                new_key = convert(k) if isinstance(k, str) else k
                if new_key in result and new_key == k:
                    continue
                result[new_key] = _convert(v)
            return result
        if isinstance(value, list):
            return [_convert(item) for item in value]
        return value

    return _convert(obj)
