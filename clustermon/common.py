# Copyright 2014-present MongoDB, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Functions and classes common to multiple clustermon modules."""
from __future__ import annotations

import math
from typing import Any, Sequence, Type, TypeVar

from clustermon.errors import InvalidArgument

_T = TypeVar("_T")

# Port assumed when a host string carries none.
DEFAULT_PORT = 27017

MIN_PORT = 1
MAX_PORT = 65535


def validate_not_none(option: str, value: _T) -> _T:
    """Validate that 'value' was supplied."""
    if value is None:
        raise InvalidArgument(f"{option} must not be None")
    return value


def validate_instance(option: str, value: Any, cls: Type[_T]) -> _T:
    """Validate that 'value' is present and an instance of 'cls'."""
    validate_not_none(option, value)
    if not isinstance(value, cls):
        raise TypeError(
            f"Wrong type for {option}, value must be an instance of {cls.__name__}, "
            f"not {type(value).__name__}"
        )
    return value


def validate_instance_or_none(option: str, value: Any, cls: Type[_T]) -> Any:
    """Validate that 'value' is None or an instance of 'cls'."""
    if value is None:
        return value
    return validate_instance(option, value, cls)


def validate_int(option: str, value: Any) -> int:
    """Validates that 'value' is an int, without string coercion."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Wrong type for {option}, value must be an int")
    return value


def validate_integer(option: str, value: Any) -> int:
    """Validates that 'value' is an integer (or string representation)."""
    if isinstance(value, bool):
        raise TypeError(f"Wrong type for {option}, value must be an integer")
    if isinstance(value, int):
        return value
    elif isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            raise InvalidArgument(f"The value of {option} must be an integer") from None
    raise TypeError(f"Wrong type for {option}, value must be an integer")


def validate_non_negative_integer(option: str, value: Any) -> int:
    """Validate that 'value' is a positive integer or 0."""
    val = validate_integer(option, value)
    if val < 0:
        raise InvalidArgument(f"The value of {option} must be a non negative integer")
    return val


def validate_port(option: str, value: Any) -> int:
    """Validate that 'value' is a usable TCP port number."""
    val = validate_integer(option, value)
    if not MIN_PORT <= val <= MAX_PORT:
        raise InvalidArgument(
            f"The value of {option} must be an integer between {MIN_PORT} and {MAX_PORT}"
        )
    return val


def validate_non_negative_float(option: str, value: Any) -> float:
    """Validates that 'value' is a finite float greater than or equal to 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Wrong type for {option}, value must be an int or float")
    value = float(value)
    if math.isnan(value) or math.isinf(value):
        raise InvalidArgument(f"The value of {option} must be a finite number")
    if value < 0:
        raise InvalidArgument(f"The value of {option} must be greater than or equal to 0")
    return value


def validate_string(option: str, value: Any) -> str:
    """Validates that 'value' is a non-empty string."""
    validate_instance(option, value, str)
    if not value:
        raise InvalidArgument(f"The value of {option} must not be empty")
    return value


def validate_string_or_none(option: str, value: Any) -> Any:
    """Validates that 'value' is a non-empty string or None."""
    if value is None:
        return value
    return validate_string(option, value)


def validate_enum_member(option: str, value: Any, members: Sequence[int]) -> int:
    """Validate that 'value' is one of the members of a namedtuple enum."""
    if isinstance(value, bool) or not isinstance(value, int) or value not in members:
        raise InvalidArgument(f"{value!r} is not a valid value for {option}")
    return value
