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

"""Version of the server software, as reported by the server."""
from __future__ import annotations

import functools
import re
from typing import Any, Optional, Tuple

from clustermon.common import validate_non_negative_integer, validate_string_or_none
from clustermon.errors import InvalidArgument

_VERSION_PATTERN = re.compile(
    r"^(?P<major>\d+)\.(?P<minor>\d+)(?:\.(?P<patch>\d+))?(?:-(?P<pre_release>.+))?$"
)


@functools.total_ordering
class SemanticVersion:
    """Immutable major.minor.patch[-pre_release] version.

    A pre-release sorts before the release it precedes, so
    ``3.0.0-rc1 < 3.0.0``.
    """

    __slots__ = ("_major", "_minor", "_patch", "_pre_release")

    def __init__(self, major: int, minor: int, patch: int, pre_release: Optional[str] = None):
        self._major = validate_non_negative_integer("major", major)
        self._minor = validate_non_negative_integer("minor", minor)
        self._patch = validate_non_negative_integer("patch", patch)
        self._pre_release = validate_string_or_none("pre_release", pre_release)

    @classmethod
    def parse(cls, value: str) -> SemanticVersion:
        """Parse a version string like ``"2.6.3"`` or ``"3.0.0-rc1"``.

        A missing patch level is read as 0.
        """
        if not isinstance(value, str):
            raise TypeError("Wrong type for value, value must be a string")
        match = _VERSION_PATTERN.match(value.strip())
        if match is None:
            raise InvalidArgument(f"Invalid semantic version: {value!r}")
        return cls(
            int(match["major"]),
            int(match["minor"]),
            int(match["patch"] or 0),
            match["pre_release"],
        )

    @property
    def major(self) -> int:
        return self._major

    @property
    def minor(self) -> int:
        return self._minor

    @property
    def patch(self) -> int:
        return self._patch

    @property
    def pre_release(self) -> Optional[str]:
        return self._pre_release

    def _key(self) -> Tuple[Any, ...]:
        return self._major, self._minor, self._patch, self._pre_release

    def _sort_key(self) -> Tuple[Any, ...]:
        # Releases sort after any of their pre-releases.
        if self._pre_release is None:
            return self._major, self._minor, self._patch, 1, ""
        return self._major, self._minor, self._patch, 0, self._pre_release

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, SemanticVersion):
            return self._key() == other._key()
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if isinstance(other, SemanticVersion):
            return self._sort_key() < other._sort_key()
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        version = f"{self._major}.{self._minor}.{self._patch}"
        if self._pre_release is not None:
            version += f"-{self._pre_release}"
        return version

    def __repr__(self) -> str:
        return f"SemanticVersion({str(self)!r})"
