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

"""A snapshot of replica set membership as reported by one member."""
from __future__ import annotations

from typing import Any, FrozenSet, Iterable, Optional, Tuple

from clustermon.common import (
    validate_instance,
    validate_instance_or_none,
    validate_non_negative_integer,
    validate_string_or_none,
)
from clustermon.endpoint import EndPoint


class ReplicaSetConfig:
    """Immutable view of a replica set's configuration.

    :param members: The :class:`~clustermon.endpoint.EndPoint` of every
      known member (hosts, passives and arbiters).
    :param name: Optional replica set name.
    :param primary: Optional, this member's opinion about who the primary is.
    :param version: Optional, the config version (``setVersion``).

    Two configs with the same members listed in a different order are equal.
    """

    __slots__ = ("_members", "_member_set", "_name", "_primary", "_version")

    def __init__(
        self,
        members: Iterable[EndPoint],
        name: Optional[str] = None,
        primary: Optional[EndPoint] = None,
        version: Optional[int] = None,
    ) -> None:
        self._members: Tuple[EndPoint, ...] = tuple(
            validate_instance("members", member, EndPoint) for member in members
        )
        self._member_set: FrozenSet[EndPoint] = frozenset(self._members)
        self._name = validate_string_or_none("name", name)
        self._primary = validate_instance_or_none("primary", primary, EndPoint)
        if version is not None:
            version = validate_non_negative_integer("version", version)
        self._version = version

    @classmethod
    def empty(cls) -> ReplicaSetConfig:
        """A config with no members, name, primary or version."""
        return cls([])

    @property
    def members(self) -> Tuple[EndPoint, ...]:
        return self._members

    @property
    def name(self) -> Optional[str]:
        """Replica set name or None."""
        return self._name

    @property
    def primary(self) -> Optional[EndPoint]:
        return self._primary

    @property
    def version(self) -> Optional[int]:
        return self._version

    def _key(self) -> Tuple[Any, ...]:
        return self._member_set, self._name, self._primary, self._version

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ReplicaSetConfig):
            return self._key() == other._key()
        return NotImplemented

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        members = ", ".join(str(member) for member in self._members)
        return "<ReplicaSetConfig name: {!r}, primary: {}, version: {!r}, members: [{}]>".format(
            self._name,
            self._primary,
            self._version,
            members,
        )
