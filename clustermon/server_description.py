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

"""Represent one server in the cluster."""
from __future__ import annotations

from typing import Any, Optional, Tuple

from clustermon import server_type as _server_type
from clustermon.common import (
    validate_enum_member,
    validate_instance,
    validate_instance_or_none,
    validate_int,
    validate_non_negative_float,
)
from clustermon.endpoint import EndPoint
from clustermon.errors import InvalidArgument
from clustermon.replica_set_config import ReplicaSetConfig
from clustermon.semantic_version import SemanticVersion
from clustermon.server_id import ServerId
from clustermon.server_state import SERVER_STATE, server_state_name
from clustermon.server_type import SERVER_TYPE
from clustermon.tag_set import TagSet


class ServerDescription:
    """Immutable representation of one server.

    ``ServerDescription(server_id, end_point)`` describes a server nothing is
    known about yet: Disconnected, of type Unknown, with a round trip time of
    0 and no config, tags or version.

    :param server_id: The :class:`~clustermon.server_id.ServerId`.
    :param end_point: The :class:`~clustermon.endpoint.EndPoint`, must equal
      ``server_id.end_point``.
    :param state: A member of :data:`~clustermon.server_state.SERVER_STATE`.
    :param server_type: A member of :data:`~clustermon.server_type.SERVER_TYPE`.
    :param average_round_trip_time: Non-negative float, in seconds.
    :param replica_set_config: Optional
      :class:`~clustermon.replica_set_config.ReplicaSetConfig`.
    :param tags: Optional :class:`~clustermon.tag_set.TagSet`.
    :param version: Optional :class:`~clustermon.semantic_version.SemanticVersion`.

    Two descriptions are equal when every field except :attr:`revision` is
    equal. The revision is a generation number assigned by whoever publishes
    the description, see :meth:`with_revision`.
    """

    __slots__ = (
        "_server_id",
        "_end_point",
        "_state",
        "_server_type",
        "_average_round_trip_time",
        "_replica_set_config",
        "_tags",
        "_version",
        "_revision",
    )

    def __init__(
        self,
        server_id: ServerId,
        end_point: EndPoint,
        state: int = SERVER_STATE.Disconnected,
        server_type: int = SERVER_TYPE.Unknown,
        average_round_trip_time: float = 0.0,
        replica_set_config: Optional[ReplicaSetConfig] = None,
        tags: Optional[TagSet] = None,
        version: Optional[SemanticVersion] = None,
    ) -> None:
        self._server_id = validate_instance("server_id", server_id, ServerId)
        self._end_point = validate_instance("end_point", end_point, EndPoint)
        if end_point != server_id.end_point:
            raise InvalidArgument(
                f"end_point {end_point} does not match server_id.end_point {server_id.end_point}"
            )
        self._state = validate_enum_member("state", state, SERVER_STATE)
        self._server_type = validate_enum_member("server_type", server_type, SERVER_TYPE)
        self._average_round_trip_time = validate_non_negative_float(
            "average_round_trip_time", average_round_trip_time
        )
        self._replica_set_config = validate_instance_or_none(
            "replica_set_config", replica_set_config, ReplicaSetConfig
        )
        self._tags = validate_instance_or_none("tags", tags, TagSet)
        self._version = validate_instance_or_none("version", version, SemanticVersion)
        self._revision = 0

    @property
    def server_id(self) -> ServerId:
        return self._server_id

    @property
    def end_point(self) -> EndPoint:
        return self._end_point

    @property
    def state(self) -> int:
        return self._state

    @property
    def state_name(self) -> str:
        return server_state_name(self._state)

    @property
    def server_type(self) -> int:
        return self._server_type

    @property
    def server_type_name(self) -> str:
        return _server_type.server_type_name(self._server_type)

    @property
    def average_round_trip_time(self) -> float:
        """The average latency, in seconds. 0 until a heartbeat succeeds."""
        return self._average_round_trip_time

    @property
    def replica_set_config(self) -> Optional[ReplicaSetConfig]:
        return self._replica_set_config

    @property
    def replica_set_name(self) -> Optional[str]:
        """Replica set name or None."""
        if self._replica_set_config is None:
            return None
        return self._replica_set_config.name

    @property
    def tags(self) -> Optional[TagSet]:
        return self._tags

    @property
    def version(self) -> Optional[SemanticVersion]:
        """The server's version or None."""
        return self._version

    @property
    def revision(self) -> int:
        """Generation number. Not part of equality or hashing."""
        return self._revision

    @property
    def is_server_type_known(self) -> bool:
        return self._server_type != SERVER_TYPE.Unknown

    @property
    def is_replica_set_member(self) -> bool:
        return _server_type.is_replica_set_member(self._server_type)

    @property
    def is_writable(self) -> bool:
        return _server_type.is_writable(self._server_type)

    @property
    def is_readable(self) -> bool:
        return _server_type.is_readable(self._server_type)

    def with_heartbeat_info(
        self,
        average_round_trip_time: float,
        replica_set_config: Optional[ReplicaSetConfig],
        tags: Optional[TagSet],
        server_type: int,
        version: Optional[SemanticVersion],
    ) -> ServerDescription:
        """Describe this server after a successful heartbeat.

        The result is always Connected, with revision 0. If this description
        is already Connected and all the given values equal the current ones,
        this same instance is returned, so callers can test ``new is old``
        before falling back to ``new == old``.
        """
        if (
            self._state == SERVER_STATE.Connected
            and self._average_round_trip_time == average_round_trip_time
            and self._replica_set_config == replica_set_config
            and self._tags == tags
            and self._server_type == server_type
            and self._version == version
        ):
            return self

        return ServerDescription(
            self._server_id,
            self._end_point,
            SERVER_STATE.Connected,
            server_type,
            average_round_trip_time,
            replica_set_config,
            tags,
            version,
        )

    def with_revision(self, value: int) -> ServerDescription:
        """A copy of this description with another revision.

        Returns this same instance when the revision is unchanged.
        """
        value = validate_int("revision", value)
        if self._revision == value:
            return self

        description = ServerDescription(
            self._server_id,
            self._end_point,
            self._state,
            self._server_type,
            self._average_round_trip_time,
            self._replica_set_config,
            self._tags,
            self._version,
        )
        description._revision = value
        return description

    def to_unknown(self) -> ServerDescription:
        """A new Disconnected, Unknown description of the same server."""
        return ServerDescription(self._server_id, self._end_point)

    def _comparison_key(self) -> Tuple[Any, ...]:
        # Every field but the revision.
        return (
            self._server_id,
            self._end_point,
            self._state,
            self._server_type,
            self._average_round_trip_time,
            self._replica_set_config,
            self._tags,
            self._version,
        )

    def __eq__(self, other: Any) -> bool:
        if other.__class__ is self.__class__:
            return self._comparison_key() == other._comparison_key()
        return NotImplemented

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash(self._comparison_key())

    def __repr__(self) -> str:
        return (
            "<{} server_id: {!r}, end_point: {}, state: {}, server_type: {}, "
            "tags: {!r}, revision: {}>".format(
                self.__class__.__name__,
                self._server_id,
                self._end_point,
                self.state_name,
                self.server_type_name,
                self._tags,
                self._revision,
            )
        )
