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

"""Type codes for the roles a server can play in a cluster."""
from __future__ import annotations

from typing import NamedTuple


class _ServerType(NamedTuple):
    Unknown: int
    Standalone: int
    ShardRouter: int
    ReplicaSetPrimary: int
    ReplicaSetSecondary: int
    ReplicaSetPassive: int
    ReplicaSetArbiter: int
    ReplicaSetOther: int
    ReplicaSetGhost: int


SERVER_TYPE = _ServerType(*range(9))

_REPLICA_SET_MEMBER_TYPES = frozenset(
    [
        SERVER_TYPE.ReplicaSetPrimary,
        SERVER_TYPE.ReplicaSetSecondary,
        SERVER_TYPE.ReplicaSetPassive,
        SERVER_TYPE.ReplicaSetArbiter,
        SERVER_TYPE.ReplicaSetOther,
        SERVER_TYPE.ReplicaSetGhost,
    ]
)

_WRITABLE_TYPES = frozenset(
    [SERVER_TYPE.Standalone, SERVER_TYPE.ShardRouter, SERVER_TYPE.ReplicaSetPrimary]
)

_READABLE_TYPES = _WRITABLE_TYPES | frozenset(
    [SERVER_TYPE.ReplicaSetSecondary, SERVER_TYPE.ReplicaSetPassive]
)


def server_type_name(server_type: int) -> str:
    return SERVER_TYPE._fields[server_type]


def is_replica_set_member(server_type: int) -> bool:
    """True for every replica set role, ghosts included."""
    return server_type in _REPLICA_SET_MEMBER_TYPES


def is_writable(server_type: int) -> bool:
    return server_type in _WRITABLE_TYPES


def is_readable(server_type: int) -> bool:
    return server_type in _READABLE_TYPES
