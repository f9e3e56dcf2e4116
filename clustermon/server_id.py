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

"""Identity of a server within one client's view of a cluster."""
from __future__ import annotations

import threading
from typing import Any, Optional

from clustermon.common import validate_instance, validate_non_negative_integer
from clustermon.endpoint import EndPoint


class ClusterId:
    """An id local to one client that names the cluster it monitors.

    :param value: Optional integer value. When omitted the next value of a
      process-wide counter is used.
    """

    __slots__ = ("_value",)

    _inc = 0
    _inc_lock = threading.Lock()

    def __init__(self, value: Optional[int] = None) -> None:
        if value is None:
            value = ClusterId._next_value()
        self._value = validate_non_negative_integer("value", value)

    @classmethod
    def _next_value(cls) -> int:
        with cls._inc_lock:
            cls._inc += 1
            return cls._inc

    @property
    def value(self) -> int:
        return self._value

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ClusterId):
            return self._value == other.value
        return NotImplemented

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"ClusterId({self._value!r})"


class ServerId:
    """A server's :class:`EndPoint` paired with the :class:`ClusterId` that owns it."""

    __slots__ = ("_cluster_id", "_end_point")

    def __init__(self, cluster_id: ClusterId, end_point: EndPoint) -> None:
        self._cluster_id = validate_instance("cluster_id", cluster_id, ClusterId)
        self._end_point = validate_instance("end_point", end_point, EndPoint)

    @property
    def cluster_id(self) -> ClusterId:
        return self._cluster_id

    @property
    def end_point(self) -> EndPoint:
        return self._end_point

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, ServerId):
            return self._cluster_id == other.cluster_id and self._end_point == other.end_point
        return NotImplemented

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash((self._cluster_id, self._end_point))

    def __repr__(self) -> str:
        return f"ServerId({self._cluster_id.value}, {self._end_point})"
