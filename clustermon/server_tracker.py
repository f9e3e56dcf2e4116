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

"""Publish successive descriptions of one server."""
from __future__ import annotations

import logging
import threading
from typing import Optional, Sequence

from clustermon.endpoint import EndPoint
from clustermon.logger import _SDAM_LOGGER, _debug_log, _SDAMStatusMessage
from clustermon.monitoring import ServerListener, _EventListeners
from clustermon.replica_set_config import ReplicaSetConfig
from clustermon.semantic_version import SemanticVersion
from clustermon.server_description import ServerDescription
from clustermon.server_id import ServerId
from clustermon.tag_set import TagSet


class ServerDescriptionTracker:
    def __init__(
        self,
        server_id: ServerId,
        end_point: EndPoint,
        listeners: Optional[Sequence[ServerListener]] = None,
    ):
        """Hold the latest published description of one server.

        Pass the server's ServerId and EndPoint, and optionally a list of
        ServerListeners in addition to the globally registered ones.

        Heartbeat results are applied one at a time. Every result that
        changes the description is stamped with the next revision and
        published to the listeners; results that change nothing are dropped.
        Listeners run while the tracker lock is held and must not call back
        into the tracker.
        """
        self._description = ServerDescription(server_id, end_point)
        self._revision = 0
        self._lock = threading.Lock()
        self._listeners = _EventListeners(listeners)

    @property
    def description(self) -> ServerDescription:
        """The currently published description."""
        return self._description

    @property
    def revision(self) -> int:
        """The revision of the currently published description."""
        return self._revision

    def on_heartbeat_succeeded(
        self,
        average_round_trip_time: float,
        replica_set_config: Optional[ReplicaSetConfig],
        tags: Optional[TagSet],
        server_type: int,
        version: Optional[SemanticVersion],
    ) -> bool:
        """Apply a successful heartbeat. Return True if a new description was published."""
        with self._lock:
            current = self._description
            new = current.with_heartbeat_info(
                average_round_trip_time, replica_set_config, tags, server_type, version
            )
            if _SDAM_LOGGER.isEnabledFor(logging.DEBUG):
                _debug_log(
                    _SDAM_LOGGER,
                    message=_SDAMStatusMessage.HEARTBEAT_SUCCESS,
                    clusterId=current.server_id.cluster_id.value,
                    serverHost=current.end_point.host,
                    serverPort=current.end_point.port,
                    averageRoundTripTimeMS=new.average_round_trip_time * 1000,
                )
            return self._publish(current, new)

    def on_heartbeat_failed(self, error: Optional[Exception] = None) -> bool:
        """Reset to an unknown description. Return True if that changed anything."""
        with self._lock:
            current = self._description
            if _SDAM_LOGGER.isEnabledFor(logging.DEBUG):
                _debug_log(
                    _SDAM_LOGGER,
                    message=_SDAMStatusMessage.HEARTBEAT_FAIL,
                    clusterId=current.server_id.cluster_id.value,
                    serverHost=current.end_point.host,
                    serverPort=current.end_point.port,
                    failure=error,
                )
            return self._publish(current, current.to_unknown())

    def _publish(self, current: ServerDescription, new: ServerDescription) -> bool:
        # Must be called with the lock held.
        if new is current or new == current:
            return False

        self._revision += 1
        new = new.with_revision(self._revision)
        self._description = new
        if _SDAM_LOGGER.isEnabledFor(logging.DEBUG):
            _debug_log(
                _SDAM_LOGGER,
                message=_SDAMStatusMessage.DESCRIPTION_CHANGED,
                clusterId=new.server_id.cluster_id.value,
                serverHost=new.end_point.host,
                serverPort=new.end_point.port,
                revision=new.revision,
                previousDescription=current,
                newDescription=new,
            )
        if self._listeners.enabled_for_server:
            self._listeners.publish_server_description_changed(new.server_id, current, new)
        return True
