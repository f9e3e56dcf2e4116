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

"""Utilities for testing clustermon."""
from __future__ import annotations

from collections import defaultdict
from typing import List

from clustermon import monitoring
from clustermon.endpoint import EndPoint
from clustermon.server_description import ServerDescription
from clustermon.server_id import ClusterId, ServerId


def make_server_id(host="localhost", port=27017, cluster_id=1):
    return ServerId(ClusterId(cluster_id), EndPoint(host, port))


def unknown_description(host="localhost", port=27017, cluster_id=1):
    server_id = make_server_id(host, port, cluster_id)
    return ServerDescription(server_id, server_id.end_point)


class ServerEventListener(monitoring.ServerListener):
    def __init__(self):
        self.results = defaultdict(list)

    @property
    def changed_events(self) -> List[monitoring.ServerDescriptionChangedEvent]:
        return self.results["description_changed"]

    def description_changed(self, event):
        assert isinstance(event, monitoring.ServerDescriptionChangedEvent)
        self.results["description_changed"].append(event)

    def reset(self):
        """Reset the state of this listener."""
        self.results.clear()


class RaisingListener(monitoring.ServerListener):
    def __init__(self):
        self.calls = 0

    def description_changed(self, event):
        self.calls += 1
        raise RuntimeError("listener failure")
