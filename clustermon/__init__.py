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

"""Client-side descriptions of the servers in a cluster."""
from __future__ import annotations

from clustermon import _version
from clustermon._version import __version__, get_version_string, version_tuple
from clustermon.endpoint import EndPoint, parse_endpoint
from clustermon.errors import ClusterMonError, InvalidArgument
from clustermon.replica_set_config import ReplicaSetConfig
from clustermon.semantic_version import SemanticVersion
from clustermon.server_description import ServerDescription
from clustermon.server_id import ClusterId, ServerId
from clustermon.server_state import SERVER_STATE
from clustermon.server_tracker import ServerDescriptionTracker
from clustermon.server_type import SERVER_TYPE
from clustermon.tag_set import Tag, TagSet

__all__ = [
    "__version__",
    "get_version_string",
    "version_tuple",
    "ClusterId",
    "ClusterMonError",
    "EndPoint",
    "InvalidArgument",
    "ReplicaSetConfig",
    "SERVER_STATE",
    "SERVER_TYPE",
    "SemanticVersion",
    "ServerDescription",
    "ServerDescriptionTracker",
    "ServerId",
    "Tag",
    "TagSet",
    "parse_endpoint",
]

version = _version.version
"""Current version of clustermon."""
