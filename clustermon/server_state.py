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

"""Observed connectivity of a server."""
from __future__ import annotations

from typing import NamedTuple


class _ServerState(NamedTuple):
    Disconnected: int
    Connecting: int
    Connected: int


SERVER_STATE = _ServerState(*range(3))


def server_state_name(state: int) -> str:
    return SERVER_STATE._fields[state]
