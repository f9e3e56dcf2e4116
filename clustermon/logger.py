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
from __future__ import annotations

import enum
import logging
import os
from typing import Any

from bson import UuidRepresentation, json_util
from bson.json_util import JSONOptions


class _SDAMStatusMessage(str, enum.Enum):
    DESCRIPTION_CHANGED = "Server description changed"
    HEARTBEAT_SUCCESS = "Server heartbeat succeeded"
    HEARTBEAT_FAIL = "Server heartbeat failed"


_DEFAULT_DOCUMENT_LENGTH = 1000
_MAX_DOCUMENT_LENGTH_ENV = "CLUSTERMON_LOG_MAX_DOCUMENT_LENGTH"
_JSON_OPTIONS = JSONOptions(uuid_representation=UuidRepresentation.STANDARD)
_SDAM_LOGGER = logging.getLogger("clustermon.topology")


def _debug_log(logger: logging.Logger, **fields: Any) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(LogMessage(**fields))


def _max_document_length() -> int:
    try:
        document_length = int(os.getenv(_MAX_DOCUMENT_LENGTH_ENV, _DEFAULT_DOCUMENT_LENGTH))
    except ValueError:
        return _DEFAULT_DOCUMENT_LENGTH
    if document_length < 0:
        return _DEFAULT_DOCUMENT_LENGTH
    return document_length


class LogMessage:
    __slots__ = ["_kwargs"]

    def __init__(self, **kwargs: Any):
        self._kwargs = kwargs

        if "durationMS" in self._kwargs:
            self._kwargs["durationMS"] = self._kwargs["durationMS"].total_seconds() * 1000
        if "failure" in self._kwargs and self._kwargs["failure"] is None:
            del self._kwargs["failure"]

    def __str__(self) -> str:
        self._truncate()
        return "%s" % (
            json_util.dumps(
                self._kwargs, json_options=_JSON_OPTIONS, default=lambda o: o.__repr__()
            )
        )

    def _truncate(self) -> None:
        document_length = _max_document_length()
        for name, value in self._kwargs.items():
            if not isinstance(value, (str, int, float, bool)) and value is not None:
                value = repr(value)
                self._kwargs[name] = value
            if isinstance(value, str) and len(value) > document_length:
                self._kwargs[name] = value[:document_length] + "..."
