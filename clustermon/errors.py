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

"""Exceptions raised by clustermon."""
from __future__ import annotations


class ClusterMonError(Exception):
    """Base class for all clustermon exceptions."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self._message = message


class InvalidArgument(ClusterMonError, ValueError):
    """Raised when a value object is built from missing or inconsistent input.

    This is a programming error at the call site, never a transient
    condition, so it is raised synchronously by constructors and parsers.

    Subclass of :exc:`~clustermon.errors.ClusterMonError` and
    :exc:`ValueError`.
    """
