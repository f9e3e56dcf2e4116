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

"""Host and port address of one server."""
from __future__ import annotations

from typing import Any, Optional, Tuple, Union

from clustermon.common import DEFAULT_PORT, validate_port, validate_string
from clustermon.errors import InvalidArgument


class EndPoint:
    """Immutable (host, port) address of a server.

    The host is normalized to lowercase, since DNS is case-insensitive:
    https://tools.ietf.org/html/rfc4343

    :param host: A hostname or IP address. IPv6 literals are given without
      the enclosing brackets.
    :param port: The port number, defaults to 27017.
    """

    __slots__ = ("_host", "_port")

    def __init__(self, host: str, port: int = DEFAULT_PORT) -> None:
        self._host = validate_string("host", host).lower()
        self._port = validate_port("port", port)

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def address(self) -> Tuple[str, int]:
        """The (host, port) pair."""
        return self._host, self._port

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, EndPoint):
            return self.address == other.address
        return NotImplemented

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash(self.address)

    def __str__(self) -> str:
        if ":" in self._host:
            return f"[{self._host}]:{self._port}"
        return f"{self._host}:{self._port}"

    def __repr__(self) -> str:
        return f"EndPoint({self._host!r}, {self._port!r})"


def _parse_ipv6_literal_host(entity: str) -> Tuple[str, Optional[str]]:
    """Split an IPv6 literal like '[::1]' or '[::1]:27017'."""
    if entity.find("]") == -1:
        raise InvalidArgument(
            "an IPv6 address literal must be enclosed in '[' and ']' according to RFC 2732."
        )
    i = entity.find("]:")
    if i == -1:
        return entity[1:-1], None
    return entity[1:i], entity[i + 2 :]


def parse_endpoint(entity: str, default_port: int = DEFAULT_PORT) -> EndPoint:
    """Parse a host or host:port string into an :class:`EndPoint`.

    :param entity: A host or host:port string where host could be a
      hostname or IP address.
    :param default_port: The port number to use when one wasn't
      specified in entity.
    """
    validate_string("entity", entity)
    host = entity
    port: Optional[Union[str, int]] = None
    if entity[0] == "[":
        host, port = _parse_ipv6_literal_host(entity)
    elif entity.find(":") != -1:
        if entity.count(":") > 1:
            raise InvalidArgument(
                "An IPv6 address literal must be enclosed in '[' "
                "and ']' according to RFC 2732."
            )
        host, port = host.split(":", 1)
    if port is None:
        port = default_port
    elif not (port.isascii() and port.isdigit()):
        raise InvalidArgument(f"Port contains non-digit characters: {entity!r}")
    return EndPoint(host, int(port))
