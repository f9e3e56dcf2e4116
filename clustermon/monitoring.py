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

"""Tools to monitor changes to the description of a server.

Use :func:`register` to register global listeners for the events of every
:class:`~clustermon.server_tracker.ServerDescriptionTracker`, or pass a list
of listeners to a tracker directly.

Listeners must inherit from :class:`ServerListener` and implement
:meth:`~ServerListener.description_changed`. For example, a simple listener
that logs every change::

    import logging

    from clustermon import monitoring

    class ServerLogger(monitoring.ServerListener):

        def description_changed(self, event):
            logging.info("Server {0.server_id} changed from {0.previous_description!r} "
                         "to {0.new_description!r}".format(event))

    monitoring.register(ServerLogger())

Exceptions raised by a listener are printed to stderr and do not prevent
other listeners from being notified.
"""
from __future__ import annotations

import sys
import traceback
from typing import TYPE_CHECKING, Any, List, Optional, Sequence

if TYPE_CHECKING:
    from clustermon.server_description import ServerDescription
    from clustermon.server_id import ServerId


class _Listeners:
    """Listeners registered with :func:`register`."""

    def __init__(self) -> None:
        self.server_listeners: List[ServerListener] = []


_LISTENERS = _Listeners()


class ServerListener:
    """Abstract base class for server description listeners."""

    def description_changed(self, event: ServerDescriptionChangedEvent) -> None:
        """Abstract method to handle a `ServerDescriptionChangedEvent`.

        :param event: An instance of :class:`ServerDescriptionChangedEvent`.
        """
        raise NotImplementedError


def _validate_event_listeners(option: str, listeners: Sequence[Any]) -> Sequence[Any]:
    """Validate event listeners."""
    if not isinstance(listeners, (list, tuple)):
        raise TypeError(f"{option} must be a list or tuple")
    for listener in listeners:
        if not isinstance(listener, ServerListener):
            raise TypeError(
                f"Listeners for {option} must be a subclass of ServerListener, "
                f"not {type(listener).__name__}"
            )
    return listeners


def register(listener: ServerListener) -> None:
    """Register a global event listener.

    :param listener: A subclass of :class:`ServerListener`.
    """
    _validate_event_listeners("listener", [listener])
    _LISTENERS.server_listeners.append(listener)


def _handle_exception() -> None:
    """Print exceptions raised by subscribers to stderr."""
    # Heavily influenced by logging.Handler.handleError.

    # See note here:
    # https://docs.python.org/3.4/library/sys.html#sys.__stderr__
    if sys.stderr:
        einfo = sys.exc_info()
        try:
            traceback.print_exception(einfo[0], einfo[1], einfo[2], None, sys.stderr)
        except OSError:
            pass
        finally:
            del einfo


class ServerDescriptionChangedEvent:
    """Published when a server's description changes.

    :param server_id: The :class:`~clustermon.server_id.ServerId` of the server.
    :param previous_description: The description before the change.
    :param new_description: The newly published description.
    """

    __slots__ = ("__server_id", "__previous_description", "__new_description")

    def __init__(
        self,
        server_id: ServerId,
        previous_description: ServerDescription,
        new_description: ServerDescription,
    ) -> None:
        self.__server_id = server_id
        self.__previous_description = previous_description
        self.__new_description = new_description

    @property
    def server_id(self) -> ServerId:
        return self.__server_id

    @property
    def previous_description(self) -> ServerDescription:
        """The previous
        :class:`~clustermon.server_description.ServerDescription`.
        """
        return self.__previous_description

    @property
    def new_description(self) -> ServerDescription:
        """The new
        :class:`~clustermon.server_description.ServerDescription`.
        """
        return self.__new_description

    def __repr__(self) -> str:
        return "<{} {!r} changed from: {!r}, to: {!r}>".format(
            self.__class__.__name__,
            self.__server_id,
            self.__previous_description,
            self.__new_description,
        )


class _EventListeners:
    """Configure event listeners for one tracker.

    Any event listeners registered globally are included by default.

    :param listeners: A list of event listeners.
    """

    def __init__(self, listeners: Optional[Sequence[ServerListener]]) -> None:
        self.__server_listeners = _LISTENERS.server_listeners[:]
        if listeners is not None:
            self.__server_listeners.extend(_validate_event_listeners("listeners", listeners))
        self.__enabled_for_server = bool(self.__server_listeners)

    @property
    def enabled_for_server(self) -> bool:
        """Are any ServerListener instances registered?"""
        return self.__enabled_for_server

    @property
    def event_listeners(self) -> List[ServerListener]:
        """List of registered event listeners."""
        return self.__server_listeners[:]

    def publish_server_description_changed(
        self,
        server_id: ServerId,
        previous_description: ServerDescription,
        new_description: ServerDescription,
    ) -> None:
        """Publish a ServerDescriptionChangedEvent to all server listeners.

        :param server_id: The server's id.
        :param previous_description: The previous server description.
        :param new_description: The new server description.
        """
        event = ServerDescriptionChangedEvent(server_id, previous_description, new_description)
        for subscriber in self.__server_listeners:
            try:
                subscriber.description_changed(event)
            except Exception:
                _handle_exception()
