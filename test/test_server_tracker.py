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

"""Test the server_tracker and monitoring modules."""
from __future__ import annotations

import io
import threading
import sys
from unittest.mock import patch

sys.path[0:0] = [""]

from test import unittest
from test.utils import RaisingListener, ServerEventListener, make_server_id

from clustermon import monitoring
from clustermon.endpoint import EndPoint
from clustermon.replica_set_config import ReplicaSetConfig
from clustermon.semantic_version import SemanticVersion
from clustermon.server_description import ServerDescription
from clustermon.server_state import SERVER_STATE
from clustermon.server_tracker import ServerDescriptionTracker
from clustermon.server_type import SERVER_TYPE
from clustermon.tag_set import TagSet


def create_tracker(listeners=None, host="db1"):
    server_id = make_server_id(host)
    return ServerDescriptionTracker(server_id, server_id.end_point, listeners)


class TestServerDescriptionTracker(unittest.TestCase):
    def test_initial_description(self):
        tracker = create_tracker()
        sid = make_server_id("db1")
        self.assertEqual(ServerDescription(sid, sid.end_point), tracker.description)
        self.assertEqual(0, tracker.revision)
        self.assertEqual(0, tracker.description.revision)

    def test_heartbeats(self):
        listener = ServerEventListener()
        tracker = create_tracker([listener])
        initial = tracker.description

        self.assertTrue(
            tracker.on_heartbeat_succeeded(0.005, None, None, SERVER_TYPE.Standalone, None)
        )
        first = tracker.description
        self.assertEqual(SERVER_STATE.Connected, first.state)
        self.assertEqual(1, first.revision)
        self.assertEqual(1, tracker.revision)

        # Nothing changed: the very same description stays published.
        self.assertFalse(
            tracker.on_heartbeat_succeeded(0.005, None, None, SERVER_TYPE.Standalone, None)
        )
        self.assertIs(first, tracker.description)
        self.assertEqual(1, tracker.revision)

        self.assertTrue(
            tracker.on_heartbeat_succeeded(0.007, None, None, SERVER_TYPE.Standalone, None)
        )
        second = tracker.description
        self.assertEqual(2, second.revision)
        self.assertEqual(0.007, second.average_round_trip_time)
        self.assertEqual(0.005, first.average_round_trip_time)

        events = listener.changed_events
        self.assertEqual(2, len(events))
        self.assertIs(initial, events[0].previous_description)
        self.assertIs(first, events[0].new_description)
        self.assertIs(first, events[1].previous_description)
        self.assertIs(second, events[1].new_description)
        self.assertEqual(make_server_id("db1"), events[1].server_id)

    def test_replica_set_heartbeat(self):
        tracker = create_tracker()
        config = ReplicaSetConfig([EndPoint("db1"), EndPoint("db2")], "rs", EndPoint("db1"), 1)
        tags = TagSet({"dc": "ny"})
        tracker.on_heartbeat_succeeded(
            0.002, config, tags, SERVER_TYPE.ReplicaSetPrimary, SemanticVersion(4, 4, 0)
        )
        sd = tracker.description
        self.assertEqual("rs", sd.replica_set_name)
        self.assertEqual(tags, sd.tags)
        self.assertTrue(sd.is_writable)

        # Members reported in another order is not a change.
        same_config = ReplicaSetConfig([EndPoint("db2"), EndPoint("db1")], "rs", EndPoint("db1"), 1)
        self.assertFalse(
            tracker.on_heartbeat_succeeded(
                0.002, same_config, tags, SERVER_TYPE.ReplicaSetPrimary, SemanticVersion(4, 4, 0)
            )
        )
        self.assertIs(sd, tracker.description)

    def test_heartbeat_failed(self):
        listener = ServerEventListener()
        tracker = create_tracker([listener])

        # Already unknown, nothing to publish.
        self.assertFalse(tracker.on_heartbeat_failed())
        self.assertEqual(0, tracker.revision)

        tracker.on_heartbeat_succeeded(0.005, None, None, SERVER_TYPE.Standalone, None)
        self.assertTrue(tracker.on_heartbeat_failed(ConnectionError("closed")))
        sd = tracker.description
        self.assertEqual(SERVER_STATE.Disconnected, sd.state)
        self.assertEqual(SERVER_TYPE.Unknown, sd.server_type)
        self.assertEqual(2, sd.revision)
        self.assertEqual(2, len(listener.changed_events))

        self.assertFalse(tracker.on_heartbeat_failed())
        self.assertIs(sd, tracker.description)

    def test_revision_only_grows(self):
        tracker = create_tracker()
        revisions = []
        for rtt in (0.001, 0.002, 0.002, 0.003):
            tracker.on_heartbeat_succeeded(rtt, None, None, SERVER_TYPE.ShardRouter, None)
            revisions.append(tracker.description.revision)
        tracker.on_heartbeat_failed()
        revisions.append(tracker.description.revision)
        self.assertEqual([1, 2, 2, 3, 4], revisions)


    def test_concurrent_heartbeats_get_sequential_revisions(self):
        listener = ServerEventListener()
        tracker = create_tracker([listener])
        n_threads, n_heartbeats = 8, 50

        def heartbeats(thread_index):
            for i in range(n_heartbeats):
                # Every round trip time is distinct, so every call changes the description.
                rtt = (thread_index * n_heartbeats + i + 1) / 1000.0
                tracker.on_heartbeat_succeeded(rtt, None, None, SERVER_TYPE.Standalone, None)
                if i % 10 == 9:
                    tracker.on_heartbeat_failed()

        threads = [threading.Thread(target=heartbeats, args=(i,)) for i in range(n_threads)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        revisions = [event.new_description.revision for event in listener.changed_events]
        self.assertGreaterEqual(len(revisions), n_threads * n_heartbeats)
        self.assertEqual(list(range(1, len(revisions) + 1)), revisions)
        self.assertEqual(len(revisions), tracker.revision)
        self.assertEqual(tracker.revision, tracker.description.revision)
        for event in listener.changed_events:
            self.assertNotEqual(event.previous_description, event.new_description)


class TestMonitoring(unittest.TestCase):
    def test_global_listener(self):
        listener = ServerEventListener()
        monitoring.register(listener)
        tracker = create_tracker()
        tracker.on_heartbeat_succeeded(0.005, None, None, SERVER_TYPE.Standalone, None)
        self.assertEqual(1, len(listener.changed_events))

    def test_global_listener_registered_later_is_ignored(self):
        tracker = create_tracker()
        listener = ServerEventListener()
        monitoring.register(listener)
        tracker.on_heartbeat_succeeded(0.005, None, None, SERVER_TYPE.Standalone, None)
        self.assertEqual(0, len(listener.changed_events))

    def test_register_validates(self):
        with self.assertRaises(TypeError):
            monitoring.register(object())  # type: ignore[arg-type]
        with self.assertRaises(TypeError):
            create_tracker([object()])
        with self.assertRaises(TypeError):
            create_tracker(ServerEventListener())

    def test_listener_exception_is_not_propagated(self):
        raising = RaisingListener()
        listener = ServerEventListener()
        tracker = create_tracker([raising, listener])
        with patch("sys.stderr", new_callable=io.StringIO) as stderr:
            self.assertTrue(
                tracker.on_heartbeat_succeeded(0.005, None, None, SERVER_TYPE.Standalone, None)
            )
        self.assertEqual(1, raising.calls)
        self.assertEqual(1, len(listener.changed_events))
        self.assertIn("RuntimeError: listener failure", stderr.getvalue())
        self.assertEqual(SERVER_STATE.Connected, tracker.description.state)

    def test_event_listeners(self):
        listener = ServerEventListener()
        listeners = monitoring._EventListeners([listener])
        self.assertTrue(listeners.enabled_for_server)
        self.assertEqual([listener], listeners.event_listeners)
        self.assertFalse(monitoring._EventListeners(None).enabled_for_server)

    def test_event_repr(self):
        sid = make_server_id("db1")
        old = ServerDescription(sid, sid.end_point)
        new = old.with_heartbeat_info(0.005, None, None, SERVER_TYPE.Standalone, None)
        event = monitoring.ServerDescriptionChangedEvent(sid, old, new)
        self.assertIs(sid, event.server_id)
        self.assertIs(old, event.previous_description)
        self.assertIs(new, event.new_description)
        self.assertTrue(repr(event).startswith("<ServerDescriptionChangedEvent ServerId(1, db1"))

    def test_base_listener_is_abstract(self):
        with self.assertRaises(NotImplementedError):
            monitoring.ServerListener().description_changed(None)  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
