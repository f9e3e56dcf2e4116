from __future__ import annotations

import pytest

from clustermon import monitoring


@pytest.fixture(autouse=True)
def clear_global_listeners():
    # Listeners registered by one test must not leak into the next.
    saved = monitoring._LISTENERS.server_listeners[:]
    yield
    monitoring._LISTENERS.server_listeners[:] = saved
