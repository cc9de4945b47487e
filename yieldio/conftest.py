from queue import Empty
from queue import Queue

import pytest

from . import samples  # noqa: F401
from .bus import Bus
from .event import Event
from .generator import GENERATOR_REGISTRY


@pytest.fixture(autouse=True)
def isolate_registry():
    """Keep generators registered by a test from leaking into others."""
    original = dict(GENERATOR_REGISTRY)
    yield
    GENERATOR_REGISTRY.clear()
    GENERATOR_REGISTRY.update(original)


@pytest.fixture
def events():
    """Collect every event published while the test runs."""
    bus = Bus()
    queue = bus.subscribe({Event})
    with bus.activate():
        yield queue
    bus.shutdown()


def collected(queue: Queue[Event]) -> list[Event]:
    events = []
    while True:
        try:
            events.append(queue.get_nowait())
        except Empty:
            return events
