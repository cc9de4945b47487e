from queue import ShutDown

import pytest

from .bus import Bus
from .bus import publish
from .computation import Computation
from .conftest import collected
from .delegate import delegate
from .event import GeneratorCompleted
from .event import GeneratorDelegated
from .event import GeneratorErrored
from .event import GeneratorResumed
from .event import GeneratorReturned
from .event import GeneratorStarted
from .event import GeneratorThrew
from .event import GeneratorYielded
from .samples import countdown


def test_subscribers_receive_matching_events():
    bus = Bus()
    returned = bus.subscribe({GeneratorReturned})
    completed = bus.subscribe({GeneratorCompleted})
    event = GeneratorReturned(generator_id="g", value=1)
    bus.publish(event)
    bus.publish(GeneratorStarted(generator_id="g"))
    assert collected(returned) == [event]
    assert collected(completed) == [event]
    bus.shutdown()


def test_unsubscribe_shuts_down_queue():
    bus = Bus()
    queue = bus.subscribe({object})
    bus.unsubscribe(queue)
    bus.publish(GeneratorStarted(generator_id="g"))
    with pytest.raises(ShutDown):
        queue.get_nowait()


def test_publish_without_active_bus_is_skipped():
    assert Bus.current() is None
    publish(GeneratorStarted(generator_id="g"))


def test_activate_is_scoped():
    outer, inner = Bus(), Bus()
    with outer.activate():
        assert Bus.current() is outer
        with inner.activate():
            assert Bus.current() is inner
        assert Bus.current() is outer
    assert Bus.current() is None


def test_lifecycle_events(events):
    computation = countdown(1)
    computation.advance()
    computation.advance()

    assert [type(event) for event in collected(events)] == [
        GeneratorStarted,
        GeneratorResumed,
        GeneratorYielded,
        GeneratorResumed,
        GeneratorReturned,
    ]


def test_error_events(events):
    computation = countdown(2)
    computation.advance()
    error = ValueError("injected")
    with pytest.raises(ValueError):
        computation.inject_error(error)

    threw, errored = collected(events)[-2:]
    assert isinstance(threw, GeneratorThrew)
    assert threw.exception is error
    assert isinstance(errored, GeneratorErrored)
    assert errored.generator_id == computation.id


def test_delegation_events(events):
    nested = countdown(1)

    def outer():
        yield delegate(nested)

    computation = Computation(outer())
    computation.advance()

    delegated = [e for e in collected(events) if isinstance(e, GeneratorDelegated)]
    assert len(delegated) == 1
    assert delegated[0].generator_id == computation.id
    assert delegated[0].target_id == nested.id
