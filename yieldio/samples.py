"""Sample computations, registered for the command line."""

from itertools import count

from .delegate import delegate
from .exceptions import ComputationError
from .generator import generator


@generator(name="char-range")
def char_range(start: int, end: int):
    """Yield the character codes from start to end, inclusive."""
    for code in range(start, end + 1):
        yield code


@generator(name="alphanumerics")
def alphanumerics():
    """Digits, then capitals, then lowercase letters, by delegation."""
    yield delegate(char_range(48, 57))
    yield delegate(char_range(65, 90))
    yield delegate(char_range(97, 122))


@generator(name="naturals")
def naturals(start: int = 0):
    yield delegate(count(start))


@generator(name="echo")
def echo(first: int = 1):
    """Yield twice whatever was last sent in, starting from first."""
    value = first
    while True:
        received = yield value * 2
        if received is not None:
            value = received


@generator(name="accumulate")
def accumulate():
    """Sum sent numbers, yielding the running total.

    Injected errors are reported as the next yielded value and the total
    carries on.
    """
    total = 0
    while True:
        try:
            received = yield total
        except ComputationError as error:
            received = yield f"error: {error}"
        if received is not None:
            total += received


@generator(name="countdown")
def countdown(start: int = 3):
    """Count down to one, then return a message."""
    for n in range(start, 0, -1):
        yield n
    return "liftoff"


@generator(name="relay")
def relay(start: int = 3):
    """Delegate to countdown and yield what it returned."""
    result = yield delegate(countdown(start))
    yield result
