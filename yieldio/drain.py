from itertools import islice
from typing import Any

from .computation import Computation


def drain[Y](computation: Computation[Y, Any, Any], /) -> list[Y]:
    """Collect every yielded value, in order, until the computation is done."""
    values = []
    while not (step := computation.advance()).done:
        values.append(step.value)
    return values


def take[Y](computation: Computation[Y, Any, Any], count: int, /) -> list[Y]:
    """Collect at most `count` leading values without advancing further."""
    if count < 0:
        raise ValueError(f"Count must not be negative, got: {count}")
    return list(islice(computation, count))
