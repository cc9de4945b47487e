from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, frozen=True)
class Delegate:
    """An instruction to forward this computation's steps to another.

    A body yields it; the runtime relays every resume to the target until
    the target completes, and the target's return value becomes the value
    of the yield expression.
    """

    target: Iterable[Any]


def delegate(target: Iterable[Any], /) -> Delegate:
    return Delegate(target=target)
