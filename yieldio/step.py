from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Step:
    """The outcome of resuming a computation.

    A step that is not done carries a yielded value. A done step carries
    the return value, or None when the computation was already complete.
    """

    value: Any
    done: bool


DONE = Step(value=None, done=True)
