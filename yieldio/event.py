from dataclasses import dataclass
from dataclasses import field
from datetime import UTC
from datetime import datetime
from typing import Any

from .id import random_id


@dataclass(eq=False, kw_only=True)
class Event:
    event_id: str = field(default_factory=random_id, repr=False)
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(tz=UTC), repr=False
    )
    generator_id: str


@dataclass(eq=False, kw_only=True)
class GeneratorStarted(Event): ...


@dataclass(eq=False, kw_only=True)
class GeneratorResumed(Event):
    value: Any


@dataclass(eq=False, kw_only=True)
class GeneratorThrew(Event):
    exception: BaseException


@dataclass(eq=False, kw_only=True)
class GeneratorYielded(Event):
    value: Any


@dataclass(eq=False, kw_only=True)
class GeneratorDelegated(Event):
    target_id: str


@dataclass(eq=False, kw_only=True)
class GeneratorCompleted(Event): ...


@dataclass(eq=False, kw_only=True)
class GeneratorReturned(GeneratorCompleted):
    value: Any


@dataclass(eq=False, kw_only=True)
class GeneratorErrored(GeneratorCompleted):
    exception: BaseException
