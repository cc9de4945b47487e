from __future__ import annotations

import warnings
from collections.abc import Callable
from collections.abc import Generator
from collections.abc import Iterable
from collections.abc import Iterator
from functools import partial
from typing import Any

from .bus import publish
from .delegate import Delegate
from .event import GeneratorDelegated
from .event import GeneratorErrored
from .event import GeneratorResumed
from .event import GeneratorReturned
from .event import GeneratorStarted
from .event import GeneratorThrew
from .event import GeneratorYielded
from .exceptions import Cancelled
from .exceptions import InvalidOperation
from .exceptions import ProtocolMisuseWarning
from .id import random_id
from .status import Status
from .step import DONE
from .step import Step


class _Finish(BaseException):
    """Unwind a computation so that it completes with a chosen value."""

    def __init__(self, value: Any):
        super().__init__(value)
        self.value = value


class Computation[Y = Any, S = Any, R = Any](Iterator[Y]):
    """A handle on a suspended computation.

    The body is a Python generator. It runs only when the handle is resumed
    with `advance`, `inject_error`, `finish` or `cancel`, and each resume
    runs it to its next yield or to its end. A body may yield `delegate(x)`
    to forward every resume into `x` until `x` completes.

    Iterating a computation produces its yielded values only. The return
    value is reported by the final `advance` step, by `StopIteration.value`,
    and by `return_value`.
    """

    def __init__(self, generator: Generator[Y, S, R], /, *, name: str | None = None):
        self.id = random_id()
        self.name = name or getattr(generator, "__qualname__", repr(generator))
        self.delegation_target: Computation | None = None
        self.error: BaseException | None = None
        self.__generator = generator
        self.__status = Status.SUSPENDED_START
        self.__last_yielded: Any = None
        self.__return_value: Any = None

    def __repr__(self):
        return f"<{type(self).__name__} {self.id!r} {self.name} {self.__status.value}>"

    @property
    def status(self) -> Status:
        return self.__status

    @property
    def last_yielded(self) -> Y:
        if self.__status is not Status.SUSPENDED_YIELD:
            raise InvalidOperation(f"{self!r} is not suspended at a yield.")
        return self.__last_yielded

    @property
    def return_value(self) -> R:
        if self.__status is not Status.COMPLETED:
            raise InvalidOperation(f"{self!r} has not completed.")
        return self.__return_value

    def advance(self, value: S | None = None, /) -> Step:
        """Run to the next yield, sending `value` as the result of the last one.

        The value is ignored on the first advance, since no yield has been
        reached yet to receive it.
        """
        if self.__status is Status.COMPLETED:
            return DONE
        if self.__status is Status.SUSPENDED_START and value is not None:
            warnings.warn(
                f"{self!r} has not started; the value {value!r} is ignored.",
                ProtocolMisuseWarning,
                stacklevel=2,
            )
            value = None
        return self.__resume(value, throw=False)

    def inject_error(self, error: BaseException, /) -> Step:
        """Raise `error` at the yield where the computation is suspended."""
        if self.__status is Status.COMPLETED:
            raise InvalidOperation(
                f"{self!r} has completed; there is no yield to raise {error!r} at."
            )
        return self.__resume(error, throw=True)

    def finish(self, value: R | None = None, /) -> Step:
        """Complete with `value`, running the body's cleanup on the way out."""
        if self.__status is Status.COMPLETED:
            return DONE
        return self.__resume(_Finish(value), throw=True)

    def cancel(self) -> Step:
        """Ask the computation to unwind by raising `Cancelled` inside it."""
        if self.__status is Status.COMPLETED:
            return DONE
        cancelled = Cancelled()
        try:
            return self.__resume(cancelled, throw=True)
        except Cancelled as exception:
            if exception is not cancelled:
                raise
            return DONE

    def __next__(self) -> Y:
        step = self.advance()
        if step.done:
            raise StopIteration(step.value)
        return step.value

    def __start(self):
        if self.__status is Status.SUSPENDED_START:
            publish(GeneratorStarted(generator_id=self.id))
        self.__status = Status.RUNNING

    def __send(self, value: Any) -> Callable[[], Any]:
        publish(GeneratorResumed(generator_id=self.id, value=value))
        return partial(self.__generator.send, value)

    def __throw(self, exception: BaseException) -> Callable[[], Any]:
        publish(GeneratorThrew(generator_id=self.id, exception=exception))
        return partial(self.__generator.throw, exception)

    def __suspend(self, value: Any):
        self.__status = Status.SUSPENDED_YIELD
        self.__last_yielded = value
        publish(GeneratorYielded(generator_id=self.id, value=value))

    def __complete(self, value: Any):
        self.__status = Status.COMPLETED
        self.__last_yielded = None
        self.__return_value = value
        self.delegation_target = None
        publish(GeneratorReturned(generator_id=self.id, value=value))

    def __fail(self, exception: BaseException):
        if isinstance(exception, _Finish):
            self.__complete(exception.value)
            return
        self.__status = Status.COMPLETED
        self.__last_yielded = None
        self.error = exception
        self.delegation_target = None
        publish(GeneratorErrored(generator_id=self.id, exception=exception))

    def __delegation_chain(self) -> list[Computation]:
        chain: list[Computation] = [self]
        while (target := chain[-1].delegation_target) is not None:
            if target.__status is Status.COMPLETED:
                # Finished while escaped; the delegation resumes with None.
                chain[-1].delegation_target = None
                break
            chain.append(target)
        return chain

    def __resume(self, payload: Any, *, throw: bool) -> Step:
        if self.__status is Status.RUNNING:
            raise InvalidOperation(f"{self!r} is already running.")

        # The innermost delegation target receives the resume; everything
        # above it is suspended at its delegation point.
        chain = self.__delegation_chain()
        if any(c.__status is Status.RUNNING for c in chain):
            raise InvalidOperation(f"{self!r} is delegating to a running computation.")
        for computation in chain:
            computation.__start()

        innermost = chain[-1]
        next_step = innermost.__throw(payload) if throw else innermost.__send(payload)

        while True:
            current = chain[-1]
            try:
                yielded = next_step()
            except StopIteration as stop:
                current.__complete(stop.value)
                chain.pop()
                if not chain:
                    return Step(value=stop.value, done=True)
                parent = chain[-1]
                parent.delegation_target = None
                next_step = parent.__send(stop.value)
                continue
            except BaseException as exception:
                current.__fail(exception)
                chain.pop()
                if not chain:
                    if isinstance(exception, _Finish):
                        return Step(value=exception.value, done=True)
                    raise
                parent = chain[-1]
                parent.delegation_target = None
                next_step = parent.__throw(exception)
                continue

            if not isinstance(yielded, Delegate):
                for computation in chain:
                    computation.__suspend(yielded)
                return Step(value=yielded, done=False)

            try:
                nested = computation_of(yielded.target)
            except TypeError as exception:
                next_step = current.__throw(exception)
                continue

            links = nested.__delegation_chain()
            if any(link.__status is Status.RUNNING for link in links):
                next_step = current.__throw(
                    InvalidOperation(f"Cannot delegate to running {nested!r}.")
                )
                continue

            publish(GeneratorDelegated(generator_id=current.id, target_id=nested.id))
            if nested.__status is Status.COMPLETED:
                next_step = current.__send(None)
                continue

            current.delegation_target = nested
            for link in links:
                link.__start()
            chain.extend(links)
            next_step = links[-1].__send(None)


def _iterate[Y](iterable: Iterable[Y]) -> Generator[Y, Any, None]:
    for value in iterable:
        yield value


def computation_of(target: Iterable[Any], /) -> Computation:
    """Convert an iterable into a computation.

    Generators keep their send and throw behavior. Other iterables ignore
    sent values, and errors thrown into them are raised at their current
    position.
    """
    match target:
        case Computation():
            return target
        case Generator():
            return Computation(target)
        case Iterable():
            return Computation(_iterate(target), name=type(target).__name__)
    raise TypeError(f"Cannot delegate to {target!r}; it is not iterable.")
