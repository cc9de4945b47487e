from collections.abc import Callable
from collections.abc import Generator
from functools import update_wrapper
from typing import Any

from .computation import Computation

GENERATOR_REGISTRY: dict[str, "GeneratorFunction"] = {}


class GeneratorFunction[**A, Y = Any, S = Any, R = Any]:
    """A generator function whose calls produce computations."""

    def __init__(self, fn: Callable[A, Generator[Y, S, R]], *, name: str):
        self.fn = fn
        self.name = name
        update_wrapper(self, fn)

    def __repr__(self):
        return f"<{type(self).__name__} {self.name!r}>"

    def __call__(self, *args: A.args, **kwargs: A.kwargs) -> Computation[Y, S, R]:
        return Computation(self.fn(*args, **kwargs), name=self.name)


def generator(*, name: str | None = None):
    """Decorate a generator function so that calling it returns a computation.

    Calling the decorated function runs none of its body; the computation
    starts suspended before the first line.
    """

    def create_generator[**A, Y, S, R](
        fn: Callable[A, Generator[Y, S, R]],
    ) -> GeneratorFunction[A, Y, S, R]:
        function = GeneratorFunction(fn, name=name or fn.__name__)
        GENERATOR_REGISTRY.setdefault(function.name, function)
        assert GENERATOR_REGISTRY[function.name].fn is fn, (
            f"Failed to register {function}; the name is taken."
        )
        return function

    return create_generator
