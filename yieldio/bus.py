from collections.abc import Generator
from collections.abc import Iterable
from contextlib import contextmanager
from contextvars import ContextVar
from itertools import chain
from queue import Queue
from queue import ShutDown
from typing import Any
from typing import Self


class Bus:
    """Distribute events to local subscribers.

    Computations publish to whichever bus is active in the current context,
    so observing a computation never requires passing a bus around.
    """

    __active = ContextVar["Bus | None"]("Bus.active", default=None)

    def __init__(self):
        self.__subscriptions: dict[type, set[Queue[Any]]] = {}

    @classmethod
    def current(cls) -> "Bus | None":
        return cls.__active.get()

    @contextmanager
    def activate(self) -> Generator[Self]:
        token = self.__active.set(self)
        try:
            yield self
        finally:
            self.__active.reset(token)

    def subscribe[T](self, types: Iterable[type[T]]) -> Queue[T]:
        queue = Queue[T]()
        for type in types:
            self.__subscriptions.setdefault(type, set()).add(queue)
        return queue

    def unsubscribe(self, queue: Queue[Any]):
        for subscriptions in self.__subscriptions.values():
            subscriptions.discard(queue)
        queue.shutdown()

    def publish(self, event: Any):
        subscribers = {
            subscription
            for type, subscriptions in self.__subscriptions.items()
            for subscription in subscriptions
            if isinstance(event, type)
        }
        for subscriber in subscribers:
            try:
                subscriber.put(event)
            except ShutDown:
                self.unsubscribe(subscriber)

    def shutdown(self):
        for subscriber in set(chain.from_iterable(self.__subscriptions.values())):
            subscriber.shutdown()
        self.__subscriptions.clear()


def publish(event: Any):
    """Publish to the active bus, if there is one."""
    if bus := Bus.current():
        bus.publish(event)
