class YieldioError(Exception):
    """Base class for errors raised by the runtime itself."""


class InvalidOperation(YieldioError):
    """The computation is not in a state that allows the operation."""


class ComputationError(Exception):
    """A convenient base for errors raised or injected by user logic.

    Any exception type can be raised inside a computation or injected into
    one; the runtime never wraps them.
    """


class ProtocolMisuseWarning(UserWarning):
    """A value was sent to a computation that has not started yet."""


class Cancelled(BaseException):
    """A computation has been asked to unwind and stop."""
