from enum import Enum


class Status(Enum):
    """Where a computation is in its lifecycle."""

    SUSPENDED_START = "suspended-start"
    SUSPENDED_YIELD = "suspended-yield"
    RUNNING = "running"
    COMPLETED = "completed"
