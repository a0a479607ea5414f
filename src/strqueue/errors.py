"""Exception classes for strqueue."""


class StrQueueError(Exception):
    """Base exception for all strqueue errors."""


class QueueEmptyError(StrQueueError):
    """Raised when reading or popping a value from an empty queue."""


class InvalidBufferError(StrQueueError, ValueError):
    """Raised when an output capacity does not fit the supplied buffer."""


class QueueCorruptedError(StrQueueError):
    """Raised when the head/tail/size bookkeeping disagrees with the node chain."""
