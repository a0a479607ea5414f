"""strqueue - Singly-linked string queue with in-place reversal and merge sort.

The object interface is StringQueue; strqueue.api offers the same operations as
handle-style functions that accept None and report failures by return value.
"""

from strqueue.core import StringQueue
from strqueue.errors import (
    InvalidBufferError,
    QueueCorruptedError,
    QueueEmptyError,
    StrQueueError,
)
from strqueue.linkedlist import Node
from strqueue import api

__version__ = "0.0.1"

__all__ = [
    "api",
    "StringQueue",
    "Node",
    "StrQueueError",
    "QueueEmptyError",
    "InvalidBufferError",
    "QueueCorruptedError",
]
