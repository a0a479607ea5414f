"""
Handle-style functional interface over StringQueue.

Every function accepts an absent (None) queue. Invalid references,
allocation failure and removal from an empty queue are reported through
the return value and never raise.
"""

import logging

from strqueue.core import StringQueue
from strqueue.types import OutBuffer

logger = logging.getLogger(__name__)


def create() -> StringQueue | None:
    """Create an empty queue, or return None if it cannot be allocated."""
    try:
        return StringQueue()
    except MemoryError:
        logger.debug("Queue allocation failed")
        return None


def destroy(queue: StringQueue | None) -> None:
    """Release every node held by the queue. No-op for None."""
    if queue is None:
        return
    queue.clear()


def insert_head(queue: StringQueue | None, value: str) -> bool:
    """Insert value at the head. Returns False if queue is None or allocation fails."""
    if queue is None:
        logger.debug("insert_head on absent queue")
        return False
    return queue.insert_head(value)


def insert_tail(queue: StringQueue | None, value: str) -> bool:
    """Insert value at the tail. Returns False if queue is None or allocation fails."""
    if queue is None:
        logger.debug("insert_tail on absent queue")
        return False
    return queue.insert_tail(value)


def remove_head(
    queue: StringQueue | None,
    out_buffer: OutBuffer | None,
    out_capacity: int,
) -> bool:
    """
    Remove the head value, copying at most out_capacity - 1 bytes of it
    plus a NUL terminator into out_buffer.

    Returns False without touching the queue if queue or out_buffer is
    None, or if the queue is empty.
    """
    if queue is None or out_buffer is None:
        logger.debug("remove_head with absent queue or buffer")
        return False
    if not queue.remove_head(out_buffer, out_capacity):
        logger.debug("remove_head on empty queue")
        return False
    return True


def size(queue: StringQueue | None) -> int:
    """Return the number of values in the queue, 0 for None."""
    if queue is None:
        return 0
    return queue.size()


def reverse(queue: StringQueue | None) -> None:
    """Reverse the queue in place. No-op for None or an empty queue."""
    if queue is None:
        return
    queue.reverse()


def sort(queue: StringQueue | None) -> None:
    """Sort the queue ascending in place. No-op for None or fewer than two values."""
    if queue is None:
        return
    queue.sort()
