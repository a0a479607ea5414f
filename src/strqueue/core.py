"""Main StringQueue implementation."""

import codecs
import logging
from collections.abc import Iterator

from strqueue.errors import InvalidBufferError, QueueCorruptedError, QueueEmptyError
from strqueue.linkedlist import (
    Node,
    iter_values,
    last_node,
    merge_sort,
    release_chain,
    reverse_chain,
)
from strqueue.types import OutBuffer

logger = logging.getLogger(__name__)


class StringQueue:
    """
    Singly-linked queue of text strings with cached head, tail and size.

    Supports insertion at both ends, removal at the head, O(1) size,
    in-place reversal and in-place ascending merge sort. Not thread-safe:
    callers sharing a queue between threads must serialize every call.
    """

    def __init__(self, *, encoding: str = "utf-8") -> None:
        """
        Initialize an empty queue.

        Args:
            encoding: Codec used by remove_head() to copy a stored string
                into a caller-supplied byte buffer. Characters it cannot
                represent are copied as the codec's replacement marker.

        Raises:
            LookupError: If encoding names no known codec
        """
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        self._encoding = codecs.lookup(encoding).name

    def insert_head(self, value: str) -> bool:
        """
        Insert a value in front of the current head.

        Returns:
            True on success, False if the node could not be allocated
            (the queue is left untouched).

        Raises:
            TypeError: If value is not a str
        """
        node = self._new_node(value)
        if node is None:
            return False

        node.next = self._head
        self._head = node
        if self._size == 0:
            self._tail = node
        self._size += 1
        return True

    def insert_tail(self, value: str) -> bool:
        """
        Append a value after the current tail.

        Returns:
            True on success, False if the node could not be allocated
            (the queue is left untouched).

        Raises:
            TypeError: If value is not a str
        """
        node = self._new_node(value)
        if node is None:
            return False

        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return True

    def remove_head(self, out_buffer: OutBuffer, out_capacity: int) -> bool:
        """
        Remove the head node, copying its value into out_buffer.

        The value is encoded with the queue's encoding and copied as at most
        out_capacity - 1 bytes followed by a NUL terminator, so nothing is
        ever written at or past index out_capacity. A capacity of 0 copies
        nothing but still removes the node. Characters the encoding cannot
        represent are copied as its replacement marker.

        Args:
            out_buffer: Writable byte buffer receiving the copy
            out_capacity: Number of bytes of out_buffer that may be written

        Returns:
            True if a node was removed, False if the queue is empty

        Raises:
            InvalidBufferError: If out_capacity is negative or exceeds the buffer
        """
        if self._head is None:
            return False
        if out_capacity < 0 or out_capacity > len(out_buffer):
            raise InvalidBufferError(
                f"Capacity {out_capacity} does not fit a buffer of {len(out_buffer)} bytes"
            )

        # Characters the codec cannot represent are copied as replacements
        encoded = self._head.value.encode(self._encoding, errors="replace")
        copy_len = min(out_capacity, len(encoded) + 1)
        if copy_len > 0:
            out_buffer[: copy_len - 1] = encoded[: copy_len - 1]
            out_buffer[copy_len - 1] = 0

        self._detach_head()
        return True

    def popleft(self) -> str:
        """
        Remove the head node and return its full value.

        Raises:
            QueueEmptyError: If the queue is empty
        """
        if self._head is None:
            raise QueueEmptyError("Cannot pop from an empty queue")
        return self._detach_head().value

    def peek_head(self) -> str:
        """Return the head value without removing it."""
        if self._head is None:
            raise QueueEmptyError("Cannot peek into an empty queue")
        return self._head.value

    def peek_tail(self) -> str:
        """Return the tail value without removing it."""
        if self._tail is None:
            raise QueueEmptyError("Cannot peek into an empty queue")
        return self._tail.value

    def size(self) -> int:
        """Return the number of stored values. O(1)."""
        return self._size

    def reverse(self) -> None:
        """Reverse the queue in place. No node is created or destroyed."""
        if self._head is None:
            return
        old_head = self._head
        self._head = reverse_chain(old_head)
        self._tail = old_head

    def sort(self) -> None:
        """Sort the queue ascending in place by relinking its nodes."""
        if self._size < 2:
            return
        self._head = merge_sort(self._head)
        # Merge sort does not track the tail
        self._tail = last_node(self._head)

    def clear(self) -> None:
        """Release every node. The queue stays usable."""
        released = release_chain(self._head)
        self._head = None
        self._tail = None
        self._size = 0
        logger.debug("Released %d node(s)", released)

    def check_invariants(self) -> None:
        """
        Verify that head, tail and size agree with the node chain.

        Raises:
            QueueCorruptedError: If any bookkeeping field is inconsistent
        """
        if self._size < 0:
            raise QueueCorruptedError(f"Negative size {self._size}")

        if self._size == 0:
            if self._head is not None or self._tail is not None:
                raise QueueCorruptedError("Empty queue still references nodes")
            return

        if self._head is None or self._tail is None:
            raise QueueCorruptedError(f"Queue of size {self._size} is missing head or tail")

        node = self._head
        count = 1
        while node.next is not None:
            node = node.next
            count += 1
            if count > self._size:
                raise QueueCorruptedError(
                    f"Chain is longer than size {self._size} or contains a cycle"
                )

        if count != self._size:
            raise QueueCorruptedError(f"Chain holds {count} node(s) but size is {self._size}")
        if node is not self._tail:
            raise QueueCorruptedError("Tail is not the last node of the chain")

    def _new_node(self, value: str) -> Node | None:
        """Allocate a node for value, or return None if allocation fails."""
        if not isinstance(value, str):
            raise TypeError(f"Queue values must be str, not {type(value).__name__}")
        try:
            return Node(value)
        except MemoryError:
            logger.debug("Node allocation failed, queue left unchanged")
            return None

    def _detach_head(self) -> Node:
        """Unlink and return the head node (caller checks for emptiness)."""
        node = self._head
        if node is None:
            raise RuntimeError("Unexpected empty queue after checking")
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        node.next = None
        return node

    def __iter__(self) -> Iterator[str]:
        """Iterate over values from head to tail."""
        return iter_values(self._head)

    def __len__(self) -> int:
        """Return the number of stored values."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the queue is non-empty."""
        return self._size > 0

    def __repr__(self) -> str:
        return f"StringQueue(size={self._size})"
