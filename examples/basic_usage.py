"""Basic usage example for strqueue."""

import logging

from strqueue import StringQueue


def main() -> None:
    """Demonstrate FIFO and LIFO use of the same queue."""
    logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    queue = StringQueue()

    print("=== FIFO: insert at tail, remove at head ===\n")
    for task in ("send_email", "process_data", "generate_report"):
        queue.insert_tail(task)
    print(f"Queue size: {queue.size()}")
    print(f"Contents: {list(queue)}\n")

    while queue:
        print(f"  Processing {queue.popleft()}")

    print("\n=== LIFO: insert at head, remove at head ===\n")
    for page in ("home", "search", "results"):
        queue.insert_head(page)

    buffer = bytearray(32)
    while queue.remove_head(buffer, len(buffer)):
        value = bytes(buffer[: buffer.index(0)]).decode()
        print(f"  Back to {value}")

    print(f"\nFinal queue size: {queue.size()}")
    queue.clear()


if __name__ == "__main__":
    main()
