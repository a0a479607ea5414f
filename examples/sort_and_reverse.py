"""Sorting, reversing and bounded copies through the functional interface."""

import logging

from strqueue import api


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    queue = api.create()
    if queue is None:
        raise SystemExit("Could not allocate a queue")

    for fruit in ("banana", "apple", "cherry", "date"):
        api.insert_tail(queue, fruit)
    print(f"Inserted: {list(queue)}")

    api.sort(queue)
    print(f"Sorted:   {list(queue)}")

    api.reverse(queue)
    print(f"Reversed: {list(queue)}\n")

    # A 4-byte buffer holds at most 3 characters plus the terminator
    buffer = bytearray(4)
    while api.remove_head(queue, buffer, len(buffer)):
        print(f"  Removed (truncated): {bytes(buffer[: buffer.index(0)]).decode()!r}")

    # Failures are return values, not exceptions
    print(f"\nRemove from empty queue: {api.remove_head(queue, buffer, len(buffer))}")
    print(f"Insert into absent queue: {api.insert_tail(None, 'x')}")

    api.destroy(queue)


if __name__ == "__main__":
    main()
