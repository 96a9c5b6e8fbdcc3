"""Basic usage example for strqueue."""

import logging

from strqueue import StringQueue


def main() -> None:
    """Demonstrate basic queue operations."""
    logging.basicConfig(level=logging.DEBUG)

    with StringQueue() as queue:
        print("=== Insert ===")
        queue.insert_tail("banana")
        queue.insert_tail("apple")
        queue.insert_head("cherry")
        print(f"Queue: {queue.to_list()} (size {queue.size()})\n")

        print("=== Sort ===")
        queue.sort()
        print(f"Queue: {queue.to_list()}\n")

        print("=== Reverse ===")
        queue.reverse()
        print(f"Queue: {queue.to_list()}\n")

        print("=== Remove into a 4 byte buffer ===")
        buf = bytearray(4)
        while queue.remove_head(buf):
            print(f"  Removed {bytes(buf[: buf.index(0)])!r}")

        # Empty queue: reported as failure, logged at DEBUG
        print(f"Remove on empty queue: {queue.remove_head(buf)}")

    print(f"Freed: {queue.freed}")


if __name__ == "__main__":
    main()
