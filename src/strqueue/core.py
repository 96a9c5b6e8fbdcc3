"""Main StringQueue implementation."""

import codecs
import logging
from collections.abc import Iterator

from strqueue.errors import QueueEmptyError, QueueFreedError
from strqueue.linkedlist import Node, SinglyLinkedList
from strqueue.types import Payload, WritableBuffer

logger = logging.getLogger(__name__)

_TERMINATOR = 0


class StringQueue:
    """
    Queue of text payloads backed by a singly-linked list.

    Supports O(1) insertion at both ends, O(1) removal from the head,
    in-place reversal and a stable in-place merge sort. The core operations
    report failure through their return value instead of raising; a queue on
    which ``free()`` has been called behaves as an absent queue.

    Not thread-safe: callers sharing a queue must serialize access.
    """

    def __init__(self, *, encoding: str = "utf-8") -> None:
        """
        Initialize an empty queue.

        Args:
            encoding: Codec used to store ``str`` payloads as bytes and to
                decode them again in ``to_list()``.

        Raises:
            LookupError: If the encoding is unknown
        """
        self._encoding = codecs.lookup(encoding).name
        self._list = SinglyLinkedList()
        self._freed = False

    @classmethod
    def create(cls, *, encoding: str = "utf-8") -> "StringQueue | None":
        """Create a new empty queue, or return None if allocation fails."""
        try:
            return cls(encoding=encoding)
        except MemoryError:
            logger.warning("Could not allocate queue")
            return None

    def free(self) -> None:
        """Release every element. The queue is unusable afterwards."""
        if self._freed:
            return
        self._list.clear()
        self._freed = True

    def __enter__(self) -> "StringQueue":
        """Context manager entry."""
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit."""
        self.free()

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def freed(self) -> bool:
        return self._freed

    def insert_head(self, text: Payload) -> bool:
        """
        Insert a copy of text at the head of the queue.

        Args:
            text: Payload to store; ``str`` is encoded with the queue encoding

        Returns:
            True on success, False if the queue is freed or allocation failed
        """
        node = self._new_node(text, "insert_head")
        if node is None:
            return False
        self._list.appendleft(node)
        return True

    def insert_tail(self, text: Payload) -> bool:
        """
        Insert a copy of text at the tail of the queue.

        Args:
            text: Payload to store; ``str`` is encoded with the queue encoding

        Returns:
            True on success, False if the queue is freed or allocation failed
        """
        node = self._new_node(text, "insert_tail")
        if node is None:
            return False
        self._list.append(node)
        return True

    def remove_head(self, buffer: WritableBuffer | None, bufsize: int | None = None) -> bool:
        """
        Remove the head element and copy its payload into buffer.

        At most ``bufsize - 1`` bytes are copied, followed by a zero byte, so
        nothing past ``buffer[bufsize - 1]`` is ever written. With
        ``bufsize == 0`` the element is removed and nothing is written.

        Args:
            buffer: Writable destination (``bytearray`` or ``memoryview``)
            bufsize: Usable capacity of buffer; defaults to its full length

        Returns:
            True if an element was removed. False, with the queue unchanged,
            if the queue is freed or empty, buffer is None, read-only or not
            contiguous, or bufsize is not an int that fits the buffer.
        """
        if self._freed:
            logger.debug("remove_head on a freed queue")
            return False
        if buffer is None:
            logger.debug("remove_head without an output buffer")
            return False

        if bufsize is not None and not isinstance(bufsize, int):
            logger.debug("remove_head with a non-integer bufsize %r", bufsize)
            return False

        # Every check that can fail runs before the head is detached
        with memoryview(buffer) as view:
            if view.readonly:
                logger.debug("remove_head into a read-only buffer")
                return False
            if not view.c_contiguous:
                logger.debug("remove_head into a non-contiguous buffer")
                return False
            capacity = view.nbytes if bufsize is None else bufsize
            if capacity < 0 or capacity > view.nbytes:
                logger.debug("remove_head with bufsize %d for a %d byte buffer", capacity, view.nbytes)
                return False
            if not self._list:
                logger.debug("remove_head on an empty queue")
                return False

            with view.cast("B") as out:
                node = self._list.popleft()
                if node is not None and capacity > 0:
                    length = min(len(node.value), capacity - 1)
                    out[:length] = node.value[:length]
                    out[length] = _TERMINATOR
        return True

    def size(self) -> int:
        """Return the number of elements, or 0 for a freed queue. O(1)."""
        if self._freed:
            return 0
        return len(self._list)

    def reverse(self) -> None:
        """Reverse the queue in place without allocating or freeing elements."""
        if self._freed:
            return
        self._list.reverse()

    def sort(self) -> None:
        """Sort the queue ascending by byte-wise payload comparison (stable)."""
        if self._freed:
            return
        self._list.sort()

    def popleft(self) -> bytes:
        """
        Remove and return the head payload.

        Raises:
            QueueEmptyError: If the queue is empty
            QueueFreedError: If the queue is freed
        """
        self._check_not_freed()
        node = self._list.popleft()
        if node is None:
            raise QueueEmptyError("popleft from an empty queue")
        return node.value

    def peek(self) -> bytes:
        """
        Return the head payload without removing it.

        Raises:
            QueueEmptyError: If the queue is empty
            QueueFreedError: If the queue is freed
        """
        self._check_not_freed()
        head = self._list.head
        if head is None:
            raise QueueEmptyError("peek at an empty queue")
        return head.value

    def to_list(self, *, errors: str = "strict") -> list[str]:
        """
        Return the payloads head to tail, decoded with the queue encoding.

        Args:
            errors: Codec error handler, as for ``bytes.decode``

        Raises:
            UnicodeDecodeError: If a bytes payload is not valid in the queue
                encoding and errors is "strict"
            QueueFreedError: If the queue is freed
        """
        self._check_not_freed()
        return [value.decode(self._encoding, errors) for value in self._list]

    def __iter__(self) -> Iterator[bytes]:
        """Iterate over payloads head to tail. Do not mutate while iterating."""
        if self._freed:
            return iter(())
        return iter(self._list)

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return self.size() > 0

    def __repr__(self) -> str:
        if self._freed:
            return f"{type(self).__name__}(<freed>)"
        return f"{type(self).__name__}({list(self._list)!r})"

    def _check_not_freed(self) -> None:
        if self._freed:
            raise QueueFreedError("Queue has been freed")

    def _new_node(self, text: Payload | None, operation: str) -> Node | None:
        """Copy text into a new node, or return None if it cannot be inserted."""
        if self._freed:
            logger.debug("%s on a freed queue", operation)
            return None
        if text is None:
            logger.debug("%s without a payload", operation)
            return None
        if not isinstance(text, (str, bytes, bytearray, memoryview)):
            raise TypeError(f"Payload must be str or bytes-like, not {type(text).__name__}")

        try:
            value = text.encode(self._encoding) if isinstance(text, str) else bytes(text)
            return Node(value)
        except MemoryError:
            logger.warning("%s could not allocate a %d byte payload", operation, len(text))
            return None


def q_new(*, encoding: str = "utf-8") -> StringQueue | None:
    """Create an empty queue; None if allocation fails."""
    return StringQueue.create(encoding=encoding)


def q_free(queue: StringQueue | None) -> None:
    """Free queue; no-op for None."""
    if queue is not None:
        queue.free()


def q_insert_head(queue: StringQueue | None, text: Payload) -> bool:
    """Insert a copy of text at the head; False for None or on failure."""
    if queue is None:
        return False
    return queue.insert_head(text)


def q_insert_tail(queue: StringQueue | None, text: Payload) -> bool:
    """Insert a copy of text at the tail; False for None or on failure."""
    if queue is None:
        return False
    return queue.insert_tail(text)


def q_remove_head(
    queue: StringQueue | None,
    buffer: WritableBuffer | None,
    bufsize: int | None = None,
) -> bool:
    """Remove the head into buffer; False for None or on failure."""
    if queue is None:
        return False
    return queue.remove_head(buffer, bufsize)


def q_size(queue: StringQueue | None) -> int:
    """Return the number of elements; 0 for None."""
    if queue is None:
        return 0
    return queue.size()


def q_reverse(queue: StringQueue | None) -> None:
    """Reverse queue in place; no-op for None."""
    if queue is not None:
        queue.reverse()


def q_sort(queue: StringQueue | None) -> None:
    """Sort queue ascending in place; no-op for None."""
    if queue is not None:
        queue.sort()
