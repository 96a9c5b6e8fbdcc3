"""strqueue - Singly-linked queue of text payloads with in-place reverse and sort."""

from strqueue.core import (
    StringQueue,
    q_free,
    q_insert_head,
    q_insert_tail,
    q_new,
    q_remove_head,
    q_reverse,
    q_size,
    q_sort,
)
from strqueue.errors import QueueEmptyError, QueueFreedError, StrQueueError
from strqueue.types import Payload, WritableBuffer

__version__ = "0.0.1"

__all__ = [
    "StringQueue",
    "q_new",
    "q_free",
    "q_insert_head",
    "q_insert_tail",
    "q_remove_head",
    "q_size",
    "q_reverse",
    "q_sort",
    "StrQueueError",
    "QueueEmptyError",
    "QueueFreedError",
    "Payload",
    "WritableBuffer",
]
