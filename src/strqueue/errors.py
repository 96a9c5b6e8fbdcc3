"""Exception classes for strqueue."""


class StrQueueError(Exception):
    """Base exception for all strqueue errors."""


class QueueEmptyError(StrQueueError, IndexError):
    """Raised when popping or peeking from an empty queue."""


class QueueFreedError(StrQueueError):
    """Raised when convenience operations are attempted on a freed queue."""
