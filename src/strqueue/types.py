"""Type definitions for strqueue."""

from typing import TypeAlias

# Anything accepted as a payload by the insert operations
Payload: TypeAlias = str | bytes | bytearray | memoryview

# Destination for remove_head; must be writable
WritableBuffer: TypeAlias = bytearray | memoryview
