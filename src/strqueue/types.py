"""Type definitions for strqueue."""

from typing import TypeAlias

# Writable destination for remove_head copies
OutBuffer: TypeAlias = bytearray | memoryview
