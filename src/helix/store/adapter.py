"""
Key-Value Store Protocol.

The only persistence surface the labs see. Values are strings (the
snapshot repository stores JSON text), keys are fixed per collection.
Backends: MemoryStore (tests, ephemeral sessions) and JsonFileStore.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """
    Abstract durable key-value storage.

    get() returns None for a missing key. set() reports whether the write
    succeeded instead of raising; callers decide how loud a failed write is.
    """

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> bool:
        ...
