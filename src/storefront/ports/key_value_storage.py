from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """
    Port for durable device-local string storage.

    Values survive process restarts. Writes to the same key are
    last-writer-wins.
    """

    @abstractmethod
    async def get_item(self, key: str) -> str | None:
        """Return the stored value, or None if the key was never written."""
        ...

    @abstractmethod
    async def set_item(self, key: str, value: str) -> None: ...

    @abstractmethod
    async def remove_item(self, key: str) -> None: ...
