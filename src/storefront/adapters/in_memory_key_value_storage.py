from __future__ import annotations

from storefront.ports.key_value_storage import KeyValueStorage


class InMemoryKeyValueStorage(KeyValueStorage):
    """Process-local storage for tests. "Restart" by sharing `values` with a new instance."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values = values if values is not None else {}

    async def get_item(self, key: str) -> str | None:
        return self.values.get(key)

    async def set_item(self, key: str, value: str) -> None:
        self.values[key] = value

    async def remove_item(self, key: str) -> None:
        self.values.pop(key, None)
