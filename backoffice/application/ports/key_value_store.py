"""Port interface for the key-value blob store behind the local strategy."""

from abc import ABC, abstractmethod
from typing import Any


class KeyValueStore(ABC):
    @abstractmethod
    async def get(self, key: str, default: Any = None) -> Any:
        """Return the decoded value stored under *key*, or *default*."""
        ...

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        ...
