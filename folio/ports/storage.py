"""
Storage 端口（Port）：
持久化键值存储的抽象接口。一个 key 对应一段字符串（序列化后的 JSON）。
"""
from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStorage(Protocol):
    """Durable string storage, one value per key."""

    def get(self, key: str) -> Optional[str]:
        """Stored value, or None when the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        """Delete the key; removing an absent key is not an error."""
        ...
