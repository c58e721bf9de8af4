"""
JSON 文件存储适配器

每个 key 落盘为 <base_dir>/<key>.json；写入先写临时文件再原子替换，
避免进程中断时留下半截文件。
"""
from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional

from ...infra.exceptions import FileOperationError, ValidationError
from ...infra.logging import get_logger

logger = get_logger(__name__)


def _safe_key(key: str) -> str:
    if not key or not all(c.isalnum() or c in ("-", "_") for c in key):
        raise ValidationError(f"invalid storage key: {key!r}", field="key", value=key)
    return key


class JsonFileStorage:
    """KeyValueStorage backed by one file per key."""

    def __init__(self, base_dir: Path) -> None:
        self.base_dir = Path(base_dir)

    def path_for(self, key: str) -> Path:
        return self.base_dir / f"{_safe_key(key)}.json"

    def get(self, key: str) -> Optional[str]:
        p = self.path_for(key)
        if not p.exists():
            return None
        try:
            return p.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            # unreadable counts as absent; the caller falls back to defaults
            logger.warning(f"读取存储文件失败 {p}: {e}")
            return None

    def set(self, key: str, value: str) -> None:
        p = self.path_for(key)
        tmp_name = None
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.base_dir, prefix=f".{key}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp_name, p)
            tmp_name = None
        except OSError as e:
            raise FileOperationError(f"写入存储文件失败: {e}", file_path=str(p), operation="write") from e
        finally:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)

    def remove(self, key: str) -> None:
        p = self.path_for(key)
        try:
            p.unlink(missing_ok=True)
        except OSError as e:
            raise FileOperationError(f"删除存储文件失败: {e}", file_path=str(p), operation="remove") from e
