"""
基础设施层 - 序列化模块

提供安全的JSON序列化功能。
"""

import json
from datetime import date, datetime
from enum import Enum
from typing import Any


class Serializer:
    """安全序列化工具"""

    @staticmethod
    def safe_json_dumps(obj: Any, **kwargs) -> str:
        """
        安全的JSON序列化，自动处理常见不可序列化对象

        Args:
            obj: 要序列化的对象
            **kwargs: 传递给json.dumps的其他参数

        Returns:
            JSON字符串
        """
        def safe_serialize(o):
            if isinstance(o, Enum):
                return o.value
            if isinstance(o, (datetime, date)):
                return o.isoformat()
            if isinstance(o, (set, frozenset)):
                return sorted(o)
            if hasattr(o, "to_dict"):
                return o.to_dict()
            raise TypeError(f"Object of type {type(o).__name__} is not JSON serializable")

        kwargs.setdefault("ensure_ascii", False)
        return json.dumps(obj, default=safe_serialize, **kwargs)


def safe_json_dumps(obj: Any, **kwargs) -> str:
    return Serializer.safe_json_dumps(obj, **kwargs)
