"""
基础设施层：日志、异常、序列化、配置。
"""

from .config import FolioConfig, load_config
from .exceptions import (
    ConfigError,
    FileOperationError,
    FolioException,
    StoreError,
    ValidationError,
    handle_errors,
)
from .logging import LoggerManager, get_logger, set_log_level
from .serialization import Serializer, safe_json_dumps

__all__ = [
    "FolioConfig",
    "load_config",
    "FolioException",
    "ConfigError",
    "ValidationError",
    "FileOperationError",
    "StoreError",
    "handle_errors",
    "LoggerManager",
    "get_logger",
    "set_log_level",
    "Serializer",
    "safe_json_dumps",
]
