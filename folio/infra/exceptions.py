"""
基础设施层 - 异常模块

定义标准异常类和错误处理机制。
"""

from functools import wraps
from typing import Any, Dict, Optional


class FolioException(Exception):
    """站点基础异常类"""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "UNKNOWN_ERROR"
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典格式"""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ConfigError(FolioException):
    """配置相关错误"""
    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, "CONFIG_ERROR", {"config_key": config_key, **kwargs})


class ValidationError(FolioException):
    """数据验证错误"""
    def __init__(self, message: str, field: Optional[str] = None, value: Any = None, **kwargs) -> None:
        super().__init__(message, "VALIDATION_ERROR", {"field": field, "value": value, **kwargs})


class FileOperationError(FolioException):
    """文件操作错误"""
    def __init__(self, message: str, file_path: Optional[str] = None, operation: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, "FILE_ERROR", {"file_path": file_path, "operation": operation, **kwargs})


class StoreError(FolioException):
    """存储操作错误"""
    def __init__(self, message: str, operation: Optional[str] = None, key: Optional[str] = None, **kwargs) -> None:
        super().__init__(message, "STORE_ERROR", {"operation": operation, "key": key, **kwargs})


# =============================================================================
# 错误处理装饰器
# =============================================================================

def handle_errors(logger=None, operation: Optional[str] = None):
    """
    统一错误处理装饰器

    业务异常记录后原样抛出；未知异常转换为 StoreError。

    Args:
        logger: 日志记录器，如果不提供则使用默认日志器
        operation: 写入 StoreError.details 的操作名，默认取函数名
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            _logger = logger
            if _logger is None:
                from .logging import get_logger
                _logger = get_logger(__name__)
            try:
                return func(*args, **kwargs)
            except FolioException as e:
                _logger.error(f"业务异常 [{e.error_code}]: {e.message}")
                raise
            except Exception as e:
                error = StoreError(f"未知错误: {str(e)}", operation=operation or func.__name__)
                _logger.error(f"未处理异常: {str(e)}", exc_info=True)
                raise error from e
        return wrapper
    return decorator
