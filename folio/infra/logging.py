"""
基础设施层 - 日志模块

根 logger 只配置一次：stdout 处理器，可选文件处理器，全局级别。
Streamlit 每次 rerun 都会重新执行脚本，因此所有配置都必须幂等。
"""

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s [%(levelname)s] [%(name)s] %(message)s'
FILE_LOG_FORMAT = '%(asctime)s [%(levelname)s] [%(name)s:%(lineno)d] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class LoggerManager:
    """根 logger 的一次性配置"""

    _configured: bool = False
    _log_file: Optional[Path] = None

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        if not cls._configured:
            cls._configure_root()
        return logging.getLogger(name)

    @classmethod
    def _configure_root(cls) -> None:
        root = logging.getLogger()
        # 宿主（pytest、streamlit）已装好处理器时不再重复添加
        if not root.handlers:
            root.setLevel(logging.INFO)
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            root.addHandler(handler)
        cls._configured = True

    @classmethod
    def set_log_file(cls, log_file: Path) -> None:
        """追加文件处理器；同一路径只添加一次"""
        if cls._log_file == log_file:
            return
        root = logging.getLogger()
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(log_file, encoding='utf-8')
        except OSError as e:
            root.warning(f"文件日志配置失败: {e}")
            return
        handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(handler)
        cls._log_file = log_file

    @staticmethod
    def set_level(level: str) -> None:
        """设置全局日志级别；未知级别名忽略"""
        value = logging.getLevelName(level.upper())
        if isinstance(value, int):
            logging.getLogger().setLevel(value)


def get_logger(name: str) -> logging.Logger:
    return LoggerManager.get_logger(name)


def set_log_level(level: str) -> None:
    LoggerManager.set_level(level)
