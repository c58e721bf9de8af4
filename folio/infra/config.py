"""
基础设施层 - 配置模块

配置优先级（低 → 高）：
1. FolioConfig 默认值
2. config/folio.yaml
3. 环境变量（启动时先由 python-dotenv 加载 config/.env.local）
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv

from .exceptions import ConfigError

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"
DATA_DIR = PROJECT_ROOT / "data"

DEFAULT_CONFIG_FILE = CONFIG_DIR / "folio.yaml"
DEFAULT_ENV_FILE = CONFIG_DIR / ".env.local"

ENV_PREFIX = "FOLIO_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class FolioConfig:
    data_dir: Path = DATA_DIR
    storage_key: str = "app_state"
    # demo-grade credential, not a security boundary
    admin_password: str = "admin123"
    enable_post_manager: bool = False
    log_level: str = "INFO"
    log_file: Optional[Path] = None


def _to_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError(f"无效的布尔值: {value!r}", config_key=key)


def _coerce(key: str, value: Any) -> Any:
    if key in ("data_dir", "log_file"):
        if value is None or str(value).strip() == "":
            if key == "data_dir":
                raise ConfigError("data_dir 不能为空", config_key=key)
            return None
        p = Path(str(value)).expanduser()
        return p if p.is_absolute() else PROJECT_ROOT / p
    if key == "enable_post_manager":
        return _to_bool(key, value)
    if key == "log_level":
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(f"无效的日志级别: {value!r}", config_key=key)
        return level
    text = "" if value is None else str(value)
    if not text.strip():
        raise ConfigError(f"{key} 不能为空", config_key=key)
    return text


def _apply(config: FolioConfig, overrides: Mapping[str, Any]) -> FolioConfig:
    known = {f.name for f in fields(FolioConfig)}
    changes: Dict[str, Any] = {}
    for key, value in overrides.items():
        if key not in known:
            raise ConfigError(f"未知配置项: {key}", config_key=key)
        changes[key] = _coerce(key, value)
    return replace(config, **changes) if changes else config


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"配置文件解析失败: {e}", config_key=str(path)) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("配置文件顶层必须是映射", config_key=str(path))
    return data


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    for f in fields(FolioConfig):
        env_key = ENV_PREFIX + f.name.upper()
        if env_key in environ:
            overrides[f.name] = environ[env_key]
    return overrides


def load_config(
    config_file: Optional[Path] = None,
    env_file: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> FolioConfig:
    """
    加载站点配置

    Args:
        config_file: YAML 配置文件路径，默认 config/folio.yaml（不存在则跳过）
        env_file: dotenv 文件路径，默认 config/.env.local（不存在则跳过）
        environ: 环境变量映射，默认 os.environ（测试可注入）
    """
    if environ is None:
        dotenv_path = env_file or DEFAULT_ENV_FILE
        if dotenv_path.exists():
            load_dotenv(dotenv_path)
        environ = os.environ

    config = FolioConfig()
    yaml_path = config_file or DEFAULT_CONFIG_FILE
    if yaml_path.exists():
        config = _apply(config, _read_yaml(yaml_path))
    return _apply(config, _env_overrides(environ))
