"""
应用层：状态存储、会话守卫与显式上下文。
"""

from .context import AppContext, build_context
from .session import SessionGuard
from .state_store import StateStore

__all__ = ["AppContext", "build_context", "SessionGuard", "StateStore"]
