"""
Session guard: an in-memory login flag for the admin pages.

Demo grade only. One configured credential, nothing persisted, no lockout or
expiry; a new browser session always starts anonymous.
"""
from __future__ import annotations

import hmac

from ..infra.logging import get_logger

logger = get_logger(__name__)


class SessionGuard:
    def __init__(self, password: str) -> None:
        self._password = password
        self._authenticated = False
        self._failed_attempt = False

    @property
    def is_authenticated(self) -> bool:
        return self._authenticated

    @property
    def failed_attempt(self) -> bool:
        """True after a rejected login, until the next success or logout."""
        return self._failed_attempt

    def clear_failure(self) -> None:
        """Forget a rejected attempt, e.g. when the login screen is opened afresh."""
        self._failed_attempt = False

    def login(self, secret: object) -> bool:
        if isinstance(secret, str) and hmac.compare_digest(secret.encode("utf-8"), self._password.encode("utf-8")):
            self._authenticated = True
            self._failed_attempt = False
            logger.info("管理员登录成功")
            return True
        self._failed_attempt = True
        logger.info("管理员登录失败：密码错误")
        return False

    def logout(self) -> None:
        if self._authenticated:
            logger.info("管理员已退出登录")
        self._authenticated = False
        self._failed_attempt = False
