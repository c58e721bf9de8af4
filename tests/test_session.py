"""
单元测试：会话守卫
"""
import pytest

from folio.app.session import SessionGuard

PASSWORD = "admin123"


@pytest.fixture
def guard():
    return SessionGuard(PASSWORD)


class TestSessionGuard:
    """会话守卫测试类"""

    def test_starts_anonymous(self, guard):
        assert not guard.is_authenticated
        assert not guard.failed_attempt

    def test_login_with_correct_password(self, guard):
        assert guard.login(PASSWORD) is True
        assert guard.is_authenticated
        assert not guard.failed_attempt

    @pytest.mark.parametrize("secret", ["", "admin", "admin1234", "ADMIN123", " admin123", None, 123])
    def test_login_rejects_everything_else(self, guard, secret):
        """测试除唯一口令外一律拒绝，且不抛异常"""
        assert guard.login(secret) is False
        assert not guard.is_authenticated
        assert guard.failed_attempt

    def test_success_clears_failed_flag(self, guard):
        guard.login("wrong")
        assert guard.login(PASSWORD)
        assert not guard.failed_attempt

    def test_logout(self, guard):
        guard.login(PASSWORD)
        guard.logout()
        assert not guard.is_authenticated
        assert not guard.failed_attempt

    def test_clear_failure_keeps_login_state(self, guard):
        guard.login("wrong")
        guard.clear_failure()
        assert not guard.failed_attempt
        assert not guard.is_authenticated

    def test_new_guard_is_anonymous(self, guard):
        """测试新会话（页面刷新）总是未登录"""
        guard.login(PASSWORD)
        assert not SessionGuard(PASSWORD).is_authenticated
