"""
页面测试：通过 streamlit AppTest 驱动整个应用
"""
import json
from dataclasses import replace
from datetime import datetime
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from folio.adapters.storage import MemoryStorage
from folio.app.context import build_context
from folio.domain.rules import new_post_draft
from folio.domain.seed import seed_state
from folio.infra.config import load_config
from folio.infra.exceptions import ValidationError
from folio.web.framework.state import get_config
from folio.web.pages_impl.post_manager import delete_post, save_post

APP_FILE = str(Path(__file__).parent.parent / "app.py")
PASSWORD = "admin123"


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("FOLIO_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("FOLIO_ADMIN_PASSWORD", PASSWORD)
    monkeypatch.setenv("FOLIO_ENABLE_POST_MANAGER", "false")
    get_config.clear()
    yield tmp_path
    get_config.clear()


@pytest.fixture
def state_file(data_dir):
    return data_dir / "app_state.json"


def saved(state_file):
    return json.loads(state_file.read_text(encoding="utf-8"))


def open_app(path):
    at = AppTest.from_file(APP_FILE, default_timeout=30)
    at.query_params["path"] = path
    at.run()
    assert not at.exception
    return at


def go(at, path):
    at.query_params["path"] = path
    at.run()
    assert not at.exception
    return at


def click(at, label):
    next(b for b in at.button if b.label == label).click().run()
    assert not at.exception
    return at


def text_input(at, label):
    return next(t for t in at.text_input if t.label == label)


def login(at, password=PASSWORD):
    at = go(at, "/admin")
    text_input(at, "Password").input(password)
    return click(at, "Login")


class TestLoginPage:
    """登录页测试类"""

    def test_wrong_password_shows_inline_error(self, data_dir):
        at = login(open_app("/admin"), "nope")
        assert [e.value for e in at.error] == ["Invalid password"]
        assert text_input(at, "Password") is not None

    def test_error_cleared_after_leaving_login(self, data_dir):
        """测试离开登录页再返回时不再显示旧的错误"""
        at = login(open_app("/admin"), "nope")
        assert len(at.error) == 1
        go(at, "/")
        go(at, "/admin")
        assert len(at.error) == 0

    def test_correct_password_opens_dashboard(self, data_dir):
        at = login(open_app("/admin"))
        assert len(at.error) == 0
        assert any(t.value.startswith("Welcome,") for t in at.title)

    def test_guarded_path_redirects_to_login(self, data_dir):
        at = open_app("/admin/settings")
        assert text_input(at, "Password") is not None
        assert len(at.radio) == 0

    def test_logout_guards_admin_again(self, data_dir):
        at = login(open_app("/admin"))
        at.button(key="sidebar_logout").click().run()
        go(at, "/admin/profile")
        assert text_input(at, "Password") is not None


class TestSettingsPage:
    """站点设置页测试类"""

    def test_theme_change_commits_immediately(self, state_file):
        at = go(login(open_app("/admin")), "/admin/settings")
        at.radio(key="settings_theme_mode").set_value("dark").run()
        assert saved(state_file)["settings"]["themeMode"] == "dark"

    def test_seo_title_commits_on_change(self, state_file):
        at = go(login(open_app("/admin")), "/admin/settings")
        at.text_input(key="settings_seo_title").input("New T").run()
        data = saved(state_file)
        assert data["settings"]["seoTitle"] == "New T"
        # settings are replaced wholesale, other fields carried over
        assert data["settings"]["themeMode"] == "light"

    def test_reset_waits_for_yes(self, state_file):
        """测试重置操作只在确认 Yes 之后执行"""
        at = go(login(open_app("/admin")), "/admin/settings")
        at.radio(key="settings_theme_mode").set_value("dark").run()
        assert state_file.exists()

        at.button(key="settings_reset").click().run()
        assert any("Are you sure you want to reset" in w.value for w in at.warning)
        assert state_file.exists()

        at.button(key="reset_all_data_yes").click().run()
        assert not at.exception
        assert not state_file.exists()
        assert at.radio(key="settings_theme_mode").value == "light"

    def test_reset_no_keeps_data(self, state_file):
        at = go(login(open_app("/admin")), "/admin/settings")
        at.radio(key="settings_theme_mode").set_value("dark").run()
        at.button(key="settings_reset").click().run()
        at.button(key="reset_all_data_no").click().run()
        assert len(at.warning) == 0
        assert saved(state_file)["settings"]["themeMode"] == "dark"


class TestProfilePage:
    """个人资料编辑页测试类"""

    def test_edits_wait_for_save(self, state_file):
        at = go(login(open_app("/admin")), "/admin/profile")
        text_input(at, "Display Name").input("New Name")
        at.run()
        assert not state_file.exists()

    def test_save_commits_whole_draft(self, state_file):
        at = go(login(open_app("/admin")), "/admin/profile")
        text_input(at, "Display Name").input("New Name")
        text_input(at, "Location").input("Rome, Italy")
        click(at, "💾 Save Changes")
        profile = saved(state_file)["profile"]
        assert profile["name"] == "New Name"
        assert profile["location"] == "Rome, Italy"
        assert profile["skills"] == seed_state().profile.skills
        assert [s.value for s in at.success] == ["Profile updated successfully!"]


class TestPostManagerPage:
    """文章管理页测试类"""

    @pytest.fixture
    def enabled(self, data_dir, monkeypatch):
        monkeypatch.setenv("FOLIO_ENABLE_POST_MANAGER", "true")
        get_config.clear()
        return data_dir / "app_state.json"

    def test_disabled_by_default(self, data_dir):
        at = go(login(open_app("/admin")), "/admin/posts")
        assert any(t.value.startswith("Welcome,") for t in at.title)
        assert not any(t.value == "Blog Posts" for t in at.title)

    def test_create_post(self, enabled):
        at = go(login(open_app("/admin")), "/admin/posts")
        click(at, "➕ Create Post")
        text_input(at, "Title").input("X")
        click(at, "Save Post")
        posts = saved(enabled)["posts"]
        assert [p["id"] for p in posts[:2]] == ["1", "2"]
        assert posts[-1]["title"] == "X"
        assert posts[-1]["author"] == seed_state().profile.name

    def test_delete_waits_for_yes(self, enabled):
        at = go(login(open_app("/admin")), "/admin/posts")
        at.button(key="delete_1").click().run()
        assert any("Delete this post?" in w.value for w in at.warning)
        assert not enabled.exists()

        at.button(key="delete_post_yes").click().run()
        assert not at.exception
        assert [p["id"] for p in saved(enabled)["posts"]] == ["2"]

    def test_delete_no_keeps_posts(self, enabled):
        at = go(login(open_app("/admin")), "/admin/posts")
        at.button(key="delete_1").click().run()
        at.button(key="delete_post_no").click().run()
        assert not enabled.exists()
        assert len(at.warning) == 0


class TestPostActions:
    """文章保存与删除操作测试类"""

    @pytest.fixture
    def ctx(self):
        return build_context(load_config(environ={}), MemoryStorage())

    def test_create_then_delete(self, ctx):
        """测试创建 X 后删除 id 1，剩余 id 2 与 X"""
        draft = new_post_draft(ctx.store.read(), datetime(2024, 5, 1, 12, 0))
        save_post(ctx, draft, is_new=True)
        assert [p.id for p in ctx.store.read().posts] == ["1", "2", draft.id]

        delete_post(ctx, "1")
        assert [p.id for p in ctx.store.read().posts] == ["2", draft.id]

    def test_edit_keeps_position(self, ctx):
        first = ctx.store.read().posts[0]
        edited = replace(first, title="Edited")
        save_post(ctx, edited, is_new=False)
        posts = ctx.store.read().posts
        assert posts[0].title == "Edited"
        assert posts[1] == seed_state().posts[1]

    def test_save_new_with_taken_id_rejected(self, ctx):
        with pytest.raises(ValidationError):
            save_post(ctx, ctx.store.read().posts[0], is_new=True)

    def test_delete_unknown_id_rejected(self, ctx):
        with pytest.raises(ValidationError):
            delete_post(ctx, "missing")
        assert ctx.store.read().posts == seed_state().posts
