"""
单元测试：键值存储适配器
"""
import pytest

from folio.adapters.storage import JsonFileStorage, MemoryStorage
from folio.app.state_store import StateStore
from folio.domain.seed import seed_state
from folio.infra.exceptions import ValidationError


class TestJsonFileStorage:
    """JSON 文件存储测试类"""

    @pytest.fixture
    def storage(self, tmp_path):
        return JsonFileStorage(tmp_path / "data")

    def test_absent_key(self, storage):
        assert storage.get("app_state") is None

    def test_set_get_remove(self, storage):
        storage.set("app_state", '{"a": 1}')
        assert storage.path_for("app_state").read_text(encoding="utf-8") == '{"a": 1}'
        assert storage.get("app_state") == '{"a": 1}'
        storage.remove("app_state")
        assert storage.get("app_state") is None

    def test_remove_absent_is_noop(self, storage):
        storage.remove("app_state")

    def test_overwrite_leaves_no_temp_files(self, storage):
        storage.set("app_state", "one")
        storage.set("app_state", "two")
        assert storage.get("app_state") == "two"
        assert [p.name for p in storage.base_dir.iterdir()] == ["app_state.json"]

    @pytest.mark.parametrize("key", ["", "../escape", "a/b", "state.json"])
    def test_rejects_unsafe_keys(self, storage, key):
        with pytest.raises(ValidationError):
            storage.path_for(key)

    def test_store_survives_restart(self, tmp_path):
        """测试重启后从文件恢复状态"""
        StateStore(JsonFileStorage(tmp_path)).update({"posts": []})
        restored = StateStore(JsonFileStorage(tmp_path)).read()
        assert restored.posts == []
        assert restored.profile == seed_state().profile

    def test_corrupted_file_falls_back(self, tmp_path):
        storage = JsonFileStorage(tmp_path)
        storage.path_for("app_state").write_text("{broken", encoding="utf-8")
        assert StateStore(storage).read() == seed_state()


class TestMemoryStorage:
    """内存存储测试类"""

    def test_initial_values_copied(self):
        initial = {"k": "v"}
        storage = MemoryStorage(initial)
        storage.set("k", "w")
        assert initial["k"] == "v"
        assert "k" in storage
        storage.remove("k")
        storage.remove("k")
        assert "k" not in storage
