"""
单元测试：命令行脚本（重置 / 导出）
"""
import importlib.util
import json
from pathlib import Path

import pytest
import yaml

from folio.adapters.storage import JsonFileStorage
from folio.app.state_store import StateStore
from folio.domain.seed import SEED_DATA

SCRIPTS_DIR = Path(__file__).parent.parent / "scripts"


def _load_script(name):
    spec = importlib.util.spec_from_file_location(f"script_{name}", SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("FOLIO_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("FOLIO_STORAGE_KEY", raising=False)
    return tmp_path


class TestResetScript:
    """重置脚本测试类"""

    def test_force_reset_removes_saved_state(self, data_dir, capsys):
        StateStore(JsonFileStorage(data_dir)).update({"posts": []})
        assert (data_dir / "app_state.json").exists()

        assert _load_script("reset_data").main(["--force"]) == 0
        assert not (data_dir / "app_state.json").exists()
        assert len(StateStore(JsonFileStorage(data_dir)).read().posts) == 2

    def test_declined_confirmation_keeps_state(self, data_dir, monkeypatch):
        StateStore(JsonFileStorage(data_dir)).update({"posts": []})
        monkeypatch.setattr("builtins.input", lambda _prompt: "n")
        assert _load_script("reset_data").main([]) == 1
        assert (data_dir / "app_state.json").exists()

    def test_stats_only(self, data_dir, capsys):
        assert _load_script("reset_data").main(["--stats"]) == 0
        out = capsys.readouterr().out
        assert "posts: 2" in out
        assert not (data_dir / "app_state.json").exists()


class TestExportScript:
    """导出脚本测试类"""

    def test_export_seed_json(self, data_dir, capsys):
        assert _load_script("export_state").main(["--seed"]) == 0
        assert json.loads(capsys.readouterr().out) == SEED_DATA

    def test_export_saved_yaml(self, data_dir, capsys):
        StateStore(JsonFileStorage(data_dir)).update({"posts": []})
        assert _load_script("export_state").main(["--format", "yaml"]) == 0
        data = yaml.safe_load(capsys.readouterr().out)
        assert data["posts"] == []
        assert data["profile"]["name"] == SEED_DATA["profile"]["name"]
