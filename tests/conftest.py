"""
测试公共夹具
"""
import os
import sys
from pathlib import Path

import pytest

# 添加项目根目录到路径
sys.path.insert(0, str(Path(__file__).parent.parent))

from folio.adapters.storage import MemoryStorage
from folio.app.state_store import StateStore


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def store(storage):
    return StateStore(storage)


@pytest.fixture(autouse=True)
def _isolate_environ():
    """load_dotenv 会写入 os.environ；每个测试后恢复，避免跨测试泄漏"""
    saved = dict(os.environ)
    yield
    os.environ.clear()
    os.environ.update(saved)
