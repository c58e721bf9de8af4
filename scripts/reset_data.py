#!/usr/bin/env python3
"""
站点数据重置脚本

删除已保存的站点状态（data/<storage_key>.json），下次加载时恢复为内置默认数据集。

使用方法:
    python scripts/reset_data.py [--force] [--stats]

参数:
    --force: 跳过确认提示，直接执行重置
    --stats: 仅显示当前状态，不执行重置
"""

import argparse
import sys
from pathlib import Path

# 添加项目根目录到路径
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from folio.adapters.storage import JsonFileStorage
from folio.app.state_store import StateStore
from folio.infra.config import load_config


def get_data_stats(store: StateStore, storage: JsonFileStorage) -> dict:
    """获取当前数据状态统计"""
    state = store.read()
    path = storage.path_for(store.key)
    return {
        "state_file": str(path),
        "state_file_exists": path.exists(),
        "state_file_size": path.stat().st_size if path.exists() else 0,
        "education": len(state.education),
        "experience": len(state.experience),
        "publications": len(state.publications),
        "posts": len(state.posts),
    }


def print_stats(stats: dict, title: str = "当前数据状态") -> None:
    print(f"\n{title}:")
    print("-" * 40)
    for key, value in stats.items():
        print(f"  {key}: {value}")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="将站点内容重置为内置默认数据集",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
    python scripts/reset_data.py          # 交互式重置
    python scripts/reset_data.py --force  # 跳过确认直接重置
    python scripts/reset_data.py --stats  # 仅显示当前状态
        """
    )
    parser.add_argument("--force", "-f", action="store_true", help="跳过确认提示，直接执行重置")
    parser.add_argument("--stats", "-s", action="store_true", help="仅显示当前数据状态，不执行重置")
    args = parser.parse_args(argv)

    config = load_config()
    storage = JsonFileStorage(config.data_dir)
    store = StateStore(storage, key=config.storage_key)

    before = get_data_stats(store, storage)
    if args.stats:
        print_stats(before)
        return 0

    print_stats(before, "重置前状态")

    if not args.force:
        print("\n⚠️  警告: 此操作将清除所有修改，无法恢复!")
        response = input("确定要继续吗? [y/N]: ").strip().lower()
        if response not in ('y', 'yes'):
            print("已取消操作。")
            return 1

    store.reset()
    print_stats(get_data_stats(store, storage), "重置后状态")
    return 0


if __name__ == "__main__":
    sys.exit(main())
