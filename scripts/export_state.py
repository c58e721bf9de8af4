#!/usr/bin/env python3
"""
导出站点状态

打印当前保存的站点内容（没有保存时为默认数据集），便于备份或审阅。

使用方法:
    python scripts/export_state.py [--format json|yaml] [--seed]
"""

import argparse
import sys
from pathlib import Path

import yaml

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from folio.adapters.storage import JsonFileStorage
from folio.app.state_store import StateStore
from folio.domain.seed import seed_state
from folio.infra.config import load_config
from folio.infra.serialization import safe_json_dumps


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="导出站点状态")
    parser.add_argument("--format", choices=["json", "yaml"], default="json", help="输出格式")
    parser.add_argument("--seed", action="store_true", help="导出内置默认数据集而不是已保存的状态")
    args = parser.parse_args(argv)

    if args.seed:
        state = seed_state()
    else:
        config = load_config()
        state = StateStore(JsonFileStorage(config.data_dir), key=config.storage_key).read()

    data = state.to_dict()
    if args.format == "yaml":
        print(yaml.safe_dump(data, allow_unicode=True, sort_keys=False))
    else:
        print(safe_json_dumps(data, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
