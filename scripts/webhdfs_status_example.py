"""
Пример: статус и содержимое каталога HDFS через hdfsbox.base.runtime.

Плюс:
- один код для local и corp (если установлен hdfsbox-plugin с аутентификацией)

Запуск:
  HDFSBOX_ADDR=namenode:9870 python scripts/webhdfs_status_example.py --path /data
"""

from __future__ import annotations

import argparse

from hdfsbox.base import runtime
from hdfsbox.base.log import setup_logger
from hdfsbox.webhdfs import Path, WebHdfsError


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--path", required=True, help="Absolute HDFS path.")
    parser.add_argument("--summary", action="store_true", help="Also print content summary.")
    parser.add_argument("--debug", action="store_true", help="Log every WebHDFS request.")
    args = parser.parse_args()

    setup_logger("DEBUG" if args.debug else "INFO")

    providers = runtime.get_providers()
    print(f"INFO: providers source = {providers.source}")

    fs = runtime.get_filesystem()
    path = Path(args.path)
    try:
        st = fs.get_file_status(path)
        print(f"INFO: {path} type={st.type.value} owner={st.owner} permission={st.permission}")

        if st.is_dir:
            for item in fs.list_status(path):
                print(f"  {item.type.value:<9} {item.length:>12} {item.path_suffix}")

        if args.summary:
            cs = fs.get_content_summary(path)
            print(
                f"INFO: dirs={cs.directory_count} files={cs.file_count} "
                f"length={cs.length} consumed={cs.space_consumed}"
            )
    except WebHdfsError as e:
        print(f"ERROR: {type(e).__name__}: {e}")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
