"""
Day31: roster のエントリーポイント（薄いラッパー）

狙い：
- import される「実装本体」（roster.py）と、CLI実行の「入口」を分離する
- テストは roster.py を直接 import して行う
"""

from __future__ import annotations

import sys

if __name__ == "__main__":
    from roster import main

    raise SystemExit(main(sys.argv[1:]))
