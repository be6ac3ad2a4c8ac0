"""
Day31: roster ツール用の共通部品（toolkit）

stdout は結果専用にしたいので、ログの出し先（stderr）の組み立てだけをここに置く。
"""

from __future__ import annotations

import logging
import sys


def setup_logger(name: str, verbose: bool) -> logging.Logger:
    """
    stderr に `[LEVEL] message` で出す logger を返す。

    verbose なら INFO 以上、そうでなければ WARNING 以上。
    何度呼んでも handler は1つだけ（呼ぶたびに付け直す）。
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)
    logger.propagate = False

    logger.handlers.clear()
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(handler)
    return logger
