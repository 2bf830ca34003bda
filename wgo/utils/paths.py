"""路径判定工具"""

from __future__ import annotations

import os


def is_within(path: str, base: str) -> bool:
    """判断 path 是否位于 base 目录之内（含 base 本身）

    相对路径为 ".." 或以 "../" 开头即视为在外部；
    无法计算相对路径（如 Windows 跨盘符）同样视为在外部。
    """
    try:
        rel = os.path.relpath(path, base)
    except ValueError:
        return False
    return rel != os.pardir and not rel.startswith(os.pardir + os.sep)
