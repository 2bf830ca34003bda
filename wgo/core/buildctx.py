"""导入路径 -> 源码目录的只查找解析

等价于 go/build 的 FindOnly 模式：只定位目录，不解析源文件。
  - 本地路径 (./x, ../x) 相对 src_dir 解析
  - 其余依次查找 GOROOT/src/<path>、各 GOPATH/src/<path>
"""

from __future__ import annotations

import os

from wgo.core.exceptions import UnresolvablePackageError


def is_local_import(path: str) -> bool:
    return path in (".", "..") or path.startswith(("./", "../"))


def find_package_dir(
    import_path: str,
    *,
    src_dir: str,
    goroot: str,
    gopath_dirs: list[str],
) -> str:
    """返回导入路径对应的绝对目录

    Raises:
        UnresolvablePackageError: 路径非法或在任何搜索根下都不存在
    """
    if not import_path:
        raise UnresolvablePackageError(import_path, "空导入路径")

    if is_local_import(import_path):
        d = os.path.normpath(os.path.join(src_dir, import_path))
        if os.path.isdir(d):
            return d
        raise UnresolvablePackageError(import_path, f"目录不存在: {d}")

    if os.path.isabs(import_path):
        raise UnresolvablePackageError(import_path, "不能导入绝对路径")

    rel = import_path.replace("/", os.sep)
    roots = ([goroot] if goroot else []) + list(gopath_dirs)
    for root in roots:
        d = os.path.join(root, "src", rel)
        if os.path.isdir(d):
            return d
    raise UnresolvablePackageError(import_path, f"不在 {roots} 中")
