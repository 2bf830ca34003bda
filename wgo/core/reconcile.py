"""路径映射

把解析结果整理成各操作需要的 "目标路径 -> 源目录" 映射:
  - save:    <vendor_root>/src/<导入路径>，交给 vendor 工具
  - promote: <主 gopath>/src/<导入路径>，直接复制
目标路径均相对工作空间根目录。
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable

from wgo.core.config import DEFAULT_IGNORE_DIRS
from wgo.core.models import PackageEntry
from wgo.core.workspace import Workspace

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PromoteItem:
    import_path: str
    destination: str  # 相对工作空间根目录
    source: str


def save_mapping(
    workspace: Workspace, entries: Iterable[PackageEntry],
) -> dict[str, str]:
    """save 模式的 {目标路径: 源目录}；已在工作空间内的包由 vendor 自行扫描"""
    vendor_src = workspace.vendor_root_src()
    mapping: dict[str, str] = {}
    for entry in entries:
        if not entry.vendorable:
            continue
        mapping[os.path.join(vendor_src, entry.import_path)] = entry.dir
    return mapping


def promote_plan(
    workspace: Workspace, entries: Iterable[PackageEntry],
) -> list[PromoteItem]:
    """promote 模式待复制的包，目标已存在的跳过（按导入路径排序）"""
    first = workspace.first_gopath()
    items: list[PromoteItem] = []
    for entry in sorted(entries, key=lambda e: e.import_path):
        if not entry.vendorable:
            continue
        destination = os.path.normpath(os.path.join(first, "src", entry.import_path))
        if os.path.exists(os.path.join(workspace.root, destination)):
            logger.debug("已存在，跳过: %s", destination)
            continue
        items.append(PromoteItem(entry.import_path, destination, entry.dir))
    return items


def ignore_dirs(
    workspace: Workspace, base: Iterable[str] = DEFAULT_IGNORE_DIRS,
) -> list[str]:
    dirs = list(base)
    for gp in workspace.gopaths:
        dirs.append(os.path.join(gp, "pkg"))
        dirs.append(os.path.join(gp, "bin"))
    return dirs


def ignore_dirs_value(
    workspace: Workspace, base: Iterable[str] = DEFAULT_IGNORE_DIRS,
) -> str:
    """VENDOR_IGNORE_DIRS 的取值，用平台路径列表分隔符连接"""
    return os.pathsep.join(ignore_dirs(workspace, base))
