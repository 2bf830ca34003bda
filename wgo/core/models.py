"""领域数据模型

数据类:
- PackageKind: 包的归属分类（每个包只计算一次）
- PackageEntry: 一次解析得到的包
- GodepsRecord: 旧版依赖清单中的一条固定版本记录
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum


class PackageKind(str, Enum):
    """包目录相对工作空间的归属"""

    EXTERNAL = "external"    # 工作空间外，需要 vendor
    WORKSPACE = "workspace"  # 已在工作空间内
    STANDARD = "standard"    # 标准库 (GOROOT 内)


@dataclass(frozen=True)
class PackageEntry:
    """已解析的依赖包"""

    import_path: str
    dir: str
    kind: PackageKind

    @property
    def is_external(self) -> bool:
        return self.kind is PackageKind.EXTERNAL

    @property
    def vendorable(self) -> bool:
        """目录为绝对路径且位于工作空间之外"""
        return self.is_external and os.path.isabs(self.dir)


@dataclass(frozen=True)
class GodepsRecord:
    """固定到某个版本的外部代码仓"""

    root: str  # vendor 目录下的落点
    repo: str  # 代码仓地址
    rev: str
    kind: str  # "git" / "hg" / "bzr"

    def as_arg(self) -> str:
        return f"{self.root}={self.repo}@{self.rev}"
