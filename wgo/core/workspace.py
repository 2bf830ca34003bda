"""工作空间模型

工作空间由根目录和若干 gopath（相对根目录的路径段）组成，
布局记录在 <root>/.gocfg 下:

  .gocfg/gopaths   每行一个 gopath，首个为主 gopath
  .gocfg/vendor    可选，指定 vendor 使用的 gopath（默认主 gopath）
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from wgo.core.config import CONFIG_DIR
from wgo.core.exceptions import WorkspaceError

logger = logging.getLogger(__name__)

GOPATHS_FILE = "gopaths"
VENDOR_FILE = "vendor"


def _read_lines(path: str) -> list[str]:
    with open(path, encoding="utf-8") as f:
        lines = [ln.strip() for ln in f]
    return [ln for ln in lines if ln and not ln.startswith("#")]


@dataclass
class Workspace:
    """Go 工作空间"""

    root: str
    gopaths: list[str] = field(default_factory=list)
    vendor: str = ""

    def __post_init__(self) -> None:
        self.root = os.path.abspath(self.root)
        if self.vendor and self.vendor not in self.gopaths:
            raise WorkspaceError(
                f"vendor gopath {self.vendor!r} 不在 gopaths 中: {self.gopaths}"
            )

    # ------------------------------------------------------------------
    # 加载
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, root: str) -> Workspace:
        """从 <root>/.gocfg 读取工作空间布局"""
        cfg_dir = os.path.join(root, CONFIG_DIR)
        if not os.path.isdir(cfg_dir):
            raise WorkspaceError(f"{root} 不是 wgo 工作空间（缺少 {CONFIG_DIR}/）")

        gopaths: list[str] = []
        gopaths_file = os.path.join(cfg_dir, GOPATHS_FILE)
        if os.path.exists(gopaths_file):
            gopaths = [os.path.normpath(p) for p in _read_lines(gopaths_file)]

        vendor = ""
        vendor_file = os.path.join(cfg_dir, VENDOR_FILE)
        if os.path.exists(vendor_file):
            lines = _read_lines(vendor_file)
            vendor = os.path.normpath(lines[0]) if lines else ""

        ws = cls(root=root, gopaths=gopaths, vendor=vendor)
        logger.debug("工作空间: root=%s gopaths=%s vendor=%s", ws.root, ws.gopaths, ws.vendor)
        return ws

    @classmethod
    def find(cls, start: str = ".") -> Workspace:
        """自 start 向上查找最近的包含 .gocfg/ 的目录"""
        cur = os.path.abspath(start)
        while True:
            if os.path.isdir(os.path.join(cur, CONFIG_DIR)):
                return cls.load(cur)
            parent = os.path.dirname(cur)
            if parent == cur:
                raise WorkspaceError(f"未找到 wgo 工作空间: {os.path.abspath(start)}")
            cur = parent

    # ------------------------------------------------------------------
    # 路径布局
    # ------------------------------------------------------------------

    def gopath_dirs(self) -> list[str]:
        """各 gopath 的绝对路径"""
        return [os.path.normpath(os.path.join(self.root, p)) for p in self.gopaths]

    def search_dirs(self, base: dict[str, str] | None = None) -> list[str]:
        """包查找顺序: 工作空间各 gopath，其后是 base 环境中原有的 GOPATH"""
        env = os.environ if base is None else base
        dirs = self.gopath_dirs()
        for p in env.get("GOPATH", "").split(os.pathsep):
            if p and os.path.abspath(p) not in dirs:
                dirs.append(os.path.abspath(p))
        return dirs

    def gopath(self, base: dict[str, str] | None = None) -> str:
        """GOPATH 环境变量取值"""
        return os.pathsep.join(self.search_dirs(base))

    def first_gopath(self) -> str:
        return self.gopaths[0] if self.gopaths else "."

    def vendor_root(self) -> str:
        if self.vendor:
            return self.vendor
        if not self.gopaths:
            raise WorkspaceError(f"工作空间 {self.root} 未配置任何 gopath，无法确定 vendor 目录")
        return self.gopaths[0]

    def vendor_root_src(self) -> str:
        """vendor 源码目录（相对工作空间根目录）"""
        return os.path.join(self.vendor_root(), "src")

    def env(self, base: dict[str, str] | None = None) -> dict[str, str]:
        """构造子进程环境变量: 以 base（默认当前进程环境）为底，覆盖 GOPATH"""
        env = dict(os.environ if base is None else base)
        env["GOPATH"] = self.gopath(env)
        return env
