"""依赖包解析器

职责:
- 两次调用 go list 得到目标的测试依赖与完整传递依赖
- 将每个导入路径解析到磁盘目录（只查找）
- 按 GOROOT / 工作空间 / 外部 对每个包分类一次，丢弃标准库

第一次列举的结果作为第二次的输入，因此两次调用必须串行。
"""

from __future__ import annotations

import logging

from wgo.core.buildctx import find_package_dir
from wgo.core.exceptions import UnresolvablePackageError
from wgo.core.lister import PackageLister
from wgo.core.models import PackageEntry, PackageKind
from wgo.core.workspace import Workspace
from wgo.utils.paths import is_within

logger = logging.getLogger(__name__)


def gopath_targets(workspace: Workspace) -> list[str]:
    """每个 gopath 下全部包的通配目标"""
    # 带前导 "./"，否则 go list 会把它当成导入路径而不是目录
    return [f"./{gp}/src/..." for gp in workspace.gopaths]


def classify(directory: str, *, goroot: str, root: str) -> PackageKind:
    if goroot and is_within(directory, goroot):
        return PackageKind.STANDARD
    if is_within(directory, root):
        return PackageKind.WORKSPACE
    return PackageKind.EXTERNAL


class PackageResolver:
    """依赖包解析器 — 每次调用都重新列举，不做缓存"""

    def __init__(
        self,
        workspace: Workspace,
        lister: PackageLister,
        *,
        goroot: str = "",
        base_env: dict[str, str] | None = None,
    ) -> None:
        self.workspace = workspace
        self.lister = lister
        self.env = workspace.env(base_env)
        self.search_dirs = workspace.search_dirs(base_env)
        self._goroot = goroot

    @property
    def goroot(self) -> str:
        if not self._goroot:
            self._goroot = self.lister.goroot(env=self.env)
            logger.debug("GOROOT=%s", self._goroot)
        return self._goroot

    def candidates(self, targets: list[str]) -> list[str]:
        """列出目标及其测试依赖的传递闭包（去重，保持首次出现顺序）"""
        root = self.workspace.root
        all_targets = list(targets) + gopath_targets(self.workspace)

        test_imports = self.lister.test_imports(all_targets, cwd=root, env=self.env)
        logger.info("测试依赖 %d 个", len(test_imports))
        all_targets.extend(test_imports)

        deps = self.lister.deps(all_targets, cwd=root, env=self.env)
        return list(dict.fromkeys(deps))

    def resolve(self, targets: list[str]) -> dict[str, PackageEntry]:
        """返回 {导入路径: PackageEntry}，不含标准库"""
        goroot = self.goroot
        root = self.workspace.root

        pkgs: dict[str, PackageEntry] = {}
        for import_path in self.candidates(targets):
            try:
                directory = find_package_dir(
                    import_path, src_dir=root,
                    goroot=goroot, gopath_dirs=self.search_dirs,
                )
            except UnresolvablePackageError as e:
                # 测试依赖中可能出现本就无法解析的路径（如 "C"）
                logger.debug("跳过: %s", e)
                continue
            kind = classify(directory, goroot=goroot, root=root)
            if kind is PackageKind.STANDARD:
                continue
            pkgs[import_path] = PackageEntry(import_path, directory, kind)

        external = sum(1 for p in pkgs.values() if p.is_external)
        logger.info("解析完成: %d 个包, 其中外部 %d 个", len(pkgs), external)
        return pkgs


def resolve_external_packages(
    workspace: Workspace,
    targets: list[str],
    *,
    lister: PackageLister,
    goroot: str = "",
    base_env: dict[str, str] | None = None,
) -> dict[str, PackageEntry]:
    """便捷入口，见 PackageResolver.resolve"""
    resolver = PackageResolver(workspace, lister, goroot=goroot, base_env=base_env)
    return resolver.resolve(targets)
