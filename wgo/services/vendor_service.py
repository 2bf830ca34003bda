"""Vendor 服务 — save / vendor(promote) / restore 的编排

每次调用的流程:
  探测 vendor 工具 -> 解析依赖包 -> 计算路径映射 -> 调用 vendor | 复制目录
任何一步失败都直接抛出异常，不重试也不回滚；promote 的复制可安全重跑。

用法:
    ws = Workspace.find()
    svc = VendorService(ws)
    svc.save(["./go/src/app/..."], godeps=True)
    svc.promote([], report=print)
    svc.restore()
"""

from __future__ import annotations

import logging
import os
from typing import Callable

from wgo.core.config import Config, get_config
from wgo.core.fileops import copy_dir
from wgo.core.godeps import import_godeps
from wgo.core.invocation import (
    Vendorer,
    VendorTool,
    restore_args,
    save_args,
    vendor_env,
)
from wgo.core.lister import GoLister, PackageLister
from wgo.core.models import PackageEntry
from wgo.core.reconcile import promote_plan, save_mapping
from wgo.core.resolver import PackageResolver
from wgo.core.toolchain import ensure_vendor
from wgo.core.workspace import Workspace
from wgo.utils.shell import CommandExecutor

logger = logging.getLogger(__name__)


class VendorService:
    """工作空间依赖 vendor 服务

    lister / vendorer 可注入，便于测试替换外部工具。
    base_env 为子进程环境的底（默认当前进程环境），本服务从不修改 os.environ。
    """

    def __init__(
        self,
        workspace: Workspace,
        *,
        config: Config | None = None,
        executor: CommandExecutor | None = None,
        lister: PackageLister | None = None,
        vendorer: Vendorer | None = None,
        base_env: dict[str, str] | None = None,
    ) -> None:
        self.workspace = workspace
        self.config = config or get_config()
        self.executor = executor
        self.lister = lister or GoLister(self.config.go_command, executor)
        self.vendorer = vendorer or VendorTool(self.config.vendor_command, executor)
        self.base_env = base_env

    def _ensure_vendor(self) -> None:
        ensure_vendor(self.executor, self.config.vendor_command)

    def resolve(self, targets: list[str]) -> dict[str, PackageEntry]:
        resolver = PackageResolver(
            self.workspace, self.lister,
            goroot=self.config.goroot, base_env=self.base_env,
        )
        return resolver.resolve(targets)

    def _run_vendor(self, args: list[str]) -> None:
        env = vendor_env(self.workspace, self.base_env, self.config.base_ignore_dirs)
        self.vendorer.run(args, cwd=self.workspace.root, env=env)

    # ------------------------------------------------------------------
    # 操作
    # ------------------------------------------------------------------

    def save(self, targets: list[str], *, godeps: bool = False) -> list[str]:
        """把外部依赖 vendor 到 vendor 目录，返回传给 vendor 的参数"""
        self._ensure_vendor()

        pkgs = self.resolve(targets)
        mapping = save_mapping(self.workspace, pkgs.values())
        records = import_godeps(self.workspace, self.config.godeps_file) if godeps else []

        args = save_args(mapping, records)
        logger.info("save: %d 个外部包, %d 个固定版本", len(mapping), len(records))
        self._run_vendor(args)
        return args

    def promote(
        self,
        targets: list[str],
        *,
        report: Callable[[str], None] | None = None,
    ) -> list[str]:
        """把外部依赖直接复制到主 gopath 的 src 下，返回本次复制的导入路径

        不需要 vendor 工具；目标目录已存在的包跳过，重复执行结果不变。
        """
        pkgs = self.resolve(targets)
        promoted: list[str] = []
        for item in promote_plan(self.workspace, pkgs.values()):
            if report is not None:
                report(item.import_path)
            copy_dir(item.source, os.path.join(self.workspace.root, item.destination))
            promoted.append(item.import_path)
        logger.info("promote: 复制 %d 个包", len(promoted))
        return promoted

    def restore(self) -> list[str]:
        """按 vendor 目录中已有的清单恢复依赖"""
        self._ensure_vendor()
        args = restore_args()
        self._run_vendor(args)
        return args
