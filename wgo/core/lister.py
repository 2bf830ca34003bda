"""go list 封装

PackageLister 协议抽象包列举能力，测试可注入返回预设输出的 fake。
"""

from __future__ import annotations

import logging
from typing import Protocol

from wgo.utils.shell import CommandExecutor, run_cmd

logger = logging.getLogger(__name__)

TEST_IMPORTS_TEMPLATE = "{{range .TestImports}}{{.}}\n{{end}}"
DEPS_TEMPLATE = "{{.ImportPath}}\n{{range .Deps}}{{.}}\n{{end}}"


def split_lines(output: str) -> list[str]:
    """按行切分，去掉空行"""
    return [ln.strip() for ln in output.splitlines() if ln.strip()]


class PackageLister(Protocol):
    """包列举协议"""

    def test_imports(
        self, targets: list[str], *, cwd: str, env: dict[str, str],
    ) -> list[str]:
        """各目标测试代码的导入路径"""
        ...

    def deps(
        self, targets: list[str], *, cwd: str, env: dict[str, str],
    ) -> list[str]:
        """各目标自身导入路径及其完整传递依赖"""
        ...

    def goroot(self, *, env: dict[str, str]) -> str:
        """标准库根目录"""
        ...


class GoLister:
    """基于 `go list` / `go env` 的实现"""

    def __init__(
        self, go_command: str = "go", executor: CommandExecutor | None = None,
    ) -> None:
        self.go_command = go_command
        self.executor = executor

    def _list(
        self, template: str, targets: list[str], *, cwd: str, env: dict[str, str],
    ) -> list[str]:
        cmd = [self.go_command, "list", "-e", "-f", template, *targets]
        r = run_cmd(cmd, cwd=cwd, env=env, executor=self.executor)
        return split_lines(r.stdout)

    def test_imports(
        self, targets: list[str], *, cwd: str, env: dict[str, str],
    ) -> list[str]:
        return self._list(TEST_IMPORTS_TEMPLATE, targets, cwd=cwd, env=env)

    def deps(
        self, targets: list[str], *, cwd: str, env: dict[str, str],
    ) -> list[str]:
        return self._list(DEPS_TEMPLATE, targets, cwd=cwd, env=env)

    def goroot(self, *, env: dict[str, str]) -> str:
        r = run_cmd([self.go_command, "env", "GOROOT"], env=env, executor=self.executor)
        return r.stdout.strip()
