"""vendor 工具调用构造

save:    vendor wgo vendor -x -s [-a dest=src]... [-r<kind> root=repo@rev]...
restore: vendor wgo vendor -r
"""

from __future__ import annotations

import logging
from typing import Iterable, Protocol

from wgo.core.config import DEFAULT_IGNORE_DIRS
from wgo.core.models import GodepsRecord
from wgo.core.reconcile import ignore_dirs_value
from wgo.core.workspace import Workspace
from wgo.utils.shell import CommandExecutor, run_cmd

logger = logging.getLogger(__name__)

VENDOR_IGNORE_ENV = "VENDOR_IGNORE_DIRS"

BASE_ARGS = ["wgo", "vendor"]


def save_args(
    mapping: dict[str, str], records: Iterable[GodepsRecord] = (),
) -> list[str]:
    """-x 工作空间模式，-s 扫描并同步；addon 按目标路径排序"""
    args = [*BASE_ARGS, "-x", "-s"]
    for destination in sorted(mapping):
        args += ["-a", f"{destination}={mapping[destination]}"]
    for rec in records:
        args += [f"-r{rec.kind}", rec.as_arg()]
    return args


def restore_args() -> list[str]:
    return [*BASE_ARGS, "-r"]


def vendor_env(
    workspace: Workspace,
    base_env: dict[str, str] | None = None,
    base_ignore: Iterable[str] = DEFAULT_IGNORE_DIRS,
) -> dict[str, str]:
    env = workspace.env(base_env)
    env[VENDOR_IGNORE_ENV] = ignore_dirs_value(workspace, base_ignore)
    return env


class Vendorer(Protocol):
    """vendor 工具调用协议"""

    def run(self, args: list[str], *, cwd: str, env: dict[str, str]) -> None:
        """执行 vendor <args>，失败抛 SubprocessFailureError"""
        ...


class VendorTool:
    """调用本地 vendor 可执行文件，输出直接打到终端"""

    def __init__(
        self, command: str = "vendor", executor: CommandExecutor | None = None,
    ) -> None:
        self.command = command
        self.executor = executor

    def run(self, args: list[str], *, cwd: str, env: dict[str, str]) -> None:
        logger.debug("%s %s", self.command, args)
        run_cmd(
            [self.command, *args], cwd=cwd, env=env,
            capture=False, executor=self.executor,
        )
