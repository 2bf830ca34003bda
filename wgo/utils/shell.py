"""Shell 命令执行工具 — 统一子进程调用

通过 CommandExecutor 协议抽象子进程执行，方便测试替换。
go list / vendor 等外部工具都经由这里调用，环境变量总是显式传入，
不修改当前进程的 os.environ。
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Protocol

from wgo.core.exceptions import SubprocessFailureError

logger = logging.getLogger(__name__)


# =========================================================================
# 命令执行结果
# =========================================================================

@dataclass
class CommandResult:
    """命令执行结果（与 subprocess 解耦）"""

    returncode: int
    stdout: str
    stderr: str

    @property
    def success(self) -> bool:
        return self.returncode == 0


# =========================================================================
# 命令执行器协议
# =========================================================================

class CommandExecutor(Protocol):
    """命令执行器协议 — 抽象子进程调用

    测试时可注入 fake 实现返回预设输出，无需 patch subprocess。
    capture=False 时子进程直接继承终端的 stdout/stderr，结果中输出为空串。
    """

    def execute(
        self,
        cmd: list[str],
        *,
        cwd: str = ".",
        env: dict[str, str] | None = None,
        capture: bool = True,
    ) -> CommandResult:
        """执行命令并返回结果"""
        ...


# =========================================================================
# 默认实现: 本地执行器
# =========================================================================

class LocalExecutor:
    """本地子进程执行器（默认实现）

    不设超时：外部工具挂起时调用方随之阻塞。
    可执行文件不存在时 subprocess 抛出的 OSError 原样向上传递。
    """

    def execute(
        self,
        cmd: list[str],
        *,
        cwd: str = ".",
        env: dict[str, str] | None = None,
        capture: bool = True,
    ) -> CommandResult:
        logger.debug("exec: %s (cwd=%s)", cmd, cwd)
        r = subprocess.run(
            cmd, capture_output=capture, text=True,
            cwd=cwd, env=env, check=False,
        )
        return CommandResult(
            returncode=r.returncode,
            stdout=r.stdout or "",
            stderr=r.stderr or "",
        )


# =========================================================================
# 全局默认执行器（可替换）
# =========================================================================

_default_executor: CommandExecutor = LocalExecutor()


def get_executor() -> CommandExecutor:
    """获取全局默认命令执行器"""
    return _default_executor


def set_executor(executor: CommandExecutor) -> None:
    """替换全局默认命令执行器（用于测试）"""
    global _default_executor  # noqa: PLW0603
    _default_executor = executor


# =========================================================================
# 便捷函数
# =========================================================================

def run_cmd(
    cmd: list[str], *, cwd: str = ".",
    env: dict[str, str] | None = None,
    capture: bool = True,
    executor: CommandExecutor | None = None,
) -> CommandResult:
    """执行命令，非零退出抛 SubprocessFailureError

    Args:
        cmd: 命令参数列表
        cwd: 工作目录
        env: 环境变量（不传则继承当前进程）
        capture: 是否捕获输出；False 时输出直接打到终端
        executor: 指定执行器，默认使用全局执行器
    """
    logger.info("  %s (cwd=%s)", " ".join(cmd[:2]), cwd)
    try:
        r = (executor or get_executor()).execute(cmd, cwd=cwd, env=env, capture=capture)
    except OSError as e:
        # 可执行文件不存在或无法启动，按 shell 约定返回 127
        raise SubprocessFailureError(cmd, 127, str(e)) from e
    if not r.success:
        raise SubprocessFailureError(cmd, r.returncode, r.stderr)
    return r
