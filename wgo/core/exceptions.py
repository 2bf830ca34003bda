"""统一异常体系

所有业务异常继承 WgoError。核心层和服务层只负责抛出，
由 CLI 入口统一决定输出提示并以 exit_code 退出进程。
"""

from __future__ import annotations


class WgoError(Exception):
    """wgo 基础异常"""

    code: str = "UNKNOWN"
    exit_code: int = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ConfigError(WgoError):
    """配置文件缺失或内容无效"""

    code = "CONFIG_ERROR"


class WorkspaceError(WgoError):
    """工作空间不存在或布局不完整（如缺少 gopath）"""

    code = "WORKSPACE_ERROR"


class ToolMissingError(WgoError):
    """未安装 vendor 工具"""

    code = "TOOL_MISSING"


class ToolOutdatedError(WgoError):
    """vendor 工具版本过旧"""

    code = "TOOL_OUTDATED"


class SubprocessFailureError(WgoError):
    """外部命令以非零状态退出

    exit_code 沿用子进程的返回码，使 CLI 原样传递失败信号。
    """

    code = "SUBPROCESS_FAILURE"

    def __init__(self, command: list[str], returncode: int, stderr: str = "") -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        self.exit_code = returncode if returncode > 0 else 1
        name = " ".join(self.command[:2])
        msg = f"{name} 失败 (rc={returncode})"
        if stderr:
            msg = f"{msg}: {stderr[:500]}"
        super().__init__(msg)


class UnresolvablePackageError(WgoError):
    """无法定位导入路径对应的源码目录（解析阶段就地丢弃）"""

    code = "UNRESOLVABLE_PACKAGE"

    def __init__(self, import_path: str, reason: str = "") -> None:
        self.import_path = import_path
        msg = f"无法定位包 {import_path!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class FileCopyError(WgoError):
    """复制包目录失败"""

    code = "COPY_ERROR"

    def __init__(self, src: str, dst: str, reason: str = "") -> None:
        self.src = src
        self.dst = dst
        msg = f"复制 {src} -> {dst} 失败"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)
