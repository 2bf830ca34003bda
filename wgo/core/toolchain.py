"""vendor 工具探测

save / restore 依赖外部 vendor 工具 (github.com/skelterjohn/vendor)，
执行前先确认其已安装且 build 号不低于 MIN_VENDOR_BUILD。
"""

from __future__ import annotations

import logging

from wgo.core.exceptions import ToolMissingError, ToolOutdatedError
from wgo.utils.shell import CommandExecutor, get_executor

logger = logging.getLogger(__name__)

MIN_VENDOR_BUILD = 3

USAGE_BANNER = "Usage: vendor"
VERSION_BANNER = "vendor build "

MISSING_MESSAGE = (
    "The save/restore functionality uses 'vendor'.\n"
    "To install vendor, 'go get github.com/skelterjohn/vendor'."
)
OUTDATED_MESSAGE = (
    "Your copy of vendor is out of date.\n"
    "To update vendor, 'go get -u github.com/skelterjohn/vendor'."
)


def parse_build_number(output: str) -> int | None:
    """从 `vendor -v` 输出中解析 build 号，格式不符时返回 None"""
    if not output.startswith(VERSION_BANNER):
        return None
    tokens = output.split()
    if len(tokens) < 3:
        return None
    try:
        return int(tokens[2])
    except ValueError:
        return None


def ensure_vendor(
    executor: CommandExecutor | None = None, command: str = "vendor",
) -> int:
    """确认 vendor 可用，返回其 build 号

    Raises:
        ToolMissingError: 未安装，或无参运行时 stderr 不是 usage 提示
        ToolOutdatedError: build 号无法解析或低于 MIN_VENDOR_BUILD
    """
    ex = executor or get_executor()

    try:
        usage = ex.execute([command])
    except OSError as e:
        logger.debug("无法启动 %s: %s", command, e)
        raise ToolMissingError(MISSING_MESSAGE) from e
    if not usage.stderr.startswith(USAGE_BANNER):
        raise ToolMissingError(MISSING_MESSAGE)

    try:
        version = ex.execute([command, "-v"])
    except OSError as e:
        raise ToolOutdatedError(OUTDATED_MESSAGE) from e
    build = parse_build_number(version.stdout)
    if build is None or build < MIN_VENDOR_BUILD:
        logger.debug("vendor 版本输出: %r", version.stdout)
        raise ToolOutdatedError(OUTDATED_MESSAGE)

    logger.info("vendor build %d", build)
    return build
