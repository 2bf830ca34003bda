"""wgo 命令行接口

各命令模块注册自己的命令到 main group。
核心层只抛 WgoError，由这里统一输出提示并以对应退出码结束进程。
"""

from __future__ import annotations

import functools
import os
import sys
from typing import Any, Callable

import click

from wgo import __version__
from wgo.core.config import Config, init_config
from wgo.core.exceptions import WgoError
from wgo.core.workspace import Workspace
from wgo.utils.logger import setup_logging


def _service(ctx: click.Context) -> Any:
    """按 --workspace / --config 构造 VendorService"""
    from wgo.services.vendor_service import VendorService

    opts = ctx.find_root().obj or {}
    ws = Workspace.find(opts.get("workspace") or ".")
    config_path = opts.get("config")
    cfg = init_config(config_path) if config_path else Config.for_workspace(ws.root)
    return VendorService(ws, config=cfg)


def exit_on_error(fn: Callable[..., Any]) -> Callable[..., Any]:
    """WgoError -> stderr 提示 + 非零退出"""

    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return fn(*args, **kwargs)
        except WgoError as e:
            click.echo(str(e), err=True)
            sys.exit(e.exit_code)

    return wrapper


@click.group()
@click.version_option(version=__version__)
@click.option("--workspace", "-w", default=None, help="工作空间目录（默认自当前目录向上查找）")
@click.option("--config", "-c", default=None, help="配置文件路径（默认 <root>/.gocfg/config.yml）")
@click.pass_context
def main(ctx: click.Context, workspace: str | None, config: str | None) -> None:
    """wgo - Go 工作空间外部依赖管理"""
    setup_logging(
        level=os.getenv("WGO_LOG_LEVEL", "WARNING"),
        json_output=os.getenv("WGO_LOG_JSON", "") == "1",
    )
    ctx.obj = {"workspace": workspace, "config": config}


from wgo.cli.cmd_vendor import register as _reg_vendor  # noqa: E402

_reg_vendor(main)
