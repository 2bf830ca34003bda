"""CLI — save / vendor / restore 命令"""

from __future__ import annotations

import click

from wgo.cli import _service, exit_on_error


def register(group: click.Group) -> None:
    group.add_command(save)
    group.add_command(vendor)
    group.add_command(restore)


@click.command()
@click.option("--godeps", is_flag=True, help="同时导入 Godeps/Godeps.json 中的固定版本")
@click.argument("targets", nargs=-1)
@click.pass_context
@exit_on_error
def save(ctx: click.Context, godeps: bool, targets: tuple[str, ...]) -> None:
    """把工作空间外的依赖 vendor 到 vendor 目录（需要 vendor 工具）"""
    _service(ctx).save(list(targets), godeps=godeps)


@click.command()
@click.argument("targets", nargs=-1)
@click.pass_context
@exit_on_error
def vendor(ctx: click.Context, targets: tuple[str, ...]) -> None:
    """把工作空间外的依赖直接复制到主 gopath，逐个打印复制的包"""
    _service(ctx).promote(list(targets), report=click.echo)


@click.command()
@click.pass_context
@exit_on_error
def restore(ctx: click.Context) -> None:
    """按 vendor 目录中记录的清单恢复依赖（需要 vendor 工具）"""
    _service(ctx).restore()
