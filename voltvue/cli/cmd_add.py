"""CLI - 组件安装命令"""

from __future__ import annotations

import logging
from typing import NoReturn

import click

from voltvue.core.models import AddReport, AddRequest

logger = logging.getLogger(__name__)


def register(group: click.Group) -> None:
    group.add_command(add)
    group.add_command(list_cmd)


def _fail(exc: Exception, verbose: bool) -> NoReturn:
    """输出错误并以退出码 1 结束；verbose 时附带堆栈"""
    if verbose:
        logger.error("详细错误信息:", exc_info=exc)
    click.echo(f"错误: {exc}", err=True)
    raise SystemExit(1)


@click.command()
@click.argument("components", nargs=-1, required=True)
@click.option("--src-dir/--no-src-dir", default=True, help="安装到 src 目录（--no-src-dir 安装到项目根目录）")
@click.option("--outdir", default="", help="指定输出目录（优先于 --src-dir）")
@click.option("--deps/--no-deps", default=True, help="是否自动安装依赖")
@click.pass_context
def add(
    ctx: click.Context, components: tuple[str, ...],
    src_dir: bool, outdir: str, deps: bool,
) -> None:
    """添加组件（组件名，或 all 表示全部）"""
    from voltvue.services.add_service import AddService

    verbose = ctx.obj.get("verbose", False) if ctx.obj else False
    req = AddRequest(components=list(components), src_dir=src_dir, outdir=outdir, follow_deps=deps)
    try:
        report = AddService().add(req)
    except Exception as e:  # noqa: BLE001 - 顶层兜底，临时目录已由 materialize() 清理
        _fail(e, verbose)

    _echo_report(report, verbose)
    if report.exit_code:
        raise SystemExit(report.exit_code)


@click.command(name="list")
@click.pass_context
def list_cmd(ctx: click.Context) -> None:
    """列出组件源中的可用组件"""
    from voltvue.services.add_service import AddService

    verbose = ctx.obj.get("verbose", False) if ctx.obj else False
    try:
        names = AddService().available()
    except Exception as e:  # noqa: BLE001
        _fail(e, verbose)
    if not names:
        click.echo("组件源中没有可用组件。")
        return
    for name in names:
        click.echo(name)


def _echo_report(report: AddReport, verbose: bool) -> None:
    if report.mode == "all":
        click.echo(f"全部组件已添加到: {report.target_dir}")
        return

    r = report.result
    if report.status == "success":
        click.echo(
            f"{r.success_count} 个组件和 {r.sub_file_count} 个依赖文件"
            f"已添加到 {report.install_location}"
        )
        if report.follow_deps:
            auto_full = r.auto_full()
            auto_sub = r.auto_sub_files()
            if auto_full:
                click.echo(f"  - 完整组件: {', '.join(auto_full)}")
            if auto_sub:
                items = [f"{c}/{', '.join(paths)}" for c, paths in auto_sub.items()]
                click.echo(f"  - 依赖文件: {'; '.join(items)}")
    elif report.status == "partial":
        click.echo(
            f"已添加 {r.success_count} 个组件, {r.failure_count} 个失败 "
            f"({', '.join(r.failed)})，位置: {report.install_location}"
        )
    else:
        click.echo(f"没有添加任何组件，{r.failure_count} 个组件全部失败。", err=True)

    if verbose and r.missing_subfiles:
        click.echo(f"  - 缺失的依赖文件: {', '.join(r.missing_subfiles)}")
