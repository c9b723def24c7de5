"""voltvue 命令行接口

命令按领域拆分为子模块，每个模块注册自己的命令到 main group。
"""

from __future__ import annotations

import click
import yaml

from voltvue import __version__
from voltvue.core.config import init_config
from voltvue.core.exceptions import VoltError
from voltvue.utils.logger import setup_cli_logging

_EXAMPLES = """\b
示例:
  voltvue add button                 添加 button 到 src/volt
  voltvue add panel                  添加 panel 及其实际引用的依赖文件
  voltvue add panel button           添加 panel 和完整的 button
  voltvue add --no-src-dir button    添加到 ./volt
  voltvue add --outdir lib button    添加到 lib/volt
  voltvue add --no-deps panel        不自动安装依赖
  voltvue add all                    添加全部组件
"""


@click.group(epilog=_EXAMPLES)
@click.version_option(__version__, "-v", "--version")
@click.option("--verbose", is_flag=True, help="输出详细日志和错误堆栈")
@click.option("--config", "config_path", default=None, help="配置文件路径（默认 .voltvue.yml）")
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: str | None) -> None:
    """voltvue - 将 PrimeVue Volt 组件添加到你的项目"""
    setup_cli_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    try:
        init_config(config_path)
    except (VoltError, OSError, ValueError, yaml.YAMLError) as e:
        raise click.ClickException(f"配置加载失败: {e}") from e


# 注册各领域子命令
from voltvue.cli.cmd_add import register as _reg_add  # noqa: E402

_reg_add(main)
