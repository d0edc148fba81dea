#!/usr/bin/env python3
"""
Checkers Project 主入口文件

提供命令行接口：查看棋盘、查询走法、运行示例局面。
"""

import sys
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.markup import escape
from rich.text import Text

from checkers_project import __version__, __description__
from checkers_project.src.checkers_engine.config import (
    EngineConfig, SystemConfig, load_configs_from_file
)
from checkers_project.src.checkers_engine.main import moves_table, run_demo
from checkers_project.src.checkers_engine.rules_engine import (
    CheckersBoard, Location, RuleEngine, TurnPhase
)
from checkers_project.src.checkers_engine.utils import CheckersError, setup_logger

console = Console()


def print_banner():
    """打印项目横幅"""
    banner_text = Text()
    banner_text.append("Checkers Engine\n", style="bold blue")
    banner_text.append(f"版本: {__version__}\n", style="green")
    banner_text.append(__description__, style="white")

    panel = Panel(
        banner_text,
        title="跳棋规则引擎",
        title_align="center",
        border_style="blue",
        padding=(1, 2)
    )
    console.print(panel)


def load_board(position: Optional[str], empty: bool = False) -> CheckersBoard:
    """根据命令行参数构造棋盘"""
    if position:
        return CheckersBoard.from_text(position)
    if empty:
        return CheckersBoard.empty()
    return CheckersBoard.new_game()


@click.group()
@click.version_option(version=__version__, prog_name="Checkers Engine")
@click.option('--debug', is_flag=True, help='启用调试模式')
@click.option('--config', type=click.Path(exists=True), help='配置文件路径')
@click.pass_context
def cli(ctx: click.Context, debug: bool, config: Optional[str]):
    """跳棋规则引擎 - 兵与王的合法走法生成"""
    engine_config, system_config = EngineConfig(), SystemConfig()
    if config:
        try:
            engine_config, system_config = load_configs_from_file(config)
        except CheckersError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            sys.exit(1)
        console.print(f"[green]使用配置文件: {config}[/green]")

    if debug:
        console.print("[yellow]调试模式已启用[/yellow]")

    setup_logger(
        name='checkers',
        level='DEBUG' if debug else system_config.log_level,
        log_file=system_config.log_file or None,
        log_dir=system_config.log_dir,
        max_size=system_config.log_max_size,
        backup_count=system_config.log_backup_count,
    )

    ctx.ensure_object(dict)
    ctx.obj['engine_config'] = engine_config


@cli.command()
def info():
    """显示系统信息"""
    print_banner()


@cli.command()
@click.option('--empty', is_flag=True, help='显示空棋盘')
@click.option('--position', type=str, help="紧凑文本格式的局面，8行以'/'分隔")
def board(empty: bool, position: Optional[str]):
    """显示棋盘"""
    try:
        console.print(load_board(position, empty).to_visual_string())
    except CheckersError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)


@cli.command()
@click.argument('row', type=int)
@click.argument('col', type=int)
@click.option('--continuation', is_flag=True, help='棋子处于连吃阶段')
@click.option('--position', type=str, help="紧凑文本格式的局面，默认为开局")
@click.pass_context
def moves(ctx: click.Context, row: int, col: int, continuation: bool, position: Optional[str]):
    """列出 (ROW, COL) 上棋子的合法走法"""
    phase = TurnPhase.CONTINUATION if continuation else TurnPhase.FREE
    location = Location(row, col)

    try:
        engine = RuleEngine(ctx.obj['engine_config'])
        result = engine.legal_moves(load_board(position), location, phase=phase, sort=True)
    except CheckersError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    console.print(moves_table(f"{location} ({phase.value})", result))
    console.print(f"共 {len(result)} 个走法")


@cli.command()
@click.pass_context
def demo(ctx: click.Context):
    """运行示例局面"""
    try:
        run_demo(console, ctx.obj['engine_config'])
    except CheckersError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)


def main():
    """主入口函数"""
    try:
        cli(obj={})
    except KeyboardInterrupt:
        console.print("\n[yellow]程序被用户中断[/yellow]")
        sys.exit(0)


if __name__ == "__main__":
    main()
