#!/usr/bin/env python3
"""
跳棋规则引擎主入口文件

运行示例局面：白兵 (3,3)、(4,2)，黑兵 (4,4)、(2,4)，
分别列出 (3,3) 在回合开始和连吃阶段的合法走法。
"""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from .config.engine_config import EngineConfig
from .rules_engine import CheckersBoard, Location, Move, PieceType, RuleEngine, TurnPhase

console = Console()

DEMO_PIECE = Location(3, 3)


def build_demo_board() -> CheckersBoard:
    """构造示例局面"""
    board = CheckersBoard.empty()
    board.set_piece(Location(3, 3), PieceType.WHITE)
    board.set_piece(Location(4, 2), PieceType.WHITE)
    board.set_piece(Location(4, 4), PieceType.BLACK)
    board.set_piece(Location(2, 4), PieceType.BLACK)
    return board


def moves_table(title: str, moves) -> Table:
    """把走法列表渲染为表格"""
    table = Table(title=title)
    table.add_column("起点")
    table.add_column("终点")
    table.add_column("吃子")
    table.add_column("记法")
    for move in moves:
        table.add_row(
            str(move.from_pos),
            str(move.to_pos),
            str(move.eaten) if move.eaten is not None else "-",
            move.to_coordinate_notation(),
        )
    return table


def run_demo(out: Console, config: Optional[EngineConfig] = None):
    """打印示例局面及两种回合阶段下的走法"""
    engine = RuleEngine(config)
    board = build_demo_board()

    out.print(board.to_visual_string())

    free_moves = engine.legal_moves(board, DEMO_PIECE, phase=TurnPhase.FREE, sort=True)
    out.print(moves_table(f"{DEMO_PIECE} 回合开始", free_moves))

    # 上一步刚落在 (3,3)，等价于连吃阶段
    last_move = Move(Location(0, 0), DEMO_PIECE)
    continuation_moves = engine.legal_moves(board, DEMO_PIECE, last_move=last_move, sort=True)
    out.print(moves_table(f"{DEMO_PIECE} 连吃阶段", continuation_moves))

    return free_moves, continuation_moves


@click.command()
def main():
    """跳棋规则引擎示例"""
    console.print("[blue]跳棋规则引擎 - 示例局面[/blue]")
    run_demo(console)


if __name__ == "__main__":
    main()
