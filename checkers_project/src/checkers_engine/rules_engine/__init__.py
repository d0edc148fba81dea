"""
跳棋规则引擎模块

包含棋盘表示、走法数据结构、走法生成和局面验证。
"""

from .piece import Color, PieceType, TurnPhase
from .move import Location, Move, canonical_order
from .checkers_board import CheckersBoard
from .board_validator import BoardValidator
from .rule_engine import RuleEngine, get_legal_moves

__all__ = [
    'Color', 'PieceType', 'TurnPhase',
    'Location', 'Move', 'canonical_order',
    'CheckersBoard', 'BoardValidator',
    'RuleEngine', 'get_legal_moves'
]
