"""
跳棋规则引擎

给定局面、位置和回合阶段，生成该位置棋子的全部合法走法。
包括规则引擎、配置管理、日志和异常定义。
"""

__version__ = "0.1.0"
__author__ = "Checkers Engine Team"

from .rules_engine import (
    Color, PieceType, TurnPhase, Location, Move, canonical_order,
    CheckersBoard, BoardValidator, RuleEngine, get_legal_moves
)
from .config import EngineConfig, SystemConfig, load_configs_from_file
from .utils import (
    setup_logger, get_logger, CheckersError, OutOfBoundsError, InvalidQueryError
)

__all__ = [
    "__version__", "__author__",
    "Color", "PieceType", "TurnPhase", "Location", "Move", "canonical_order",
    "CheckersBoard", "BoardValidator", "RuleEngine", "get_legal_moves",
    "EngineConfig", "SystemConfig", "load_configs_from_file",
    "setup_logger", "get_logger", "CheckersError", "OutOfBoundsError", "InvalidQueryError"
]
