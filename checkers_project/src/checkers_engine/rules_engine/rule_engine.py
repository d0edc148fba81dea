"""
跳棋规则引擎

实现兵和王的走法生成，包括吃子检测和连吃阶段的限制。
"""

from typing import List, Optional, Tuple

from .checkers_board import CheckersBoard, LocationLike, _as_location
from .move import Location, Move, canonical_order
from .piece import Color, PieceType, TurnPhase
from ..config.engine_config import (
    EngineConfig, KING_CONTINUATION_CAPTURE_ONLY, KING_CONTINUATION_POLICIES
)
from ..utils.exceptions import ConfigurationError, InvalidQueryError, OutOfBoundsError
from ..utils.logger import LoggerMixin


class RuleEngine(LoggerMixin):
    """
    跳棋规则引擎

    根据棋盘、位置和回合阶段生成该位置棋子的全部合法走法。
    引擎只读棋盘，不修改棋盘也不保存对局状态。
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        """
        初始化规则引擎

        Args:
            config: 引擎配置，None表示使用默认配置
        """
        self.config = config or EngineConfig()
        if self.config.king_continuation not in KING_CONTINUATION_POLICIES:
            raise ConfigurationError(
                'king_continuation',
                f"未知的取值 {self.config.king_continuation!r}，可选 {KING_CONTINUATION_POLICIES}"
            )

        # 四个斜方向
        self.diagonals = [(1, 1), (1, -1), (-1, 1), (-1, -1)]

        # 兵的前进方向：白方向行号增大，黑方向行号减小
        self.forward_diagonals = {
            color: [(color.forward, 1), (color.forward, -1)]
            for color in Color
        }

    def legal_moves(self, board: CheckersBoard, location: LocationLike,
                    last_move: Optional[Move] = None,
                    phase: Optional[TurnPhase] = None,
                    sort: Optional[bool] = None) -> List[Move]:
        """
        生成指定位置棋子的所有合法走法

        Args:
            board: 当前棋盘
            location: 棋子位置
            last_move: 上一步走法，终点等于location时视为连吃阶段
            phase: 显式指定的回合阶段，优先于last_move
            sort: 是否按规范顺序返回，None表示使用配置

        Returns:
            List[Move]: 合法走法列表

        Raises:
            OutOfBoundsError: location不在棋盘内
            InvalidQueryError: location上没有棋子
        """
        loc = _as_location(location)
        piece = board.at(loc)
        if piece is None:
            raise InvalidQueryError(loc, "该位置没有棋子")

        if phase is None:
            phase = TurnPhase.from_last_move(last_move, loc)

        if piece.is_king:
            moves = self._generate_king_moves(board, loc, piece, phase)
        else:
            moves = self._generate_man_moves(board, loc, piece, phase)

        self.log_debug(f"{piece.name} @ {loc} [{phase.value}]: {len(moves)} 个走法")

        if sort is None:
            sort = self.config.sort_moves
        if sort:
            moves = self.sort_moves(moves)
        return moves

    @staticmethod
    def sort_moves(moves: List[Move]) -> List[Move]:
        """按 (起点, 终点, 被吃位置) 的规范顺序排列走法"""
        return canonical_order(moves)

    def _peek(self, board: CheckersBoard, location: Location) -> Tuple[bool, Optional[PieceType]]:
        """
        查看格子

        Returns:
            Tuple[bool, Optional[PieceType]]: (是否在棋盘内, 棋子)
        """
        try:
            return True, board.at(location)
        except OutOfBoundsError:
            return False, None

    # ==================== 兵 ====================

    def _generate_man_moves(self, board: CheckersBoard, location: Location,
                            piece: PieceType, phase: TurnPhase) -> List[Move]:
        """
        生成兵的走法

        回合开始时只能沿两个前进斜方向走一步或吃子；
        连吃阶段可以沿四个斜方向吃子，但不能走普通步。
        """
        color = piece.color
        moves = []

        if phase is TurnPhase.CONTINUATION:
            for direction in self.diagonals:
                move = self._capture_only(board, location, color, direction)
                if move is not None:
                    moves.append(move)
        else:
            for direction in self.forward_diagonals[color]:
                move = self._move_or_capture(board, location, color, direction)
                if move is not None:
                    moves.append(move)

        return moves

    def _move_or_capture(self, board: CheckersBoard, location: Location,
                         color: Color, direction: Tuple[int, int]) -> Optional[Move]:
        """沿一个方向走一步，或跳过相邻的对方棋子"""
        step = location + direction
        on_board, target = self._peek(board, step)
        if not on_board:
            return None
        if target is None:
            return Move(location, step)
        if target.color is color:
            return None
        return self._jump(board, location, step, direction)

    def _capture_only(self, board: CheckersBoard, location: Location,
                      color: Color, direction: Tuple[int, int]) -> Optional[Move]:
        """沿一个方向跳过相邻的对方棋子，相邻格为空时不产生走法"""
        step = location + direction
        on_board, target = self._peek(board, step)
        if not on_board or target is None or target.color is color:
            return None
        return self._jump(board, location, step, direction)

    def _jump(self, board: CheckersBoard, location: Location,
              eaten: Location, direction: Tuple[int, int]) -> Optional[Move]:
        # 落点必须在棋盘内且为空
        landing = eaten + direction
        on_board, occupant = self._peek(board, landing)
        if on_board and occupant is None:
            return Move(location, landing, eaten)
        return None

    # ==================== 王 ====================

    def _generate_king_moves(self, board: CheckersBoard, location: Location,
                             piece: PieceType, phase: TurnPhase) -> List[Move]:
        """
        生成王的走法

        沿四个斜方向分别滑行：空格都是落点；遇到对方棋子且其后为空时
        可以吃子，吃子后该方向停止；遇到己方棋子或棋盘边缘停止。
        """
        color = piece.color
        moves = []

        for direction in self.diagonals:
            moves.extend(self._slide(board, location, color, direction))

        if (phase is TurnPhase.CONTINUATION
                and self.config.king_continuation == KING_CONTINUATION_CAPTURE_ONLY):
            moves = [move for move in moves if move.is_capture]

        return moves

    def _slide(self, board: CheckersBoard, location: Location,
               color: Color, direction: Tuple[int, int]) -> List[Move]:
        """沿一个方向滑行，直到被阻挡或吃子"""
        moves = []
        current = location + direction

        while True:
            on_board, target = self._peek(board, current)
            if not on_board:
                break
            if target is None:
                moves.append(Move(location, current))
                current = current + direction
                continue
            if target.color is not color:
                capture = self._jump(board, location, current, direction)
                if capture is not None:
                    moves.append(capture)
            break

        return moves


_default_engine = None


def get_legal_moves(board: CheckersBoard, location: LocationLike,
                    last_move: Optional[Move] = None,
                    phase: Optional[TurnPhase] = None) -> List[Move]:
    """使用默认配置的规则引擎生成走法"""
    global _default_engine
    if _default_engine is None:
        _default_engine = RuleEngine()
    return _default_engine.legal_moves(board, location, last_move=last_move, phase=phase)
