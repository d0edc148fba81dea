"""
棋局合法性验证器

检查跳棋局面的结构是否合理。
"""

from typing import List, Tuple, Dict, Any
import numpy as np

from .checkers_board import CheckersBoard, VALID_CODES
from .piece import Color, PieceType


class BoardValidator:
    """
    棋局合法性验证器

    只检查局面本身是否可能出现，不涉及轮到哪一方。
    """

    def __init__(self, max_pieces_per_side: int = 12):
        """
        初始化验证器

        Args:
            max_pieces_per_side: 每方棋子数上限
        """
        self.max_pieces_per_side = max_pieces_per_side

        # 兵到达即升变的行，兵不应停留在这里
        self.promotion_rows = {
            PieceType.WHITE: CheckersBoard.SIZE - 1,
            PieceType.BLACK: 0,
        }

        self.valid_codes = VALID_CODES

    def validate_board_structure(self, board: CheckersBoard) -> Tuple[bool, List[str]]:
        """
        验证棋盘基本结构

        Args:
            board: 要验证的棋盘

        Returns:
            Tuple[bool, List[str]]: (是否合法, 错误信息列表)
        """
        errors = []
        size = CheckersBoard.SIZE

        if board.board.shape != (size, size):
            errors.append(f"棋盘尺寸错误: {board.board.shape}, 应为({size}, {size})")
            return False, errors

        unknown = set(np.unique(board.board).tolist()) - self.valid_codes
        if unknown:
            errors.append(f"未知的棋子编码: {sorted(unknown)}")

        return len(errors) == 0, errors

    def validate_piece_positions(self, board: CheckersBoard) -> Tuple[bool, List[str]]:
        """
        验证棋子位置

        棋子只能位于深色格，兵不能停留在己方的升变行。
        """
        errors = []

        for location, piece in board.pieces():
            if (location.row + location.col) % 2 != 0:
                errors.append(f"{piece.name} 位于浅色格 {location}")
            if not piece.is_king and location.row == self.promotion_rows[piece]:
                errors.append(f"{piece.name} 位于升变行 {location} 但未升变")

        return len(errors) == 0, errors

    def validate_piece_counts(self, board: CheckersBoard) -> Tuple[bool, List[str]]:
        """验证每方棋子数量"""
        errors = []

        for color in Color:
            count = board.count_pieces(color)
            if count > self.max_pieces_per_side:
                errors.append(f"{color.value} 棋子数量 {count} 超过上限 {self.max_pieces_per_side}")

        return len(errors) == 0, errors

    def validate(self, board: CheckersBoard) -> Tuple[bool, List[str]]:
        """
        执行全部验证

        Returns:
            Tuple[bool, List[str]]: (是否合法, 错误信息列表)
        """
        ok, errors = self.validate_board_structure(board)
        if not ok:
            return False, errors

        for check in (self.validate_piece_positions, self.validate_piece_counts):
            _, check_errors = check(board)
            errors.extend(check_errors)

        return len(errors) == 0, errors

    def get_validation_report(self, board: CheckersBoard) -> Dict[str, Any]:
        """
        生成验证报告

        Returns:
            Dict[str, Any]: 包含验证结果和棋子统计的字典
        """
        is_valid, errors = self.validate(board)
        return {
            'is_valid': is_valid,
            'errors': errors,
            'white_pieces': board.count_pieces(Color.WHITE),
            'black_pieces': board.count_pieces(Color.BLACK),
            'kings': sum(1 for _, piece in board.pieces() if piece.is_king),
        }
