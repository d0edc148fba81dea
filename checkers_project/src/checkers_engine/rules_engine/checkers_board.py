"""
跳棋棋盘数据结构

定义8x8跳棋棋盘的表示、访问和格式转换功能。
"""

import numpy as np
import json
from typing import List, Optional, Tuple, Union

from .move import Location, BOARD_SIZE
from .piece import Color, PieceType, EMPTY_SYMBOL
from ..utils.exceptions import OutOfBoundsError, BoardStateError


LocationLike = Union[Location, Tuple[int, int]]

# 棋盘矩阵中允许出现的编码: 0 (空位) 和各棋子类型
VALID_CODES = frozenset({0} | {int(piece) for piece in PieceType})


def _as_location(loc: LocationLike) -> Location:
    if isinstance(loc, Location):
        return loc
    row, col = loc
    return Location(int(row), int(col))


class CheckersBoard:
    """
    跳棋棋盘类

    8x8矩阵，每个格子存放棋子编码 (PieceType的整数值) 或 0 (空位)。
    棋盘不记录轮到哪一方、步数或历史，这些都由调用方维护。
    """

    SIZE = BOARD_SIZE
    EMPTY = 0

    def __init__(self, matrix: Optional[np.ndarray] = None):
        """
        初始化棋盘

        Args:
            matrix: 8x8的棋子编码矩阵，为None时创建空棋盘

        Raises:
            BoardStateError: 矩阵尺寸不是8x8或包含未知的棋子编码
        """
        if matrix is None:
            self.board = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
        else:
            try:
                self.board = np.array(matrix, dtype=np.int8)
            except (ValueError, TypeError, OverflowError) as e:
                raise BoardStateError("棋盘矩阵", str(e)) from e
            if self.board.shape != (self.SIZE, self.SIZE):
                raise BoardStateError(f"棋盘尺寸 {self.board.shape}", f"应为({self.SIZE}, {self.SIZE})")
            unknown = set(np.unique(self.board).tolist()) - VALID_CODES
            if unknown:
                raise BoardStateError("棋盘矩阵", f"未知的棋子编码: {sorted(unknown)}")

    @classmethod
    def empty(cls) -> 'CheckersBoard':
        """创建空棋盘，用于构造局面"""
        return cls()

    @classmethod
    def new_game(cls) -> 'CheckersBoard':
        """
        创建标准开局棋盘

        白兵占据第0-2行的深色格，黑兵占据第5-7行的深色格，第3-4行为空。
        深色格即 (行 + 列) 为偶数的格子，(0, 0) 为深色格。
        """
        board = cls()
        for row in range(cls.SIZE):
            for col in range(cls.SIZE):
                if (row + col) % 2 != 0:
                    continue
                if row <= 2:
                    board.board[row, col] = PieceType.WHITE
                elif row >= 5:
                    board.board[row, col] = PieceType.BLACK
        return board

    @classmethod
    def from_matrix(cls, matrix: np.ndarray) -> 'CheckersBoard':
        """从棋子编码矩阵创建棋盘"""
        return cls(matrix)

    def to_matrix(self) -> np.ndarray:
        """转换为矩阵格式（副本）"""
        return self.board.copy()

    # ==================== 格子访问 ====================

    def at(self, location: LocationLike) -> Optional[PieceType]:
        """
        获取指定位置的棋子

        所有逻辑都通过这个方法访问棋盘，越界坐标在这里统一检查。

        Args:
            location: 位置坐标

        Returns:
            Optional[PieceType]: 棋子类型，空位返回None

        Raises:
            OutOfBoundsError: 行或列不在 [0, 8) 范围内
        """
        loc = _as_location(location)
        if not loc.in_bounds(self.SIZE):
            raise OutOfBoundsError(loc, self.SIZE)
        code = int(self.board[loc.row, loc.col])
        if code == self.EMPTY:
            return None
        return PieceType(code)

    def set_piece(self, location: LocationLike, piece: Optional[PieceType]) -> None:
        """
        放置或移除棋子，用于构造局面

        Args:
            location: 位置坐标
            piece: 棋子类型，None表示清空该格
        """
        loc = _as_location(location)
        if not loc.in_bounds(self.SIZE):
            raise OutOfBoundsError(loc, self.SIZE)
        self.board[loc.row, loc.col] = self.EMPTY if piece is None else int(piece)

    def is_empty(self, location: LocationLike) -> bool:
        """检查指定位置是否为空"""
        return self.at(location) is None

    def is_enemy(self, location: LocationLike, color: Color) -> bool:
        """检查指定位置是否为对方棋子"""
        piece = self.at(location)
        return piece is not None and piece.color is not color

    def is_friend(self, location: LocationLike, color: Color) -> bool:
        """检查指定位置是否为己方棋子"""
        piece = self.at(location)
        return piece is not None and piece.color is color

    def pieces(self, color: Optional[Color] = None) -> List[Tuple[Location, PieceType]]:
        """
        获取所有棋子及其位置

        Args:
            color: 只返回该颜色的棋子，None表示全部

        Returns:
            List[Tuple[Location, PieceType]]: 按行优先排列的 (位置, 棋子) 列表
        """
        result = []
        rows, cols = np.nonzero(self.board)
        for row, col in zip(rows.tolist(), cols.tolist()):
            piece = PieceType(int(self.board[row, col]))
            if color is None or piece.color is color:
                result.append((Location(row, col), piece))
        return result

    def count_pieces(self, color: Optional[Color] = None) -> int:
        """统计棋子数量"""
        return len(self.pieces(color))

    def copy(self) -> 'CheckersBoard':
        """复制棋盘"""
        return CheckersBoard(self.board.copy())

    # ==================== 格式转换 ====================

    def to_visual_string(self) -> str:
        """
        转换为带行列索引的可视化字符串

        Returns:
            str: 可视化的棋盘字符串
        """
        lines = ["   " + " ".join(str(col) for col in range(self.SIZE))]
        for row in range(self.SIZE):
            cells = []
            for col in range(self.SIZE):
                piece = self.at(Location(row, col))
                cells.append(piece.symbol if piece is not None else EMPTY_SYMBOL)
            lines.append(f"{row}  " + " ".join(cells))
        return "\n".join(lines)

    def to_text(self) -> str:
        """
        转换为紧凑文本格式

        Returns:
            str: 8行符号以 '/' 分隔，第0行在前，如 "w.w.w.w./..."
        """
        rows = []
        for row in range(self.SIZE):
            chars = []
            for col in range(self.SIZE):
                piece = self.at(Location(row, col))
                chars.append(piece.symbol if piece is not None else EMPTY_SYMBOL)
            rows.append("".join(chars))
        return "/".join(rows)

    @classmethod
    def from_text(cls, text: str) -> 'CheckersBoard':
        """
        从紧凑文本格式创建棋盘

        Args:
            text: to_text() 产生的字符串

        Returns:
            CheckersBoard: 棋盘对象
        """
        rows = text.strip().split("/")
        if len(rows) != cls.SIZE:
            raise BoardStateError(text, f"应包含{cls.SIZE}行，实际{len(rows)}行")

        board = cls()
        for row, line in enumerate(rows):
            if len(line) != cls.SIZE:
                raise BoardStateError(line, f"第{row}行应包含{cls.SIZE}个格子")
            for col, char in enumerate(line):
                try:
                    piece = PieceType.from_symbol(char)
                except ValueError as e:
                    raise BoardStateError(line, str(e)) from e
                board.set_piece(Location(row, col), piece)
        return board

    def to_json(self) -> str:
        """转换为JSON格式"""
        data = {'board': self.board.tolist()}
        return json.dumps(data, ensure_ascii=False)

    @classmethod
    def from_json(cls, json_str: str) -> 'CheckersBoard':
        """
        从JSON格式创建棋盘对象

        Args:
            json_str: JSON格式字符串

        Returns:
            CheckersBoard: 棋盘对象
        """
        try:
            data = json.loads(json_str)
            matrix = data['board']
        except (ValueError, KeyError, TypeError) as e:
            raise BoardStateError("JSON数据", str(e)) from e

        return cls(matrix)

    def __str__(self) -> str:
        return self.to_visual_string()

    def __eq__(self, other) -> bool:
        if not isinstance(other, CheckersBoard):
            return False
        return np.array_equal(self.board, other.board)

