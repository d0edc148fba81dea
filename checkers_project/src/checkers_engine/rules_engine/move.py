"""
跳棋位置与走法数据结构

定义棋盘坐标、走法的表示和转换功能。
"""

from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable, List, Optional, Tuple
import re


BOARD_SIZE = 8

_NOTATION_RE = re.compile(r'^([a-h])([1-8])$')


@dataclass(frozen=True, order=True)
class Location:
    """
    棋盘坐标

    行列均为有符号整数，类型本身不限制范围（越界坐标是合法的中间值），
    访问棋盘前由棋盘负责边界检查。按行优先排序。
    """
    row: int
    col: int

    def __add__(self, offset: Tuple[int, int]) -> 'Location':
        """按 (行增量, 列增量) 平移，返回新坐标"""
        drow, dcol = offset
        return Location(self.row + drow, self.col + dcol)

    def in_bounds(self, size: int = BOARD_SIZE) -> bool:
        """是否位于棋盘内"""
        return 0 <= self.row < size and 0 <= self.col < size

    def to_notation(self) -> str:
        """
        转换为代数记法

        Returns:
            str: 列字母加行号，如 (0, 0) -> "a1"
        """
        if not self.in_bounds():
            raise ValueError(f"越界坐标没有代数记法: {self}")
        return f"{chr(ord('a') + self.col)}{self.row + 1}"

    @classmethod
    def from_notation(cls, notation: str) -> 'Location':
        """从代数记法创建坐标，如 "c3" -> (2, 2)"""
        match = _NOTATION_RE.match(notation.strip().lower())
        if not match:
            raise ValueError(f"无效的坐标记法: {notation}")
        col = ord(match.group(1)) - ord('a')
        row = int(match.group(2)) - 1
        return cls(row, col)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


@total_ordering
@dataclass(frozen=True)
class Move:
    """
    跳棋走法

    eaten 为None表示普通走法，否则为被跳过（吃掉）的棋子所在位置。
    三个字段全部相同时两个走法相等。
    """
    from_pos: Location
    to_pos: Location
    eaten: Optional[Location] = None

    @property
    def is_capture(self) -> bool:
        """是否为吃子走法"""
        return self.eaten is not None

    def sort_key(self) -> tuple:
        """规范排序键：起点、终点、被吃位置（普通走法排在吃子走法之前）"""
        if self.eaten is None:
            return (self.from_pos, self.to_pos, 0, Location(0, 0))
        return (self.from_pos, self.to_pos, 1, self.eaten)

    def __lt__(self, other) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def to_coordinate_notation(self) -> str:
        """
        转换为坐标记法

        Returns:
            str: 普通走法如 "c3-d4"，吃子走法如 "c3xe5"
        """
        separator = 'x' if self.is_capture else '-'
        return f"{self.from_pos.to_notation()}{separator}{self.to_pos.to_notation()}"

    def __str__(self) -> str:
        return self.to_coordinate_notation()

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'from_pos': (self.from_pos.row, self.from_pos.col),
            'to_pos': (self.to_pos.row, self.to_pos.col),
            'eaten': (self.eaten.row, self.eaten.col) if self.eaten is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Move':
        """从字典创建Move对象"""
        eaten = data.get('eaten')
        return cls(
            from_pos=Location(*data['from_pos']),
            to_pos=Location(*data['to_pos']),
            eaten=Location(*eaten) if eaten is not None else None
        )


def canonical_order(moves: Iterable[Move]) -> List[Move]:
    """
    按规范顺序排列走法

    用于比较和验证，生成器本身不保证顺序。
    """
    return sorted(moves, key=Move.sort_key)
