"""
棋子与回合阶段定义

定义跳棋的颜色、棋子类型以及回合阶段。
"""

from enum import Enum, IntEnum
from typing import Optional


class Color(Enum):
    """棋子颜色"""
    BLACK = 'black'
    WHITE = 'white'

    @property
    def opponent(self) -> 'Color':
        """对方颜色"""
        return Color.WHITE if self is Color.BLACK else Color.BLACK

    @property
    def forward(self) -> int:
        """前进方向的行增量：白方向行号增大方向前进，黑方相反"""
        return 1 if self is Color.WHITE else -1


class PieceType(IntEnum):
    """
    棋子类型

    整数值即棋盘矩阵中的编码，0 表示空位。
    """
    WHITE = 1        # 白兵
    BLACK = 2        # 黑兵
    WHITE_KING = 3   # 白王
    BLACK_KING = 4   # 黑王

    @property
    def color(self) -> Color:
        """棋子颜色"""
        if self in (PieceType.WHITE, PieceType.WHITE_KING):
            return Color.WHITE
        return Color.BLACK

    @property
    def is_king(self) -> bool:
        """是否为王"""
        return self in (PieceType.WHITE_KING, PieceType.BLACK_KING)

    @property
    def symbol(self) -> str:
        """文本表示用的单字符符号"""
        return _SYMBOLS[self]

    @classmethod
    def man(cls, color: Color) -> 'PieceType':
        return cls.WHITE if color is Color.WHITE else cls.BLACK

    @classmethod
    def king(cls, color: Color) -> 'PieceType':
        return cls.WHITE_KING if color is Color.WHITE else cls.BLACK_KING

    @classmethod
    def from_symbol(cls, symbol: str) -> Optional['PieceType']:
        """
        从符号解析棋子

        Args:
            symbol: 'w', 'b', 'W', 'B' 或 '.' (空位)

        Returns:
            Optional[PieceType]: 棋子类型，空位返回None
        """
        if symbol == EMPTY_SYMBOL:
            return None
        for piece, sym in _SYMBOLS.items():
            if sym == symbol:
                return piece
        raise ValueError(f"未知的棋子符号: {symbol!r}")


EMPTY_SYMBOL = '.'

_SYMBOLS = {
    PieceType.WHITE: 'w',
    PieceType.BLACK: 'b',
    PieceType.WHITE_KING: 'W',
    PieceType.BLACK_KING: 'B',
}


class TurnPhase(Enum):
    """
    回合阶段

    FREE: 回合刚开始，兵可以向前走一步或向前吃子。
    CONTINUATION: 棋子刚在本回合内落到当前位置，只能继续吃子，且可以向四个斜方向吃。
    """
    FREE = 'free'
    CONTINUATION = 'continuation'

    @classmethod
    def from_last_move(cls, last_move, location) -> 'TurnPhase':
        """
        根据上一步走法推导回合阶段

        上一步的终点就是当前查询的位置时，说明该棋子正处于连吃中。

        Args:
            last_move: 上一步走法，对局的第一步传入None
            location: 当前查询的位置

        Returns:
            TurnPhase: 回合阶段
        """
        if last_move is not None and last_move.to_pos == location:
            return cls.CONTINUATION
        return cls.FREE
