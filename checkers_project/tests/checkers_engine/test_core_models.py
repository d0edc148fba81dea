"""
核心数据模型测试

测试Location、Move、PieceType和TurnPhase的基本功能。
"""

import pytest
from checkers_project.src.checkers_engine.rules_engine.move import Location, Move, canonical_order
from checkers_project.src.checkers_engine.rules_engine.piece import Color, PieceType, TurnPhase


class TestLocation:
    """测试Location类"""

    def test_add_offset(self):
        """按偏移量平移"""
        assert Location(1, 1) + (1, 1) == Location(2, 2)
        assert Location(3, 3) + (-1, 1) == Location(2, 4)

    def test_out_of_range_is_valid_value(self):
        """越界坐标是合法的中间值"""
        loc = Location(0, 0) + (-1, -1)
        assert loc == Location(-1, -1)
        assert not loc.in_bounds()
        assert Location(7, 7).in_bounds()
        assert not Location(8, 0).in_bounds()

    def test_row_major_order(self):
        """按行优先排序"""
        assert Location(0, 7) < Location(1, 0)
        assert Location(2, 1) < Location(2, 3)
        assert sorted([Location(3, 1), Location(0, 5), Location(3, 0)]) == [
            Location(0, 5), Location(3, 0), Location(3, 1)
        ]

    def test_value_semantics(self):
        """结构相等且可哈希"""
        assert Location(4, 4) == Location(4, 4)
        assert len({Location(4, 4), Location(4, 4), Location(4, 5)}) == 2

    def test_notation(self):
        """代数记法转换"""
        assert Location(0, 0).to_notation() == "a1"
        assert Location(2, 2).to_notation() == "c3"
        assert Location.from_notation("h8") == Location(7, 7)
        assert Location.from_notation("C3") == Location(2, 2)

        with pytest.raises(ValueError):
            Location.from_notation("i9")
        with pytest.raises(ValueError):
            Location(-1, 0).to_notation()


class TestMove:
    """测试Move类"""

    def test_move_creation(self):
        """Move对象创建"""
        move = Move(Location(2, 2), Location(3, 3))
        assert move.from_pos == Location(2, 2)
        assert move.to_pos == Location(3, 3)
        assert move.eaten is None
        assert not move.is_capture

        capture = Move(Location(2, 2), Location(4, 4), Location(3, 3))
        assert capture.is_capture

    def test_move_equality(self):
        """三个字段全部相同才相等"""
        move1 = Move(Location(2, 2), Location(4, 4), Location(3, 3))
        move2 = Move(Location(2, 2), Location(4, 4), Location(3, 3))
        move3 = Move(Location(2, 2), Location(4, 4))

        assert move1 == move2
        assert move1 != move3
        assert hash(move1) == hash(move2)

    def test_move_ordering(self):
        """按起点、终点、被吃位置排序，普通走法在前"""
        simple = Move(Location(2, 2), Location(4, 4))
        capture = Move(Location(2, 2), Location(4, 4), Location(3, 3))
        later = Move(Location(2, 2), Location(5, 0))
        earlier_from = Move(Location(1, 1), Location(7, 7))

        assert simple < capture
        assert capture < later
        assert earlier_from < simple
        assert canonical_order([later, capture, simple, earlier_from]) == [
            earlier_from, simple, capture, later
        ]

    def test_canonical_order_idempotent(self):
        """规范排序幂等"""
        moves = [
            Move(Location(3, 3), Location(5, 5), Location(4, 4)),
            Move(Location(3, 3), Location(1, 5), Location(2, 4)),
        ]
        once = canonical_order(moves)
        assert canonical_order(once) == once
        assert once[0].to_pos == Location(1, 5)

    def test_coordinate_notation(self):
        """坐标记法"""
        assert Move(Location(2, 2), Location(3, 3)).to_coordinate_notation() == "c3-d4"
        capture = Move(Location(2, 2), Location(4, 4), Location(3, 3))
        assert capture.to_coordinate_notation() == "c3xe5"
        assert str(capture) == "c3xe5"

    def test_dict_conversion(self):
        """字典转换"""
        capture = Move(Location(2, 2), Location(4, 4), Location(3, 3))
        data = capture.to_dict()
        assert data['eaten'] == (3, 3)
        assert Move.from_dict(data) == capture

        simple = Move(Location(5, 1), Location(4, 0))
        assert Move.from_dict(simple.to_dict()) == simple


class TestPieceType:
    """测试PieceType和Color"""

    def test_color_mapping(self):
        """颜色由棋子类型推导"""
        assert PieceType.WHITE.color is Color.WHITE
        assert PieceType.WHITE_KING.color is Color.WHITE
        assert PieceType.BLACK.color is Color.BLACK
        assert PieceType.BLACK_KING.color is Color.BLACK

    def test_is_king(self):
        assert PieceType.WHITE_KING.is_king
        assert PieceType.BLACK_KING.is_king
        assert not PieceType.WHITE.is_king
        assert not PieceType.BLACK.is_king

    def test_constructors(self):
        assert PieceType.man(Color.BLACK) is PieceType.BLACK
        assert PieceType.king(Color.WHITE) is PieceType.WHITE_KING

    def test_symbols(self):
        """符号转换"""
        for piece in PieceType:
            assert PieceType.from_symbol(piece.symbol) is piece
        assert PieceType.from_symbol('.') is None
        with pytest.raises(ValueError):
            PieceType.from_symbol('x')

    def test_color_helpers(self):
        assert Color.WHITE.opponent is Color.BLACK
        assert Color.BLACK.opponent is Color.WHITE
        assert Color.WHITE.forward == 1
        assert Color.BLACK.forward == -1


class TestTurnPhase:
    """测试回合阶段推导"""

    def test_no_previous_move(self):
        assert TurnPhase.from_last_move(None, Location(3, 3)) is TurnPhase.FREE

    def test_landed_here(self):
        last_move = Move(Location(1, 1), Location(3, 3), Location(2, 2))
        assert TurnPhase.from_last_move(last_move, Location(3, 3)) is TurnPhase.CONTINUATION

    def test_landed_elsewhere(self):
        last_move = Move(Location(1, 1), Location(3, 3), Location(2, 2))
        assert TurnPhase.from_last_move(last_move, Location(5, 5)) is TurnPhase.FREE
