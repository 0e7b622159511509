"""Statistics over a packing result"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class BoardTypeCount:
    """Boards of one size/thickness, for the shopping list"""
    width: float
    height: float
    thickness: float
    price: float
    count: int = 0

    @property
    def subtotal(self) -> float:
        return self.count * self.price

    def to_dict(self) -> Dict[str, Any]:
        return {
            'width': self.width,
            'height': self.height,
            'thickness': self.thickness,
            'price': self.price,
            'count': self.count,
            'subtotal': self.subtotal,
        }


@dataclass
class CuttingStats:
    total_boards: int = 0
    total_pieces: int = 0
    placed_pieces: int = 0
    total_cost: float = 0.0
    boards_by_type: List[BoardTypeCount] = field(default_factory=list)
    efficiency: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            'total_boards': self.total_boards,
            'total_pieces': self.total_pieces,
            'placed_pieces': self.placed_pieces,
            'total_cost': self.total_cost,
            'boards_by_type': [bt.to_dict() for bt in self.boards_by_type],
            'efficiency': self.efficiency,
        }


def compute_statistics(boards, total_pieces=None) -> CuttingStats:
    """Fold the board list into counts, cost and utilisation

    Args:
        boards: packed boards (not modified)
        total_pieces: number of pieces submitted; defaults to the placed count

    Returns:
        CuttingStats, all zero for an empty board list
    """
    by_type: Dict[tuple, BoardTypeCount] = {}
    for board in boards:
        key = (board.width, board.height, board.thickness)
        if key not in by_type:
            by_type[key] = BoardTypeCount(board.width, board.height, board.thickness, board.price)
        by_type[key].count += 1

    placed = sum(len(board.pieces) for board in boards)
    used_area = sum(p.placed_width * p.placed_height for board in boards for p in board.pieces)
    board_area = sum(board.width * board.height for board in boards)

    return CuttingStats(
        total_boards=len(boards),
        total_pieces=placed if total_pieces is None else total_pieces,
        placed_pieces=placed,
        total_cost=sum(board.price for board in boards),
        boards_by_type=list(by_type.values()),
        efficiency=used_area / board_area * 100 if board_area > 0 else 0.0,
    )
