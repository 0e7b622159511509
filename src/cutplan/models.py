"""Data models for the cutting planner."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .packing import OccupiedSpace, Rect

_DUPLICATE_SUFFIX = re.compile(r" \(\d+/\d+\)$")


def base_name(name: str) -> str:
    """Strip the ' (i/n)' label added when a quantity is expanded"""
    return _DUPLICATE_SUFFIX.sub("", name)


@dataclass(frozen=True)
class Piece:
    """One physical piece to cut (quantities are already expanded)."""
    name: str
    width: float
    height: float
    thickness: float
    quantity: int = 1

    @property
    def area(self) -> float:
        return self.width * self.height

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'width': self.width,
            'height': self.height,
            'thickness': self.thickness,
        }


@dataclass(frozen=True)
class PlacedPiece:
    """A piece bound to a position and orientation on a board."""
    piece: Piece
    x: float
    y: float
    placed_width: float
    placed_height: float
    rotated: bool = False

    @property
    def name(self) -> str:
        return self.piece.name

    @property
    def thickness(self) -> float:
        return self.piece.thickness

    @property
    def area(self) -> float:
        return self.placed_width * self.placed_height

    def footprint(self, kerf: float) -> Rect:
        return Rect(self.x, self.y, self.placed_width + kerf, self.placed_height + kerf)

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.piece.to_dict(),
            'x': self.x,
            'y': self.y,
            'placed_width': self.placed_width,
            'placed_height': self.placed_height,
            'rotated': self.rotated,
        }


class Board:
    """A stock board being filled; read-only once packing is done."""

    def __init__(self, board_id: int, width: float, height: float, thickness: float, price: float):
        self.id = board_id
        self.width = width
        self.height = height
        self.thickness = thickness
        self.price = price
        self.pieces: List[PlacedPiece] = []
        self.occupied = OccupiedSpace()

    @classmethod
    def from_template(cls, board_id: int, template) -> Board:
        return cls(board_id, template.width, template.height, template.thickness, template.price)

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def used_area(self) -> float:
        return sum(p.area for p in self.pieces)

    @property
    def efficiency(self) -> float:
        """Used area in percent of the board area (kerf not counted)"""
        return self.used_area / self.area * 100 if self.area > 0 else 0.0

    def place(self, placed: PlacedPiece, footprint: Rect) -> None:
        self.pieces.append(placed)
        self.occupied.add(footprint)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'width': self.width,
            'height': self.height,
            'thickness': self.thickness,
            'price': self.price,
            'efficiency': self.efficiency,
            'pieces': [p.to_dict() for p in self.pieces],
        }

    def __repr__(self):
        return f"Board(id={self.id}, {self.width}x{self.height}x{self.thickness}, pieces={len(self.pieces)})"


@dataclass
class PackingResult:
    """Outcome of one optimisation run."""
    boards: List[Board] = field(default_factory=list)
    excluded: List[Piece] = field(default_factory=list)
    dropped: List[Piece] = field(default_factory=list)
    total_pieces: int = 0

    @property
    def placed_pieces(self) -> int:
        return sum(len(board.pieces) for board in self.boards)

    @property
    def is_empty(self) -> bool:
        return not self.boards

    def to_dict(self) -> Dict[str, Any]:
        return {
            'boards': [board.to_dict() for board in self.boards],
            'excluded': [p.to_dict() for p in self.excluded],
            'dropped': [p.to_dict() for p in self.dropped],
            'total_pieces': self.total_pieces,
        }
