"""
Base module
- Rect: axis-aligned rectangle (kerf-inflated footprint)
- OccupiedSpace: per-board index of claimed footprints
- PackingStrategy: packing strategy base class
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import CuttingConfig
    from .models import PackingResult, Piece


class Rect:
    """Axis-aligned rectangle, top-left origin"""
    def __init__(self, x, y, width, height):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    @property
    def right(self):
        return self.x + self.width

    @property
    def bottom(self):
        return self.y + self.height

    def overlaps(self, other: Rect) -> bool:
        """Overlap test; rectangles that only share an edge do not overlap"""
        return not (self.right <= other.x or self.x >= other.right or
                    self.bottom <= other.y or self.y >= other.bottom)

    def __eq__(self, other):
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.x, self.y, self.width, self.height) == (other.x, other.y, other.width, other.height)

    def __repr__(self):
        return f"Rect(x={self.x}, y={self.y}, width={self.width}, height={self.height})"


class OccupiedSpace:
    """Footprints already claimed on one board

    Entries are only ever appended: boards are never repacked.
    """
    def __init__(self):
        self._rects: list[Rect] = []

    def __len__(self):
        return len(self._rects)

    def __iter__(self):
        return iter(self._rects)

    def is_free(self, candidate: Rect) -> bool:
        for used in self._rects:
            if candidate.overlaps(used):
                return False
        return True

    def add(self, rect: Rect) -> None:
        self._rects.append(rect)


class PackingStrategy(ABC):
    """Packing strategy base class"""

    def __init__(self, config: CuttingConfig) -> None:
        self.config = config
        self.kerf: float = config.kerf
        self.margin: float = config.margin
        self.step: float = config.step

    @abstractmethod
    def pack(self, pieces: list[Piece]) -> PackingResult:
        """Place pieces on boards

        Args:
            pieces: expanded piece list (one entry per physical piece)

        Returns:
            PackingResult with the boards used and the pieces left out
        """
        pass

    def group_by_thickness(self, pieces: list[Piece]) -> dict[float, list[Piece]]:
        """Group pieces by exact thickness, keys in ascending order"""
        groups: dict[float, list[Piece]] = {}
        for piece in pieces:
            groups.setdefault(piece.thickness, []).append(piece)
        return {thickness: groups[thickness] for thickness in sorted(groups)}

    def order_pieces(self, pieces: list[Piece]) -> list[Piece]:
        """Largest area first; sorted() is stable so ties keep input order"""
        return sorted(pieces, key=lambda p: p.area, reverse=True)
