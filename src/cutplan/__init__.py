"""Cutplan - board cutting planner

Greedy grid first-fit placement of pieces on stock boards, grouped by thickness
"""

from .config import BoardTemplate, CuttingConfig
from .models import Board, PackingResult, Piece, PlacedPiece
from .stats import compute_statistics
from .strategies import GridFirstFitPacker

__all__ = [
    'BoardTemplate',
    'CuttingConfig',
    'Board',
    'PackingResult',
    'Piece',
    'PlacedPiece',
    'GridFirstFitPacker',
    'compute_statistics',
    'optimize',
]


def optimize(pieces, config=None):
    """Pack pieces with the default strategy and return (result, stats)"""
    config = config or CuttingConfig()
    result = GridFirstFitPacker(config).pack(pieces)
    return result, compute_statistics(result.boards, total_pieces=result.total_pieces)
