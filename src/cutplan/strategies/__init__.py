"""Packing strategies"""
from .grid_first_fit import GridFirstFitPacker

__all__ = [
    'GridFirstFitPacker',
]
