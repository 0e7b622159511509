"""
Shared test fixtures for cutplan tests.

Provides board configurations and piece lists reused across the
packing, statistics, report and API tests.
"""

import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from cutplan.config import BoardTemplate, CuttingConfig
from cutplan.models import Piece


@pytest.fixture
def small_config() -> CuttingConfig:
    """One 50x50 board type, no kerf, no margin."""
    return CuttingConfig(
        boards=[BoardTemplate(width=50, height=50, thickness=16, price=12.5)],
        kerf=0,
        margin=0,
        step=10,
    )


@pytest.fixture
def workshop_config() -> CuttingConfig:
    """Two thicknesses with realistic sizes, kerf and margin."""
    return CuttingConfig(
        boards=[
            BoardTemplate(width=2000, height=500, thickness=16, price=10.9),
            BoardTemplate(width=2500, height=1250, thickness=19, price=42.0),
        ],
        kerf=3,
        margin=4,
    )


@pytest.fixture
def cabinet_pieces() -> list:
    """A small cabinet cut list, already expanded."""
    return [
        Piece("Side (1/2)", 720, 400, 16, 2),
        Piece("Side (2/2)", 720, 400, 16, 2),
        Piece("Top", 800, 400, 19),
        Piece("Bottom", 800, 400, 19),
        Piece("Shelf (1/3)", 768, 380, 16, 3),
        Piece("Shelf (2/3)", 768, 380, 16, 3),
        Piece("Shelf (3/3)", 768, 380, 16, 3),
        Piece("Back", 1200, 780, 19),
        Piece("Plinth", 800, 100, 16),
        Piece("Door", 716, 396, 19),
        Piece("Drawer front", 396, 180, 16),
        Piece("Drawer side", 450, 150, 16),
    ]
