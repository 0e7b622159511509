"""
Input reading for the cutting planner.
Turns a spreadsheet cut list into expanded Piece records.
"""

import logging
import re
import zipfile
from pathlib import Path
from typing import Dict, List, Tuple

import pandas as pd

from .models import Piece

logger = logging.getLogger(__name__)

DEFAULT_THICKNESS = 16.0

# column positions in the cut list sheet (column C is not used)
NAME_COL = 0
WIDTH_COL = 1
HEIGHT_COL = 3
THICKNESS_COL = 4
QUANTITY_COL = 5

_NON_NUMERIC = re.compile(r"[^\d.]")


class InputFormatError(ValueError):
    """The cut list cannot be read"""


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def parse_number(value):
    """Parse a cell such as '600 mm' or 18 into a float, None if impossible"""
    if _is_blank(value):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    cleaned = _NON_NUMERIC.sub("", str(value))
    try:
        return float(cleaned)
    except ValueError:
        return None


def expand_quantity(name: str, width: float, height: float, thickness: float, quantity: int) -> List[Piece]:
    """One Piece per unit, labelled 'Name (i/n)' when quantity > 1"""
    if quantity <= 1:
        return [Piece(name, width, height, thickness)]
    return [
        Piece(f"{name} ({i + 1}/{quantity})", width, height, thickness, quantity)
        for i in range(quantity)
    ]


def rows_to_pieces(rows) -> List[Piece]:
    """
    Convert raw sheet rows (header already removed) into pieces.

    Rows without a name or a usable dimension are skipped.
    """
    pieces = []
    for index, row in enumerate(rows):
        cells = list(row) + [None] * (QUANTITY_COL + 1 - len(row))

        name = cells[NAME_COL]
        if _is_blank(name) or _is_blank(cells[WIDTH_COL]) or _is_blank(cells[HEIGHT_COL]):
            continue

        width = parse_number(cells[WIDTH_COL])
        height = parse_number(cells[HEIGHT_COL])
        if width is None or height is None:
            logger.debug(f"Skipping row {index + 2}: unreadable dimensions")
            continue
        if width <= 0 or height <= 0:
            logger.debug(f"Skipping row {index + 2}: empty dimension {width:g}x{height:g}")
            continue

        thickness = parse_number(cells[THICKNESS_COL])
        if thickness is None:
            thickness = DEFAULT_THICKNESS

        quantity = parse_number(cells[QUANTITY_COL])
        quantity = int(quantity) if quantity is not None else 1
        if quantity <= 0:
            logger.debug(f"Skipping row {index + 2}: quantity {quantity}")
            continue

        pieces.extend(expand_quantity(str(name).strip(), width, height, thickness, quantity))

    return pieces


def read_pieces(filepath) -> List[Piece]:
    """
    Read the cut list from the first sheet of an Excel file (or a CSV file).

    Expected columns, by position:
        A: name, B: width (mm), D: height (mm), E: thickness (mm, default 16),
        F: quantity (default 1)

    Raises:
        FileNotFoundError: if the file does not exist
        InputFormatError: if the file cannot be parsed as a table
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")

    try:
        if path.suffix.lower() == ".csv":
            df = pd.read_csv(path, header=0, dtype=object)
        else:
            df = pd.read_excel(path, sheet_name=0, header=0, dtype=object)
    except (ValueError, zipfile.BadZipFile, pd.errors.ParserError) as e:
        raise InputFormatError(f"Cannot read {path}: {e}") from e

    if df.shape[1] <= HEIGHT_COL:
        raise InputFormatError(f"{path} has {df.shape[1]} columns, expected at least {HEIGHT_COL + 1}")

    pieces = rows_to_pieces(df.itertuples(index=False, name=None))
    logger.info(f"Loaded {len(pieces)} pieces from {path}")
    return pieces


def filter_by_available_thickness(pieces: List[Piece], boards) -> Tuple[List[Piece], List[Piece]]:
    """Split pieces into (kept, excluded) by whether a board has their thickness"""
    available = {board.thickness for board in boards}
    kept = [p for p in pieces if p.thickness in available]
    excluded = [p for p in pieces if p.thickness not in available]

    if excluded:
        by_thickness: Dict[float, int] = {}
        for piece in excluded:
            by_thickness[piece.thickness] = by_thickness.get(piece.thickness, 0) + 1
        for thickness, count in by_thickness.items():
            logger.warning(f"{count} pieces of {thickness:g}mm ignored: no board with this thickness")

    return kept, excluded
