"""Cutting configuration: available boards, kerf, margin."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class BoardTemplate(BaseModel):
    """Purchasable stock board"""
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    thickness: float = Field(gt=0)
    price: float = Field(default=0, ge=0)

    def label(self) -> str:
        return f"{self.width:g}×{self.height:g}mm - {self.thickness:g}mm - {self.price:g}€"


def default_boards() -> list[BoardTemplate]:
    return [BoardTemplate(width=2000, height=500, thickness=16, price=10.9)]


class CuttingConfig(BaseModel):
    """Settings for one optimisation run"""
    boards: list[BoardTemplate] = Field(default_factory=default_boards)
    kerf: float = Field(default=3, ge=0)      # saw blade loss (mm)
    margin: float = Field(default=4, ge=0)    # edge clearance (mm)
    step: float = Field(default=10, gt=0)     # placement grid (mm)
    input_file: str = "input.xlsx"
    output_dir: str = "output"

    def available_thicknesses(self) -> list[float]:
        return [board.thickness for board in self.boards]

    def template_for(self, thickness: float) -> BoardTemplate | None:
        """First template with this thickness, in configuration order"""
        for board in self.boards:
            if board.thickness == thickness:
                return board
        return None

    def duplicate_thicknesses(self) -> list[float]:
        seen = set()
        duplicates = []
        for board in self.boards:
            if board.thickness in seen and board.thickness not in duplicates:
                duplicates.append(board.thickness)
            seen.add(board.thickness)
        return duplicates


def load_config(path: str | Path) -> CuttingConfig:
    """Load a CuttingConfig from a JSON file

    Raises:
        FileNotFoundError: if the file does not exist
        pydantic.ValidationError: if the content is invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    config = CuttingConfig.model_validate_json(path.read_text(encoding="utf-8"))
    logger.info(f"Loaded {len(config.boards)} board templates from {path}")
    return config
