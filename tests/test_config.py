"""Tests for configuration loading and the package entry point."""

import pytest
from pydantic import ValidationError

from cutplan import optimize
from cutplan.config import BoardTemplate, CuttingConfig, load_config
from cutplan.models import Piece


class TestCuttingConfig:

    def test_defaults(self):
        config = CuttingConfig()

        assert (config.kerf, config.margin, config.step) == (3, 4, 10)
        assert config.available_thicknesses() == [16]
        assert config.boards[0].price == pytest.approx(10.9)

    def test_rejects_negative_kerf(self):
        with pytest.raises(ValidationError):
            CuttingConfig(kerf=-1)

    def test_rejects_zero_width_board(self):
        with pytest.raises(ValidationError):
            BoardTemplate(width=0, height=100, thickness=16)

    def test_template_for_first_match(self):
        config = CuttingConfig(boards=[
            BoardTemplate(width=100, height=100, thickness=16, price=1),
            BoardTemplate(width=200, height=100, thickness=16, price=2),
        ])

        assert config.template_for(16).width == 100
        assert config.template_for(18) is None
        assert config.duplicate_thicknesses() == [16]


class TestLoadConfig:

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.json")

    def test_load(self, tmp_path):
        path = tmp_path / "boards.json"
        path.write_text('{"boards": [{"width": 2440, "height": 1220, "thickness": 18, "price": 35}],'
                        ' "kerf": 4}', encoding="utf-8")

        config = load_config(path)

        assert config.boards[0].thickness == 18
        assert config.kerf == 4
        assert config.margin == 4


def test_optimize_entry_point(small_config):
    result, stats = optimize([Piece("A", 10, 10, 16), Piece("C", 40, 40, 16)], small_config)

    assert stats.total_boards == 1
    assert stats.total_pieces == 2
    assert [p.name for p in result.boards[0].pieces] == ["C", "A"]
