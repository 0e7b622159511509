"""Tests for the interactive CLI flow."""

import pytest

from cutplan.cli import main
from cutplan.config import BoardTemplate, CuttingConfig
from cutplan.interactive import format_preview, run_interactive
from cutplan.models import Piece


@pytest.fixture
def cutlist(tmp_path):
    path = tmp_path / "input.csv"
    path.write_text(
        "Name,Width,Notes,Height,Thickness,Quantity\n"
        "Side,720,,400,16,2\n"
        "Shelf,768,,380,16,3\n"
        "Top,800,,400,18,1\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def config(tmp_path):
    return CuttingConfig(
        boards=[BoardTemplate(width=2000, height=500, thickness=16, price=10.9)],
        output_dir=str(tmp_path / "output"),
    )


class TestFormatPreview:

    def test_one_line_per_base_name(self):
        pieces = [Piece("Shelf (1/2)", 600, 300, 16, 2), Piece("Shelf (2/2)", 600, 300, 16, 2)]
        preview = format_preview(pieces)

        assert preview.count("Shelf") == 1
        assert "TOTAL: 2 pieces to cut" in preview

    def test_limit(self):
        pieces = [Piece(f"Part {i}", 10, 10, 16) for i in range(12)]
        preview = format_preview(pieces)

        assert "Part 9" in preview
        assert "Part 10" not in preview
        assert "... and 2 more" in preview


class TestRunInteractive:

    def test_full_run(self, cutlist, config, tmp_path, capsys):
        code = run_interactive(config, cutlist, assume_yes=True)

        assert code == 0
        assert (tmp_path / "output" / "results.html").exists()
        out = capsys.readouterr().out
        assert "1 pieces ignored" in out
        assert "Total cost:" in out

    def test_declined(self, cutlist, config, monkeypatch, tmp_path):
        monkeypatch.setattr("builtins.input", lambda prompt: "n")

        assert run_interactive(config, cutlist) == 1
        assert not (tmp_path / "output").exists()

    def test_confirmed(self, cutlist, config, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda prompt: "Y")

        assert run_interactive(config, cutlist) == 0

    def test_missing_input(self, config, tmp_path, capsys):
        assert run_interactive(config, tmp_path / "nope.xlsx", assume_yes=True) == 1
        assert "File not found" in capsys.readouterr().out

    def test_corrupt_input_reported(self, config, tmp_path, capsys):
        path = tmp_path / "input.xlsx"
        path.write_bytes(b"not a zip at all")

        assert run_interactive(config, path, assume_yes=True) == 1
        assert "❌ Cannot read" in capsys.readouterr().out

    def test_nothing_to_optimize(self, cutlist, tmp_path, capsys):
        config = CuttingConfig(boards=[BoardTemplate(width=100, height=100, thickness=25)],
                               output_dir=str(tmp_path / "output"))

        assert run_interactive(config, cutlist, assume_yes=True) == 1
        assert "nothing to optimize" in capsys.readouterr().out


class TestCli:

    def test_main_with_config_file(self, cutlist, tmp_path):
        config_path = tmp_path / "boards.json"
        config_path.write_text(
            '{"boards": [{"width": 2000, "height": 500, "thickness": 16, "price": 10.9},'
            ' {"width": 2000, "height": 500, "thickness": 18, "price": 14}],'
            f' "kerf": 3, "margin": 4, "output_dir": "{(tmp_path / "out").as_posix()}"}}',
            encoding="utf-8",
        )

        assert main([str(cutlist), "--config", str(config_path), "--yes"]) == 0
        assert (tmp_path / "out" / "results.html").exists()

    def test_main_with_invalid_config(self, cutlist, tmp_path, capsys):
        config_path = tmp_path / "boards.json"
        config_path.write_text('{"boards": [], "kerf": -3}', encoding="utf-8")

        assert main([str(cutlist), "--config", str(config_path), "--yes"]) == 1
        assert "Invalid configuration" in capsys.readouterr().out

    def test_main_with_missing_config(self, cutlist, tmp_path, capsys):
        assert main([str(cutlist), "--config", str(tmp_path / "nope.json"), "--yes"]) == 1
        assert "Config file not found" in capsys.readouterr().out
