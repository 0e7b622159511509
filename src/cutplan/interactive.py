#!/usr/bin/env python3
"""Interactive cutting plan CLI"""

import logging
from pathlib import Path

from .config import CuttingConfig
from .ingest import InputFormatError, filter_by_available_thickness, read_pieces
from .models import base_name
from .report import write_report
from .stats import compute_statistics
from .strategies import GridFirstFitPacker
from .visualizer import visualize_solution

logger = logging.getLogger(__name__)

PREVIEW_ROWS = 10


def format_preview(pieces, limit=PREVIEW_ROWS):
    """Table of the loaded pieces, one line per distinct name

    Args:
        pieces: expanded piece list
        limit: maximum number of lines

    Returns:
        the preview as a single string
    """
    lines = [
        "=" * 80,
        f"LOADED DATA PREVIEW (max {limit})",
        "=" * 80,
        "-" * 80,
        "No.".ljust(4) + "Name".ljust(30) + "Width".ljust(12) + "Height".ljust(12)
        + "Thickness".ljust(12) + "Qty",
        "-" * 80,
    ]

    shown = set()
    for piece in pieces:
        if len(shown) >= limit:
            break
        name = base_name(piece.name)
        if name in shown:
            continue
        shown.add(name)
        lines.append(
            f"{len(shown):<4}{name[:28]:<30}{piece.width:<12g}{piece.height:<12g}"
            f"{piece.thickness:<12g}{piece.quantity}"
        )

    if len(pieces) > limit:
        lines.append(f"... and {len(pieces) - len(shown)} more")

    lines.append("-" * 80)
    lines.append(f"\nTOTAL: {len(pieces)} pieces to cut\n")
    return "\n".join(lines)


def format_summary(stats, report_path):
    lines = [
        "=" * 80,
        "DONE!",
        "=" * 80,
        "\nSummary:",
        f"   - Boards needed: {stats.total_boards}",
    ]
    for bt in stats.boards_by_type:
        lines.append(f"     • {bt.count}x {bt.width:g}×{bt.height:g}mm ({bt.thickness:g}mm) "
                     f"@ {bt.price:g}€ = {bt.subtotal:.2f}€")
    lines.append(f"   - Total cost: {stats.total_cost:.2f} €")
    lines.append(f"   - Utilisation: {stats.efficiency:.1f}%")
    lines.append(f"\n Report written: {report_path}")
    lines.append("=" * 80)
    return "\n".join(lines)


def confirm(prompt: str) -> bool:
    """Yes/no question, only 'y' or 'yes' accepts"""
    answer = input(prompt).strip().lower()
    return answer in ("y", "yes")


def run_interactive(config: CuttingConfig | None = None, input_file=None, assume_yes=False, png=False) -> int:
    """Run the interactive planner

    Returns:
        process exit code
    """
    config = config or CuttingConfig()
    input_path = Path(input_file or config.input_file)

    print("Starting the cutting optimiser...\n")

    if not input_path.exists():
        print(f"❌ File not found: {input_path}")
        print(f'Put your Excel file next to this program and name it "{config.input_file}"')
        return 1

    print("Available boards:")
    for idx, board in enumerate(config.boards, 1):
        print(f"   {idx}. {board.label()}")

    print(f"\nReading {input_path}...")
    try:
        all_pieces = read_pieces(input_path)
    except (InputFormatError, OSError) as e:
        print(f"❌ {e}")
        return 1
    print(format_preview(all_pieces))

    if not assume_yes and not confirm("Continue with this data? (Y/N): "):
        print("❌ Cancelled.")
        return 1

    pieces, excluded = filter_by_available_thickness(all_pieces, config.boards)
    if excluded:
        print(f"\n⚠️  {len(excluded)} pieces ignored (thickness not configured), "
              f"add their thickness to the board list if needed")

    if not pieces:
        print("❌ No piece matches the configured thicknesses, nothing to optimize!")
        return 1

    print(f"\n{len(pieces)} pieces kept for optimisation\n")

    print("Optimising placement...")
    packer = GridFirstFitPacker(config)
    result = packer.pack(pieces)
    result.excluded.extend(excluded)
    result.total_pieces = len(pieces)
    print(f"   - {len(result.boards)} boards needed\n")

    if result.dropped:
        print(f"⚠️  {len(result.dropped)} pieces too large for their board")

    stats = compute_statistics(result.boards, total_pieces=len(pieces))

    print("Writing HTML report...")
    output_dir = Path(config.output_dir)
    report_path = write_report(output_dir / "results.html", result, stats, config.margin)

    if png:
        image_path = visualize_solution(result.boards, output_dir / "results.png", config.margin)
        if image_path:
            print(f"Overview image: {image_path}")

    print("\n" + format_summary(stats, report_path) + "\n")
    return 0
