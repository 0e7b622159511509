"""HTML cutting plan report"""

import logging
from html import escape
from pathlib import Path

from .visualizer import board_svg, piece_colors

logger = logging.getLogger(__name__)

STYLE = """
    body { font-family: Arial, sans-serif; margin: 20px; background: #fff; }
    h1 { color: #2c3e50; border-bottom: 3px solid #3498db; padding-bottom: 10px; }
    h2 { color: #34495e; margin-top: 0; }
    .summary { background: #ecf0f1; padding: 20px; border-radius: 8px; margin: 20px 0; }
    .summary-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 15px; }
    .stat { background: white; padding: 15px; border-radius: 5px; border-left: 4px solid #3498db; }
    .stat-label { font-size: 0.9em; color: #7f8c8d; }
    .stat-value { font-size: 1.8em; font-weight: bold; color: #2c3e50; }
    .board { margin: 30px 0; padding: 20px; border: 2px solid #bdc3c7; border-radius: 8px; }
    .board-header { background: #3498db; color: white; padding: 10px; border-radius: 5px; margin-bottom: 15px; }
    .piece-item { padding: 8px; margin: 5px 0; background: #f8f9fa; }
    .shopping-list { background: #fff3cd; padding: 20px; border-radius: 8px; margin: 20px 0; border-left: 4px solid #ffc107; }
    .warning { background: #fdecea; padding: 20px; border-radius: 8px; margin: 20px 0; border-left: 4px solid #e74c3c; }
    .print-button { background: #3498db; color: white; border: none; padding: 10px 20px; border-radius: 5px; cursor: pointer; }
    @media print {
        .print-button { display: none; }
        .board { page-break-after: always; }
    }
"""


def _fmt(value):
    return f"{value:g}"


def _shopping_list(stats):
    lines = [
        f'<div class="type-line"><strong>{bt.count}x</strong> Board {_fmt(bt.width)}×{_fmt(bt.height)}mm'
        f' - thickness {_fmt(bt.thickness)}mm @ {bt.price:.2f}€/unit = <strong>{bt.subtotal:.2f}€</strong></div>'
        for bt in stats.boards_by_type
    ]
    return f"""
    <div class="shopping-list">
        <h2>Shopping list</h2>
        {''.join(lines)}
        <div class="total"><strong>Total: {stats.total_cost:.2f} €</strong></div>
    </div>"""


def _summary(stats):
    cards = [
        ("Boards", stats.total_boards),
        ("Total cost", f"{stats.total_cost:.2f} €"),
        ("Pieces to cut", stats.total_pieces),
        ("Utilisation", f"{stats.efficiency:.1f}%"),
    ]
    body = ''.join(
        f'<div class="stat"><div class="stat-label">{label}</div><div class="stat-value">{value}</div></div>'
        for label, value in cards
    )
    return f"""
    <div class="summary">
        <h2>Summary</h2>
        <div class="summary-grid">{body}</div>
    </div>"""


def _board_section(board, margin, colors):
    items = []
    for i, p in enumerate(board.pieces, 1):
        rotated = ' ↻ <em>(rotated 90°)</em>' if p.rotated else ''
        items.append(
            f'<div class="piece-item"><strong>{i}. {escape(p.name)}</strong>'
            f' - {_fmt(p.placed_width)} × {_fmt(p.placed_height)} mm{rotated}'
            f' - position: X={_fmt(p.x)}mm, Y={_fmt(p.y)}mm</div>'
        )
    return f"""
    <div class="board">
        <div class="board-header">
            <h3>Board #{board.id} - {_fmt(board.width)}×{_fmt(board.height)}mm - thickness {_fmt(board.thickness)}mm
            (utilisation {board.efficiency:.1f}%)</h3>
        </div>
        {board_svg(board, margin, colors)}
        <div class="piece-list">
            <h4>Cut list ({len(board.pieces)} pieces):</h4>
            {''.join(items)}
        </div>
    </div>"""


def _piece_warning(title, pieces):
    if not pieces:
        return ""
    items = ''.join(
        f'<li>{escape(p.name)} - {_fmt(p.width)} × {_fmt(p.height)} mm, {_fmt(p.thickness)}mm</li>'
        for p in pieces
    )
    return f"""
    <div class="warning">
        <h2>{title} ({len(pieces)})</h2>
        <ul>{items}</ul>
    </div>"""


def render_html(result, stats, margin=0):
    """Build the full HTML report for a packing result"""
    colors = piece_colors(result.boards)
    boards_html = ''.join(_board_section(board, margin, colors) for board in result.boards)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Optimised cutting plan</title>
    <style>{STYLE}</style>
</head>
<body>
    <h1>Optimised cutting plan</h1>
    <button class="print-button" onclick="window.print()">Print</button>
    {_shopping_list(stats)}
    {_summary(stats)}
    {_piece_warning("Pieces without a matching board", result.excluded)}
    {_piece_warning("Pieces too large for their board", result.dropped)}
    {boards_html}
</body>
</html>
"""


def write_report(path, result, stats, margin=0) -> Path:
    """Render the report and write it to path (parent directories are created)"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_html(result, stats, margin), encoding="utf-8")
    logger.info(f"Report written to {path}")
    return path
