"""Visualisation module"""

import io

import matplotlib
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle as MPLRect

from .models import base_name


def piece_colors(boards):
    """One colour per base piece name, stable across boards"""
    names = sorted({base_name(p.name) for board in boards for p in board.pieces})
    cmap = matplotlib.colormaps['Set3']
    return {name: cmap(i % cmap.N) for i, name in enumerate(names)}


def draw_board(ax, board, margin=0, colors=None):
    """Draw one board with its pieces on a matplotlib Axes

    Args:
        ax: target axes
        board: packed Board
        margin: edge clearance to shade (mm)
        colors: {base name: colour}, computed from this board if omitted
    """
    if colors is None:
        colors = piece_colors([board])

    ax.add_patch(MPLRect((0, 0), board.width, board.height,
                         facecolor='#f5f5f5', edgecolor='black', linewidth=2))
    if margin > 0:
        ax.add_patch(MPLRect((margin, margin), board.width - 2 * margin, board.height - 2 * margin,
                             fill=False, edgecolor='gray', linestyle='--', linewidth=0.8))

    for piece in board.pieces:
        x, y = piece.x, piece.y
        w, h = piece.placed_width, piece.placed_height

        ax.add_patch(MPLRect((x, y), w, h,
                             linewidth=1, edgecolor='black',
                             facecolor=colors.get(base_name(piece.name), 'lightgray'), alpha=0.8))

        label = f"{piece.name}\n{w:g}×{h:g}"
        if piece.rotated:
            label += "\n↻"
        ax.text(x + w / 2, y + h / 2, label, ha='center', va='center',
                fontsize=7, fontweight='bold', clip_on=True)

    ax.set_xlim(0, board.width)
    # board coordinates grow downwards
    ax.set_ylim(board.height, 0)
    ax.set_aspect('equal')
    ax.set_title(f"#{board.id} {board.width:g}×{board.height:g}×{board.thickness:g}mm "
                 f"({board.efficiency:.1f}%)", fontsize=10, fontweight='bold')


def board_svg(board, margin=0, colors=None, scale=0.005):
    """Render one board to an SVG string

    Args:
        scale: inches per mm of board
    """
    fig = Figure(figsize=(max(board.width * scale, 2), max(board.height * scale, 1) + 0.5))
    ax = fig.add_subplot(1, 1, 1)
    draw_board(ax, board, margin, colors)
    ax.set_xticks([])
    ax.set_yticks([])
    fig.tight_layout()

    buffer = io.StringIO()
    fig.savefig(buffer, format='svg')
    svg = buffer.getvalue()
    # drop the XML prolog and doctype so the drawing can be inlined in HTML
    return svg[svg.index('<svg'):]


def visualize_solution(boards, output_path, margin=0, columns=2):
    """Save an overview PNG of all boards

    Returns:
        path of the written file, None when there is nothing to draw
    """
    if not boards:
        return None

    colors = piece_colors(boards)
    rows = (len(boards) + columns - 1) // columns
    ncols = min(columns, len(boards))
    fig, axes = plt.subplots(rows, ncols, figsize=(8 * ncols, 4 * rows), squeeze=False)

    for idx, ax in enumerate(axes.flat):
        if idx < len(boards):
            draw_board(ax, boards[idx], margin, colors)
        else:
            ax.axis('off')

    fig.tight_layout()
    fig.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return output_path
