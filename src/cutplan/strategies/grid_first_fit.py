"""Grid scan first-fit packing strategy"""

import logging

from ..models import Board, PackingResult, PlacedPiece
from ..packing import PackingStrategy, Rect

logger = logging.getLogger(__name__)


class GridFirstFitPacker(PackingStrategy):
    """Greedy first-fit over boards and over grid positions

    Pieces are handled per thickness, largest area first. Each piece goes
    to the first existing board (creation order) that has room for it at
    some grid position, otherwise to a new board. Positions are scanned
    row by row (y outer, x inner) on a `step` grid starting at the margin.
    A position that is only valid off-grid is never found.
    """

    def pack(self, pieces):
        result = PackingResult(total_pieces=len(pieces))

        for thickness in self.config.duplicate_thicknesses():
            logger.warning(f"Several board templates with thickness {thickness:g}mm, using the first one")

        for thickness, group in self.group_by_thickness(pieces).items():
            template = self.config.template_for(thickness)
            if template is None:
                logger.warning(f"No board configured for thickness {thickness:g}mm, "
                               f"skipping {len(group)} pieces")
                result.excluded.extend(group)
                continue

            logger.info(f"Packing {len(group)} pieces of {thickness:g}mm on "
                        f"{template.width:g}x{template.height:g}mm boards")
            self._pack_group(self.order_pieces(group), template, result)

        return result

    def _pack_group(self, pieces, template, result):
        boards = []

        for piece in pieces:
            if any(self.try_place(board, piece) for board in boards):
                continue

            board = Board.from_template(len(result.boards) + 1, template)
            if self.try_place(board, piece):
                logger.debug(f"Opened board #{board.id} for {piece.name}")
                boards.append(board)
                result.boards.append(board)
            else:
                logger.warning(f"Piece too large: {piece.name} ({piece.width:g}x{piece.height:g}mm) "
                               f"for board {template.width:g}x{template.height:g}mm")
                result.dropped.append(piece)

    def orientations(self, piece):
        """Candidate (width, height, rotated), unrotated first"""
        return [
            (piece.width, piece.height, False),
            (piece.height, piece.width, True),
        ]

    def try_place(self, board, piece):
        """Place piece at the first free grid position on board

        Returns:
            the PlacedPiece on success, None if no position fits
        """
        for w, h, rotated in self.orientations(piece):
            footprint_w = w + self.kerf
            footprint_h = h + self.kerf

            if footprint_w > board.width or footprint_h > board.height:
                continue

            position = self._find_position(board, footprint_w, footprint_h)
            if position is None:
                continue

            x, y = position
            placed = PlacedPiece(piece, x, y, w, h, rotated)
            board.place(placed, Rect(x, y, footprint_w, footprint_h))
            return placed

        return None

    def _find_position(self, board, footprint_w, footprint_h):
        max_x = board.width - footprint_w - self.margin
        max_y = board.height - footprint_h - self.margin

        # origins are computed from the index, not accumulated, to avoid float drift
        row = 0
        while self.margin + row * self.step <= max_y:
            y = self.margin + row * self.step
            col = 0
            while self.margin + col * self.step <= max_x:
                x = self.margin + col * self.step
                if board.occupied.is_free(Rect(x, y, footprint_w, footprint_h)):
                    return x, y
                col += 1
            row += 1

        return None
