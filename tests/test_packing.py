"""Tests for geometry primitives and the packing base class."""

from cutplan.config import CuttingConfig
from cutplan.models import Piece
from cutplan.packing import OccupiedSpace, Rect
from cutplan.strategies import GridFirstFitPacker


class TestRect:

    def test_overlapping(self):
        assert Rect(0, 0, 20, 20).overlaps(Rect(10, 10, 20, 20))

    def test_contained(self):
        assert Rect(0, 0, 50, 50).overlaps(Rect(10, 10, 5, 5))

    def test_touching_edges_do_not_overlap(self):
        a = Rect(0, 0, 20, 20)
        assert not a.overlaps(Rect(20, 0, 20, 20))
        assert not a.overlaps(Rect(0, 20, 20, 20))
        assert not a.overlaps(Rect(20, 20, 5, 5))

    def test_disjoint(self):
        assert not Rect(0, 0, 10, 10).overlaps(Rect(30, 30, 10, 10))

    def test_symmetric(self):
        a, b = Rect(5, 5, 10, 10), Rect(0, 0, 8, 8)
        assert a.overlaps(b) == b.overlaps(a)

    def test_edges(self):
        r = Rect(4, 6, 10, 20)
        assert r.right == 14
        assert r.bottom == 26


class TestOccupiedSpace:

    def test_empty_is_free(self):
        assert OccupiedSpace().is_free(Rect(0, 0, 100, 100))

    def test_add_and_query(self):
        space = OccupiedSpace()
        space.add(Rect(0, 0, 20, 20))

        assert not space.is_free(Rect(10, 0, 20, 20))
        assert space.is_free(Rect(20, 0, 20, 20))
        assert len(space) == 1

    def test_append_only_keeps_order(self):
        space = OccupiedSpace()
        space.add(Rect(0, 0, 1, 1))
        space.add(Rect(5, 5, 1, 1))
        assert list(space) == [Rect(0, 0, 1, 1), Rect(5, 5, 1, 1)]


class TestGroupingAndOrdering:

    def test_group_by_exact_thickness(self):
        packer = GridFirstFitPacker(CuttingConfig())
        pieces = [Piece("a", 1, 1, 18), Piece("b", 1, 1, 16), Piece("c", 1, 1, 18), Piece("d", 1, 1, 16.5)]

        groups = packer.group_by_thickness(pieces)

        assert list(groups) == [16, 16.5, 18]
        assert [p.name for p in groups[18]] == ["a", "c"]

    def test_order_by_area_descending_stable(self):
        packer = GridFirstFitPacker(CuttingConfig())
        pieces = [
            Piece("A", 20, 20, 16),
            Piece("B", 10, 40, 16),
            Piece("C", 40, 40, 16),
            Piece("D", 40, 10, 16),
        ]

        ordered = packer.order_pieces(pieces)

        assert [p.name for p in ordered] == ["C", "A", "B", "D"]
        # input list is not reordered
        assert [p.name for p in pieces] == ["A", "B", "C", "D"]
