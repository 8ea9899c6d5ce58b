"""
Tests for half-open interval overlap.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from app.application.utils.intervals import overlaps

T0 = datetime(2024, 6, 10, 8, 0)


def at(hours: float) -> datetime:
    return T0 + timedelta(hours=hours)


def test_overlapping_intervals():
    """Intervals sharing any instant overlap."""
    assert overlaps(at(0), at(2), at(1), at(3)) is True
    assert overlaps(at(0), at(9), at(2), at(3)) is True


def test_touching_intervals_do_not_overlap():
    """[8,9) and [9,10) share no instant."""
    assert overlaps(at(0), at(1), at(1), at(2)) is False
    assert overlaps(at(1), at(2), at(0), at(1)) is False


def test_disjoint_intervals():
    """Separated intervals do not overlap."""
    assert overlaps(at(0), at(1), at(5), at(6)) is False


def test_overlap_is_symmetric():
    """overlaps(a, b, c, d) equals overlaps(c, d, a, b)."""
    points = [at(h) for h in range(0, 5)]
    for a in points:
        for b in points:
            if not a < b:
                continue
            for c in points:
                for d in points:
                    if not c < d:
                        continue
                    assert overlaps(a, b, c, d) == overlaps(c, d, a, b)
