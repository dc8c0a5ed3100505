"""Tests for the frame table that every policy places pages into."""

import pytest

from pagesim.errors import ConfigurationError
from pagesim.frames import FrameTable


class TestFrameTable:
    """Verify slot lookup and placement."""

    def test_starts_empty(self) -> None:
        """A new table has every slot empty."""
        frames = FrameTable(3)
        assert frames.snapshot() == (None, None, None)
        assert len(frames) == 3
        assert not frames.is_full()

    def test_zero_frames_rejected(self) -> None:
        """A table needs at least one frame."""
        with pytest.raises(ConfigurationError):
            FrameTable(0)

    def test_negative_frames_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            FrameTable(-2)

    def test_first_empty_slot_is_lowest_index(self) -> None:
        """The lowest-index empty slot is reported."""
        frames = FrameTable(3)
        frames.place(0, 7)
        frames.place(2, 9)
        assert frames.first_empty_slot() == 1

    def test_first_empty_slot_when_full(self) -> None:
        frames = FrameTable(2)
        frames.place(0, 1)
        frames.place(1, 2)
        assert frames.first_empty_slot() is None
        assert frames.is_full()

    def test_contains_and_slot_of(self) -> None:
        """Membership and slot lookup agree."""
        frames = FrameTable(2)
        frames.place(1, 5)
        assert frames.contains(5)
        assert not frames.contains(6)
        assert frames.slot_of(5) == 1
        assert frames.slot_of(6) is None

    def test_place_returns_replaced_page(self) -> None:
        """Placing into an occupied slot hands back the evicted page."""
        frames = FrameTable(1)
        assert frames.place(0, 3) is None
        assert frames.place(0, 4) == 3
        assert list(frames) == [4]

    def test_page_zero_is_not_empty(self) -> None:
        """Page 0 is a real page, distinct from an empty slot."""
        frames = FrameTable(2)
        frames.place(0, 0)
        assert frames.contains(0)
        assert frames.first_empty_slot() == 1
