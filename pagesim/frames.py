from typing import Iterator, Optional, Tuple

from .errors import ConfigurationError


class FrameTable:
    """Fixed set of physical memory frames, each empty (None) or holding one page"""

    def __init__(self, frame_count: int):
        if frame_count < 1:
            raise ConfigurationError(f"frame count must be at least 1, got {frame_count}")
        self.frame_count = frame_count
        self.slots = [None] * frame_count  # None indicates empty frame

    def contains(self, page: int) -> bool:
        return page in self.slots

    def first_empty_slot(self) -> Optional[int]:
        try:
            return self.slots.index(None)
        except ValueError:
            return None

    def slot_of(self, page: int) -> Optional[int]:
        try:
            return self.slots.index(page)
        except ValueError:
            return None

    def place(self, index: int, page: int) -> Optional[int]:
        """Put page into slot index, return the page it replaced (if any)"""
        evicted = self.slots[index]
        self.slots[index] = page
        return evicted

    def is_full(self) -> bool:
        return None not in self.slots

    def snapshot(self) -> Tuple[Optional[int], ...]:
        return tuple(self.slots)

    def __len__(self) -> int:
        return self.frame_count

    def __iter__(self) -> Iterator[Optional[int]]:
        return iter(self.slots)

    def __repr__(self):
        return f"FrameTable({self.slots})"
