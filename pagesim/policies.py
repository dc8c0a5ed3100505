"""
Page replacement policies.

Each policy answers one question on a page fault: which frame slot should
receive the faulting page?  The simulation loop that asks the question lives
in ``simulator.SimulationRunner`` and is shared by every policy.
"""

from typing import Dict, List, Optional, Sequence, Type, Union

from .errors import ConfigurationError
from .frames import FrameTable


class _NeverUsed:
    """Next-use marker for a page that is not referenced again"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "NEVER"

    def __reduce__(self):
        return (_NeverUsed, ())


NEVER = _NeverUsed()

NextUse = Union[int, _NeverUsed]


def is_farther(candidate: NextUse, best: NextUse) -> bool:
    """True if candidate is strictly later than best; NEVER is later than any index"""
    if candidate is NEVER:
        return best is not NEVER
    if best is NEVER:
        return False
    return candidate > best


class ReplacementPolicy:
    """Base class for page replacement policies"""

    name = "base"

    def __init__(self):
        self.frame_count = 0

    def reset(self, frame_count: int, reference: Sequence[int]):
        """Clear run-scoped state before a new simulation"""
        self.frame_count = frame_count

    def observe(self, page: int, step: int):
        """Called for every access, fault or hit, after placement"""

    def choose_slot(self, frames: FrameTable, reference: Sequence[int], step: int) -> int:
        """
        Return the slot that receives reference[step] on a fault.
        """
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}()"


class FIFOPolicy(ReplacementPolicy):
    """First-In-First-Out page replacement"""

    name = "FIFO"

    def __init__(self):
        super().__init__()
        self.next_slot = 0

    def reset(self, frame_count: int, reference: Sequence[int]):
        super().reset(frame_count, reference)
        self.next_slot = 0

    def choose_slot(self, frames: FrameTable, reference: Sequence[int], step: int) -> int:
        # The cursor advances while filling empty frames too, so once the
        # table is full it points at the oldest loaded page.
        slot = self.next_slot
        self.next_slot = (self.next_slot + 1) % self.frame_count
        return slot


class LRUPolicy(ReplacementPolicy):
    """Least Recently Used page replacement"""

    name = "LRU"

    def __init__(self):
        super().__init__()
        self.last_used: Dict[int, int] = {}  # page -> step of last reference

    def reset(self, frame_count: int, reference: Sequence[int]):
        super().reset(frame_count, reference)
        self.last_used.clear()

    def observe(self, page: int, step: int):
        self.last_used[page] = step

    def choose_slot(self, frames: FrameTable, reference: Sequence[int], step: int) -> int:
        empty = frames.first_empty_slot()
        if empty is not None:
            return empty

        victim = 0
        oldest = None
        for slot, page in enumerate(frames):
            used = self.last_used.get(page, -1)
            if oldest is None or used < oldest:
                oldest = used
                victim = slot
        return victim


class OptimalPolicy(ReplacementPolicy):
    """Optimal (Belady) page replacement, requires the whole reference string"""

    name = "Optimal"

    def __init__(self):
        super().__init__()
        self.next_index: List[NextUse] = []
        self.last_seen: Dict[int, int] = {}

    def reset(self, frame_count: int, reference: Sequence[int]):
        super().reset(frame_count, reference)
        self.last_seen.clear()

        # next_index[i] is the next position after i holding the same page
        self.next_index = [NEVER] * len(reference)
        upcoming: Dict[int, int] = {}
        for i in range(len(reference) - 1, -1, -1):
            self.next_index[i] = upcoming.get(reference[i], NEVER)
            upcoming[reference[i]] = i

    def observe(self, page: int, step: int):
        self.last_seen[page] = step

    def next_use(self, page: int, reference: Sequence[int], step: int) -> NextUse:
        """Index of the next reference to page strictly after step, or NEVER"""
        seen = self.last_seen.get(page)
        if seen is not None and seen <= step and len(self.next_index) == len(reference):
            upcoming = self.next_index[seen]
            # Only valid when page was not referenced again between seen and step
            if upcoming is NEVER or upcoming > step:
                return upcoming
        for i in range(step + 1, len(reference)):
            if reference[i] == page:
                return i
        return NEVER

    def choose_slot(self, frames: FrameTable, reference: Sequence[int], step: int) -> int:
        empty = frames.first_empty_slot()
        if empty is not None:
            return empty

        victim = 0
        farthest: Optional[NextUse] = None
        for slot, page in enumerate(frames):
            use = self.next_use(page, reference, step)
            if farthest is None or is_farther(use, farthest):
                farthest = use
                victim = slot
        return victim


POLICIES: Dict[str, Type[ReplacementPolicy]] = {
    FIFOPolicy.name: FIFOPolicy,
    LRUPolicy.name: LRUPolicy,
    OptimalPolicy.name: OptimalPolicy,
}

_ALIASES = {"OPT": OptimalPolicy.name}


def get_policy(name: str) -> ReplacementPolicy:
    """Build a fresh policy instance by (case-insensitive) name"""
    key = name.strip().upper()
    key = _ALIASES.get(key, key).upper()
    for policy_name, policy_class in POLICIES.items():
        if policy_name.upper() == key:
            return policy_class()
    raise ConfigurationError(
        f"Unknown policy '{name}', expected one of: {', '.join(POLICIES)}"
    )
