"""
Replacement simulation engine.

SimulationRunner drives one policy across a reference string, counting page
faults and recording the per-step frame history.  compare() runs several
policies over the same input, fault_curve() sweeps the frame count.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

import numpy as np

from .errors import ConfigurationError
from .frames import FrameTable
from .policies import POLICIES, ReplacementPolicy, get_policy

logger = logging.getLogger(__name__)

DEFAULT_POLICIES = tuple(POLICIES)

Label = Optional[int]  # None is a blank cell
HistoryGrid = Tuple[Tuple[Label, ...], ...]
PolicyLike = Union[str, ReplacementPolicy]


@dataclass(frozen=True)
class FaultRecord:
    """What happened at one step of the reference string"""
    step: int
    page: int
    fault: bool
    slot: Optional[int] = None     # frame that received the page on a fault
    evicted: Optional[int] = None  # page that was replaced, if any


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of one policy run"""
    policy: str
    frame_count: int
    reference: Tuple[int, ...]
    fault_count: int
    faults: Tuple[FaultRecord, ...]
    history: HistoryGrid

    @property
    def hits(self) -> int:
        return len(self.reference) - self.fault_count

    @property
    def fault_rate(self) -> float:
        return self.fault_count / len(self.reference) if self.reference else 0.0

    @property
    def evictions(self) -> int:
        return sum(1 for record in self.faults if record.evicted is not None)

    def column(self, step: int) -> Tuple[Label, ...]:
        """History labels of every frame at one step"""
        return tuple(row[step] for row in self.history)


def _resolve(policy: PolicyLike) -> ReplacementPolicy:
    if isinstance(policy, ReplacementPolicy):
        return policy
    return get_policy(policy)


class SimulationRunner:
    """Runs a replacement policy over a reference string with a fixed frame count"""

    def __init__(self, frame_count: int):
        if frame_count < 1:
            raise ConfigurationError(f"frame count must be at least 1, got {frame_count}")
        self.frame_count = frame_count

    def run(self, policy: PolicyLike, reference: Sequence[int],
            fault_only: bool = True) -> SimulationResult:
        """
        Simulate policy over reference.

        With fault_only (the default) history cells are blank on steps that hit
        and show the whole frame table on steps that fault.  fault_only=False
        records the frame table on every step.
        """
        policy = _resolve(policy)
        reference = tuple(reference)
        frames = FrameTable(self.frame_count)
        policy.reset(self.frame_count, reference)

        rows: List[List[Label]] = [[] for _ in range(self.frame_count)]
        records = []
        page_faults = 0

        for step, page in enumerate(reference):
            if frames.contains(page):
                records.append(FaultRecord(step, page, False))
                fault = False
            else:
                # Page fault occurred
                slot = policy.choose_slot(frames, reference, step)
                evicted = frames.place(slot, page)
                page_faults += 1
                records.append(FaultRecord(step, page, True, slot, evicted))
                fault = True

            policy.observe(page, step)

            for slot, held in enumerate(frames):
                rows[slot].append(held if fault or not fault_only else None)

        logger.debug("%s with %d frames: %d faults over %d references",
                     policy.name, self.frame_count, page_faults, len(reference))

        return SimulationResult(
            policy=policy.name,
            frame_count=self.frame_count,
            reference=reference,
            fault_count=page_faults,
            faults=tuple(records),
            history=tuple(tuple(row) for row in rows),
        )


def compare(reference: Sequence[int], frame_count: int,
            policies: Optional[Iterable[PolicyLike]] = None,
            fault_only: bool = True) -> Dict[str, SimulationResult]:
    """Run each policy independently over the same reference string"""
    runner = SimulationRunner(frame_count)
    results = {}
    for policy in policies if policies is not None else DEFAULT_POLICIES:
        result = runner.run(policy, reference, fault_only=fault_only)
        results[result.policy] = result
    return results


def fault_curve(reference: Sequence[int], frame_counts: Iterable[int],
                policy: PolicyLike = "FIFO") -> np.ndarray:
    """Fault count of policy for each frame count"""
    policy = _resolve(policy)
    counts = [SimulationRunner(int(n)).run(policy, reference).fault_count for n in frame_counts]
    return np.array(counts, dtype=int)


def find_belady_anomalies(reference: Sequence[int], max_frames: int,
                          policy: PolicyLike = "FIFO") -> List[int]:
    """
    Frame counts k in [1, max_frames) where k + 1 frames fault more than k.

    Always empty for stack algorithms such as LRU and Optimal.
    """
    frame_counts = np.arange(1, max_frames + 1)
    faults = fault_curve(reference, frame_counts, policy)
    worse = np.flatnonzero(np.diff(faults) > 0)
    return [int(frame_counts[i]) for i in worse]
