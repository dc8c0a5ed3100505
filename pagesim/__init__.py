"""Page replacement simulator: FIFO, LRU and Optimal over a reference string"""

from .config import SimulationConfig
from .errors import ConfigurationError, InputFormatError, PageSimError
from .frames import FrameTable
from .policies import (NEVER, POLICIES, FIFOPolicy, LRUPolicy, OptimalPolicy,
                       ReplacementPolicy, get_policy)
from .reference import generate_reference_string, parse_frame_count, parse_reference_string
from .simulator import (FaultRecord, SimulationResult, SimulationRunner, compare,
                        fault_curve, find_belady_anomalies)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "FIFOPolicy",
    "FaultRecord",
    "FrameTable",
    "InputFormatError",
    "LRUPolicy",
    "NEVER",
    "OptimalPolicy",
    "POLICIES",
    "PageSimError",
    "ReplacementPolicy",
    "SimulationConfig",
    "SimulationResult",
    "SimulationRunner",
    "compare",
    "fault_curve",
    "find_belady_anomalies",
    "generate_reference_string",
    "get_policy",
    "parse_frame_count",
    "parse_reference_string",
]
