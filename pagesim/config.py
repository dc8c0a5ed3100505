from dataclasses import dataclass
from typing import Optional, Tuple

from .errors import ConfigurationError
from .policies import POLICIES, get_policy
from .reference import DEFAULT_LENGTH, DEFAULT_PAGE_RANGE


@dataclass
class SimulationConfig:
    """Parameters for one comparison run"""
    frame_count: int = 3
    length: int = DEFAULT_LENGTH
    page_range: int = DEFAULT_PAGE_RANGE
    seed: Optional[int] = None
    policies: Tuple[str, ...] = tuple(POLICIES)
    fault_only: bool = True

    def validate(self) -> "SimulationConfig":
        if self.frame_count < 1:
            raise ConfigurationError(f"frame count must be at least 1, got {self.frame_count}")
        if self.page_range < 1:
            raise ConfigurationError(f"page range must be at least 1, got {self.page_range}")
        if self.length < 0:
            raise ConfigurationError(f"length must not be negative, got {self.length}")
        if not self.policies:
            raise ConfigurationError("at least one policy is required")
        # Normalise names ("lru", "opt") to their canonical spelling
        self.policies = tuple(get_policy(name).name for name in self.policies)
        return self
