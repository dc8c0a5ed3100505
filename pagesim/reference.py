import re
from typing import Optional, Tuple

import numpy as np

from .errors import ConfigurationError, InputFormatError

DEFAULT_LENGTH = 20
DEFAULT_PAGE_RANGE = 10

_SEPARATORS = re.compile(r"[\s,]+")


def generate_reference_string(length: int = DEFAULT_LENGTH,
                              page_range: int = DEFAULT_PAGE_RANGE,
                              seed: Optional[int] = None) -> Tuple[int, ...]:
    """Generate a reference string of pages drawn uniformly from [0, page_range)"""
    if page_range < 1:
        raise ConfigurationError(f"page range must be at least 1, got {page_range}")
    if length < 0:
        raise ConfigurationError(f"length must not be negative, got {length}")

    rng = np.random.default_rng(seed)
    return tuple(int(page) for page in rng.integers(0, page_range, size=length))


def parse_reference_string(text: str) -> Tuple[int, ...]:
    """Parse comma and/or whitespace separated page numbers"""
    tokens = [token for token in _SEPARATORS.split(text.strip()) if token]
    pages = []
    for token in tokens:
        # Plain non-negative decimal only: no sign, underscores or non-ASCII digits
        if not (token.isascii() and token.isdigit()):
            raise InputFormatError(f"'{token}' is not a valid page number")
        pages.append(int(token))
    return tuple(pages)


def parse_frame_count(text: str) -> int:
    """Read the number of frames from raw user text"""
    try:
        frames = int(text.strip())
    except ValueError:
        raise InputFormatError("Please enter a valid number for frames.") from None
    if frames < 1:
        raise ConfigurationError(f"frame count must be at least 1, got {frames}")
    return frames
