"""errchain errors - chained errors with creation sites."""

from .chain import (
    call_site,
    cause,
    file,
    for_causes,
    is_comparable,
    iter_causes,
    line,
    one_cause_of,
)
from .errors import ChainError, new

__all__ = [
    # Core error type
    "ChainError",
    "new",
    # Queries
    "file",
    "line",
    "call_site",
    "cause",
    # Traversal
    "for_causes",
    "iter_causes",
    "one_cause_of",
    "is_comparable",
]
