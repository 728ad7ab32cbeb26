"""errchain - Chained errors that remember where they were created.

Usage:
    from errchain import new, one_cause_of

    ErrNotFound = new("not found")
    err = new("loading user", ErrNotFound)
    assert one_cause_of(err, ErrNotFound)
"""

from errchain.errors import (
    ChainError,
    call_site,
    cause,
    file,
    for_causes,
    is_comparable,
    iter_causes,
    line,
    new,
    one_cause_of,
)
from errchain.location import CallSite, capture

__version__ = "0.1.0"
__all__ = [
    "__version__",
    "CallSite",
    "ChainError",
    "call_site",
    "capture",
    "cause",
    "file",
    "for_causes",
    "is_comparable",
    "iter_causes",
    "line",
    "new",
    "one_cause_of",
]
