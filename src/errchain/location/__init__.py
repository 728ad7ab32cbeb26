"""Location capture - cheap call-site handles resolved on demand."""

from .callsite import CallSite, capture, file, line

__all__ = [
    "CallSite",
    "capture",
    "file",
    "line",
]
