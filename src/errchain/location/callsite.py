"""Call-site capture with lazy file/line resolution.

Capturing stores only the code object and bytecode offset of the calling
frame. File, line and function name are derived from them when asked for.
"""

import sys
from dataclasses import dataclass
from types import CodeType

from errchain.config import get_config


@dataclass(frozen=True)
class CallSite:
    """Opaque handle for a captured call site.

    ``CallSite()`` is the zero handle: it resolves to ``""`` and ``0``.
    """

    code: CodeType | None = None
    offset: int = -1

    def __bool__(self) -> bool:
        return self.code is not None

    def __str__(self) -> str:
        if self.code is None:
            return ""
        return f"{self.file}:{self.line}"

    @property
    def file(self) -> str:
        """Path of the source file, empty for the zero handle."""
        if self.code is None:
            return ""
        return self.code.co_filename

    @property
    def line(self) -> int:
        """1-based line number, 0 if it cannot be resolved."""
        if self.code is None or self.offset < 0:
            return 0
        for start, end, lineno in self.code.co_lines():
            if start <= self.offset < end:
                return lineno or 0
        return 0

    @property
    def function(self) -> str:
        """Qualified name of the calling function, empty for the zero handle."""
        if self.code is None:
            return ""
        return self.code.co_qualname


def capture(skip: int = 0) -> CallSite:
    """Capture the call site ``skip`` frames above the caller of ``capture``.

    Args:
        skip: Number of frames to skip; 0 identifies the caller itself

    Returns:
        CallSite for that frame, or the zero handle if the stack is not that
        deep or location capture is disabled
    """
    if not get_config().capture_locations:
        return CallSite()
    try:
        frame = sys._getframe(skip + 1)
    except ValueError:
        return CallSite()
    return CallSite(frame.f_code, frame.f_lasti)


def file(site: CallSite | None) -> str:
    """Resolve a handle to its file path."""
    if site is None:
        return ""
    return site.file


def line(site: CallSite | None) -> int:
    """Resolve a handle to its line number."""
    if site is None:
        return 0
    return site.line
