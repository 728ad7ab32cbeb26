"""Chain error node and constructor."""

from errchain.location import CallSite, capture


class ChainError(Exception):
    """Error with a message, an optional cause and its creation site.

    Instances compare and hash by identity, so two errors built from the same
    text stay distinguishable. ``text`` and ``cause`` are read-only.

    Args:
        text: Human-readable message
        cause: Optional underlying error (any exception, not only ChainError)
        skip: Extra frames to skip when recording the creation site; 0 records
            the line that instantiated the class
    """

    def __init__(self, text: str, cause: BaseException | None = None, *, skip: int = 0) -> None:
        super().__init__(text)
        self._text = text
        self._cause = cause
        self._call_site = capture(skip + 1)
        if isinstance(cause, BaseException):
            # Lets tracebacks print the chain when raised
            self.__cause__ = cause

    def __str__(self) -> str:
        return self._text

    @property
    def text(self) -> str:
        """Message given at construction."""
        return self._text

    @property
    def cause(self) -> BaseException | None:
        """Underlying error given at construction."""
        return self._cause

    @property
    def call_site(self) -> CallSite:
        """Site where this error was created."""
        return self._call_site


def new(text: str, cause: BaseException | None = None) -> ChainError:
    """Create a new chain error.

    Each call returns a distinct error, even for identical text. The recorded
    location is the line that called ``new``.

    Args:
        text: Human-readable message
        cause: Optional underlying error

    Returns:
        ChainError instance
    """
    return ChainError(text, cause, skip=1)
