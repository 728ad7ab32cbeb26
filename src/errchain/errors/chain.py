"""Queries over error chains: location, cause, traversal and membership.

Every function here accepts ``None`` and foreign exceptions (anything that is
not a ChainError) and answers with a zero value instead of raising.
"""

from collections.abc import Callable, Hashable, Iterator

from errchain.location import CallSite
from errchain.telemetry.logging import get_logger

from .errors import ChainError


def file(err: BaseException | None) -> str:
    """Return the file where ``err`` was created.

    Args:
        err: Error to inspect

    Returns:
        File path, or "" for None and foreign errors
    """
    if not isinstance(err, ChainError):
        return ""
    return err.call_site.file


def line(err: BaseException | None) -> int:
    """Return the line where ``err`` was created.

    Args:
        err: Error to inspect

    Returns:
        Line number, or 0 for None and foreign errors
    """
    if not isinstance(err, ChainError):
        return 0
    return err.call_site.line


def call_site(err: BaseException | None) -> CallSite:
    """Return the captured creation site of ``err``.

    Args:
        err: Error to inspect

    Returns:
        CallSite, or the zero handle for None and foreign errors
    """
    if not isinstance(err, ChainError):
        return CallSite()
    return err.call_site


def cause(err: BaseException | None) -> BaseException | None:
    """Return the error ``err`` was chained onto.

    Args:
        err: Error to inspect

    Returns:
        The stored cause, or None for None and foreign errors
    """
    if not isinstance(err, ChainError):
        return None
    return err.cause


def iter_causes(err: BaseException | None) -> Iterator[BaseException]:
    """Yield ``err`` and then each cause, outermost first.

    Stops after the first error that is not a ChainError or has no cause.
    Chains are acyclic by construction; a cycle would never terminate.
    """
    while err is not None:
        yield err
        if not isinstance(err, ChainError):
            return
        err = err.cause


def for_causes(err: BaseException | None, visit: Callable[[BaseException], object]) -> None:
    """Call ``visit`` on ``err`` and every error in its cause chain.

    Args:
        err: Outermost error; nothing is visited for None
        visit: Callback, its return value is ignored
    """
    for current in iter_causes(err):
        visit(current)


def is_comparable(value: object) -> bool:
    """Check whether ``value`` supports equality matching.

    A value is comparable when its type is hashable. Exception types that
    define ``__eq__`` without ``__hash__`` (such as ``@dataclass`` exceptions
    holding lists or dicts) are not.
    """
    return isinstance(value, Hashable)


def one_cause_of(err: BaseException | None, target: BaseException | None) -> bool:
    """Check whether ``target`` appears anywhere in the chain of ``err``.

    Elements match by identity, or by equality when the element has exactly
    the target's type; other types are never asked to compare. A target
    whose type is not comparable never matches, and an element whose
    comparison raises is treated as a mismatch.

    Args:
        err: Outermost error of the chain
        target: Error to look for

    Returns:
        True if found; for a None target, True only if err is None
    """
    if target is None:
        return err is None

    if not is_comparable(target):
        return False

    for current in iter_causes(err):
        if current is target or (type(current) is type(target) and _equal(current, target)):
            return True
    return False


def _equal(current: BaseException, target: BaseException) -> bool:
    try:
        return bool(current == target)
    except (TypeError, ValueError) as e:
        get_logger("errors").debug(
            "Comparison skipped",
            error_type=type(current).__name__,
            target_type=type(target).__name__,
            reason=str(e),
        )
        return False
