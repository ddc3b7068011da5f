"""Reduction rules for CompositeLib.

A Reducer folds the results returned by each child into the single value the
composite returns. It is the composite counterpart of an aggregating data
collector: an identity value plus a binary merge function.
"""

import operator
from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True, eq=False)
class Reducer:
    """Identity value and ``(accumulator, next) -> accumulator`` merger.

    Reducers compare by identity, which is what the two sentinels below
    rely on. The fold is only well defined for mergers whose behaviour
    matches the child order (associative ones, or ones written for
    insertion order).
    """

    identity: Any
    merger: Callable[[Any, Any], Any]

    def reduce(self, results) -> Any:
        """Fold an iterable of results, left to right, from the identity."""
        accumulated = self.identity
        for result in results:
            accumulated = self.merger(accumulated, result)
        return accumulated

    def __repr__(self) -> str:
        name = getattr(self.merger, "__name__", repr(self.merger))
        return f"Reducer(identity={self.identity!r}, merger={name})"


def _ignore(accumulated: Any, result: Any) -> None:
    return None


# Used when no reducer is registered for an operation
NULL_REDUCER = Reducer(None, _ignore)

# Tells the handler to return the composite handle itself (fluent calls)
PROXY_INSTANCE_REDUCER = Reducer(None, _ignore)


def sum_reducer(identity: Any = 0) -> Reducer:
    """Sum child results, e.g. total counts or sizes."""
    return Reducer(identity, operator.add)


def _max_merger(accumulated: Any, result: Any) -> Any:
    if result is None:
        return accumulated
    if accumulated is None:
        return result
    return max(accumulated, result)


def _min_merger(accumulated: Any, result: Any) -> Any:
    if result is None:
        return accumulated
    if accumulated is None:
        return result
    return min(accumulated, result)


def max_reducer() -> Reducer:
    """Largest child result, ignoring None. None for an empty composite."""
    return Reducer(None, _max_merger)


def min_reducer() -> Reducer:
    """Smallest child result, ignoring None. None for an empty composite."""
    return Reducer(None, _min_merger)


def all_reducer() -> Reducer:
    """True if every child returned a truthy value (vacuously True)."""
    return Reducer(True, lambda accumulated, result: accumulated and bool(result))


def any_reducer() -> Reducer:
    """True if at least one child returned a truthy value."""
    return Reducer(False, lambda accumulated, result: accumulated or bool(result))


def tuple_reducer() -> Reducer:
    """Collect child results into a tuple, in child order.

    A tuple keeps the shared identity returned by an empty composite
    immutable.
    """
    return Reducer((), lambda accumulated, result: accumulated + (result,))
