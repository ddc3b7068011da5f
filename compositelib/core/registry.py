"""Reducer registry helpers for CompositeLib.

A registry is a read-only mapping from MethodKey to Reducer. It is built once,
when a composite is created, either from a mapping supplied by the caller or
by asking the target abstraction for its defaults.
"""

from collections.abc import Mapping as MappingABC
from types import MappingProxyType
from typing import Any, Dict, Mapping

from ..errors import ConfigurationError
from .method_key import MethodKey
from .reducer import Reducer


EMPTY_REGISTRY: Mapping[MethodKey, Reducer] = MappingProxyType({})


def freeze_reducers(reducers: Mapping[Any, Reducer]) -> Mapping[MethodKey, Reducer]:
    """Normalise and freeze a caller-supplied reducer mapping.

    Keys may be MethodKey instances or functions, which are converted with
    ``MethodKey.of``.

    Args:
        reducers: Mapping of operation to Reducer

    Returns:
        Read-only mapping keyed by MethodKey

    Raises:
        ConfigurationError: If a key or value has the wrong type
    """
    if not isinstance(reducers, MappingABC):
        raise ConfigurationError(
            f"reducers must be a mapping, got {type(reducers).__name__}"
        )

    frozen: Dict[MethodKey, Reducer] = {}
    for key, reducer in reducers.items():
        if not isinstance(key, MethodKey):
            if not callable(key):
                raise ConfigurationError(
                    f"reducer key must be a MethodKey or a function, got {key!r}"
                )
            key = MethodKey.of(key)
        if not isinstance(reducer, Reducer):
            raise ConfigurationError(
                f"reducer for {key} must be a Reducer, got {type(reducer).__name__}"
            )
        frozen[key] = reducer
    return MappingProxyType(frozen)


def discover_reducers(target: type, accessor: str) -> Mapping[MethodKey, Reducer]:
    """Ask a target abstraction for its default reducers.

    Calls ``target.<accessor>()`` without an instance. A missing accessor,
    any exception it raises, or a result that is not a valid reducer mapping
    all give an empty registry; discovery never fails.

    Args:
        target: The target abstraction class
        accessor: Name of the static accessor

    Returns:
        Read-only mapping keyed by MethodKey
    """
    try:
        return freeze_reducers(getattr(target, accessor)())
    except Exception:
        return EMPTY_REGISTRY
