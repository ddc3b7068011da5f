"""Core abstractions for CompositeLib.

This module contains the composite base class, operation keys, reducers and
the dispatch handler that ties them together.
"""

from .composite import Composite
from .method_key import MethodKey
from .reducer import (
    Reducer,
    NULL_REDUCER,
    PROXY_INSTANCE_REDUCER,
    sum_reducer,
    max_reducer,
    min_reducer,
    all_reducer,
    any_reducer,
    tuple_reducer,
)
from .registry import EMPTY_REGISTRY, discover_reducers, freeze_reducers
from .handler import CompositeHandler
from .proxy import CompositeProxy, create_proxy, proxy_class_for

__all__ = [
    "Composite",
    "MethodKey",
    "Reducer",
    "NULL_REDUCER",
    "PROXY_INSTANCE_REDUCER",
    "sum_reducer",
    "max_reducer",
    "min_reducer",
    "all_reducer",
    "any_reducer",
    "tuple_reducer",
    "EMPTY_REGISTRY",
    "discover_reducers",
    "freeze_reducers",
    "CompositeHandler",
    "CompositeProxy",
    "create_proxy",
    "proxy_class_for",
]
