"""High-level API for CompositeLib.

This module provides the functional entry points most users need: building a
composite handle for an abstraction and looking behind a handle.
"""

import warnings
from typing import Any, Iterable, Mapping, Optional, Type, TypeVar

from .config import CompositeConfig
from .core.handler import CompositeHandler
from .core.method_key import MethodKey
from .core.proxy import HANDLER_ATTRIBUTE, CompositeProxy, create_proxy
from .core.reducer import Reducer


T = TypeVar("T")


def compose(target: Type[T],
            reducers: Optional[Mapping[Any, Reducer]] = None,
            config: Optional[CompositeConfig] = None,
            children: Iterable[Any] = ()) -> T:
    """Create a composite of the given abstraction.

    Args:
        target: Abstraction class derived from Composite
        reducers: Reducers by operation; ``None`` to use the abstraction's
            ``get_reducers()`` defaults if it declares them
        config: Optional CompositeConfig
        children: Initial children, added in order

    Returns:
        A handle that is an instance of ``target``

    Raises:
        InvalidTargetError: If target is not derived from Composite
        ConfigurationError: If config or reducers are invalid

    Example:
        >>> team = compose(Contact)
        >>> team.add(Person("alice@example.com"))
        >>> team.count()
        1
    """
    # Report construction warnings against the caller of compose()
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        handler = CompositeHandler(target, reducers, config)
    for warning in caught:
        warnings.warn(warning.message, warning.category, stacklevel=2)

    handle = create_proxy(handler)
    # Initial children go straight to the structural add, whatever it is named
    add = MethodKey(handler.config.add_method, (object,))
    for child in children:
        handler.invoke(handle, add, (child,))
    return handle


def is_composite(obj: Any) -> bool:
    """Check if an object is a handle created by ``compose``."""
    return isinstance(obj, CompositeProxy)


def get_handler(handle: Any) -> CompositeHandler:
    """Return the CompositeHandler behind a composite handle.

    Useful for testing and debugging, e.g. to inspect ``children``.

    Raises:
        TypeError: If ``handle`` was not created by ``compose``
    """
    if not is_composite(handle):
        raise TypeError(f"{handle!r} is not a composite handle")
    return getattr(handle, HANDLER_ATTRIBUTE)
