"""Composite handle generation for CompositeLib.

A composite handle is an instance of a class generated on the fly as a
subclass of the target abstraction. Every public instance method of the
target is replaced by a forwarder that routes the call, with its precomputed
MethodKey, into CompositeHandler.invoke. The handle therefore passes
``isinstance(handle, Target)`` and can itself be added to other composites.
"""

import functools
import inspect
import types
from typing import Any, Callable, Dict, Iterator, Tuple

from .handler import CompositeHandler
from .method_key import MethodKey


HANDLER_ATTRIBUTE = "_composite_handler"


class CompositeProxy:
    """Mixin placed first in the bases of every generated handle class.

    Handles compare and hash by identity, whatever the target abstraction
    defines, so that ``remove`` of a nested composite removes exactly that
    composite.
    """

    def __init__(self, handler: CompositeHandler):
        object.__setattr__(self, HANDLER_ATTRIBUTE, handler)

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return object.__hash__(self)

    def __repr__(self) -> str:
        handler = getattr(self, HANDLER_ATTRIBUTE)
        return f"Composite[{handler.target.__name__}](children={len(handler.children)})"


def _make_forwarder(func: Callable, key: MethodKey) -> Callable:
    """Wrap a target method so that calls go to the handler."""

    @functools.wraps(func)
    def forwarder(self, *args, **kwargs):
        return getattr(self, HANDLER_ATTRIBUTE).invoke(self, key, args, kwargs)

    # wraps() copies the abstract flag of the declaration
    forwarder.__isabstractmethod__ = False
    return forwarder


def _interceptable_methods(target: type, intercept_private: bool,
                           reducers_accessor: str) -> Iterator[Tuple[str, Callable]]:
    """Yield (name, function) for every instance method to forward."""
    for name in dir(target):
        if name.startswith("__") and name.endswith("__"):
            continue
        if name.startswith("_") and not intercept_private:
            continue
        if name == reducers_accessor:
            continue
        # Static and class methods, properties and other descriptors stay
        raw = inspect.getattr_static(target, name)
        if inspect.isfunction(raw):
            yield name, raw


@functools.lru_cache(maxsize=None)
def proxy_class_for(target: type, intercept_private: bool = False,
                    reducers_accessor: str = "get_reducers") -> type:
    """Build (once per target and options) the handle class for a target.

    Args:
        target: Class derived from Composite
        intercept_private: Also forward single-underscore methods
        reducers_accessor: Name of the default reducers accessor, never
            forwarded

    Returns:
        Subclass of ``CompositeProxy`` and ``target``
    """
    namespace: Dict[str, Any] = {
        name: _make_forwarder(func, MethodKey.of(func))
        for name, func in _interceptable_methods(target, intercept_private,
                                                 reducers_accessor)
    }
    namespace["__module__"] = target.__module__
    namespace["__qualname__"] = f"Composite{target.__qualname__}"

    cls = types.new_class(
        f"Composite{target.__name__}",
        (CompositeProxy, target),
        exec_body=lambda ns: ns.update(namespace),
    )
    # Abstract properties and the like cannot be forwarded; accessing one on
    # a handle behaves as on any other subclass that does not override it
    cls.__abstractmethods__ = frozenset()
    return cls


def create_proxy(handler: CompositeHandler) -> Any:
    """Create the composite handle backed by ``handler``."""
    config = handler.config
    cls = proxy_class_for(handler.target, config.intercept_private,
                          config.reducers_accessor)
    return cls(handler)
