"""Dispatch handler for CompositeLib.

The CompositeHandler is the single entry point every call on a composite
handle is routed through. Structural operations (add/remove) manage the
child list; every other operation is invoked on each child in turn and the
results are folded with the reducer registered for that operation.
"""

import inspect
import warnings
from typing import Any, Dict, List, Mapping, Optional, Tuple, TypeVar

from ..config import CompositeConfig
from ..errors import ConfigurationError, InvalidTargetError
from .composite import Composite
from .method_key import MethodKey
from .reducer import NULL_REDUCER, PROXY_INSTANCE_REDUCER, Reducer
from .registry import discover_reducers, freeze_reducers


class CompositeHandler:
    """Handles every operation invoked on one composite node.

    The handler owns the node's state: the ordered list of children and the
    reducer registry. Children are held by plain reference and may belong
    to several composites at once.

    The handler is not thread-safe. Concurrent add/remove/delegate calls on
    the same node need external synchronization.
    """

    def __init__(self, target: type,
                 reducers: Optional[Mapping[Any, Reducer]] = None,
                 config: Optional[CompositeConfig] = None):
        """Create a handler for a target abstraction.

        Args:
            target: Class derived from Composite
            reducers: Explicit reducer mapping. ``None`` means "not provided"
                and triggers discovery through the target's static accessor;
                an empty mapping disables discovery.
            config: Conventions to use (defaults to CompositeConfig())

        Raises:
            InvalidTargetError: If target is not derived from Composite
            ConfigurationError: If config or reducers are invalid
        """
        if not (isinstance(target, type) and issubclass(target, Composite)):
            raise InvalidTargetError(
                f"target is not derived from Composite: {target!r}"
            )

        self.config = config or CompositeConfig()
        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.target = target
        self._children: List[Any] = []

        if reducers is None:
            self._reducers = discover_reducers(target, self.config.reducers_accessor)
        else:
            self._reducers = freeze_reducers(reducers)
            self._warn_unreachable(self._reducers)

    def _warn_unreachable(self, reducers: Mapping[MethodKey, Reducer]) -> None:
        # stacklevel 3 points at whoever constructed the handler
        for key in reducers:
            if self.config.is_structural(key.name):
                warnings.warn(
                    f"Reducer for structural operation {key} is never used",
                    RuntimeWarning,
                    stacklevel=3
                )
                continue

            declared = inspect.getattr_static(self.target, key.name, None)
            if not inspect.isfunction(declared):
                warnings.warn(
                    f"Reducer for {key} does not match any method of "
                    f"{self.target.__name__}",
                    RuntimeWarning,
                    stacklevel=3
                )
            elif MethodKey.of(declared) != key:
                warnings.warn(
                    f"Reducer for {key} does not match the signature of "
                    f"{self.target.__name__}.{MethodKey.of(declared)}",
                    RuntimeWarning,
                    stacklevel=3
                )

    def invoke(self, proxy: Any, method: MethodKey, args: Tuple[Any, ...],
               kwargs: Optional[Dict[str, Any]] = None) -> Any:
        """Handle one operation invoked on the composite handle.

        Args:
            proxy: The composite handle the call was made on
            method: Identity of the invoked operation
            args: Positional arguments of the call
            kwargs: Keyword arguments of the call

        Returns:
            None for add, a bool for remove, otherwise the folded child
            results (or ``proxy`` for PROXY_INSTANCE_REDUCER)

        Raises:
            Whatever the first failing child raised, unchanged
        """
        kwargs = kwargs or {}

        if self._matches(method, self.config.add_method, args, kwargs):
            self._children.append(self._single_argument(args, kwargs))
            return None
        if self._matches(method, self.config.remove_method, args, kwargs):
            return self._remove(self._single_argument(args, kwargs))

        reducer = self._reducers.get(method, NULL_REDUCER)

        # Children are called directly from this frame so that their own
        # exceptions reach the caller unchanged. Iterating a snapshot keeps
        # children added during delegation out of this call.
        result = reducer.identity
        for child in list(self._children):
            result = reducer.merger(result, getattr(child, method.name)(*args, **kwargs))

        if reducer is PROXY_INSTANCE_REDUCER:
            return proxy
        return result

    def _remove(self, element: Any) -> bool:
        try:
            self._children.remove(element)
        except ValueError:
            return False
        return True

    def _matches(self, method: MethodKey, name: str,
                 args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> bool:
        return (method.name == name
                and method.parameter_count == 1
                and _is_element_type(method.parameter_types[0])
                and len(args) + len(kwargs) == 1)

    @staticmethod
    def _single_argument(args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> Any:
        if args:
            return args[0]
        return next(iter(kwargs.values()))

    # Introspection methods for testing and debugging

    @property
    def children(self) -> Tuple[Any, ...]:
        """Snapshot of the current children, in insertion order."""
        return tuple(self._children)

    @property
    def reducers(self) -> Mapping[MethodKey, Reducer]:
        """The read-only reducer registry bound to this node."""
        return self._reducers

    def get_reducer(self, method: MethodKey) -> Reducer:
        """Return the reducer a delegated call to ``method`` would use."""
        return self._reducers.get(method, NULL_REDUCER)

    def __repr__(self) -> str:
        return (f"CompositeHandler({self.target.__name__}, "
                f"children={len(self._children)}, reducers={len(self._reducers)})")


def _is_element_type(annotation: Any) -> bool:
    """Check if a parameter annotation denotes the composite's element type."""
    if isinstance(annotation, (TypeVar, str)) or annotation is object:
        return True
    return isinstance(annotation, type) and issubclass(annotation, Composite)
