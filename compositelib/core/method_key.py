"""Operation identity for CompositeLib.

A MethodKey identifies an operation by its name and the ordered types of its
formal parameters. Return type and declaring class are deliberately left out,
so a key built from the abstraction matches the override on any subclass.
"""

import inspect
import typing
from dataclasses import dataclass
from typing import Any, Callable, Tuple


_SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


@dataclass(frozen=True)
class MethodKey:
    """Immutable (name, parameter types) pair used as a reducer lookup key."""

    name: str
    parameter_types: Tuple[Any, ...] = ()

    @classmethod
    def of(cls, func: Callable) -> 'MethodKey':
        """Build the key for a function declared on an abstraction.

        The leading ``self`` parameter is dropped. Unannotated parameters
        are typed as ``object``; annotations are resolved with
        ``typing.get_type_hints`` where possible and kept as written
        otherwise.

        Args:
            func: Function (usually ``Abstraction.method``)

        Returns:
            MethodKey for the function
        """
        func = inspect.unwrap(func)
        try:
            hints = typing.get_type_hints(func)
        except Exception:
            hints = {}

        parameters = list(inspect.signature(func).parameters.values())
        if parameters and parameters[0].name in ("self", "cls"):
            parameters = parameters[1:]

        types = []
        for param in parameters:
            if param.kind in _SKIPPED_KINDS:
                continue
            annotation = hints.get(param.name, param.annotation)
            if annotation is inspect.Parameter.empty:
                annotation = object
            types.append(annotation)

        return cls(func.__name__, tuple(types))

    @property
    def parameter_count(self) -> int:
        """Number of formal parameters, excluding ``self``."""
        return len(self.parameter_types)

    def __str__(self) -> str:
        names = ", ".join(_type_name(t) for t in self.parameter_types)
        return f"{self.name}({names})"


def _type_name(annotation: Any) -> str:
    if isinstance(annotation, type):
        return annotation.__name__
    return str(annotation)
