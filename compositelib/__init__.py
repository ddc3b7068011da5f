"""CompositeLib - Composite pattern without delegation boilerplate.

CompositeLib builds composites of any abstraction derived from ``Composite``.
Calls on a composite are fanned out to every child and the per-child results
are merged with a reducer registered for that operation:

    from compositelib import Composite, MethodKey, compose, sum_reducer

    team = compose(Contact, {MethodKey.of(Contact.count): sum_reducer()})
    team.add(alice)
    team.add(bob)
    team.count()        # alice.count() + bob.count()

Operations without a reducer return None; operations registered with
PROXY_INSTANCE_REDUCER return the composite itself for fluent chaining.
"""

__version__ = "0.1.0"

from .errors import CompositeError, InvalidTargetError, ConfigurationError
from .config import CompositeConfig
from .core import (
    Composite,
    MethodKey,
    Reducer,
    NULL_REDUCER,
    PROXY_INSTANCE_REDUCER,
    sum_reducer,
    max_reducer,
    min_reducer,
    all_reducer,
    any_reducer,
    tuple_reducer,
    CompositeHandler,
)
from .api import compose, is_composite, get_handler

__all__ = [
    "__version__",
    # Errors
    "CompositeError",
    "InvalidTargetError",
    "ConfigurationError",
    # Config
    "CompositeConfig",
    # Core
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
    "CompositeHandler",
    # API
    "compose",
    "is_composite",
    "get_handler",
]
