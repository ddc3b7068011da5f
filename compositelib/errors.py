"""Exception types for CompositeLib.

Only construction problems are represented here. Errors raised by children
during a delegated call are never wrapped: the caller receives the child's
own exception object.
"""


class CompositeError(Exception):
    """Base class for all CompositeLib errors."""
    pass


class InvalidTargetError(CompositeError, TypeError):
    """Raised when a target type is not derived from Composite."""
    pass


class ConfigurationError(CompositeError, ValueError):
    """Raised when a CompositeConfig or a reducer mapping is invalid."""
    pass
