"""Configuration system for CompositeLib.

This module defines how users adjust the conventions the dispatch handler
relies on: which operations are structural and where default reducers are
discovered.
"""

from dataclasses import dataclass
from typing import List


DEFAULT_REDUCERS_ACCESSOR = "get_reducers"


@dataclass
class CompositeConfig:
    """Conventions used by a CompositeHandler.

    The defaults match the ``Composite`` base class, so most users never
    need to create one of these.
    """

    # Static, zero-argument accessor returning the default reducers
    reducers_accessor: str = DEFAULT_REDUCERS_ACCESSOR

    # Structural operations, handled by the composite itself
    add_method: str = "add"
    remove_method: str = "remove"

    # Also forward single-underscore methods (dunders are never forwarded)
    intercept_private: bool = False

    @classmethod
    def default(cls) -> 'CompositeConfig':
        """Create the configuration matching the Composite base class."""
        return cls()

    def is_structural(self, name: str) -> bool:
        """Check if an operation name is one of the structural operations."""
        return name in (self.add_method, self.remove_method)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        for label, value in (
            ("reducers_accessor", self.reducers_accessor),
            ("add_method", self.add_method),
            ("remove_method", self.remove_method),
        ):
            if not isinstance(value, str) or not value.isidentifier():
                errors.append(f"{label} must be a valid identifier, got {value!r}")

        if self.add_method == self.remove_method:
            errors.append("add_method and remove_method must differ")

        if self.reducers_accessor in (self.add_method, self.remove_method):
            errors.append("reducers_accessor cannot name a structural operation")

        return errors
