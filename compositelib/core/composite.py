"""Composite abstraction for CompositeLib.

A target abstraction derives from Composite and declares its business
operations as abstract methods. The dispatch handler implements all of them
at once, so neither leaves nor composites need hand-written delegation code.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar


E = TypeVar("E", bound="Composite")


class Composite(ABC, Generic[E]):
    """Base class for every abstraction that can be composed.

    Example:
        class Contact(Composite["Contact"]):
            @abstractmethod
            def count(self) -> int:
                pass

            @staticmethod
            def get_reducers():
                return {MethodKey.of(Contact.count): sum_reducer()}

    Leaves subclass the abstraction and implement the business methods;
    their ``add``/``remove`` usually raise or do nothing. Composites are not
    written by hand at all, see ``compositelib.compose``.
    """

    @abstractmethod
    def add(self, element: E) -> None:
        """Append a child to this composite."""
        pass

    @abstractmethod
    def remove(self, element: E) -> bool:
        """Remove the first child equal to ``element``.

        Returns:
            True if a child was removed, False otherwise
        """
        pass
