#!/usr/bin/env python3
"""
Distribution lists built from contacts with CompositeLib.

This example demonstrates:
- Declaring an abstraction with default reducers
- Nesting composites inside composites
- Fluent calls that return the composite itself
- Errors raised by a child reaching the caller unchanged
"""

import sys
from abc import abstractmethod
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from compositelib import (
    Composite,
    MethodKey,
    PROXY_INSTANCE_REDUCER,
    compose,
    get_handler,
    sum_reducer,
)


class Contact(Composite["Contact"]):
    """Anything that can receive a message."""

    @abstractmethod
    def send_message(self, message: str) -> None:
        pass

    @abstractmethod
    def count(self) -> int:
        pass

    @abstractmethod
    def tag(self, label: str) -> "Contact":
        pass

    @staticmethod
    def get_reducers():
        return {
            MethodKey.of(Contact.count): sum_reducer(),
            MethodKey.of(Contact.tag): PROXY_INSTANCE_REDUCER,
        }


class Person(Contact):
    """A single recipient."""

    def __init__(self, email: str):
        self.email = email
        self.labels = []

    def add(self, element: Contact) -> None:
        raise TypeError("a person has no members")

    def remove(self, element: Contact) -> bool:
        return False

    def send_message(self, message: str) -> None:
        if not self.email:
            raise ValueError("person has no email address")
        print(f"  to {self.email}: {message}")

    def count(self) -> int:
        return 1

    def tag(self, label: str) -> Contact:
        self.labels.append(label)
        return self

    def __repr__(self) -> str:
        return f"Person({self.email!r})"


def main():
    """Build a small organisation and message it."""
    engineering = compose(Contact, children=[
        Person("ada@example.com"),
        Person("linus@example.com"),
    ])
    sales = compose(Contact, children=[Person("grace@example.com")])

    everyone = compose(Contact)
    everyone.add(engineering)
    everyone.add(sales)
    everyone.add(Person("ceo@example.com"))

    print(f"Recipients: {everyone.count()}")
    print("Sending announcement:")
    everyone.send_message("Quarterly results are out")

    # tag() returns the composite itself, so calls chain
    everyone.tag("all-hands").tag("q3")
    print(f"Top-level members: {list(get_handler(everyone).children)}")

    # The first failing child stops delegation; its own error reaches us
    everyone.add(Person(""))
    try:
        everyone.send_message("This one fails at the end")
    except ValueError as e:
        print(f"Delivery stopped: {e}")

    everyone.remove(sales)
    print(f"Recipients after removing sales: {everyone.count()}")


if __name__ == "__main__":
    print("CompositeLib - Contacts Example")
    print("=" * 50)
    main()
