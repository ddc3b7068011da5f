#!/usr/bin/env python3
"""
Test the shipped examples to ensure they keep working.
"""

import importlib.util
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from compositelib import get_handler


EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


@pytest.fixture
def contacts():
    """Load examples/contacts.py as a module."""
    spec = importlib.util.spec_from_file_location(
        "contacts_example", EXAMPLES_DIR / "contacts.py"
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_contacts_example_runs(contacts, capsys):
    """The walkthrough prints the expected counts and failure."""
    contacts.main()
    output = capsys.readouterr().out

    assert "Recipients: 4" in output
    assert "to ada@example.com: Quarterly results are out" in output
    assert "Delivery stopped: person has no email address" in output
    assert "Recipients after removing sales: 4" in output


def test_contacts_defaults(contacts):
    """The Contact abstraction supplies count and tag reducers."""
    ada = contacts.Person("ada@example.com")
    team = contacts.compose(contacts.Contact, children=[ada])

    assert team.count() == 1
    assert team.tag("x") is team
    assert ada.labels == ["x"]
    assert get_handler(team).children == (ada,)


def test_person_cannot_have_members(contacts):
    with pytest.raises(TypeError):
        contacts.Person("a@example.com").add(contacts.Person("b@example.com"))
