"""Unit tests for the LinkEntryModel dataclass in link_entry_model.py.

Test coverage includes:

1. Model creation
   - Ensures instances can be created with valid field values.

2. Equality semantics
   - Confirms that models with identical data compare equal and differing data doesn't.

3. Immutability
   - Verifies that all fields are frozen and cannot be reassigned after creation.
"""

from dataclasses import FrozenInstanceError

import pytest

from linkshortener.models import LinkEntryModel


# -------------------------------------------------
# 1. Model creation
# -------------------------------------------------


def test_valid_link_entry_model_creation():
    """Ensure LinkEntryModel can be created with valid data."""
    entry = LinkEntryModel(short_id='k3x9q0', long_url='http://localhost:3000/page1')

    assert entry.short_id == 'k3x9q0'
    assert entry.long_url == 'http://localhost:3000/page1'


# -------------------------------------------------
# 2. Equality semantics
# -------------------------------------------------


def test_link_entry_model_equality():
    """Models with identical data should compare equal."""
    left = LinkEntryModel(short_id='k3x9q0', long_url='http://localhost:3000/page1')
    right = LinkEntryModel(short_id='k3x9q0', long_url='http://localhost:3000/page1')

    assert left == right
    assert hash(left) == hash(right)


@pytest.mark.parametrize(
    'right_parameters',
    [
        {'short_id': 'zzzzzz', 'long_url': 'http://localhost:3000/page1'},
        {'short_id': 'k3x9q0', 'long_url': 'http://localhost:3000/page2'},
    ],
)
def test_link_entry_model_inequality(right_parameters):
    """Models with differing data should not compare equal."""
    left = LinkEntryModel(short_id='k3x9q0', long_url='http://localhost:3000/page1')
    assert left != LinkEntryModel(**right_parameters)


# -------------------------------------------------
# 3. Immutability
# -------------------------------------------------


@pytest.mark.parametrize('field, new_value', [('short_id', 'zzzzzz'), ('long_url', 'http://localhost:3000/page2')])
def test_link_entry_model_immutability(field, new_value):
    """Attempting to modify fields should raise FrozenInstanceError."""
    entry = LinkEntryModel(short_id='k3x9q0', long_url='http://localhost:3000/page1')

    with pytest.raises(FrozenInstanceError):
        setattr(entry, field, new_value)
