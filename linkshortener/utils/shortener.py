"""Short identifier generation utility

This module provides helper functions for generating short, random,
non-sequential identifiers for stored links.

Functions:
    generate_short_id(length=6, alphabet=ALPHABET):
        Generate a random identifier suitable for use as a URL slug.

    generate_unique_short_id(taken, length=6, collisions_before_growth=32):
        Regenerate identifiers until one is not in `taken`.

Example:
    >>> from linkshortener.utils import generate_short_id
    >>> generate_short_id()
    'k3x9q0'
"""

import secrets
import string
import logging
from collections.abc import Container

from linkshortener.utils.constants import DEFAULT_SHORT_ID_LENGTH, COLLISIONS_BEFORE_GROWTH


logger = logging.getLogger(__name__)

ALPHABET = string.digits + string.ascii_lowercase
BASE = len(ALPHABET)  # base36: 10 digits + 26 lowercase letters


def generate_short_id(length: int = DEFAULT_SHORT_ID_LENGTH, alphabet: str = ALPHABET) -> str:
    """Generate a random fixed-length identifier.

    Every character is drawn independently and uniformly from `alphabet`
    using the `secrets` CSPRNG, so identifiers are neither sequential nor
    predictable from previously issued ones.

    Args:
        length (int, optional):
            Exact length of the resulting identifier.
            Defaults to 6.

        alphabet (str, optional):
            Characters to draw from.
            Defaults to base36 ([0-9a-z]).

    Returns:
        str: A random alphanumeric identifier.

    Example:
        >>> generate_short_id(length=8)
        'p0c7zz1m'
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')
    if not alphabet:
        raise ValueError('Alphabet must be a non-empty string.')

    return ''.join(secrets.choice(alphabet) for _ in range(length))


def generate_unique_short_id(
    taken: Container[str],
    length: int = DEFAULT_SHORT_ID_LENGTH,
    collisions_before_growth: int = COLLISIONS_BEFORE_GROWTH,
) -> str:
    """Generate a random identifier which is not contained in `taken`.

    Candidates are drawn with `generate_short_id()` and rejected while they
    collide with `taken`. The loop never gives up: after
    `collisions_before_growth` consecutive collisions at the current length
    the identifier grows by one character, which multiplies the free space
    by 36 and keeps the loop live even for a nearly full table.

    Args:
        taken (Container[str]):
            Identifiers already in use (anything supporting `in`).

        length (int, optional):
            Starting identifier length. Defaults to 6.

        collisions_before_growth (int, optional):
            Consecutive collisions tolerated before growing the length.
            Defaults to 32.

    Returns:
        str: An identifier not contained in `taken`.

    Example:
        >>> generate_unique_short_id({'abc123'})
        'q1w2e3'
    """
    if collisions_before_growth <= 0:
        raise ValueError(f'Collisions before growth must be a positive integer (given value: {collisions_before_growth}).')

    collisions = 0
    while True:
        candidate = generate_short_id(length)
        if candidate not in taken:
            return candidate

        collisions += 1
        logger.debug('Short id collision.', extra={'shortId': candidate, 'collisions': collisions})
        if collisions >= collisions_before_growth:
            length += 1
            collisions = 0
            logger.warning('Short id space looks crowded. Growing short id length.', extra={'length': length})
