"""Shortcode generation utility

This module provides a helper function for generating short, random,
fixed-length identifiers for links.

Functions:
    generate_shortcode(length=8):
        Generate a random Base62 string suitable for use as a URL slug.

Example:
    >>> from linkshortener.utils import generate_shortcode
    >>> generate_shortcode()
    'q7fEmOj2'
"""

import secrets
import string

from linkshortener.constants import Shortcode


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
BASE = len(ALPHABET)  # 26 lowercase + 26 uppercase + 10 digits


def generate_shortcode(length: int = Shortcode.LENGTH) -> str:
    """Generate a random, fixed-length Base62 identifier.

    Every character is drawn independently and uniformly from the 62-symbol
    alphabet using the `secrets` module, so identifiers are neither sequential
    nor predictable from previously issued ones.

    Args:
        length (int, optional):
            Number of characters in the identifier, between
            Shortcode.MIN_LENGTH and Shortcode.MAX_LENGTH.
            Defaults to Shortcode.LENGTH (8).

    Returns:
        str: A random alphanumeric identifier.

    Raises:
        TypeError: If length is not an integer.
        ValueError: If length is outside the allowed range.

    NOTE:
        - Uniqueness is NOT guaranteed. With 62**8 possible values collisions
          are improbable, but callers that need uniqueness must check the
          store and retry (see LinkEngine).
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if not Shortcode.MIN_LENGTH <= length <= Shortcode.MAX_LENGTH:
        raise ValueError(
            f'Length must be between {Shortcode.MIN_LENGTH} and {Shortcode.MAX_LENGTH} (given value: {length}).'
        )

    return ''.join(secrets.choice(ALPHABET) for _ in range(length))
