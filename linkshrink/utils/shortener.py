"""Shortcode generation utility

This module provides helpers for generating random short codes and for
validating user-chosen aliases against the same URL-safe format.

Functions:
    generate_shortcode(length=6) -> str:
        Generate a random Base62 code suitable for use as a URL slug.
    is_valid_alias(code) -> bool:
        Check a custom alias against the allowed format.

Example:
    >>> from linkshrink.utils import generate_shortcode, is_valid_alias
    >>> len(generate_shortcode())
    6
    >>> is_valid_alias('my-link_01')
    True
    >>> is_valid_alias('no')
    False
"""

import re
import random
import string

from linkshrink.constants import Shortcode


ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
BASE = len(ALPHABET)  # 26 uppercase + 26 lowercase + 10 digits

ALIAS_PATTERN = re.compile(r'^[A-Za-z0-9_-]+$')


def generate_shortcode(length: int = Shortcode.GENERATED_LENGTH) -> str:
    """Generate a random Base62 shortcode.

    Every character is drawn independently and uniformly from ALPHABET.

    Args:
        length (int, optional):
            Number of characters. Defaults to 6.

    Returns:
        str: A random alphanumeric code.

    NOTE:
        - Uses the non-cryptographic `random` module. Codes are identifiers, not secrets.
        - No collision avoidance happens here. Callers retry until the code is unused.
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    return ''.join(random.choices(ALPHABET, k=length))  # noqa: S311


def is_valid_alias(code: str) -> bool:
    """Check whether `code` can be used as a custom alias

    Returns:
        bool: True iff `code` only holds letters, digits, '-' or '_'
              and is 3 to 20 characters long.
    """
    if not isinstance(code, str):
        return False
    return (
        ALIAS_PATTERN.fullmatch(code) is not None
        and Shortcode.ALIAS_MIN_LENGTH <= len(code) <= Shortcode.ALIAS_MAX_LENGTH
    )
