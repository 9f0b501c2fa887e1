"""Unit tests for shortcode helpers in shortener.py.

Test coverage includes:

1. Basic functionality
   - Ensures generate_shortcode() returns a 6-character string by default.

2. Output format
   - All characters must belong to the Base62 alphabet.

3. Length parameter
   - The 'length' argument is respected; invalid lengths raise errors.

4. Randomness sanity
   - Consecutive codes are not all identical; a seeded generator is reproducible.

5. Alias validation
   - Accepts 3-20 characters of letters, digits, '-' and '_'.
   - Rejects shorter/longer strings, other characters and non-strings.
"""

import random
import string

import pytest

from linkshrink.utils import generate_shortcode, is_valid_alias
from linkshrink.utils.shortener import ALPHABET, BASE


# -------------------------------
# 1. Basic functionality
# -------------------------------


def test_generate_shortcode_returns_six_characters():
    """Ensure generate_shortcode() returns a 6-character string by default."""
    result = generate_shortcode()
    assert isinstance(result, str)
    assert len(result) == 6


# -------------------------------
# 2. Output format
# -------------------------------


def test_alphabet_is_base62():
    """Ensure the alphabet holds exactly the 62 alphanumeric characters."""
    assert BASE == 62
    assert set(ALPHABET) == set(string.ascii_letters + string.digits)


def test_generate_shortcode_is_base62_safe():
    """Ensure output contains only Base62 characters."""
    alphabet = set(string.ascii_letters + string.digits)
    for _ in range(200):
        assert set(generate_shortcode()) <= alphabet


# -------------------------------
# 3. Length parameter
# -------------------------------


@pytest.mark.parametrize('length', [1, 6, 10, 32])
def test_generate_shortcode_respects_length(length):
    """Ensure output has exactly the requested length."""
    assert len(generate_shortcode(length)) == length


@pytest.mark.parametrize('length, error', [(0, ValueError), (-3, ValueError), (6.0, TypeError), ('6', TypeError), (True, TypeError)])
def test_generate_shortcode_with_invalid_length(length, error):
    """Ensure invalid lengths raise ValueError or TypeError."""
    with pytest.raises(error):
        generate_shortcode(length)


# -------------------------------
# 4. Randomness sanity
# -------------------------------


def test_generate_shortcode_varies():
    """Ensure generated codes are not constant."""
    assert len({generate_shortcode() for _ in range(50)}) > 1


def test_generate_shortcode_uses_random_module():
    """Ensure codes come from the (seedable) random module."""
    random.seed(1234)
    first = generate_shortcode()
    random.seed(1234)
    second = generate_shortcode()
    assert first == second


# -------------------------------
# 5. Alias validation
# -------------------------------


@pytest.mark.parametrize('alias', ['abc', 'a' * 20, 'my-link_01', 'ABC-xyz_123', '---', '2025'])
def test_valid_aliases(alias):
    """Ensure well-formed aliases are accepted."""
    assert is_valid_alias(alias)


@pytest.mark.parametrize('alias', ['', 'ab', 'a' * 21, 'has space', 'dot.ted', 'slash/ed', 'émoji', 'abc\n', None, 123])
def test_invalid_aliases(alias):
    """Ensure too short, too long, non URL-safe or non-string aliases are rejected."""
    assert not is_valid_alias(alias)
