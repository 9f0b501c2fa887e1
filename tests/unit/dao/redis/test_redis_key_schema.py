"""Unit tests for RedisKeySchema

Test coverage includes:

1. Key generation
   - Ensures the collection key is namespaced by the prefix when given.

2. Validation
   - Ensures non-string prefixes raise TypeError.
"""

import pytest

from linkshrink.dao.redis import RedisKeySchema


# -------------------------------
# 1. Key generation
# -------------------------------


def test_collection_key_with_prefix():
    assert RedisKeySchema(prefix='linkshrink:prod').collection_key() == 'linkshrink:prod:linkShrink_urls'


def test_collection_key_without_prefix():
    assert RedisKeySchema().collection_key() == 'linkShrink_urls'


# -------------------------------
# 2. Validation
# -------------------------------


@pytest.mark.parametrize('prefix', [42, b'linkshrink', ['linkshrink']])
def test_invalid_prefix_type(prefix):
    with pytest.raises(TypeError):
        RedisKeySchema(prefix=prefix)
