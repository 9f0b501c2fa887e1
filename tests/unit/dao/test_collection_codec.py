"""Unit tests for the link collection codec in dao/helpers.py

Test coverage includes:

1. Serialization
   - Ensures the collection is stored as a JSON array of camelCase records.
   - Ensures stored order is preserved.

2. Empty blobs
   - Ensures None and empty blobs decode to an empty collection.

3. Corrupted blobs
   - Ensures invalid JSON, non-arrays and malformed records raise CorruptedCollectionError.
"""

import json
from datetime import datetime, timedelta, UTC

import pytest

from linkshrink.models import ShortLinkModel
from linkshrink.dao.helpers import dump_collection, load_collection
from linkshrink.dao.exceptions import CorruptedCollectionError


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def links():
    now = datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)
    return [
        ShortLinkModel(
            id=str(i),
            original_url=f'https://example.com/{i}',
            shortcode=f'code{i}',
            short_url=f'https://sho.rt/code{i}',
            expires_at=now + timedelta(days=i + 1),
            created_at=now,
            clicks=i,
        )
        for i in range(3)
    ]


# -------------------------------
# 1. Serialization
# -------------------------------


def test_dump_collection_is_json_array(links):
    """Ensure the blob is a JSON array of persisted records in stored order."""
    data = json.loads(dump_collection(links))
    assert [item['shortCode'] for item in data] == ['code0', 'code1', 'code2']
    assert data[1] == links[1].to_dict()


def test_load_collection_restores_links(links):
    assert load_collection(dump_collection(links)) == links


# -------------------------------
# 2. Empty blobs
# -------------------------------


@pytest.mark.parametrize('blob', [None, '', b'', '[]'])
def test_load_empty_collection(blob):
    assert load_collection(blob) == []


# -------------------------------
# 3. Corrupted blobs
# -------------------------------


@pytest.mark.parametrize(
    'blob',
    [
        'not json',
        b'\xc3\x28',
        '{"id": "1"}',
        '"linkShrink_urls"',
        '[{"id": "1"}]',
        '[42]',
    ],
)
def test_load_corrupted_collection(blob):
    """Ensure blobs that aren't valid collections raise CorruptedCollectionError."""
    with pytest.raises(CorruptedCollectionError):
        load_collection(blob)
