"""Serialization of the link collection blob shared by all DAO implementations

The collection is persisted as a single JSON array of camelCase link records.

Functions:
    dump_collection(links) -> str
        Serialize link records into the persisted JSON blob.
    load_collection(blob) -> list[ShortLinkModel]
        Deserialize the persisted JSON blob. None or empty blobs mean an empty collection.

Example:
    >>> load_collection(None)
    []
    >>> load_collection(dump_collection([link])) == [link]
    True
"""

import json
from collections.abc import Iterable

from linkshrink.models import ShortLinkModel
from linkshrink.dao.exceptions import CorruptedCollectionError


def dump_collection(links: Iterable[ShortLinkModel]) -> str:
    return json.dumps([link.to_dict() for link in links])


def load_collection(blob: str | bytes | None) -> list[ShortLinkModel]:
    """Deserialize the persisted collection

    Raises:
        CorruptedCollectionError:
            If the blob is not JSON, not a JSON array, or holds malformed records.
    """
    if not blob:
        return []

    try:
        data = json.loads(blob)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CorruptedCollectionError('Stored link collection is not valid JSON.') from e

    if not isinstance(data, list):
        raise CorruptedCollectionError(f'Stored link collection must be a JSON array (given type: {type(data).__name__}).')

    try:
        return [ShortLinkModel.from_dict(item) for item in data]
    except (KeyError, ValueError, TypeError, AttributeError) as e:
        raise CorruptedCollectionError(f'Stored link collection holds a malformed record ({e!r}).') from e
