"""In-memory implementation of LinkCollectionBaseDAO

The collection is kept as the same serialized blob the other data stores
persist, so records go through the same encode/decode path.
"""

from beartype import beartype

from linkshrink.models import ShortLinkModel
from linkshrink.dao.base import LinkCollectionBaseDAO
from linkshrink.dao.helpers import dump_collection, load_collection


class LinkCollectionMemoryDAO(LinkCollectionBaseDAO):
    """Process-local link collection.

    Attributes:
        blob (str | None):
            Serialized collection, None until the first save.

    Example:
        >>> dao = LinkCollectionMemoryDAO()
        >>> dao.load()
        []
    """

    def __init__(self, blob: str | None = None):
        self.blob = blob

    def load(self, **kwargs) -> list[ShortLinkModel]:
        return load_collection(self.blob)

    @beartype
    def save(self, links: list[ShortLinkModel], **kwargs) -> 'LinkCollectionMemoryDAO':
        self.blob = dump_collection(links)
        return self
