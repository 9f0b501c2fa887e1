from linkshrink.dao.base import LinkCollectionBaseDAO
from linkshrink.dao.memory import LinkCollectionMemoryDAO
from linkshrink.dao.file import LinkCollectionFileDAO


__all__ = [
    'LinkCollectionBaseDAO',
    'LinkCollectionMemoryDAO',
    'LinkCollectionFileDAO',
]
