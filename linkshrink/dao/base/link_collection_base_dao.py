"""Abstract base class for link collection data access objects (DAOs).

The whole link collection is the unit of persistence: callers load every
record, change the list in memory and save every record back. This class
establishes that contract for all storage mechanisms (e.g. in-memory, JSON
file, Redis).

Responsibilities:
    - Provide an interface for loading and saving the full link collection.
    - Standardize error handling across multiple data store implementations.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from linkshrink.dao.file import LinkCollectionFileDAO

        >>> dao = LinkCollectionFileDAO(path='data/links.json')
        >>> links = dao.load()
        >>> dao.save([*links, new_link])
        <LinkCollectionFileDAO>

NOTE:
    - Nothing coordinates concurrent writers. Two interleaved load/save
      cycles lose the first writer's changes (last write wins).
"""

from abc import ABC, abstractmethod

from linkshrink.models import ShortLinkModel


class LinkCollectionBaseDAO(ABC):
    """Interface for link collection data access objects (DAOs).

    Methods:
        load(**kwargs) -> list[ShortLinkModel]:
            Load every stored link record, in stored order.
            Returns an empty list if nothing was stored yet.
            Raises CorruptedCollectionError if the stored blob can't be decoded.
            Raises DataStoreError on connection or read failure.

        save(links: list[ShortLinkModel], **kwargs) -> LinkCollectionBaseDAO:
            Replace the stored collection with `links`.
            Raises DataStoreError on connection or write failure.

    Subclassing:
        Datastore-specific implementations (e.g., LinkCollectionRedisDAO)
        must extend this class and implement all abstract methods.
    """

    @abstractmethod
    def load(self, **kwargs) -> list[ShortLinkModel]:
        """Load the full link collection from the data store.

        Args:
            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            list[ShortLinkModel]: stored link records (empty if none).

        Raises:
            CorruptedCollectionError:
                If the stored collection cannot be decoded.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def save(self, links: list[ShortLinkModel], **kwargs) -> 'LinkCollectionBaseDAO':
        """Replace the stored link collection.

        Args:
            links (list[ShortLinkModel]):
                The complete collection to persist.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            LinkCollectionBaseDAO: self (for method chaining)

        Raises:
            DataStoreError:
                If there is an error in the data store.
        """
        pass
