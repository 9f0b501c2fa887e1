"""Data Access Object (DAO) implementation persisting the link collection in a JSON file

The file holds the serialized collection blob and is rewritten as a whole on
every save. Writes go to a sibling temporary file which then replaces the
original, so readers never observe a half-written collection.

Classes:
    LinkCollectionFileDAO:
        DAO for storing and retrieving the link collection in a local JSON file.

Example:
    >>> dao = LinkCollectionFileDAO(path='data/links.json')
    >>> dao.load()
    []
    >>> dao.save([link]).load() == [link]
    True
"""

import os
import logging
import tempfile
from pathlib import Path

from beartype import beartype

from linkshrink.models import ShortLinkModel
from linkshrink.dao.base import LinkCollectionBaseDAO
from linkshrink.dao.helpers import dump_collection, load_collection
from linkshrink.dao.exceptions import DataStoreError


logger = logging.getLogger(__name__)


class LinkCollectionFileDAO(LinkCollectionBaseDAO):
    """File-based link collection.

    Attributes:
        path (Path):
            Location of the JSON collection file. Parent directories are
            created on the first save.
    """

    @beartype
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self, **kwargs) -> list[ShortLinkModel]:
        """Read the collection file

        Returns:
            list[ShortLinkModel]: stored links, or [] if the file doesn't exist yet.

        Raises:
            CorruptedCollectionError:
                If the file content is not a valid collection.
            DataStoreError:
                If the file exists but can't be read.
        """
        try:
            blob = self.path.read_text(encoding='utf-8')
        except FileNotFoundError:
            logger.debug('Link collection file does not exist yet.', extra={'path': str(self.path)})
            return []
        except OSError as e:
            raise DataStoreError(f"Can't read link collection from {self.path}.") from e

        return load_collection(blob)

    @beartype
    def save(self, links: list[ShortLinkModel], **kwargs) -> 'LinkCollectionFileDAO':
        """Replace the collection file with `links`

        Raises:
            DataStoreError:
                If the file can't be written (permissions, full disk, etc.).
        """
        blob = dump_collection(links)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f'.{self.path.name}.', suffix='.tmp')
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    f.write(blob)
                os.replace(tmp_path, self.path)
            except BaseException:
                Path(tmp_path).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise DataStoreError(f"Can't write link collection to {self.path}.") from e

        return self
