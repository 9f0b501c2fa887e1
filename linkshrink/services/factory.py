"""Build a LinkService from the application configuration

Functions:
    dao_from_config(config: dict) -> LinkCollectionBaseDAO
        Instantiate the DAO of the configured storage backend.
    link_service_from_config(config: dict) -> LinkService
        Instantiate a LinkService over the configured backend and base URL.

Example:
    >>> from linkshrink.utils import load_config
    >>> service = link_service_from_config(load_config())
"""

import logging
from pathlib import Path

from linkshrink.constants import Backend, STORAGE_KEY
from linkshrink.exceptions import BadConfigurationError
from linkshrink.types import AppConfig
from linkshrink.dao.base import LinkCollectionBaseDAO
from linkshrink.dao.file import LinkCollectionFileDAO
from linkshrink.dao.memory import LinkCollectionMemoryDAO
from linkshrink.dao.redis import LinkCollectionRedisDAO
from linkshrink.services.link_service import LinkService
from linkshrink.utils.config import app_prefix, project_root
from linkshrink.utils.helpers import base_url


logger = logging.getLogger(__name__)


def dao_from_config(config: AppConfig) -> LinkCollectionBaseDAO:
    """Instantiate the DAO selected by `config['active_backend']`

    Relative file paths are resolved against the project root.

    Raises:
        BadConfigurationError: If the backend is unknown.
        DataStoreError: If the Redis backend is unreachable.
    """
    backend = config.get('active_backend')
    options = config.get(backend) or {}

    match backend:
        case Backend.MEMORY:
            return LinkCollectionMemoryDAO()
        case Backend.FILE:
            path = Path(options.get('path', f'data/{STORAGE_KEY}.json'))
            if not path.is_absolute():
                path = project_root() / path
            return LinkCollectionFileDAO(path=path)
        case Backend.REDIS:
            logger.debug('Using Redis as the link collection backend.')
            redis_config = {f'redis_{k}': v for k, v in options.items()}
            return LinkCollectionRedisDAO(**redis_config, prefix=app_prefix())
        case _:
            raise BadConfigurationError(f'Unknown storage backend {backend!r}.')


def link_service_from_config(config: AppConfig) -> LinkService:
    return LinkService(dao_from_config(config), base_url=base_url(config))
