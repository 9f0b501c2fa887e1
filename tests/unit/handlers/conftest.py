from unittest.mock import MagicMock

import pytest
from freezegun import freeze_time

from linkshrink.dao import LinkCollectionMemoryDAO
from linkshrink.services import LinkService


@pytest.fixture()
def context():
    """Mock handler context"""
    ctx = MagicMock()
    ctx.function_name = 'test-function'
    ctx.aws_request_id = 'test-request-id'
    return ctx


@pytest.fixture()
def config():
    return {'active_backend': 'memory', 'base_url': 'https://sho.rt', 'memory': {}}


@pytest.fixture()
def dao():
    return LinkCollectionMemoryDAO()


@pytest.fixture()
def service(dao):
    return LinkService(dao, base_url='https://sho.rt')


@pytest.fixture()
def frozen():
    with freeze_time('2025-10-15 12:00:00') as frozen_time:
        yield frozen_time
