import pytest
from freezegun import freeze_time

from linkshrink.dao import LinkCollectionMemoryDAO
from linkshrink.models import CreateLinkRequest, ShortLinkModel
from linkshrink.services import LinkService


@pytest.fixture
def frozen():
    """Freeze the clock at 2025-10-15 12:00:00 UTC; move it with frozen.move_to()/tick()."""
    with freeze_time('2025-10-15 12:00:00') as frozen_time:
        yield frozen_time


@pytest.fixture
def dao():
    return LinkCollectionMemoryDAO()


@pytest.fixture
def service(dao):
    return LinkService(dao, base_url='https://sho.rt/')


@pytest.fixture
def create(service):
    """Create a link and return the stored record, failing the test on error."""

    def _create(original_url: str = 'example.com', **kwargs) -> ShortLinkModel:
        response = service.create(CreateLinkRequest(original_url=original_url, **kwargs))
        assert response.success, response.error
        return response.data

    return _create
