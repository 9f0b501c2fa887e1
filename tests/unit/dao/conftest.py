from datetime import datetime, timedelta, UTC

import pytest

from linkshrink.models import ShortLinkModel


@pytest.fixture
def link() -> ShortLinkModel:
    """A persisted-precision link record (milliseconds, UTC)."""
    now = datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC)
    return ShortLinkModel(
        id='5f1d0c2ab7e94b1d9b3a6f0c2e8d4a11',
        original_url='https://example.com/test',
        shortcode='abc123',
        short_url='https://sho.rt/abc123',
        expires_at=now + timedelta(days=30),
        created_at=now,
        clicks=7,
    )
