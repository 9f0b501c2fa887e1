"""Unit tests for the ApiResponse envelope and LinkStatsModel.

Test coverage includes:

1. Successful envelopes
   - Ensures ok() wraps data and to_dict() serializes nested models and lists.

2. Failed envelopes
   - Ensures fail() carries the exception message and its error_code.
   - Ensures exceptions without error_code get the unknown error code.
"""

from datetime import datetime, timedelta, UTC

from linkshrink.constants import UNKNOWN_INTERNAL_SERVER_ERROR
from linkshrink.exceptions import AliasTakenError
from linkshrink.models import ApiResponse, LinkStatsModel, ShortLinkModel


# -------------------------------
# 1. Successful envelopes
# -------------------------------


def test_ok_envelope_serializes_models():
    """Ensure successful envelopes serialize models, lists of models and plain values."""
    now = datetime(2025, 10, 15, tzinfo=UTC)
    link = ShortLinkModel(
        id='1',
        original_url='https://example.com',
        shortcode='abc123',
        short_url='https://sho.rt/abc123',
        expires_at=now + timedelta(days=1),
        created_at=now,
    )
    stats = LinkStatsModel(total_urls=3, active_urls=2, expired_urls=1, total_clicks=42)

    assert ApiResponse.ok(stats).to_dict() == {
        'success': True,
        'data': {'totalUrls': 3, 'activeUrls': 2, 'expiredUrls': 1, 'totalClicks': 42},
    }
    assert ApiResponse.ok([link]).to_dict() == {'success': True, 'data': [link.to_dict()]}
    assert ApiResponse.ok().to_dict() == {'success': True, 'data': None}


# -------------------------------
# 2. Failed envelopes
# -------------------------------


def test_fail_envelope_carries_message_and_code():
    """Ensure failed envelopes expose the error message and its error code."""
    response = ApiResponse.fail(AliasTakenError('This custom alias is already taken'))

    assert response.success is False
    assert response.data is None
    assert response.error == 'This custom alias is already taken'
    assert response.error_code == 'link:alias_taken'
    assert response.to_dict() == {
        'success': False,
        'error': 'This custom alias is already taken',
        'errorCode': 'link:alias_taken',
    }


def test_fail_envelope_with_foreign_exception():
    """Ensure exceptions without an error_code get the unknown error code."""
    response = ApiResponse.fail(RuntimeError('boom'))

    assert response.error == 'boom'
    assert response.error_code == UNKNOWN_INTERNAL_SERVER_ERROR
