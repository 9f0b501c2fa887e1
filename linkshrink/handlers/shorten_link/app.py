import json
import logging
from typing import Any

from linkshrink.constants import INVALID_JSON_BODY, MISSING_ORIGINAL_URL
from linkshrink.exceptions import ConfigurationError
from linkshrink.models import CreateLinkRequest
from linkshrink.services import link_service_from_config
from linkshrink.types import HandlerEvent, HandlerContext, HandlerResponse
from linkshrink.utils import load_config
from linkshrink.handlers.responses import response_400, response_500, response_from_envelope, guarantee_500_response


logger = logging.getLogger(__name__)


def _text_field(body: dict[str, Any], key: str) -> str | None:
    """Return the trimmed string value of `key`, None if missing or blank"""
    value = body.get(key)
    if not isinstance(value, str):
        return None
    return value.strip() or None


def _expiry_days(value: Any) -> int | None:
    """Return the expiry window in days if it's a positive integer (or integer string)"""
    if isinstance(value, str) and value.strip().isdecimal():
        value = int(value.strip())
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    return None


def create_request_from_form(body: dict[str, Any]) -> CreateLinkRequest | None:
    """Build a CreateLinkRequest from submitted form values

    Returns:
        CreateLinkRequest | None: None if no original URL was submitted.

    Example:
        >>> create_request_from_form({'originalUrl': ' example.com ', 'customAlias': '', 'expiryDays': '7'})
        CreateLinkRequest(original_url='example.com', custom_alias=None, custom_domain=None, expiry_days=7)
    """
    original_url = _text_field(body, 'originalUrl')
    if original_url is None:
        return None

    return CreateLinkRequest(
        original_url=original_url,
        custom_alias=_text_field(body, 'customAlias'),
        custom_domain=_text_field(body, 'customDomain'),
        expiry_days=_expiry_days(body.get('expiryDays')),
    )


@guarantee_500_response
def handler(event: HandlerEvent, context: HandlerContext) -> HandlerResponse:
    """Handle incoming requests to shorten URLs

    This handler follows this procedure to shorten URLs:
    - Step 1: Extract form values from the JSON request body
    - Step 2: Create the short link (via LinkService)
    - Step 3: Respond with the envelope

    HTTP responses:
        200: Successful URL shortening
            data: the new short link record
        400: Bad client request
            error: invalid JSON body, missing originalUrl, invalid URL or alias
        409: Conflict
            error: custom alias already taken
        500: Internal server error
            error: configuration or persistence failure

    Example:
        >>> event = {'body': '{"originalUrl": "example.com"}'}
        >>> response = handler(event, None)
        >>> response['statusCode']
        200
        >>> json.loads(response['body'])['data']['originalUrl']
        'https://example.com'
    """
    # 0- Get application's config
    try:
        app_config = load_config()
    except (FileNotFoundError, ConfigurationError):
        logger.exception('Failed to load configuration for shorten link handler. Responding with 500.')
        return response_500()

    # 1- Extract form values from request body
    try:
        body = json.loads(event.get('body') or '{}')
    except json.JSONDecodeError:
        logger.info('Invalid JSON body. Responding with 400.', extra={'event': INVALID_JSON_BODY})
        return response_400(message='invalid JSON body', error_code=INVALID_JSON_BODY)

    request = create_request_from_form(body) if isinstance(body, dict) else None
    if request is None:
        logger.info('Missing "originalUrl" in body. Responding with 400.', extra={'event': MISSING_ORIGINAL_URL})
        return response_400(message="missing 'originalUrl' in JSON body", error_code=MISSING_ORIGINAL_URL)

    # 2- Create the short link
    service = link_service_from_config(app_config)
    result = service.create(request)

    # 3- Respond with the envelope
    return response_from_envelope(result)
