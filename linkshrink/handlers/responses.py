"""HTTP response builders shared by the handlers

Every response body is JSON. Error bodies follow the ApiResponse envelope
shape: {"success": false, "error": "...", "errorCode": "..."}.

Functions:
    response_200(body) / response_302(location) / response_400(...) /
    response_404(...) / response_500(...)
        Build a response dictionary with the given status code.
    response_from_envelope(envelope) -> dict
        Map a LinkService ApiResponse onto an HTTP response.
    guarantee_500_response(func) -> Callable
        Decorator: turn any unhandled handler exception into a logged 500 response.
"""

import json
import logging
import functools
from typing import Any
from collections.abc import Callable

from linkshrink.constants import UNKNOWN_INTERNAL_SERVER_ERROR
from linkshrink.models import ApiResponse
from linkshrink.types import HandlerResponse


logger = logging.getLogger(__name__)


CORS_HEADERS = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Allow-Methods': 'OPTIONS,POST,GET,DELETE',
}

# HTTP status per LinkShrinkError / DAOError code; unknown codes map to 500
STATUS_BY_ERROR_CODE = {
    'link:invalid_url': 400,
    'link:invalid_alias': 400,
    'link:invalid_query': 400,
    'link:alias_taken': 409,
    'link:not_found': 404,
}


def _response(status_code: int, body: dict[str, Any], headers: dict[str, str] | None = None) -> HandlerResponse:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json', **CORS_HEADERS, **(headers or {})},
        'body': json.dumps(body),
    }


def _error_body(base: str, message: str | None, error_code: str | None) -> dict[str, Any]:
    body = {'success': False, 'error': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return body


def response_200(body: dict[str, Any]) -> HandlerResponse:
    return _response(200, body)


def response_302(*, location: str) -> HandlerResponse:
    return _response(302, {}, headers={'Location': location})  # no body needed for redirects


def response_400(message: str | None = None, error_code: str | None = None) -> HandlerResponse:
    return _response(400, _error_body('Bad Request', message, error_code))


def response_404(message: str | None = None, error_code: str | None = None) -> HandlerResponse:
    return _response(404, _error_body('Not Found', message, error_code))


def response_500(message: str | None = None, error_code: str | None = None) -> HandlerResponse:
    return _response(500, _error_body('Internal Server Error', message, error_code))


def response_from_envelope(envelope: ApiResponse) -> HandlerResponse:
    """Map a LinkService envelope onto an HTTP response

    Successful envelopes become 200 responses. Failed envelopes keep their
    body and get the status mapped from their error code (500 if unknown).
    """
    if envelope.success:
        return response_200(envelope.to_dict())
    return _response(STATUS_BY_ERROR_CODE.get(envelope.error_code, 500), envelope.to_dict())


def guarantee_500_response(func: Callable[..., HandlerResponse]) -> Callable[..., HandlerResponse]:
    """Decorator: respond with 500 instead of letting a handler raise

    Example:
        >>> @guarantee_500_response
        ... def handler(event, context):
        ...     raise RuntimeError('boom')
        >>> handler({}, None)['statusCode']
        500
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs) -> HandlerResponse:
        try:
            return func(*args, **kwargs)
        except Exception:
            logger.exception('Unhandled error in handler. Responding with 500.', extra={'handler': func.__module__})
            return response_500(error_code=UNKNOWN_INTERNAL_SERVER_ERROR)

    return wrapper
