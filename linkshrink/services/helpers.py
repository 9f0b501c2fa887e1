import logging
import functools
from typing import Any, TypeVar
from collections.abc import Callable

from linkshrink.models import ApiResponse
from linkshrink.exceptions import LinkShrinkError
from linkshrink.dao.exceptions import DAOError


__all__ = ['returns_envelope']

logger = logging.getLogger(__name__)


F = TypeVar('F', bound=Callable[..., Any])


def returns_envelope(method: F) -> F:
    """Wrap LinkService operations so that they always return an ApiResponse

    Application and DAO errors become failed envelopes carrying the error's
    message and `error_code`. Any other exception is logged with its traceback
    and also reported as a failed envelope.

    Args:
        method (Callable[..., Any]):
            LinkService method returning the operation's data or raising on failure.

    Returns:
        Callable[..., ApiResponse]:
            Wrapped method which never raises.

    Example:
        >>> @returns_envelope
        ... def delete(self, link_id):
        ...     raise LinkNotFoundError('URL not found')
        >>> service.delete('123')
        ApiResponse(success=False, data=None, error='URL not found', error_code='link:not_found')
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs) -> ApiResponse:
        try:
            data = method(self, *args, **kwargs)
        except (LinkShrinkError, DAOError) as e:
            logger.info(
                'Link operation failed.',
                extra={'operation': method.__name__, 'errorCode': e.error_code, 'reason': str(e)},
            )
            return ApiResponse.fail(e)
        except Exception as e:
            logger.exception('Unexpected error in link operation.', extra={'operation': method.__name__})
            return ApiResponse.fail(e)
        return ApiResponse.ok(data)

    return wrapper
