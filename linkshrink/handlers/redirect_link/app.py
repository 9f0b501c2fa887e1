import logging

from linkshrink.constants import MISSING_SHORTCODE
from linkshrink.exceptions import ConfigurationError
from linkshrink.services import link_service_from_config
from linkshrink.types import HandlerEvent, HandlerContext, HandlerResponse
from linkshrink.utils import load_config, base_url, get_short_url
from linkshrink.handlers.responses import response_302, response_400, response_500, guarantee_500_response


logger = logging.getLogger(__name__)


@guarantee_500_response
def handler(event: HandlerEvent, context: HandlerContext) -> HandlerResponse:
    """Handle incoming requests to redirect short URLs

    This handler follows this procedure to redirect URLs:
    - Step 1: Extract shortcode from request path
    - Step 2: Resolve the shortcode (counts the click)
    - Step 3: Redirect client to the original URL, or to the application root

    HTTP responses:
        302: Redirect
            headers:
                Location: original URL, or '<base url>/' if the shortcode is
                          unknown or expired
        400: Bad client request
            error: missing shortcode in path parameters
        500: Internal server error

    Example:
        >>> event = {'pathParameters': {'shortcode': 'abc123'}}
        >>> response = handler(event, None)
        >>> response['statusCode']
        302
        >>> response['headers']['Location']
        'https://example.com/my-page'
    """
    # 0- Get application's config
    try:
        app_config = load_config()
    except (FileNotFoundError, ConfigurationError):
        logger.exception('Failed to load configuration for redirect handler. Responding with 500.')
        return response_500()

    # 1- Extract shortcode from request's path
    shortcode = (event.get('pathParameters') or {}).get('shortcode')
    if not shortcode:
        logger.info('Missing "shortcode" in path. Responding with 400.', extra={'event': MISSING_SHORTCODE})
        return response_400(message="missing 'shortcode' in path", error_code=MISSING_SHORTCODE)
    logger.debug('Client requested short URL %s.', get_short_url(shortcode, app_config))

    # 2- Resolve the shortcode
    service = link_service_from_config(app_config)
    target_url = service.resolve(shortcode)

    # 3- Redirect client
    if target_url is None:
        logger.info('Short link unknown or expired. Redirecting to application root.', extra={'shortcode': shortcode})
        return response_302(location=f'{base_url(app_config)}/')

    logger.info('Redirecting client to original URL.', extra={'shortcode': shortcode})
    return response_302(location=target_url)
