import logging

from linkshrink.constants import ROUTE_NOT_FOUND
from linkshrink.exceptions import ConfigurationError
from linkshrink.models import LinkQuery
from linkshrink.services import LinkService, link_service_from_config
from linkshrink.types import HandlerEvent, HandlerContext, HandlerResponse
from linkshrink.utils import load_config
from linkshrink.handlers.responses import response_404, response_500, response_from_envelope, guarantee_500_response


logger = logging.getLogger(__name__)


def list_links(service: LinkService, event: HandlerEvent) -> HandlerResponse:
    params = event.get('queryStringParameters') or {}
    query = LinkQuery(
        search=params.get('search') or None,
        status=params.get('status') or LinkQuery.status,
        sort_by=params.get('sortBy') or LinkQuery.sort_by,
        sort_order=params.get('sortOrder') or LinkQuery.sort_order,
    )
    return response_from_envelope(service.list_links(query))


def link_stats(service: LinkService, event: HandlerEvent) -> HandlerResponse:
    return response_from_envelope(service.stats())


def delete_link(service: LinkService, event: HandlerEvent) -> HandlerResponse:
    link_id = (event.get('pathParameters') or {}).get('id')
    return response_from_envelope(service.delete(link_id))


ROUTES = {
    ('GET', '/links'): list_links,
    ('GET', '/links/stats'): link_stats,
    ('DELETE', '/links/{id}'): delete_link,
}


@guarantee_500_response
def handler(event: HandlerEvent, context: HandlerContext) -> HandlerResponse:
    """Handle link management requests

    Routes:
        GET /links?search=&status=&sortBy=&sortOrder=
            List links (refreshes statuses first).
        GET /links/stats
            Aggregate counts and clicks.
        DELETE /links/{id}
            Delete a link permanently.

    HTTP responses:
        200: envelope with the operation's data
        400: invalid listing query
        404: unknown route or link id
        500: configuration or persistence failure
    """
    # 0- Get application's config
    try:
        app_config = load_config()
    except (FileNotFoundError, ConfigurationError):
        logger.exception('Failed to load configuration for manage links handler. Responding with 500.')
        return response_500()

    # 1- Find the route
    method = (event.get('httpMethod') or 'GET').upper()
    resource = event.get('resource') or event.get('path') or ''
    route = ROUTES.get((method, resource))
    if route is None:
        logger.info('Unknown route. Responding with 404.', extra={'method': method, 'resource': resource})
        return response_404(message=f'no route for {method} {resource}', error_code=ROUTE_NOT_FOUND)

    # 2- Run the operation
    service = link_service_from_config(app_config)
    return route(service, event)
