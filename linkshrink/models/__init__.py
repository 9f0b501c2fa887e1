from linkshrink.models.short_link_model import ShortLinkModel
from linkshrink.models.link_stats_model import LinkStatsModel
from linkshrink.models.requests import CreateLinkRequest, LinkQuery
from linkshrink.models.api_response import ApiResponse


__all__ = [
    'ShortLinkModel',
    'LinkStatsModel',
    'CreateLinkRequest',
    'LinkQuery',
    'ApiResponse',
]
