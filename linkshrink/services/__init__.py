from linkshrink.services.link_service import LinkService
from linkshrink.services.factory import link_service_from_config, dao_from_config


__all__ = [
    'LinkService',
    'link_service_from_config',
    'dao_from_config',
]
