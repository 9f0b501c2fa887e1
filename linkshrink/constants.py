from enum import StrEnum


class TTL:
    """Link expiry windows."""

    DEFAULT_EXPIRY_DAYS = 30  # Expiry window applied when none (or a non-positive one) is requested


class Shortcode:
    """Shortcode format constraints."""

    GENERATED_LENGTH = 6
    ALIAS_MIN_LENGTH = 3
    ALIAS_MAX_LENGTH = 20


class LinkStatus(StrEnum):
    ACTIVE = 'active'
    EXPIRED = 'expired'


class StatusFilter(StrEnum):
    ALL = 'all'
    ACTIVE = 'active'
    EXPIRED = 'expired'


class SortField(StrEnum):
    ORIGINAL_URL = 'originalUrl'
    SHORTCODE = 'shortCode'
    CLICKS = 'clicks'
    STATUS = 'status'
    CREATED_AT = 'createdAt'
    EXPIRES_AT = 'expiresAt'


class SortOrder(StrEnum):
    ASC = 'asc'
    DESC = 'desc'


class Backend(StrEnum):
    MEMORY = 'memory'
    FILE = 'file'
    REDIS = 'redis'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        PROJECT_ROOT = 'PROJECT_ROOT'
        LOG_LEVEL = 'LOG_LEVEL'
        CONFIG_FILE = 'LINKSHRINK_CONFIG_FILE'


# Fixed identifier of the persisted link collection
STORAGE_KEY = 'linkShrink_urls'

# Public base URL used when the configuration does not provide one
DEFAULT_BASE_URL = 'http://localhost:3000'

# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
MISSING_SHORTCODE = 'MISSING_SHORTCODE'
MISSING_ORIGINAL_URL = 'MISSING_ORIGINAL_URL'
INVALID_JSON_BODY = 'INVALID_JSON_BODY'
ROUTE_NOT_FOUND = 'ROUTE_NOT_FOUND'
