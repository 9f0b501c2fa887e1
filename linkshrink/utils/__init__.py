from linkshrink.utils.config import app_env, app_name, project_root, app_prefix, load_config
from linkshrink.utils.helpers import base_url, get_short_url, utcnow, format_timestamp, parse_timestamp
from linkshrink.utils.shortener import generate_shortcode, is_valid_alias
from linkshrink.utils.validators import is_valid_url, normalize_url
from linkshrink.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'is_valid_alias',
    'is_valid_url',
    'normalize_url',
    'app_env',
    'app_name',
    'app_prefix',
    'project_root',
    'load_config',
    'base_url',
    'get_short_url',
    'utcnow',
    'format_timestamp',
    'parse_timestamp',
    'initialize_logging',
]
