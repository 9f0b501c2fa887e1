"""Helper utilities shared across the application.

Functions:
    utcnow() -> datetime
        Current moment as an aware UTC datetime
    format_timestamp(moment: datetime) -> str
        Render a datetime as an ISO-8601 UTC string with millisecond precision
    parse_timestamp(value: str) -> datetime
        Parse an ISO-8601 string into an aware UTC datetime
    base_url(config: dict) -> str
        Extract the public base URL from the application configuration
    get_short_url(shortcode: str, config: dict) -> str
        Get string representation of short URL for a given shortcode

Example:
    >>> from datetime import datetime, UTC
    >>> format_timestamp(datetime(2025, 10, 15, tzinfo=UTC))
    '2025-10-15T00:00:00.000Z'
    >>> parse_timestamp('2025-10-15T00:00:00.000Z')
    datetime.datetime(2025, 10, 15, 0, 0, tzinfo=datetime.timezone.utc)
    >>> get_short_url('abc123', {'base_url': 'https://sho.rt/'})
    'https://sho.rt/abc123'
"""

from datetime import datetime, UTC
from typing import Any

from linkshrink.constants import DEFAULT_BASE_URL


def utcnow() -> datetime:
    return datetime.now(UTC)


def format_timestamp(moment: datetime) -> str:
    """Render `moment` the way the persisted collection stores timestamps

    Naive datetimes are assumed to already be in UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)

    # fmt: off
    return moment.astimezone(UTC) \
                 .isoformat(timespec='milliseconds') \
                 .replace('+00:00', 'Z')
    # fmt: on


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp into an aware UTC datetime

    Raises:
        TypeError: If `value` is not a string.
        ValueError: If `value` is not a valid ISO-8601 timestamp.
    """
    if not isinstance(value, str):
        raise TypeError(f'Timestamp must be of type string (given type: {type(value)}).')

    moment = datetime.fromisoformat(value)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def base_url(config: dict[str, Any]) -> str:
    """Extract public base URL from the application configuration

    Args:
        config (dict): configuration returned by `load_config()`

    Returns:
        str: Base URL without a trailing slash, e.g. "https://sho.rt".
             Falls back to 'http://localhost:3000' for local runs.
    """
    return (config.get('base_url') or DEFAULT_BASE_URL).rstrip('/')


def get_short_url(shortcode: str, config: dict[str, Any]) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        config (dict): configuration returned by `load_config()`

    Returns:
        str: short url string representation
    """
    return f'{base_url(config)}/{shortcode}'
