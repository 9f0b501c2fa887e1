from dataclasses import dataclass, replace
from datetime import datetime

from linkshrink.constants import LinkStatus
from linkshrink.types import SerializedLink
from linkshrink.utils.helpers import format_timestamp, parse_timestamp


@dataclass(frozen=True)
class ShortLinkModel:
    """Represent a shortened URL record.

    Attributes:
        id (str):
            Opaque unique identifier, assigned at creation.
        original_url (str):
            Normalized absolute URL the short code redirects to.
        shortcode (str):
            Unique short identifier (generated code or custom alias).
        short_url (str):
            Display string built from the public base URL and the shortcode.
        expires_at (datetime):
            UTC moment after which the link no longer redirects.
        created_at (datetime):
            UTC creation moment.
        clicks (int):
            Number of successful redirects through this link.
        status (LinkStatus):
            Last computed status. Never authoritative, see `refreshed()`.
        last_accessed (datetime | None):
            UTC moment of the last successful redirect, if any.

    Example:
        >>> from datetime import datetime, timedelta, UTC
        >>> now = datetime.now(UTC)
        >>> link = ShortLinkModel(
        ...     id='1f0c2a',
        ...     original_url='https://example.com/article/123',
        ...     shortcode='abc123',
        ...     short_url='http://localhost:3000/abc123',
        ...     expires_at=now + timedelta(days=30),
        ...     created_at=now,
        ... )
        >>> link.clicks
        0
        >>> link.status
        <LinkStatus.ACTIVE: 'active'>
    """

    id: str
    original_url: str
    shortcode: str
    short_url: str
    expires_at: datetime
    created_at: datetime
    clicks: int = 0
    status: LinkStatus = LinkStatus.ACTIVE
    last_accessed: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at < now

    def refreshed(self, now: datetime) -> 'ShortLinkModel':
        """Return the record with its status recomputed against `now`"""
        status = LinkStatus.EXPIRED if self.is_expired(now) else LinkStatus.ACTIVE
        return self if status == self.status else replace(self, status=status)

    def to_dict(self) -> SerializedLink:
        """Serialize into the persisted (camelCase) representation"""
        data = {
            'id': self.id,
            'originalUrl': self.original_url,
            'shortCode': self.shortcode,
            'shortUrl': self.short_url,
            'clicks': self.clicks,
            'status': str(self.status),
            'expiresAt': format_timestamp(self.expires_at),
            'createdAt': format_timestamp(self.created_at),
        }
        if self.last_accessed is not None:
            data['lastAccessed'] = format_timestamp(self.last_accessed)
        return data

    @classmethod
    def from_dict(cls, data: SerializedLink) -> 'ShortLinkModel':
        """Build a record from its persisted representation

        Raises:
            KeyError: If a required field is missing.
            ValueError: If a timestamp or status cannot be parsed.
            TypeError: If a field has an unexpected type.
        """
        clicks = data.get('clicks', 0)
        if not isinstance(clicks, int) or isinstance(clicks, bool) or clicks < 0:
            raise ValueError(f'Clicks must be a non-negative integer (given value: {clicks!r}).')

        last_accessed = data.get('lastAccessed')
        return cls(
            id=str(data['id']),
            original_url=data['originalUrl'],
            shortcode=data['shortCode'],
            short_url=data['shortUrl'],
            expires_at=parse_timestamp(data['expiresAt']),
            created_at=parse_timestamp(data['createdAt']),
            clicks=clicks,
            status=LinkStatus(data.get('status', LinkStatus.ACTIVE)),
            last_accessed=None if last_accessed is None else parse_timestamp(last_accessed),
        )
