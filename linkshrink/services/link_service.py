"""Record store for short links

LinkService is the sole authority over the persisted link collection. Every
operation loads the whole collection through the injected DAO, works on it in
memory and saves the whole collection back.

Responsibilities:
    - Create links (URL validation & normalization, alias checks, code allocation, expiry);
    - List links with search, status filter and sorting;
    - Delete links;
    - Aggregate statistics;
    - Resolve shortcodes for redirects while counting clicks;
    - Keep every record's status in line with its expiry (lazy status sweep on reads).

Classes:
    LinkService:
        Operations over the link collection, returning ApiResponse envelopes.

Example:
    >>> from linkshrink.dao import LinkCollectionMemoryDAO
    >>> service = LinkService(LinkCollectionMemoryDAO(), base_url='https://sho.rt')
    >>> response = service.create(CreateLinkRequest(original_url='example.com', custom_alias='docs'))
    >>> response.data.short_url
    'https://sho.rt/docs'
    >>> service.resolve('docs')
    'https://example.com'
    >>> service.stats().data.total_clicks
    1

NOTE:
    - Nothing coordinates concurrent callers. Interleaved operations lose
      updates (last full-collection write wins).
    - Expiry is applied lazily. No background task flips statuses.
"""

import uuid
import logging
from dataclasses import replace
from datetime import datetime, timedelta

from beartype import beartype

from linkshrink.constants import TTL, DEFAULT_BASE_URL, LinkStatus, SortField, SortOrder, StatusFilter
from linkshrink.models import ShortLinkModel, LinkStatsModel, CreateLinkRequest, LinkQuery
from linkshrink.dao.base import LinkCollectionBaseDAO
from linkshrink.dao.exceptions import CorruptedCollectionError, DataStoreError
from linkshrink.exceptions import (
    InvalidUrlError,
    InvalidAliasError,
    AliasTakenError,
    LinkNotFoundError,
    InvalidQueryError,
)
from linkshrink.services.helpers import returns_envelope
from linkshrink.utils.helpers import utcnow
from linkshrink.utils.shortener import generate_shortcode, is_valid_alias
from linkshrink.utils.validators import is_valid_url, normalize_url


logger = logging.getLogger(__name__)


SORT_KEYS = {
    SortField.ORIGINAL_URL: lambda link: link.original_url,
    SortField.SHORTCODE: lambda link: link.shortcode,
    SortField.CLICKS: lambda link: link.clicks,
    SortField.STATUS: lambda link: str(link.status),
    SortField.CREATED_AT: lambda link: link.created_at.timestamp(),
    SortField.EXPIRES_AT: lambda link: link.expires_at.timestamp(),
}


def expiry_window(expiry_days: int | None) -> timedelta:
    """Return the requested expiry window, or the 30 day default unless it's a positive integer"""
    if isinstance(expiry_days, int) and not isinstance(expiry_days, bool) and expiry_days > 0:
        return timedelta(days=expiry_days)
    return timedelta(days=TTL.DEFAULT_EXPIRY_DAYS)


class LinkService:
    """Operations over the persisted short link collection

    Attributes:
        dao (LinkCollectionBaseDAO):
            Storage for the whole link collection.
        base_url (str):
            Public origin prepended to shortcodes to build short URLs.

    Methods:
        create(request: CreateLinkRequest) -> ApiResponse[ShortLinkModel]
        list_links(query: LinkQuery | None = None) -> ApiResponse[list[ShortLinkModel]]
        delete(link_id: str) -> ApiResponse[None]
        stats() -> ApiResponse[LinkStatsModel]
        resolve(shortcode: str) -> str | None
    """

    @beartype
    def __init__(self, dao: LinkCollectionBaseDAO, base_url: str = DEFAULT_BASE_URL):
        self.dao = dao
        self.base_url = base_url.rstrip('/')

    def _load(self) -> list[ShortLinkModel]:
        try:
            return self.dao.load()
        except CorruptedCollectionError:
            logger.exception('Stored link collection is corrupted. Treating it as empty.')
            return []

    def _save(self, links: list[ShortLinkModel]) -> None:
        try:
            self.dao.save(links)
        except DataStoreError as e:
            logger.exception('Failed to save link collection.', extra={'links': len(links)})
            raise DataStoreError('Failed to save data') from e

    def _sweep(self, now: datetime) -> list[ShortLinkModel]:
        """Recompute every status against `now` and persist the refreshed collection"""
        links = [link.refreshed(now) for link in self._load()]
        self._save(links)
        return links

    @returns_envelope
    def create(self, request: CreateLinkRequest) -> ShortLinkModel:
        """Create a short link

        Raises (reported through the envelope):
            InvalidUrlError: If the URL isn't a valid http(s) URL.
            InvalidAliasError: If the custom alias has an invalid format.
            AliasTakenError: If the custom alias is already used by another link.
            DataStoreError: If the collection can't be saved.
        """
        if not is_valid_url(request.original_url):
            raise InvalidUrlError('Please provide a valid URL')

        original_url = normalize_url(request.original_url)
        links = self._load()
        taken = {link.shortcode for link in links}

        if request.custom_alias:
            if not is_valid_alias(request.custom_alias):
                raise InvalidAliasError(
                    'Custom alias must be 3-20 characters long and contain only letters, numbers, hyphens, and underscores'
                )
            if request.custom_alias in taken:
                raise AliasTakenError('This custom alias is already taken')
            shortcode = request.custom_alias
        else:
            shortcode = generate_shortcode()
            while shortcode in taken:
                shortcode = generate_shortcode()

        now = utcnow()
        link = ShortLinkModel(
            id=uuid.uuid4().hex,
            original_url=original_url,
            shortcode=shortcode,
            short_url=f'{self.base_url}/{shortcode}',
            expires_at=now + expiry_window(request.expiry_days),
            created_at=now,
        )
        self._save([*links, link])

        logger.info(
            'Created short link.',
            extra={'linkId': link.id, 'shortcode': shortcode, 'customAlias': bool(request.custom_alias)},
        )
        return link

    @returns_envelope
    def list_links(self, query: LinkQuery | None = None) -> list[ShortLinkModel]:
        """List links matching `query`, sorted

        Refreshes and persists every status first. Records with equal sort
        keys keep their stored (creation) order, whichever the direction.

        Raises (reported through the envelope):
            InvalidQueryError: If the status filter, sort field or sort order is unknown.
            DataStoreError: If the refreshed collection can't be saved.
        """
        query = query or LinkQuery()
        try:
            status = StatusFilter(query.status or StatusFilter.ALL)
            sort_by = SortField(query.sort_by or SortField.CREATED_AT)
            sort_order = SortOrder(query.sort_order or SortOrder.DESC)
        except ValueError as e:
            raise InvalidQueryError(f'Invalid listing query ({e}).') from e

        links = self._sweep(utcnow())

        if query.search:
            term = query.search.lower()
            links = [link for link in links if term in link.original_url.lower() or term in link.shortcode.lower()]

        if status != StatusFilter.ALL:
            links = [link for link in links if str(link.status) == str(status)]

        return sorted(links, key=SORT_KEYS[sort_by], reverse=sort_order == SortOrder.DESC)

    @returns_envelope
    def delete(self, link_id: str) -> None:
        """Permanently delete the link with id `link_id`

        Raises (reported through the envelope):
            LinkNotFoundError: If no link has that id.
            DataStoreError: If the reduced collection can't be saved.
        """
        links = self._load()
        remaining = [link for link in links if link.id != link_id]
        if len(remaining) == len(links):
            raise LinkNotFoundError('URL not found')

        self._save(remaining)
        logger.info('Deleted short link.', extra={'linkId': link_id})

    @returns_envelope
    def stats(self) -> LinkStatsModel:
        """Aggregate counts over the (status-refreshed) collection"""
        links = self._sweep(utcnow())
        active = sum(1 for link in links if link.status == LinkStatus.ACTIVE)
        return LinkStatsModel(
            total_urls=len(links),
            active_urls=active,
            expired_urls=len(links) - active,
            total_clicks=sum(link.clicks for link in links),
        )

    def resolve(self, shortcode: str) -> str | None:
        """Resolve `shortcode` to its original URL and count the click

        Returns:
            str | None:
                The original URL to redirect to. None if the shortcode doesn't
                exist, the link expired (its status is flipped and persisted),
                or the lookup failed.
        """
        try:
            return self._resolve(shortcode)
        except Exception:
            logger.exception('Error handling redirect.', extra={'shortcode': shortcode})
            return None

    def _resolve(self, shortcode: str) -> str | None:
        links = self._load()
        index = next((i for i, link in enumerate(links) if link.shortcode == shortcode), None)
        if index is None:
            logger.info('Shortcode not found.', extra={'shortcode': shortcode})
            return None

        now = utcnow()
        link = links[index]
        if link.is_expired(now):
            links[index] = replace(link, status=LinkStatus.EXPIRED)
            self._save(links)
            logger.info('Short link expired. Redirect denied.', extra={'shortcode': shortcode})
            return None

        links[index] = replace(link, clicks=link.clicks + 1, status=LinkStatus.ACTIVE, last_accessed=now)
        self._save(links)
        logger.debug('Counted click on short link.', extra={'shortcode': shortcode, 'clicks': link.clicks + 1})
        return link.original_url
