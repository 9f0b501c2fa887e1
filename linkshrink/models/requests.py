"""Inputs accepted by LinkService operations

Classes:
    CreateLinkRequest:
        Raw form values submitted to create a short link.
    LinkQuery:
        Filter and sort options for listing links.
"""

from dataclasses import dataclass

from linkshrink.constants import SortField, SortOrder, StatusFilter


@dataclass(frozen=True)
class CreateLinkRequest:
    """Raw values for a new short link.

    NOTE: `custom_domain` is accepted for compatibility with the submission form
          but plays no part in the stored short URL.
    """

    original_url: str
    custom_alias: str | None = None
    custom_domain: str | None = None
    expiry_days: int | None = None


@dataclass(frozen=True)
class LinkQuery:
    """Listing options. Values are plain strings so that raw query parameters can be passed through."""

    search: str | None = None
    status: str = StatusFilter.ALL
    sort_by: str = SortField.CREATED_AT
    sort_order: str = SortOrder.DESC
