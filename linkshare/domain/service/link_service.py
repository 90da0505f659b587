"""Link domain service."""

from typing import List, Optional

import logfire

from linkshare.config import ListingSettings
from linkshare.domain.error import OutOfRangeError
from linkshare.domain.model.link import Link
from linkshare.domain.repository import LinkRepository
from linkshare.domain.value import LinkFilter, LinkId, LinkOrder, Page, UserId, parse_id

from .base import Service


class LinkService(Service):
    """Domain service for link operations."""

    def __init__(
        self, link_repository: LinkRepository, listing_settings: ListingSettings
    ) -> None:
        """Initialize link service.

        Args:
            link_repository: Link repository
            listing_settings: Page size limits for listings
        """
        self.link_repository = link_repository
        self.listing = listing_settings

    def page(self, skip: Optional[int] = None, take: Optional[int] = None) -> Page:
        """Validate a skip/take window.

        Args:
            skip: Links to skip, defaults to 0
            take: Page size, defaults to the configured default

        Returns:
            Validated page

        Raises:
            OutOfRangeError: If take is outside the configured range or skip
                is negative
        """
        take = self.listing.default_take if take is None else take
        if take < self.listing.min_take or take > self.listing.max_take:
            raise OutOfRangeError(
                "take", take, self.listing.min_take, self.listing.max_take
            )

        skip = 0 if skip is None else skip
        if skip < 0:
            raise OutOfRangeError("skip", skip, 0, None)

        return Page(skip=skip, take=take)

    async def list_links(
        self,
        filter_needle: Optional[str] = None,
        skip: Optional[int] = None,
        take: Optional[int] = None,
        order: Optional[LinkOrder] = None,
    ) -> List[Link]:
        """List links, optionally filtered by a substring of description or url.

        Pagination is validated before any data access.

        Raises:
            OutOfRangeError: If the pagination window is invalid
        """
        page = self.page(skip, take)
        link_filter = LinkFilter(needle=filter_needle) if filter_needle else None

        with logfire.span(
            "link_service.list_links",
            filter_needle=filter_needle,
            skip=page.skip,
            take=page.take,
        ):
            links = await self.link_repository.find_many(
                page=page, link_filter=link_filter, order=order
            )
            logfire.info("Links listed", count=len(links))
            return links

    async def get_link(self, raw_id: str) -> Optional[Link]:
        """Look up a link by a client supplied id.

        Returns None for ids that are not plain digit strings.
        """
        link_id = parse_id(raw_id)
        if link_id is None:
            return None
        return await self.link_repository.find_by_id(LinkId(link_id))

    async def get_link_by_id(self, link_id: LinkId) -> Optional[Link]:
        """Get a link by ID."""
        return await self.link_repository.find_by_id(link_id)

    async def links_by_author(self, author_id: UserId) -> List[Link]:
        """All links posted by a user."""
        return await self.link_repository.find_by_author(author_id)

    async def create_link(
        self, url: str, description: str, author_id: Optional[UserId]
    ) -> Link:
        """Create a link.

        Args:
            url: Link target
            description: Link description
            author_id: Posting user, None for anonymous links

        Returns:
            Created link
        """
        with logfire.span("link_service.create_link", author_id=author_id):
            result = await self.link_repository.create(
                url=url, description=description, author_id=author_id
            )
            link = result.unwrap()
            logfire.info("Link created", link_id=link.id, author_id=author_id)
            return link
