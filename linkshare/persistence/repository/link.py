"""PostgreSQL implementation of Link repository."""

from typing import List, Optional

from sqlalchemy import asc, desc, or_, select

from linkshare.domain.model import Link
from linkshare.domain.repository import LinkRepository, WriteResult
from linkshare.domain.value import (
    LinkFilter,
    LinkId,
    LinkOrder,
    Page,
    SortDirection,
    UserId,
)
from linkshare.persistence.mappers import row_to_link
from linkshare.persistence.repository.base import PostgresRepository
from linkshare.persistence.tables import links_table


class PostgresLinkRepository(PostgresRepository, LinkRepository):
    """PostgreSQL implementation of LinkRepository."""

    async def find_by_id(self, link_id: LinkId) -> Optional[Link]:
        """Find a link by ID."""
        stmt = select(links_table).where(links_table.c.id == link_id)
        return await self._fetch_one(stmt, row_to_link)

    async def find_many(
        self,
        page: Page,
        link_filter: Optional[LinkFilter] = None,
        order: Optional[LinkOrder] = None,
    ) -> List[Link]:
        """Find links matching a filter, one page at a time."""
        stmt = select(links_table)

        if link_filter is not None:
            # contains() escapes LIKE wildcards in the needle
            stmt = stmt.where(
                or_(
                    links_table.c.description.contains(link_filter.needle, autoescape=True),
                    links_table.c.url.contains(link_filter.needle, autoescape=True),
                )
            )

        if order is not None:
            for field, direction in order.clauses():
                column = links_table.c[field]
                stmt = stmt.order_by(
                    asc(column) if direction is SortDirection.ASC else desc(column)
                )
        # Stable pagination
        stmt = stmt.order_by(links_table.c.id)

        stmt = stmt.offset(page.skip).limit(page.take)
        return await self._fetch_all(stmt, row_to_link)

    async def find_by_author(self, author_id: UserId) -> List[Link]:
        """Find all links posted by a user."""
        stmt = (
            select(links_table)
            .where(links_table.c.author_id == author_id)
            .order_by(links_table.c.id)
        )
        return await self._fetch_all(stmt, row_to_link)

    async def create(
        self, url: str, description: str, author_id: Optional[UserId] = None
    ) -> WriteResult[Link]:
        """Create a link."""
        return await self._insert(
            links_table,
            {"url": url, "description": description, "author_id": author_id},
            row_to_link,
        )
