"""In-memory link repository for testing."""

from datetime import datetime, timezone
from typing import List, Optional

from linkshare.domain.model import Link
from linkshare.domain.repository import ConstraintKind, LinkRepository, WriteResult
from linkshare.domain.value import LinkFilter, LinkId, LinkOrder, Page, SortDirection, UserId
from linkshare.persistence.repository.inmemory.store import InMemoryStore, checkpoint


class InMemoryLinkRepository(LinkRepository):
    """In-memory implementation of LinkRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, link_id: LinkId) -> Optional[Link]:
        """Find a link by ID."""
        link = self._store.links.get(link_id)
        await checkpoint()
        return link

    async def find_many(
        self,
        page: Page,
        link_filter: Optional[LinkFilter] = None,
        order: Optional[LinkOrder] = None,
    ) -> List[Link]:
        """Find links matching a filter, one page at a time."""
        links = sorted(self._store.links.values(), key=lambda link: link.id)

        if link_filter is not None:
            links = [
                link for link in links if link_filter.matches(link.description, link.url)
            ]

        if order is not None:
            # Stable sorts applied from lowest to highest priority
            for field, direction in reversed(order.clauses()):
                links.sort(
                    key=lambda link: getattr(link, field),
                    reverse=direction is SortDirection.DESC,
                )

        await checkpoint()
        return links[page.skip : page.skip + page.take]

    async def find_by_author(self, author_id: UserId) -> List[Link]:
        """Find all links posted by a user."""
        links = [
            link
            for link in sorted(self._store.links.values(), key=lambda link: link.id)
            if link.author_id == author_id
        ]
        await checkpoint()
        return links

    async def create(
        self, url: str, description: str, author_id: Optional[UserId] = None
    ) -> WriteResult[Link]:
        """Create a link."""
        if author_id is not None and author_id not in self._store.users:
            return WriteResult.violated(ConstraintKind.FOREIGN_KEY, "links_author_id_fkey")
        link = Link(
            id=LinkId(self._store.next_id("links")),
            url=url,
            description=description,
            created_at=datetime.now(timezone.utc),
            author_id=author_id,
        )
        self._store.links[link.id] = link
        return WriteResult.ok(link)
