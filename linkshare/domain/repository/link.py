"""Link repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from linkshare.domain.model.link import Link
from linkshare.domain.repository.result import WriteResult
from linkshare.domain.value import LinkFilter, LinkId, LinkOrder, Page, UserId


class LinkRepository(ABC):
    """Repository for Link entity."""

    @abstractmethod
    async def find_by_id(self, link_id: LinkId) -> Optional[Link]:
        """Find a link by ID.

        Args:
            link_id: The link's unique identifier

        Returns:
            The link if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_many(
        self,
        page: Page,
        link_filter: Optional[LinkFilter] = None,
        order: Optional[LinkOrder] = None,
    ) -> List[Link]:
        """Find links matching a filter, one page at a time.

        Without an order, links come back in insertion (id) order.

        Args:
            page: Skip/take window, already validated
            link_filter: Optional substring filter on description or url
            order: Optional ordering

        Returns:
            List of links in the requested window
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Link]:
        """Find all links posted by a user.

        Args:
            author_id: The author's user ID

        Returns:
            List of links by the author
        """
        pass

    @abstractmethod
    async def create(
        self, url: str, description: str, author_id: Optional[UserId] = None
    ) -> WriteResult[Link]:
        """Create a link.

        Args:
            url: Link target
            description: Link description
            author_id: Posting user, None for anonymous links

        Returns:
            OK with the created link, or a FOREIGN_KEY violation if the
            author does not exist
        """
        pass
