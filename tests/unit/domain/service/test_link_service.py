"""Unit tests for LinkService."""

import pytest

from linkshare.domain.error import OutOfRangeError
from linkshare.domain.repository import LinkRepository, UserRepository
from linkshare.domain.service import LinkService
from linkshare.domain.value import LinkOrder, SortDirection
from linkshare.persistence.repository.inmemory import (
    InMemoryLinkRepository,
    InMemoryStore,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class CountingLinkRepository(InMemoryLinkRepository):
    """Records listing queries."""

    def __init__(self, store: InMemoryStore) -> None:
        super().__init__(store)
        self.find_many_calls = 0

    async def find_many(self, page, link_filter=None, order=None):
        self.find_many_calls += 1
        return await super().find_many(page, link_filter, order)


async def post_links(link_service: LinkService, count: int) -> None:
    for i in range(count):
        await link_service.create_link(
            url=f"https://example.com/{i}", description=f"Link {i}", author_id=None
        )


class TestPagination:
    """take/skip validation for allLink."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("take", [0, 51, -1])
    async def test_take_outside_range_fails(self, unit_env, take):
        link_service = await unit_env.get(LinkService)

        with pytest.raises(OutOfRangeError) as exc_info:
            await link_service.list_links(take=take)

        assert str(exc_info.value) == (
            f"'take' argument value '{take}' is outside the valid range of '1' to '50'."
        )
        assert exc_info.value.code == "OUT_OF_RANGE"

    @pytest.mark.asyncio
    async def test_out_of_range_fails_before_data_access(self, listing_settings):
        repo = CountingLinkRepository(InMemoryStore())
        link_service = LinkService(link_repository=repo, listing_settings=listing_settings)

        with pytest.raises(OutOfRangeError):
            await link_service.list_links(take=0)

        assert repo.find_many_calls == 0

    @pytest.mark.asyncio
    async def test_default_take_is_30(self, unit_env):
        link_service = await unit_env.get(LinkService)
        await post_links(link_service, 35)

        links = await link_service.list_links()

        assert len(links) == 30

    @pytest.mark.asyncio
    @pytest.mark.parametrize("take", [1, 50])
    async def test_take_at_bounds_succeeds(self, unit_env, take):
        link_service = await unit_env.get(LinkService)
        await post_links(link_service, 55)

        links = await link_service.list_links(take=take)

        assert len(links) == take

    @pytest.mark.asyncio
    async def test_skip_offsets_results(self, unit_env):
        link_service = await unit_env.get(LinkService)
        await post_links(link_service, 5)

        links = await link_service.list_links(skip=3, take=10)

        assert [link.description for link in links] == ["Link 3", "Link 4"]

    @pytest.mark.asyncio
    async def test_negative_skip_fails(self, unit_env):
        link_service = await unit_env.get(LinkService)

        with pytest.raises(OutOfRangeError) as exc_info:
            await link_service.list_links(skip=-1)

        assert exc_info.value.argument == "skip"


class TestFilterAndOrder:
    """filterNeedle and orderBy."""

    @pytest.mark.asyncio
    async def test_filter_matches_description_or_url(self, unit_env):
        link_service = await unit_env.get(LinkService)
        await link_service.create_link("https://graphql.org", "Spec site", None)
        await link_service.create_link("https://python.org", "All about graphql", None)
        await link_service.create_link("https://rust-lang.org", "Rust", None)

        links = await link_service.list_links(filter_needle="graphql")

        assert {link.url for link in links} == {
            "https://graphql.org",
            "https://python.org",
        }

    @pytest.mark.asyncio
    async def test_empty_filter_returns_everything(self, unit_env):
        link_service = await unit_env.get(LinkService)
        await post_links(link_service, 3)

        links = await link_service.list_links(filter_needle="")

        assert len(links) == 3

    @pytest.mark.asyncio
    async def test_order_by_description_descending(self, unit_env):
        link_service = await unit_env.get(LinkService)
        for description in ("b", "c", "a"):
            await link_service.create_link(f"https://{description}.io", description, None)

        links = await link_service.list_links(
            order=LinkOrder(description=SortDirection.DESC)
        )

        assert [link.description for link in links] == ["c", "b", "a"]


class TestLookups:
    """uniqueLink and relation lookups."""

    @pytest.mark.asyncio
    async def test_get_link_by_numeric_id(self, unit_env):
        link_service = await unit_env.get(LinkService)
        created = await link_service.create_link("https://a.io", "a", None)

        found = await link_service.get_link(str(created.id))

        assert found == created

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "raw_id", ["abc", "", "-1", "1.5", " 1", "1 ", "1\n", "\u0661", "99999999999"]
    )
    async def test_non_numeric_id_returns_none(self, unit_env, raw_id):
        link_service = await unit_env.get(LinkService)
        await link_service.create_link("https://a.io", "a", None)

        assert await link_service.get_link(raw_id) is None

    @pytest.mark.asyncio
    async def test_links_by_author(self, unit_env):
        link_service = await unit_env.get(LinkService)
        user_repo = await unit_env.get(UserRepository)
        author = (await user_repo.create("a@example.com", "hash", "Ann")).unwrap()

        await link_service.create_link("https://mine.io", "mine", author.id)
        await link_service.create_link("https://anon.io", "anon", None)

        links = await link_service.links_by_author(author.id)

        assert [link.url for link in links] == ["https://mine.io"]

    @pytest.mark.asyncio
    async def test_create_link_persists(self, unit_env):
        link_service = await unit_env.get(LinkService)
        link_repo = await unit_env.get(LinkRepository)

        link = await link_service.create_link("https://a.io", "a", None)

        assert await link_repo.find_by_id(link.id) == link
        assert link.author_id is None
