"""Per-request GraphQL context."""

from collections.abc import AsyncIterator
from typing import TypeVar

from dishka import AsyncContainer
from starlette.requests import HTTPConnection
from strawberry.fastapi import BaseContext

from linkshare.adapter.pubsub import EventBus
from linkshare.domain.model import ResolvedCaller
from linkshare.domain.service import IdentityService
from linkshare.interface.error import ContainerNotConfiguredError

T = TypeVar("T")


class GraphQLContext(BaseContext):
    """Everything a resolver may use: the caller, services and the bus.

    Built once per HTTP request, or once per WebSocket connection for
    subscriptions, and never shared between them.
    """

    def __init__(
        self,
        container: AsyncContainer,
        caller: ResolvedCaller,
        event_bus: EventBus,
    ) -> None:
        super().__init__()
        self.container = container
        self.caller = caller
        self.event_bus = event_bus

    async def get(self, dependency: type[T]) -> T:
        """Resolve a service or use case from the request container."""
        return await self.container.get(dependency)


async def get_context(connection: HTTPConnection) -> AsyncIterator[GraphQLContext]:
    """FastAPI dependency building the GraphQL context.

    Opens a REQUEST scope on the application container for the lifetime of
    the request (or WebSocket connection) and resolves the caller from the
    ``Authorization`` header. Identity resolution never fails the request;
    bad credentials make the caller anonymous.
    """
    root: AsyncContainer | None = getattr(
        connection.app.state, "dishka_container", None
    )
    if root is None:
        raise ContainerNotConfiguredError()

    async with root() as container:
        identity_service = await container.get(IdentityService)
        caller = await identity_service.resolve(connection.headers.get("authorization"))
        event_bus = await container.get(EventBus)
        yield GraphQLContext(container=container, caller=caller, event_bus=event_bus)
