"""GraphQL interface."""

from linkshare.interface.graphql.context import GraphQLContext, get_context
from linkshare.interface.graphql.schema import schema

__all__ = ["GraphQLContext", "get_context", "schema"]
