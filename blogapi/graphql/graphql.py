"""GraphQL application configuration."""

import strawberry
from strawberry.fastapi import GraphQLRouter

from .context import get_context
from .mutations import Mutation
from .queries import Query

schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def create_graphql_router(graphiql: bool = True) -> GraphQLRouter:
    """Create the router serving the schema, optionally with the GraphiQL IDE."""
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphiql else None,
    )
