"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..errors import StartupError
from ..logging import get_logger
from .context import build_context
from .queries.root import Query

logger = get_logger(__name__)

schema = strawberry.Schema(query=Query)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Catches unresolved type references before the server starts listening.

    Raises:
        StartupError: If the schema is invalid or introspection fails
    """
    graphql_schema = schema._schema

    errors = gql_validate_schema(graphql_schema)
    if errors:
        message = "; ".join(str(e) for e in errors)
        logger.error("GraphQL schema validation failed", error=message)
        raise StartupError(f"GraphQL schema validation failed: {message}")

    result = graphql_sync(graphql_schema, get_introspection_query())
    if result.errors:
        message = "; ".join(str(e) for e in result.errors)
        logger.error("GraphQL introspection failed", error=message)
        raise StartupError(f"GraphQL introspection failed: {message}")

    logger.info("GraphQL schema validation successful")


def export_sdl() -> str:
    """Return the schema in GraphQL SDL form."""
    return schema.as_str()


def create_graphql_router(graphiql: bool = True) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""

    async def get_context(request: Request) -> dict[str, Any]:
        return build_context(request)

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
