"""AppSync resolvers module for GraphQL API.

This module provides resolver creation for the AppSync GraphQL API,
organized into:
- mutations: Mutation resolvers (create, update, delete operations)
- queries: Query resolvers (read operations)
"""

from aws_cdk import aws_appsync as appsync
from constructs import Construct

from ..resolver_builder import ResolverBuilder
from .mutations import MUTATION_FIELDS, create_mutation_resolvers
from .queries import QUERY_FIELDS, create_query_resolvers

# Every (type name, field name) pair fulfilled by the product Lambda
PRODUCT_OPERATIONS: tuple[tuple[str, str], ...] = tuple(
    [("Query", field_name) for field_name in QUERY_FIELDS]
    + [("Mutation", field_name) for field_name in MUTATION_FIELDS]
)

__all__ = [
    "PRODUCT_OPERATIONS",
    "create_resolvers",
    "create_mutation_resolvers",
    "create_query_resolvers",
]


def create_resolvers(
    scope: Construct,
    api: appsync.GraphqlApi,
    lambda_datasources: dict[str, appsync.LambdaDataSource],
) -> list[appsync.Resolver]:
    """
    Create all AppSync resolvers for the GraphQL API.

    Queries and mutations share one builder so a field bound twice is
    rejected.

    Args:
        scope: CDK construct scope
        api: AppSync GraphQL API
        lambda_datasources: Dictionary of Lambda data sources

    Returns:
        All created resolvers, queries first
    """
    builder = ResolverBuilder(api, lambda_datasources, scope)

    resolvers = create_query_resolvers(scope, api, lambda_datasources, builder)
    resolvers += create_mutation_resolvers(scope, api, lambda_datasources, builder)
    return resolvers
