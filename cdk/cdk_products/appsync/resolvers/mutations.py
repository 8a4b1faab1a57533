"""Mutation resolvers for AppSync GraphQL API."""

from aws_cdk import aws_appsync as appsync
from constructs import Construct

from ..resolver_builder import ResolverBuilder

# Field names must match schema.graphql exactly
MUTATION_FIELDS: tuple[str, ...] = (
    "createProduct",
    "deleteProduct",
    "updateProduct",
)


def create_mutation_resolvers(
    scope: Construct,
    api: appsync.GraphqlApi,
    lambda_datasources: dict[str, appsync.LambdaDataSource],
    builder: ResolverBuilder | None = None,
) -> list[appsync.Resolver]:
    """Create the create/delete/update product resolvers."""
    builder = builder or ResolverBuilder(api, lambda_datasources, scope)
    return builder.bind_all(("Mutation", field_name) for field_name in MUTATION_FIELDS)
