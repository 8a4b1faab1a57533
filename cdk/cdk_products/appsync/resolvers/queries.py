"""Query resolvers for AppSync GraphQL API."""

from aws_cdk import aws_appsync as appsync
from constructs import Construct

from ..resolver_builder import ResolverBuilder

# Field names must match schema.graphql exactly (including productsByCatergory)
QUERY_FIELDS: tuple[str, ...] = (
    "getProductById",
    "listProducts",
    "productsByCatergory",
)


def create_query_resolvers(
    scope: Construct,
    api: appsync.GraphqlApi,
    lambda_datasources: dict[str, appsync.LambdaDataSource],
    builder: ResolverBuilder | None = None,
) -> list[appsync.Resolver]:
    """
    Create all AppSync query resolvers.

    Args:
        scope: CDK construct scope
        api: AppSync GraphQL API
        lambda_datasources: Dictionary of Lambda data sources
        builder: Shared builder (one is created when omitted)

    Returns:
        The created resolvers
    """
    builder = builder or ResolverBuilder(api, lambda_datasources, scope)
    return builder.bind_all(("Query", field_name) for field_name in QUERY_FIELDS)
