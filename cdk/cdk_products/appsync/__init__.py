"""
GraphQL layer of the products stack.

    schema.py            synth-time checks of the schema asset
    api.py               GraphqlApi (API key default auth, Cognito additional auth)
    datasources.py       Lambda data source
    resolver_builder.py  operation -> resolver binding
    resolvers/           query and mutation field lists
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from aws_cdk import aws_appsync as appsync
from constructs import Construct

from .api import create_appsync_api
from .datasources import create_lambda_datasources
from .resolvers import PRODUCT_OPERATIONS, create_resolvers
from .schema import SCHEMA_PATH, SchemaValidationError, validate_schema

if TYPE_CHECKING:
    from aws_cdk import aws_cognito as cognito
    from aws_cdk import aws_lambda as lambda_


@dataclass
class AppSyncResources:
    """What setup_appsync built."""

    api: appsync.GraphqlApi
    lambda_datasources: dict[str, appsync.LambdaDataSource]
    resolvers: list[appsync.Resolver] = field(default_factory=list)


def setup_appsync(
    scope: Construct,
    resource_name: Any,  # Callable[[str], str]
    user_pool: "cognito.IUserPool",
    lambda_functions: dict[str, "lambda_.IFunction"],
    schema_path: Path | str = SCHEMA_PATH,
) -> AppSyncResources:
    """
    Build the API, its Lambda data source and one resolver per operation.

    Args:
        scope: CDK construct scope
        resource_name: Resource naming function
        user_pool: Pool accepted as the additional auth mode
        lambda_functions: Functions by key ("product_handler")
        schema_path: Schema asset, already validated by the caller
    """
    api = create_appsync_api(scope, resource_name, user_pool, schema_path=schema_path)
    lambda_datasources = create_lambda_datasources(api, lambda_functions)

    return AppSyncResources(
        api=api,
        lambda_datasources=lambda_datasources,
        resolvers=create_resolvers(scope, api, lambda_datasources),
    )


__all__ = [
    "AppSyncResources",
    "PRODUCT_OPERATIONS",
    "SCHEMA_PATH",
    "SchemaValidationError",
    "setup_appsync",
    "validate_schema",
]
