"""AppSync API creation."""

from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any

from aws_cdk import CfnOutput, Duration, Expiration
from aws_cdk import aws_appsync as appsync
from constructs import Construct

from .schema import SCHEMA_PATH

if TYPE_CHECKING:
    from aws_cdk import aws_cognito as cognito

API_KEY_VALIDITY_DAYS = 365


def get_api_key_expiration(scope: Construct) -> Expiration:
    """
    Expiration for the default API key.

    When the ``api_key_issued_on`` context value (ISO date) is set the expiry
    is a fixed instant, so repeated synths produce the same template. Without
    it the key expires a year after synthesis.

    Args:
        scope: Construct used to read CDK context

    Returns:
        Expiration for the API key

    Raises:
        ValueError: If the context value is not an ISO date
    """
    issued_on = scope.node.try_get_context("api_key_issued_on")
    if not issued_on:
        return Expiration.after(Duration.days(API_KEY_VALIDITY_DAYS))

    issued = date.fromisoformat(str(issued_on))
    expires = datetime(issued.year, issued.month, issued.day, tzinfo=timezone.utc) + timedelta(
        days=API_KEY_VALIDITY_DAYS
    )
    return Expiration.at_timestamp(int(expires.timestamp() * 1000))


def create_appsync_api(
    scope: Construct,
    resource_name: Any,  # Callable[[str], str]
    user_pool: "cognito.IUserPool",
    schema_path: Path | str = SCHEMA_PATH,
) -> appsync.GraphqlApi:
    """
    Create the AppSync GraphQL API with API key and Cognito authorization.

    Args:
        scope: CDK construct scope
        resource_name: Function to generate resource names
        user_pool: Cognito User Pool accepted as an additional auth mode
        schema_path: Path to the GraphQL schema asset

    Returns:
        The created GraphQL API
    """
    api_name = resource_name("cdk-product-api")
    print(f"Creating AppSync API: {api_name}")

    api = appsync.GraphqlApi(
        scope,
        "cdk-product-app",
        name=api_name,
        definition=appsync.Definition.from_file(str(schema_path)),
        authorization_config=appsync.AuthorizationConfig(
            default_authorization=appsync.AuthorizationMode(
                authorization_type=appsync.AuthorizationType.API_KEY,
                api_key_config=appsync.ApiKeyConfig(expires=get_api_key_expiration(scope)),
            ),
            additional_authorization_modes=[
                appsync.AuthorizationMode(
                    authorization_type=appsync.AuthorizationType.USER_POOL,
                    user_pool_config=appsync.UserPoolConfig(user_pool=user_pool),
                ),
            ],
        ),
        log_config=appsync.LogConfig(
            field_log_level=appsync.FieldLogLevel.ALL,
        ),
    )

    CfnOutput(
        scope,
        "GraphQLAPIUrl",
        value=api.graphql_url,
        description="AppSync GraphQL endpoint",
    )

    CfnOutput(
        scope,
        "AppSyncAPIKey",
        value=api.api_key or "",
        description="AppSync API key (default authorization mode)",
    )

    return api
