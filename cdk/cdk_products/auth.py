"""Cognito User Pool authentication configuration for the products stack.

This module creates and configures:
- Cognito User Pool with self sign-up and email code verification
- User Pool Client used by front ends to authenticate against the pool
"""

from typing import Any

from aws_cdk import CfnOutput, RemovalPolicy
from aws_cdk import aws_cognito as cognito
from constructs import Construct


def _create_user_verification() -> cognito.UserVerificationConfig:
    """Verification emails carry a one-time code rather than a link."""
    return cognito.UserVerificationConfig(email_style=cognito.VerificationEmailStyle.CODE)


def _create_standard_attributes() -> cognito.StandardAttributes:
    """Email is the only standard attribute, required and mutable."""
    return cognito.StandardAttributes(
        email=cognito.StandardAttribute(required=True, mutable=True),
    )


def create_cognito_auth(
    scope: Construct,
    rn: Any,  # Resource naming function
    removal_policy: RemovalPolicy = RemovalPolicy.DESTROY,
) -> dict[str, Any]:
    """Create the Cognito User Pool and its client.

    Args:
        scope: CDK construct scope
        rn: Resource naming function (name -> formatted name)
        removal_policy: What happens to the pool when the stack is deleted

    Returns:
        Dictionary containing user_pool and user_pool_client
    """
    user_pool_name = rn("cdk-products-user-pool")
    print(f"Creating User Pool: {user_pool_name}")

    user_pool = cognito.UserPool(
        scope,
        "cdk-products-user-pool",
        user_pool_name=user_pool_name,
        self_sign_up_enabled=True,
        account_recovery=cognito.AccountRecovery.PHONE_WITHOUT_MFA_AND_EMAIL,
        user_verification=_create_user_verification(),
        auto_verify=cognito.AutoVerifiedAttrs(email=True),
        standard_attributes=_create_standard_attributes(),
        removal_policy=removal_policy,
    )

    # Sibling of the pool, not a child: references user_pool_id only
    user_pool_client = cognito.UserPoolClient(
        scope,
        "UserPoolClient",
        user_pool=user_pool,
    )

    _output_user_pool_ids(scope, user_pool, user_pool_client)

    return {
        "user_pool": user_pool,
        "user_pool_client": user_pool_client,
    }


def _output_user_pool_ids(
    scope: Construct, user_pool: cognito.UserPool, user_pool_client: cognito.UserPoolClient
) -> None:
    """Output the pool and client IDs front ends need to sign users in."""
    CfnOutput(
        scope,
        "UserPoolId",
        value=user_pool.user_pool_id,
        description="Cognito User Pool ID",
    )

    CfnOutput(
        scope,
        "UserPoolClientId",
        value=user_pool_client.user_pool_client_id,
        description="Cognito User Pool Client ID",
    )
