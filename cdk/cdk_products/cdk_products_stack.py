from pathlib import Path

from aws_cdk import CfnOutput, Stack
from constructs import Construct

from .appsync import PRODUCT_OPERATIONS, SCHEMA_PATH, setup_appsync, validate_schema
from .auth import create_cognito_auth
from .dynamodb_tables import create_dynamodb_tables
from .helpers import get_region_abbrev, get_removal_policy, make_resource_namer
from .lambdas import create_lambda_functions
from .topology import apply_dependencies


class CdkProductsStack(Stack):
    """
    CDK Products - Core Infrastructure Stack

    Creates:
    - Cognito User Pool and client for authentication
    - AppSync GraphQL API (API key by default, Cognito as additional mode)
    - Lambda function resolving every product operation
    - DynamoDB products table with the productsByCatergory index
    - Outputs clients need to talk to the API
    """

    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        env_name: str = "dev",
        schema_path: Path | str = SCHEMA_PATH,
        **kwargs,
    ) -> None:
        # Validate the schema before anything is added to the construct tree:
        # a bad asset must not produce a partial template.
        validate_schema(schema_path, PRODUCT_OPERATIONS)

        super().__init__(scope, construct_id, **kwargs)

        self.env_name = env_name

        # Helper for consistent resource naming: {name}-{region}-{env}
        self.region_abbrev = get_region_abbrev()
        rn = make_resource_namer(self.region_abbrev, env_name)
        self.resource_name = rn

        removal_policy = get_removal_policy(self)

        # ====================================================================
        # Cognito User Pool
        # ====================================================================

        auth = create_cognito_auth(self, rn, removal_policy=removal_policy)
        self.user_pool = auth["user_pool"]
        self.user_pool_client = auth["user_pool_client"]

        # ====================================================================
        # Products Table
        # ====================================================================

        tables = create_dynamodb_tables(self, rn, removal_policy=removal_policy)
        self.products_table = tables["products_table"]

        # ====================================================================
        # Lambda Function (grant + PRODUCT_TABLE wiring)
        # ====================================================================

        lambdas = create_lambda_functions(self, rn, self.products_table)
        self.product_handler_fn = lambdas["product_handler_fn"]
        self.products_table_grant = lambdas["products_table_grant"]

        # ====================================================================
        # AppSync GraphQL API
        # ====================================================================

        appsync_resources = setup_appsync(
            self,
            rn,
            user_pool=self.user_pool,
            lambda_functions={"product_handler": self.product_handler_fn},
            schema_path=schema_path,
        )
        self.api = appsync_resources.api
        self.resolvers = appsync_resources.resolvers

        # Resolvers only become usable once the function can reach the table
        self.products_table_grant.apply_before(*self.resolvers)
        apply_dependencies(
            {
                "user_pool": self.user_pool,
                "user_pool_client": self.user_pool_client,
                "api": self.api,
                "function": self.product_handler_fn,
                "table": self.products_table,
                "resolvers": self.resolvers,
            }
        )

        # ====================================================================
        # Outputs
        # ====================================================================

        CfnOutput(
            self,
            "ProjectRegion",
            value=self.region,
            description="Region the stack is deployed to",
        )
