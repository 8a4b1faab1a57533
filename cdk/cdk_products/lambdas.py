"""Lambda function definitions for the products stack.

This module creates the single Lambda function backing every GraphQL
operation and wires it to the products table:
- Function from the src/ code asset (handlers.product_operations)
- Full read/write grant on the products table
- PRODUCT_TABLE environment variable holding the table name
"""

import os
from typing import TYPE_CHECKING, Any

from aws_cdk import Duration
from aws_cdk import aws_iam as iam
from aws_cdk import aws_lambda as lambda_
from constructs import Construct

if TYPE_CHECKING:
    from aws_cdk import aws_dynamodb as dynamodb

PRODUCT_HANDLER = "handlers.product_operations.lambda_handler"
PRODUCT_TABLE_ENV = "PRODUCT_TABLE"

# Use only the src directory for Lambda code (not the entire repo)
LAMBDA_CODE_PATH = os.path.join(os.path.dirname(__file__), "..", "..", "src")


def create_lambda_functions(
    scope: Construct,
    rn: Any,  # Resource naming function
    products_table: "dynamodb.Table",
    code_path: str = LAMBDA_CODE_PATH,
) -> dict[str, lambda_.Function | iam.Grant]:
    """Create the product Lambda function and connect it to the table.

    Args:
        scope: CDK construct scope
        rn: Resource naming function (name -> formatted name)
        products_table: Products DynamoDB table
        code_path: Directory holding the handler package

    Returns:
        Dictionary containing the function and its table grant
    """
    lambda_code = lambda_.Code.from_asset(
        code_path,
        exclude=[
            "__pycache__",
            "*.pyc",
            ".pytest_cache",
        ],
    )

    product_handler_fn = lambda_.Function(
        scope,
        "AppSyncProductHandler",
        function_name=rn("cdk-products-handler"),
        runtime=lambda_.Runtime.PYTHON_3_13,
        handler=PRODUCT_HANDLER,
        code=lambda_code,
        timeout=Duration.seconds(30),
        memory_size=1024,
    )

    products_table_grant = products_table.grant_full_access(product_handler_fn)

    product_handler_fn.add_environment(PRODUCT_TABLE_ENV, products_table.table_name)

    return {
        "product_handler_fn": product_handler_fn,
        "products_table_grant": products_table_grant,
    }
