"""
Test fixtures for Lambda function tests.

Provides common test data and a mocked products table.
"""

from decimal import Decimal
from typing import Any, Dict, Generator

import boto3
import pytest
from moto import mock_aws

PRODUCTS_TABLE_NAME = "cdk-products-ue1-dev"


@pytest.fixture
def aws_credentials() -> None:
    """Set fake AWS credentials for moto."""
    import os

    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
    # Injected by the stack into the product handler
    os.environ["PRODUCT_TABLE"] = PRODUCTS_TABLE_NAME


@pytest.fixture
def dynamodb_table(aws_credentials: None) -> Generator[Any, None, None]:
    """Create the mock products table with the category index."""
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name="us-east-1")

        products_table = dynamodb.create_table(
            TableName=PRODUCTS_TABLE_NAME,
            KeySchema=[
                {"AttributeName": "id", "KeyType": "HASH"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "id", "AttributeType": "S"},
                {"AttributeName": "category", "AttributeType": "S"},
            ],
            GlobalSecondaryIndexes=[
                {
                    "IndexName": "productsByCatergory",
                    "KeySchema": [
                        {"AttributeName": "category", "KeyType": "HASH"},
                    ],
                    "Projection": {"ProjectionType": "ALL"},
                },
            ],
            BillingMode="PAY_PER_REQUEST",
        )

        yield products_table


@pytest.fixture
def sample_product() -> Dict[str, Any]:
    """ProductInput as sent by a client (no id)."""
    return {
        "name": "Caramel Corn",
        "description": "Classic caramel popcorn, 10oz tin",
        "price": 12.5,
        "category": "snacks",
        "sku": "SNK-001",
        "inventory": 40,
    }


@pytest.fixture
def stored_product(dynamodb_table: Any) -> Dict[str, Any]:
    """A product already present in the table."""
    item = {
        "id": "prod-123",
        "name": "Kettle Corn",
        "description": "Sweet and salty",
        "price": Decimal("8.75"),
        "category": "snacks",
        "sku": "SNK-002",
        "inventory": 12,
        "createdAt": "2026-01-01T00:00:00+00:00",
        "updatedAt": "2026-01-01T00:00:00+00:00",
    }
    dynamodb_table.put_item(Item=item)
    return item


@pytest.fixture
def lambda_context() -> Any:
    """Mock Lambda context."""

    class Context:
        function_name = "test-function"
        memory_limit_in_mb = 1024
        invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-function"
        aws_request_id = "test-request-id"

    return Context()


@pytest.fixture
def appsync_event() -> Dict[str, Any]:
    """Base AppSync event structure (Cognito caller)."""
    return {
        "arguments": {},
        "identity": {
            "sub": "user-123-456",
            "username": "testuser",
        },
        "requestContext": {
            "requestId": "test-correlation-id",
        },
        "info": {
            "fieldName": "testField",
            "parentTypeName": "Query",
        },
    }


@pytest.fixture
def make_event(appsync_event: Dict[str, Any]) -> Any:
    """Factory for events targeting a given field with the given arguments."""

    def _make(field_name: str, parent: str = "Query", **arguments: Any) -> Dict[str, Any]:
        return {
            **appsync_event,
            "arguments": arguments,
            "info": {"fieldName": field_name, "parentTypeName": parent},
        }

    return _make
