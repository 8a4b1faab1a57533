"""
Products table access for the Lambda.

The table name is injected by the stack as ``PRODUCT_TABLE``; the table
object is resolved on every access so tests can switch environments, and a
module-level override lets tests hand in a moto or mock table directly.
"""

import os
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterator, Optional

import boto3

if TYPE_CHECKING:
    from mypy_boto3_dynamodb import DynamoDBServiceResource
    from mypy_boto3_dynamodb.service_resource import Table


PRODUCT_TABLE_ENV = "PRODUCT_TABLE"

_table_overrides: dict[str, Optional["Table"]] = {}


def get_required_env(name: str, default: Optional[str] = None) -> str:
    """
    Value of an environment variable that the deployment must set.

    Raises:
        ValueError: If it is unset and no default was given
    """
    value = os.environ.get(name, default)
    if value is None:
        raise ValueError(f"Required environment variable '{name}' is not set")
    return value


def _get_dynamodb() -> "DynamoDBServiceResource":
    # DYNAMODB_ENDPOINT points at DynamoDB Local / LocalStack when set
    return boto3.resource("dynamodb", endpoint_url=os.getenv("DYNAMODB_ENDPOINT"))


class TableAccessor:
    """Process-wide accessor for the tables this function uses."""

    _instance: Optional["TableAccessor"] = None

    def __new__(cls) -> "TableAccessor":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def products(self) -> "Table":
        """The products table (name from PRODUCT_TABLE)."""
        override = _table_overrides.get("products")
        if override is not None:
            return override
        # Name first: a missing variable must surface as ValueError, not NoRegionError
        table_name = get_required_env(PRODUCT_TABLE_ENV)
        return _get_dynamodb().Table(table_name)


tables = TableAccessor()


def iterate_pages(operation: Callable[..., Dict[str, Any]], **kwargs: Any) -> Iterator[Dict[str, Any]]:
    """
    Yield every item of a paginated scan or query.

    Args:
        operation: Bound table method (e.g. table.scan, table.query)
        **kwargs: Arguments passed to every call

    Yields:
        DynamoDB items across all pages
    """
    while True:
        response = operation(**kwargs)
        yield from response.get("Items", [])
        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            return
        kwargs["ExclusiveStartKey"] = last_key


def override_table(table_name: str, table: Optional["Table"]) -> None:
    """Use ``table`` instead of the real one (None removes the override)."""
    _table_overrides[table_name] = table


def clear_all_overrides() -> None:
    _table_overrides.clear()


def reset_singleton() -> None:
    TableAccessor._instance = None
