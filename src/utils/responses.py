"""
GraphQL response builders for Lambda resolvers.

Provides consistent response structures for AppSync GraphQL resolvers.
"""

from typing import Any, Dict, List, Optional, TypedDict, cast


class ProductResponse(TypedDict, total=False):
    """GraphQL Product response type."""

    id: str
    name: str
    description: str
    price: float
    category: str
    sku: str
    inventory: int
    createdAt: Optional[str]
    updatedAt: Optional[str]


def build_product_response(item: Dict[str, Any]) -> ProductResponse:
    """
    Build a Product response from a DynamoDB item.

    DynamoDB returns numbers as Decimal; GraphQL Float and Int need plain
    Python numbers.

    Args:
        item: DynamoDB item dictionary

    Returns:
        ProductResponse with normalized field types
    """
    price = item.get("price")
    try:
        price = float(price) if price is not None else 0.0
    except (ValueError, TypeError):
        price = 0.0

    inventory = item.get("inventory")
    try:
        inventory = int(inventory) if inventory is not None else 0
    except (ValueError, TypeError):
        inventory = 0

    return ProductResponse(
        id=cast(str, item.get("id", "")),
        name=cast(str, item.get("name", "")),
        description=cast(str, item.get("description", "")),
        price=price,
        category=cast(str, item.get("category", "")),
        sku=cast(str, item.get("sku", "")),
        inventory=inventory,
        createdAt=item.get("createdAt"),
        updatedAt=item.get("updatedAt"),
    )


def build_list_response(items: List[Dict[str, Any]], builder: Any) -> List[Any]:
    """
    Build a list of responses using a builder function.

    Args:
        items: List of DynamoDB items
        builder: Builder function to apply to each item

    Returns:
        List of built responses
    """
    return [builder(item) for item in items]
