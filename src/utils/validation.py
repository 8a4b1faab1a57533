"""
Input validation utilities.

Validates product input for create and update mutations.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict

from .errors import AppError, ErrorCode

STRING_FIELDS = ("name", "description", "category", "sku")
PRODUCT_FIELDS = STRING_FIELDS + ("price", "inventory")


def _validate_string(field: str, value: Any) -> str:
    """Non-empty string, surrounding whitespace removed."""
    if not isinstance(value, str) or not value.strip():
        raise AppError(ErrorCode.INVALID_INPUT, f"Product {field} must be a non-empty string", {"field": field})
    return value.strip()


def validate_price(price: Any) -> Decimal:
    """
    Validate a product price.

    Args:
        price: Price as sent by the client (Float in GraphQL)

    Returns:
        Price as a Decimal (DynamoDB does not accept floats)

    Raises:
        AppError: If the price is not a non-negative number
    """
    if isinstance(price, bool) or not isinstance(price, (int, float, Decimal, str)):
        raise AppError(ErrorCode.INVALID_INPUT, "Product price must be a number", {"field": "price"})

    try:
        amount = Decimal(str(price))
    except InvalidOperation:
        raise AppError(ErrorCode.INVALID_INPUT, "Product price must be a number", {"field": "price"})

    if not amount.is_finite() or amount < 0:
        raise AppError(ErrorCode.INVALID_INPUT, "Product price must be zero or more", {"field": "price"})
    return amount


def validate_inventory(inventory: Any) -> int:
    """
    Validate a product inventory count.

    Raises:
        AppError: If inventory is not a non-negative integer
    """
    if isinstance(inventory, bool) or not isinstance(inventory, int):
        raise AppError(ErrorCode.INVALID_INPUT, "Product inventory must be an integer", {"field": "inventory"})
    if inventory < 0:
        raise AppError(ErrorCode.INVALID_INPUT, "Product inventory must be zero or more", {"field": "inventory"})
    return inventory


def _validate_field(field: str, value: Any) -> Any:
    if field == "price":
        return validate_price(value)
    if field == "inventory":
        return validate_inventory(value)
    return _validate_string(field, value)


def validate_product_input(product: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate a ProductInput for createProduct.

    Requirements:
    - name, description, category and sku are non-empty strings
    - price is a non-negative number
    - inventory is a non-negative integer
    - id is optional; when given it must be a non-empty string

    Args:
        product: ProductInput dictionary

    Returns:
        Validated and normalized product data

    Raises:
        AppError: If validation fails
    """
    missing = [field for field in PRODUCT_FIELDS if product.get(field) is None]
    if missing:
        raise AppError(
            ErrorCode.INVALID_INPUT,
            "Product is missing required fields",
            {"missingFields": missing},
        )

    validated = {field: _validate_field(field, product[field]) for field in PRODUCT_FIELDS}

    if product.get("id") is not None:
        validated["id"] = _validate_string("id", product["id"])

    return validated


def validate_product_update(product: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate an UpdateProductInput for updateProduct.

    Only fields that are present and not null are updated.

    Args:
        product: UpdateProductInput dictionary

    Returns:
        Dictionary with "id" and the validated fields to set

    Raises:
        AppError: If id is missing or no field is provided
    """
    if product.get("id") is None:
        raise AppError(ErrorCode.INVALID_INPUT, "Product id is required", {"missingFields": ["id"]})

    changes = {
        field: _validate_field(field, product[field]) for field in PRODUCT_FIELDS if product.get(field) is not None
    }
    if not changes:
        raise AppError(
            ErrorCode.INVALID_INPUT,
            f"At least one field must be provided ({', '.join(PRODUCT_FIELDS)})",
        )

    return {"id": _validate_string("id", product["id"]), **changes}
