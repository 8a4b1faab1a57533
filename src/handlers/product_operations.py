"""
Product operations Lambda handler.

One direct Lambda resolver backs every product query and mutation. AppSync
passes the raw resolver event; the operation is picked from
``info.fieldName``.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

# Handle both Lambda (absolute) and unit test (relative) imports
try:  # pragma: no cover
    from utils.appsync_types import get_argument, get_argument_required, get_caller_id, get_field_name  # type: ignore[import-not-found]
    from utils.dynamodb import iterate_pages, tables  # type: ignore[import-not-found]
    from utils.errors import AppError, ErrorCode, handle_error  # type: ignore[import-not-found]
    from utils.logging import get_correlation_id, get_logger  # type: ignore[import-not-found]
    from utils.responses import (  # type: ignore[import-not-found]
        ProductResponse,
        build_list_response,
        build_product_response,
    )
    from utils.validation import validate_product_input, validate_product_update  # type: ignore[import-not-found]
except ModuleNotFoundError:  # pragma: no cover
    from ..utils.appsync_types import get_argument, get_argument_required, get_caller_id, get_field_name
    from ..utils.dynamodb import iterate_pages, tables
    from ..utils.errors import AppError, ErrorCode, handle_error
    from ..utils.logging import get_correlation_id, get_logger
    from ..utils.responses import ProductResponse, build_list_response, build_product_response
    from ..utils.validation import validate_product_input, validate_product_update

logger = get_logger(__name__)

# Must match the index name declared on the table by the stack
PRODUCTS_BY_CATEGORY_INDEX = "productsByCatergory"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _is_conditional_check_failure(error: ClientError) -> bool:
    return error.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException"


def get_product_by_id(event: Dict[str, Any], context: Any) -> Optional[ProductResponse]:
    """
    Fetch one product by its id.

    Args:
        event: AppSync event with arguments.productId
        context: Lambda context (unused)

    Returns:
        The product, or None when no product has that id
    """
    product_id = get_argument_required(event, "productId")

    response = tables.products.get_item(Key={"id": product_id})
    item = response.get("Item")
    if not item:
        logger.info(f"Product {product_id} not found")
        return None
    return build_product_response(item)


def list_products(event: Dict[str, Any], context: Any) -> List[ProductResponse]:
    """Return every product (full table scan, all pages)."""
    items = list(iterate_pages(tables.products.scan))
    logger.info(f"Listed {len(items)} products")
    return build_list_response(items, build_product_response)


def products_by_category(event: Dict[str, Any], context: Any) -> List[ProductResponse]:
    """
    Return the products in one category through the category index.

    Args:
        event: AppSync event with arguments.category
        context: Lambda context (unused)

    Returns:
        Products whose category equals the argument
    """
    category = get_argument_required(event, "category")

    items = list(
        iterate_pages(
            tables.products.query,
            IndexName=PRODUCTS_BY_CATEGORY_INDEX,
            KeyConditionExpression=Key("category").eq(category),
        )
    )
    logger.info(f"Found {len(items)} products in category {category}")
    return build_list_response(items, build_product_response)


def create_product(event: Dict[str, Any], context: Any) -> ProductResponse:
    """
    Create a product.

    A UUID is generated when the input has no id. Creating a product with an
    id that is already taken fails instead of overwriting it.

    Args:
        event: AppSync event with arguments.product (ProductInput)
        context: Lambda context (unused)

    Returns:
        The stored product

    Raises:
        AppError: If the input is invalid or the id already exists
    """
    product = validate_product_input(get_argument(event, "product") or {})
    product.setdefault("id", str(uuid.uuid4()))

    timestamp = _now()
    item = {**product, "createdAt": timestamp, "updatedAt": timestamp}

    try:
        tables.products.put_item(Item=item, ConditionExpression=Attr("id").not_exists())
    except ClientError as e:
        if _is_conditional_check_failure(e):
            raise AppError(ErrorCode.ALREADY_EXISTS, f"Product {item['id']} already exists", {"id": item["id"]})
        raise

    logger.info(f"Created product {item['id']}", category=item["category"])
    return build_product_response(item)


def delete_product(event: Dict[str, Any], context: Any) -> str:
    """
    Delete a product.

    Args:
        event: AppSync event with arguments.productId
        context: Lambda context (unused)

    Returns:
        The id of the deleted product

    Raises:
        AppError: If no product has that id
    """
    product_id = get_argument_required(event, "productId")

    try:
        tables.products.delete_item(
            Key={"id": product_id},
            ConditionExpression=Attr("id").exists(),
        )
    except ClientError as e:
        if _is_conditional_check_failure(e):
            raise AppError(ErrorCode.NOT_FOUND, f"Product {product_id} not found", {"id": product_id})
        raise

    logger.info(f"Deleted product {product_id}")
    return str(product_id)


def update_product(event: Dict[str, Any], context: Any) -> ProductResponse:
    """
    Update the supplied fields of an existing product.

    Args:
        event: AppSync event with arguments.product (UpdateProductInput)
        context: Lambda context (unused)

    Returns:
        The product after the update

    Raises:
        AppError: If the input is invalid or the product does not exist
    """
    changes = validate_product_update(get_argument(event, "product") or {})
    product_id = changes.pop("id")
    changes["updatedAt"] = _now()

    # Build DynamoDB update expression
    update_expressions = []
    expression_attribute_names = {}
    expression_attribute_values = {}
    for field, value in changes.items():
        update_expressions.append(f"#{field} = :{field}")
        expression_attribute_names[f"#{field}"] = field
        expression_attribute_values[f":{field}"] = value

    try:
        response = tables.products.update_item(
            Key={"id": product_id},
            UpdateExpression="SET " + ", ".join(update_expressions),
            ExpressionAttributeNames=expression_attribute_names,
            ExpressionAttributeValues=expression_attribute_values,
            ConditionExpression=Attr("id").exists(),
            ReturnValues="ALL_NEW",
        )
    except ClientError as e:
        if _is_conditional_check_failure(e):
            raise AppError(ErrorCode.NOT_FOUND, f"Product {product_id} not found", {"id": product_id})
        raise

    logger.info(f"Updated product {product_id}", fields=sorted(changes))
    return build_product_response(response["Attributes"])


OPERATIONS: Dict[str, Callable[[Dict[str, Any], Any], Any]] = {
    "getProductById": get_product_by_id,
    "listProducts": list_products,
    "productsByCatergory": products_by_category,
    "createProduct": create_product,
    "deleteProduct": delete_product,
    "updateProduct": update_product,
}


def lambda_handler(event: Dict[str, Any], context: Any) -> Any:
    """
    Resolve any product query or mutation.

    Args:
        event: Direct Lambda resolver event from AppSync
        context: Lambda context

    Returns:
        The GraphQL field value

    Raises:
        AppError: For unknown operations, invalid input and missing products
    """
    logger.correlation_id = get_correlation_id(event)
    field_name = get_field_name(event)

    operation = OPERATIONS.get(field_name or "")
    if operation is None:
        logger.error(f"No product operation for field {field_name}")
        raise AppError(ErrorCode.UNKNOWN_OPERATION, f"Unknown operation: {field_name}", {"fieldName": field_name})

    logger.info(f"{field_name} handler invoked", caller=get_caller_id(event))

    try:
        return operation(event, context)
    except AppError as e:
        logger.warning(f"{field_name} rejected", error=handle_error(e))
        raise
    except Exception as e:
        logger.error(f"{field_name} failed: {str(e)}", error=handle_error(e))
        raise
