from typing import Callable, Dict

from aws_cdk import RemovalPolicy
from aws_cdk import aws_dynamodb as ddb
from constructs import Construct

# Index name matches the productsByCatergory GraphQL query and is queried by
# the Lambda handler under this exact name. Do not "fix" the spelling.
PRODUCTS_BY_CATEGORY_INDEX = "productsByCatergory"


def create_dynamodb_tables(
    stack: Construct,
    rn: Callable[[str], str],
    removal_policy: RemovalPolicy = RemovalPolicy.DESTROY,
) -> Dict[str, ddb.Table]:
    """Create the DynamoDB tables used by the application and return them in a dict.

    Args:
        stack: CDK Construct (usually the Stack instance)
        rn: helper function to create resource names (rn(name: str) -> str)
        removal_policy: What happens to the table when the stack is deleted

    Returns:
        Mapping of table names to Table constructs
    """

    products_table = ddb.Table(
        stack,
        "CDKProductTable",
        table_name=rn("cdk-products"),
        partition_key=ddb.Attribute(name="id", type=ddb.AttributeType.STRING),
        billing_mode=ddb.BillingMode.PAY_PER_REQUEST,
        removal_policy=removal_policy,
    )
    products_table.add_global_secondary_index(
        index_name=PRODUCTS_BY_CATEGORY_INDEX,
        partition_key=ddb.Attribute(name="category", type=ddb.AttributeType.STRING),
        projection_type=ddb.ProjectionType.ALL,
    )

    return {
        "products_table": products_table,
    }
