"""AppSync data source creation."""

from typing import TYPE_CHECKING

from aws_cdk import aws_appsync as appsync

if TYPE_CHECKING:
    from aws_cdk import aws_lambda as lambda_

# Function key -> data source name in the API
LAMBDA_DATASOURCE_NAMES: dict[str, str] = {
    "product_handler": "lambdaDataSource",
}


def create_lambda_datasources(
    api: appsync.GraphqlApi,
    lambda_functions: dict[str, "lambda_.IFunction"],
) -> dict[str, appsync.LambdaDataSource]:
    """
    Attach each known function to the API as a Lambda data source.

    Functions without an entry in LAMBDA_DATASOURCE_NAMES are ignored, and a
    missing function simply produces no data source.

    Returns:
        Function key to data source (the data source role may invoke the function)
    """
    return {
        fn_key: api.add_lambda_data_source(ds_name, lambda_function=lambda_functions[fn_key])
        for fn_key, ds_name in LAMBDA_DATASOURCE_NAMES.items()
        if fn_key in lambda_functions
    }
