"""
Builder for the product API's resolvers.

Every product operation is a direct Lambda resolver: no request or response
mapping template, the function receives the raw AppSync event and decides
what to do from ``info.fieldName``.
"""

from collections.abc import Iterable

from aws_cdk import aws_appsync as appsync
from constructs import Construct

DEFAULT_DATASOURCE = "product_handler"


class ResolverBuilder:
    """
    Attaches (type, field) operations to Lambda data sources.

    A given operation can be bound once per builder; share one builder
    across the query and mutation modules to catch double bindings.

    Example:
        builder = ResolverBuilder(api, lambda_datasources, scope)
        builder.bind("Query", "getProductById")
        builder.bind_all([("Mutation", "createProduct"), ("Mutation", "deleteProduct")])
    """

    def __init__(
        self,
        api: appsync.GraphqlApi,
        lambda_datasources: dict[str, appsync.LambdaDataSource],
        scope: Construct,
        default_datasource: str = DEFAULT_DATASOURCE,
    ):
        self.api = api
        self.lambda_datasources = lambda_datasources
        self.scope = scope
        self.default_datasource = default_datasource
        self._resolvers: dict[tuple[str, str], appsync.Resolver] = {}

    @property
    def bindings(self) -> list[tuple[str, str]]:
        """Operations bound so far, in binding order."""
        return list(self._resolvers)

    def bind(
        self,
        type_name: str,
        field_name: str,
        datasource: str | None = None,
        construct_id: str | None = None,
    ) -> appsync.Resolver:
        """
        Create the resolver for one operation.

        Args:
            type_name: GraphQL type (Query or Mutation)
            field_name: GraphQL field name
            datasource: Key in lambda_datasources (defaults to the product handler)
            construct_id: CDK construct ID, ``{field_name}Resolver`` by default

        Returns:
            The created resolver

        Raises:
            ValueError: If the operation already has a resolver
            KeyError: If the data source does not exist
        """
        operation = (type_name, field_name)
        if operation in self._resolvers:
            raise ValueError(f"Resolver already defined for {type_name}.{field_name}")

        lambda_ds = self.lambda_datasources[datasource or self.default_datasource]
        resolver = lambda_ds.create_resolver(
            construct_id or f"{field_name}Resolver",
            type_name=type_name,
            field_name=field_name,
        )
        self._resolvers[operation] = resolver
        return resolver

    def bind_all(self, operations: Iterable[tuple[str, str]]) -> list[appsync.Resolver]:
        """Bind every (type, field) pair on the default data source."""
        return [self.bind(type_name, field_name) for type_name, field_name in operations]
