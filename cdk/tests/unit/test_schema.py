"""Tests for the GraphQL schema asset checks."""

import pytest

from cdk_products.appsync import PRODUCT_OPERATIONS, SCHEMA_PATH
from cdk_products.appsync.schema import (
    SchemaValidationError,
    parse_operation_fields,
    read_schema,
    validate_schema,
)

SDL = '''
"""Products"""
type Product @aws_api_key {
  id: ID!
  name: String
}

input ProductInput {
  name: String!
}

type Query {
  # commented: ghostField: String
  getProductById(productId: ID!): Product
  listProducts(filter: ProductInput, note: String = "a: b"): [Product]
}

type Mutation {
  createProduct(product: ProductInput!): Product @aws_cognito_user_pools
}

extend type Query {
  productsByCatergory(category: String!): [Product]
}
'''


class TestParseOperationFields:
    """Tests for parse_operation_fields."""

    def test_collects_type_fields(self):
        fields = parse_operation_fields(SDL)

        assert fields["Query"] == {"getProductById", "listProducts", "productsByCatergory"}
        assert fields["Mutation"] == {"createProduct"}
        assert fields["Product"] == {"id", "name"}

    def test_skips_inputs(self):
        assert "ProductInput" not in parse_operation_fields(SDL)

    def test_quotes_inside_comments(self):
        sdl = (
            '# use """ for descriptions\n'
            "type Query {\n"
            "  getProductById(productId: ID!): String\n"
            "}\n"
            '"""Mutations"""\n'
            "type Mutation {\n"
            "  createProduct: String\n"
            "}"
        )

        fields = parse_operation_fields(sdl)

        assert fields["Query"] == {"getProductById"}
        assert fields["Mutation"] == {"createProduct"}

    def test_hash_inside_string_is_not_a_comment(self):
        sdl = 'type Query {\n  a(x: String = "#1"): String\n  b: String\n}'

        assert parse_operation_fields(sdl)["Query"] == {"a", "b"}

    def test_unbalanced_braces(self):
        with pytest.raises(SchemaValidationError):
            parse_operation_fields("type Query { a: String")

        with pytest.raises(SchemaValidationError):
            parse_operation_fields("type Query { a: String }}")


class TestReadSchema:
    """Tests for read_schema."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaValidationError, match="not found") as exc_info:
            read_schema(tmp_path / "missing.graphql")

        assert exc_info.value.path.endswith("missing.graphql")

    def test_blank_file(self, tmp_path):
        path = tmp_path / "schema.graphql"
        path.write_text("  \n")

        with pytest.raises(SchemaValidationError, match="empty"):
            read_schema(path)


class TestValidateSchema:
    """Tests for validate_schema."""

    def test_bundled_schema_declares_every_operation(self):
        fields = validate_schema(SCHEMA_PATH, PRODUCT_OPERATIONS)

        assert {"getProductById", "listProducts", "productsByCatergory"} <= fields["Query"]
        assert {"createProduct", "deleteProduct", "updateProduct"} <= fields["Mutation"]

    def test_reports_missing_operations(self, tmp_path):
        path = tmp_path / "schema.graphql"
        path.write_text(SDL)

        with pytest.raises(SchemaValidationError) as exc_info:
            validate_schema(path, PRODUCT_OPERATIONS)

        assert exc_info.value.missing == ["Mutation.deleteProduct", "Mutation.updateProduct"]

    def test_malformed_schema(self, tmp_path):
        path = tmp_path / "schema.graphql"
        path.write_text("type Query {")

        with pytest.raises(SchemaValidationError, match="Malformed"):
            validate_schema(path, PRODUCT_OPERATIONS)
