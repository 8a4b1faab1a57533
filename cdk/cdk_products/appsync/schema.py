"""GraphQL schema asset checks run before any construct is created.

AppSync only rejects a bad schema once CloudFormation reaches the
GraphQLSchema resource, after the user pool, table and function already
exist. Checking the asset at synth time means a missing or incomplete schema
never produces a template at all.
"""

import re
from collections.abc import Iterable
from pathlib import Path

# Asset location: kept next to the CDK app, outside the Python package
SCHEMA_PATH = Path(__file__).parent.parent.parent / "schema" / "schema.graphql"

# One alternation: whichever ignored token starts first wins
_IGNORED = re.compile(r'"""(?:.|\n)*?"""|"(?:\\.|[^"\\\n])*"|#[^\n]*')
_ARGUMENTS = re.compile(r"\([^()]*\)")
_FIELD = re.compile(r"([_A-Za-z]\w*)\s*:")
_KEYWORD = re.compile(r"\b(type|input|interface|enum|schema|union|scalar|directive)\b(?:\s+([_A-Za-z]\w*))?")


class SchemaValidationError(Exception):
    """Raised when the GraphQL schema asset cannot back the API."""

    def __init__(self, message: str, path: Path | str | None = None, missing: list[str] | None = None):
        self.path = str(path) if path is not None else None
        self.missing = missing or []
        super().__init__(message)


def read_schema(path: Path | str = SCHEMA_PATH) -> str:
    """
    Read the schema asset.

    Args:
        path: Path to the .graphql file

    Returns:
        Schema definition language text

    Raises:
        SchemaValidationError: If the file is missing or blank
    """
    schema_path = Path(path)
    if not schema_path.is_file():
        raise SchemaValidationError(f"GraphQL schema not found: {schema_path}", path=schema_path)

    sdl = schema_path.read_text(encoding="utf-8")
    if not sdl.strip():
        raise SchemaValidationError(f"GraphQL schema is empty: {schema_path}", path=schema_path)
    return sdl


def _strip_ignored(sdl: str) -> str:
    """Remove descriptions, string literals and comments."""

    def replace(match: re.Match[str]) -> str:
        token = match.group(0)
        if token.startswith('"') and not token.startswith('"""'):
            return '""'
        return ""

    return _IGNORED.sub(replace, sdl)


def _top_level_blocks(sdl: str) -> list[tuple[str, str]]:
    """Split the document into (head, body) pairs for every top-level {...}."""
    blocks: list[tuple[str, str]] = []
    depth = 0
    head_start = 0
    body_start = 0
    head = ""

    for index, char in enumerate(sdl):
        if char == "{":
            if depth == 0:
                head = sdl[head_start:index]
                body_start = index + 1
            depth += 1
        elif char == "}":
            depth -= 1
            if depth < 0:
                raise SchemaValidationError(f"Unbalanced '}}' at offset {index}")
            if depth == 0:
                blocks.append((head, sdl[body_start:index]))
                head_start = index + 1

    if depth != 0:
        raise SchemaValidationError("Unbalanced '{' in schema: definition never closed")
    return blocks


def parse_operation_fields(sdl: str) -> dict[str, set[str]]:
    """
    Collect the field names declared on every object type.

    Fields from ``extend type`` blocks are merged into the base type.

    Args:
        sdl: Schema definition language text

    Returns:
        Mapping of type name to the set of its field names

    Raises:
        SchemaValidationError: If braces do not balance
    """
    fields: dict[str, set[str]] = {}

    for head, body in _top_level_blocks(_strip_ignored(sdl)):
        keywords = _KEYWORD.findall(head)
        if not keywords:
            continue
        keyword, type_name = keywords[-1]
        if keyword != "type" or not type_name:
            continue

        # Drop argument lists (innermost first) so only field names keep a colon
        previous = None
        while previous != body:
            previous = body
            body = _ARGUMENTS.sub("", body)

        fields.setdefault(type_name, set()).update(_FIELD.findall(body))

    return fields


def validate_schema(
    path: Path | str,
    operations: Iterable[tuple[str, str]],
) -> dict[str, set[str]]:
    """
    Check that the schema asset declares every resolver-backed operation.

    Args:
        path: Path to the .graphql file
        operations: (type name, field name) pairs that get a resolver

    Returns:
        Parsed type to field mapping

    Raises:
        SchemaValidationError: If the asset is missing, malformed or lacks an operation
    """
    sdl = read_schema(path)
    try:
        fields = parse_operation_fields(sdl)
    except SchemaValidationError as e:
        raise SchemaValidationError(f"Malformed GraphQL schema {path}: {e}", path=path) from e

    missing = [
        f"{type_name}.{field_name}"
        for type_name, field_name in operations
        if field_name not in fields.get(type_name, set())
    ]
    if missing:
        raise SchemaValidationError(
            f"GraphQL schema {path} is missing operations: {', '.join(missing)}",
            path=path,
            missing=missing,
        )

    print(f"Validated GraphQL schema: {path}")
    return fields
