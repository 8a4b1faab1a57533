"""
Resource dependency graph for the products stack.

CDK infers most ordering from token references, but some edges (resolvers
waiting on the table and on the grant policy) have no reference between
them. The whole graph is declared here as an adjacency list so the ordering
is explicit and can be checked without synthesizing a template.

Edges are ``(dependent, dependency)`` pairs: the dependent is created after,
and deleted before, its dependency.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from constructs import Construct

# Logical resource names, in declaration order (used to break ties)
RESOURCE_NAMES: tuple[str, ...] = (
    "user_pool",
    "user_pool_client",
    "api",
    "function",
    "table",
    "grant",
    "environment",
    "resolvers",
    "outputs",
)

RESOURCE_DEPENDENCIES: tuple[tuple[str, str], ...] = (
    ("user_pool_client", "user_pool"),
    ("api", "user_pool"),
    ("grant", "table"),
    ("grant", "function"),
    ("environment", "table"),
    ("environment", "function"),
    ("resolvers", "api"),
    ("resolvers", "function"),
    ("resolvers", "table"),
    ("resolvers", "grant"),
    ("outputs", "api"),
    ("outputs", "user_pool"),
    ("outputs", "user_pool_client"),
)


class DependencyCycleError(Exception):
    """Raised when the declared resource graph contains a cycle."""

    def __init__(self, remaining: Iterable[str]):
        self.remaining = sorted(remaining)
        super().__init__(f"Dependency cycle between resources: {', '.join(self.remaining)}")


def _nodes(edges: list[tuple[str, str]]) -> list[str]:
    """Names appearing in the edges, known resources in declaration order first."""
    seen = {name for edge in edges for name in edge}
    nodes = [name for name in RESOURCE_NAMES if name in seen]
    for edge in edges:
        for name in edge:
            if name not in nodes:
                nodes.append(name)
    return nodes


def provisioning_order(edges: Iterable[tuple[str, str]] = RESOURCE_DEPENDENCIES) -> list[str]:
    """
    Topologically sort the resource graph (Kahn's algorithm).

    Ties are broken by declaration order so the result is deterministic.

    Args:
        edges: (dependent, dependency) pairs

    Returns:
        Resource names, dependencies before their dependents

    Raises:
        DependencyCycleError: If the graph is not acyclic
    """
    edges = list(edges)
    nodes = _nodes(edges)
    pending: dict[str, set[str]] = {name: set() for name in nodes}
    for dependent, dependency in edges:
        pending[dependent].add(dependency)

    order: list[str] = []
    while len(order) < len(nodes):
        ready = [name for name in nodes if name not in order and not pending[name]]
        if not ready:
            raise DependencyCycleError(name for name in nodes if name not in order)
        name = ready[0]
        order.append(name)
        for deps in pending.values():
            deps.discard(name)
    return order


def teardown_order(edges: Iterable[tuple[str, str]] = RESOURCE_DEPENDENCIES) -> list[str]:
    """Deletion order: dependents before the resources they depend on."""
    return list(reversed(provisioning_order(edges)))


def apply_dependencies(
    constructs: Mapping[str, Any],
    edges: Iterable[tuple[str, str]] = RESOURCE_DEPENDENCIES,
) -> int:
    """
    Add explicit construct dependencies for every declared edge.

    A mapping value may be a single construct or a list of constructs (e.g.
    all resolvers). Edges with an endpoint missing from the mapping are
    skipped, as are pairs where the dependency is an ancestor of the
    dependent.

    Args:
        constructs: Logical resource name to construct(s)
        edges: (dependent, dependency) pairs

    Returns:
        Number of construct-level dependencies added
    """
    added = 0
    for dependent, dependency in edges:
        if dependent not in constructs or dependency not in constructs:
            continue
        for source in _as_list(constructs[dependent]):
            for target in _as_list(constructs[dependency]):
                if _is_ancestor(target, source):
                    continue
                source.node.add_dependency(target)
                added += 1
    return added


def _is_ancestor(scope: Construct, construct: Construct) -> bool:
    return construct.node.path.startswith(scope.node.path + "/")


def _as_list(value: Any) -> list[Construct]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]
