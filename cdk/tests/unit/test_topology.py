"""Tests for the resource dependency graph."""

import pytest
from aws_cdk import App, Stack
from constructs import Construct

from cdk_products.topology import (
    RESOURCE_DEPENDENCIES,
    DependencyCycleError,
    apply_dependencies,
    provisioning_order,
    teardown_order,
)


def _dependency_paths(construct):
    return {dep.node.path for dep in construct.node.dependencies}


class TestProvisioningOrder:
    """Tests for provisioning_order."""

    def test_every_dependency_comes_first(self):
        order = provisioning_order()

        for dependent, dependency in RESOURCE_DEPENDENCIES:
            assert order.index(dependency) < order.index(dependent), f"{dependency} must precede {dependent}"

    def test_deterministic(self):
        assert provisioning_order() == provisioning_order()
        assert provisioning_order()[0] == "user_pool"

    def test_resolvers_after_grant(self):
        order = provisioning_order()
        assert order.index("grant") < order.index("resolvers")

    def test_unknown_names_are_appended(self):
        assert provisioning_order([("b", "a")]) == ["a", "b"]

    def test_cycle_detected(self):
        with pytest.raises(DependencyCycleError) as exc_info:
            provisioning_order([("api", "table"), ("table", "function"), ("function", "api"), ("outputs", "api")])

        assert exc_info.value.remaining == ["api", "function", "outputs", "table"]


class TestTeardownOrder:
    """Tests for teardown_order."""

    def test_is_reverse_of_provisioning(self):
        assert teardown_order() == list(reversed(provisioning_order()))

    def test_dependents_deleted_first(self):
        order = teardown_order()

        for dependent, dependency in RESOURCE_DEPENDENCIES:
            assert order.index(dependent) < order.index(dependency)


class TestApplyDependencies:
    """Tests for apply_dependencies."""

    @pytest.fixture
    def stack(self):
        return Stack(App(), "TestStack")

    def test_adds_edges_for_present_constructs(self, stack):
        table = Construct(stack, "Table")
        function = Construct(stack, "Function")
        grant = Construct(stack, "Grant")

        added = apply_dependencies({"table": table, "function": function, "grant": grant})

        assert added == 2
        assert _dependency_paths(grant) == {"TestStack/Table", "TestStack/Function"}
        assert not table.node.dependencies

    def test_lists_expand(self, stack):
        api = Construct(stack, "Api")
        table = Construct(stack, "Table")
        resolvers = [Construct(stack, "R1"), Construct(stack, "R2")]

        added = apply_dependencies({"api": api, "table": table, "resolvers": resolvers})

        assert added == 4
        for resolver in resolvers:
            assert _dependency_paths(resolver) == {"TestStack/Api", "TestStack/Table"}

    def test_skips_ancestors(self, stack):
        api = Construct(stack, "Api")
        resolver = Construct(api, "Resolver")

        assert apply_dependencies({"api": api, "resolvers": [resolver]}) == 0
        assert not resolver.node.dependencies

    def test_custom_edges(self, stack):
        first = Construct(stack, "First")
        second = Construct(stack, "Second")

        assert apply_dependencies({"a": first, "b": second}, edges=[("b", "a")]) == 1
        assert _dependency_paths(second) == {"TestStack/First"}
