"""Tests for the resource walker."""

from tgimport.ingest.models import PlannedModule
from tgimport.mapping.walker import walk_resources, collect_resources


def _resource(address: str) -> dict:
    return {"address": address, "mode": "managed", "type": "null_resource", "name": address.rsplit(".", 1)[-1]}


def _tree() -> PlannedModule:
    return PlannedModule.model_validate({
        "resources": [_resource("null_resource.r1"), _resource("null_resource.r2")],
        "child_modules": [
            {
                "address": "module.a",
                "resources": [_resource("module.a.null_resource.a1")],
                "child_modules": [
                    {"address": "module.a.module.c", "resources": [_resource("module.a.module.c.null_resource.c1")]}
                ],
            },
            {"address": "module.b", "resources": [_resource("module.b.null_resource.b1")]},
        ],
    })


class TestWalkResources:
    """Test pre-order traversal."""
    
    def test_pre_order(self):
        """Test a node's resources come before its children, children in order."""
        addresses = [walked.resource.address for walked in walk_resources(_tree())]
        assert addresses == [
            "null_resource.r1",
            "null_resource.r2",
            "module.a.null_resource.a1",
            "module.a.module.c.null_resource.c1",
            "module.b.null_resource.b1",
        ]
    
    def test_yields_owning_module(self):
        """Test each resource is paired with the node declaring it."""
        owners = {walked.resource.address: walked.module.address for walked in walk_resources(_tree())}
        assert owners["null_resource.r1"] is None
        assert owners["module.a.module.c.null_resource.c1"] == "module.a.module.c"
        assert owners["module.b.null_resource.b1"] == "module.b"
    
    def test_completeness(self):
        """Test every resource is yielded exactly once."""
        resources = collect_resources(_tree())
        addresses = [r.address for r in resources]
        assert len(addresses) == 5
        assert len(set(addresses)) == 5
    
    def test_restartable(self):
        """Test walking twice gives the same sequence."""
        tree = _tree()
        first = [w.resource.address for w in walk_resources(tree)]
        second = [w.resource.address for w in walk_resources(tree)]
        assert first == second
    
    def test_empty_and_missing_root(self):
        """Test empty trees yield nothing."""
        assert collect_resources(PlannedModule()) == []
        assert collect_resources(None) == []
    
    def test_lazy(self):
        """Test the walker is a generator."""
        walker = walk_resources(_tree())
        assert next(walker).resource.address == "null_resource.r1"
