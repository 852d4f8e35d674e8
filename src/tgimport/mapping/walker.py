"""Pre-order traversal of the planned module tree."""

from typing import Iterator, List, NamedTuple, Optional
from ..ingest.models import PlannedModule, Resource


class WalkedResource(NamedTuple):
    """A resource together with the module node that declares it."""
    resource: Resource
    module: PlannedModule


def walk_resources(root: Optional[PlannedModule]) -> Iterator[WalkedResource]:
    """
    Yield every resource in the tree, pre-order.
    
    A node's own resources come first, in list order, then each child
    module in list order. The generator is lazy; call again to restart.
    
    Args:
        root: Root module node (None yields nothing)
        
    Yields:
        WalkedResource for each resource
    """
    if root is None:
        return
    
    stack = [root]
    while stack:
        module = stack.pop()
        for resource in module.resources or []:
            yield WalkedResource(resource, module)
        # Reversed so the first child is visited next
        stack.extend(reversed(module.child_modules or []))


def collect_resources(root: Optional[PlannedModule]) -> List[Resource]:
    """Return every resource of the tree as a list, in walk order."""
    return [walked.resource for walked in walk_resources(root)]
