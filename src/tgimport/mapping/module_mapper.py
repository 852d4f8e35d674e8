"""Map planned resources to the Terragrunt module that owns them."""

from pathlib import Path
from typing import Dict, List, Optional, Set, Union
from ..ingest.models import ModuleDescriptor, ModulesFile, PlanFile, PlannedModule
from ..utils.errors import UnmatchedModuleError, DuplicateResourceError
from ..utils.logging import get_logger

logger = get_logger("mapping.module_mapper")

MODULE_PREFIX = "module."


def _descriptors(modules: Union[ModulesFile, List[ModuleDescriptor]]) -> List[ModuleDescriptor]:
    if isinstance(modules, ModulesFile):
        return modules.modules
    return list(modules)


def _root(plan: Union[PlanFile, PlannedModule, None]) -> Optional[PlannedModule]:
    if isinstance(plan, PlanFile):
        return plan.root_module
    return plan


def module_key(address: str) -> str:
    """Strip the leading 'module.' from a module address."""
    if address.startswith(MODULE_PREFIX):
        return address[len(MODULE_PREFIX):]
    return address


def find_module(modules: Union[ModulesFile, List[ModuleDescriptor]], key: str) -> Optional[ModuleDescriptor]:
    """Find the descriptor with the given key, or None."""
    for descriptor in _descriptors(modules):
        if descriptor.key == key:
            return descriptor
    return None


def map_resources_to_modules(
    modules: Union[ModulesFile, List[ModuleDescriptor]],
    plan: Union[PlanFile, PlannedModule, None],
) -> Dict[str, ModuleDescriptor]:
    """
    Build a mapping from resource address to its owning module descriptor.
    
    Every non-root module in the tree must match a descriptor key once its
    'module.' prefix is stripped. Resources declared directly in the root
    module are left unmapped.
    
    Args:
        modules: Module manifest or list of descriptors
        plan: PlanFile or root module node; a plan without planned values maps to {}
        
    Returns:
        Dictionary of resource address -> ModuleDescriptor
        
    Raises:
        UnmatchedModuleError: If a module address has no descriptor
        DuplicateResourceError: If a resource address appears twice
    """
    root = _root(plan)
    mapping: Dict[str, ModuleDescriptor] = {}
    if root is None:
        return mapping
    
    seen: Set[str] = set()
    stack = [root]
    while stack:
        module = stack.pop()
        stack.extend(reversed(module.child_modules or []))
        
        resources = module.resources or []
        for resource in resources:
            if resource.address in seen:
                raise DuplicateResourceError(resource.address)
            seen.add(resource.address)
        
        if not module.address:
            continue
        
        descriptor = find_module(modules, module_key(module.address))
        if descriptor is None:
            raise UnmatchedModuleError(module.address)
        
        for resource in resources:
            mapping[resource.address] = descriptor
    
    logger.debug(f"Mapped {len(mapping)} resources to modules")
    return mapping


def validate_module_dirs(
    modules: Union[ModulesFile, List[ModuleDescriptor]],
    module_root: Union[str, Path],
) -> List[str]:
    """
    Check that each descriptor's directory exists under module_root.
    
    Returns:
        One "Missing or invalid directory: <path>" message per bad descriptor
    """
    errors = []
    for descriptor in _descriptors(modules):
        path = Path(module_root) / descriptor.dir
        if not path.is_dir():
            errors.append(f"Missing or invalid directory: {path}")
    return errors
