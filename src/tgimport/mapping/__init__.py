"""Resource traversal and resource-to-module mapping."""

from .walker import WalkedResource, walk_resources, collect_resources
from .module_mapper import map_resources_to_modules, validate_module_dirs, find_module

__all__ = [
    "WalkedResource",
    "walk_resources",
    "collect_resources",
    "map_resources_to_modules",
    "validate_module_dirs",
    "find_module",
]
