"""Input decoding: plan documents and module manifests."""

from .models import Resource, PlannedModule, PlanFile, ModuleDescriptor, ModulesFile
from .plan_loader import load_plan_json, load_plan
from .modules_loader import load_modules, load_input_files

__all__ = [
    "Resource",
    "PlannedModule",
    "PlanFile",
    "ModuleDescriptor",
    "ModulesFile",
    "load_plan_json",
    "load_plan",
    "load_modules",
    "load_input_files",
]
