"""Import command planning."""

from .models import ImportCommand, ImportPlan, PlanEntry, SkippedResource, SkipReason
from .command_planner import plan_imports, build_command_string, generate_import_commands

__all__ = [
    "ImportCommand",
    "ImportPlan",
    "PlanEntry",
    "SkippedResource",
    "SkipReason",
    "plan_imports",
    "build_command_string",
    "generate_import_commands",
]
