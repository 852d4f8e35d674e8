"""Validate Terraform plan JSON structure."""

from typing import Dict, Any, List
from .models import PlanFile, PlannedModule
from ..utils.errors import InputParseError
from ..utils.logging import get_logger

logger = get_logger("ingest.plan_validator")

SUPPORTED_FORMAT_VERSIONS = ["0.1", "0.2", "1.0", "1.1", "1.2"]


def validate_plan_structure(plan_data: Dict[str, Any]) -> None:
    """
    Validate Terraform plan JSON structure.
    
    Args:
        plan_data: Parsed Terraform plan JSON
        
    Raises:
        InputParseError: If plan structure is invalid
    """
    if not isinstance(plan_data, dict):
        raise InputParseError(
            "Plan JSON must be an object. "
            "Generate one using: terragrunt show -json tf.plan > out.json"
        )
    
    required_fields = ["format_version", "terraform_version"]
    missing_fields = [field for field in required_fields if field not in plan_data]
    
    if missing_fields:
        raise InputParseError(
            f"Plan JSON missing required fields: {', '.join(missing_fields)}. "
            "This doesn't appear to be a Terraform plan JSON file."
        )
    
    for field in required_fields:
        if not isinstance(plan_data[field], str):
            raise InputParseError(f"Plan '{field}' must be a string")
    
    version_major_minor = ".".join(plan_data["format_version"].split(".")[:2])
    if version_major_minor not in SUPPORTED_FORMAT_VERSIONS:
        logger.warning(
            f"Plan format version '{plan_data['format_version']}' may not be fully supported. "
            f"Supported versions: {', '.join(SUPPORTED_FORMAT_VERSIONS)}"
        )
    
    planned_values = plan_data.get("planned_values")
    if planned_values is None:
        logger.warning("Plan JSON has no 'planned_values' - nothing to import")
    elif not isinstance(planned_values, dict) or not isinstance(planned_values.get("root_module"), dict):
        raise InputParseError("Plan 'planned_values' must contain a 'root_module' object")
    
    logger.debug("Plan structure validation passed")


def get_plan_summary(plan: PlanFile) -> Dict[str, Any]:
    """
    Extract summary information from a decoded plan.
    
    Args:
        plan: Plan already validated into the typed model
        
    Returns:
        Dictionary with format/terraform versions and resource/module counts
    """
    resource_count = 0
    module_count = 0
    
    pending: List[PlannedModule] = []
    if plan.root_module is not None:
        pending.append(plan.root_module)
    while pending:
        module = pending.pop()
        module_count += 1
        resource_count += len(module.resources or [])
        pending.extend(module.child_modules or [])
    
    return {
        "format_version": plan.format_version,
        "terraform_version": plan.terraform_version,
        "resource_count": resource_count,
        "module_count": module_count,
        "has_provider_schemas": bool(plan.provider_schemas and plan.provider_schemas.provider_schemas),
    }
