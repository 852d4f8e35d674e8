"""Load and validate Terraform plan JSON."""

from pathlib import Path
from typing import Dict, Any, Tuple
from pydantic import ValidationError
from .json_file import read_json_file
from .models import PlanFile
from .plan_validator import validate_plan_structure, get_plan_summary
from ..utils.errors import InputParseError
from ..utils.logging import get_logger

logger = get_logger("ingest.plan_loader")


def _read_plan(plan_path: str) -> Tuple[Dict[str, Any], PlanFile]:
    path = Path(plan_path)
    plan_data = read_json_file(path, "plan")
    validate_plan_structure(plan_data)
    plan = parse_plan(plan_data)
    
    summary = get_plan_summary(plan)
    logger.info(
        f"Loaded Terraform plan from {plan_path} "
        f"(terraform: {summary['terraform_version']}, "
        f"modules: {summary['module_count']}, "
        f"resources: {summary['resource_count']})"
    )
    
    return plan_data, plan


def load_plan_json(plan_path: str) -> Dict[str, Any]:
    """
    Load and validate Terraform plan JSON file.
    
    Args:
        plan_path: Path to Terraform plan JSON file
        
    Returns:
        Parsed and validated plan data
        
    Raises:
        InputIOError: If file cannot be read
        InputParseError: If file is not a valid plan
    """
    plan_data, _ = _read_plan(plan_path)
    return plan_data


def parse_plan(plan_data: Dict[str, Any]) -> PlanFile:
    """Decode already parsed plan JSON into the typed model."""
    try:
        return PlanFile.model_validate(plan_data)
    except ValidationError as e:
        raise InputParseError(f"Failed to parse plan JSON: {e}")


def load_plan(plan_path: str) -> PlanFile:
    """
    Load a plan file into the typed model.
    
    Raises:
        InputIOError: If file cannot be read
        InputParseError: If file is not a valid plan
    """
    _, plan = _read_plan(plan_path)
    return plan
