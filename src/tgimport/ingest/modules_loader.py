"""Load the Terragrunt module manifest (modules.json)."""

from pathlib import Path
from typing import Tuple
from pydantic import ValidationError
from .json_file import read_json_file
from .models import ModulesFile, PlanFile
from .plan_loader import load_plan
from ..utils.errors import InputParseError
from ..utils.logging import get_logger

logger = get_logger("ingest.modules_loader")


def load_modules(modules_path: str) -> ModulesFile:
    """
    Load and parse the modules file.
    
    The manifest keeps Terragrunt's capitalised field names:
    {"Modules": [{"Key": ..., "Source": ..., "Dir": ...}]}
    
    Args:
        modules_path: Path to modules.json
        
    Returns:
        ModulesFile with one descriptor per module
        
    Raises:
        InputIOError: If file cannot be read
        InputParseError: If file is not valid JSON, has the wrong shape or repeats a key
    """
    path = Path(modules_path)
    data = read_json_file(path, "modules")
    
    try:
        modules_file = ModulesFile.model_validate(data)
    except ValidationError as e:
        raise InputParseError(f"Failed to parse modules JSON in file {path}: {e}")
    
    seen = set()
    for module in modules_file.modules:
        if module.key in seen:
            raise InputParseError(f"Duplicate module key '{module.key}' in {path}")
        seen.add(module.key)
    
    logger.info(f"Loaded {len(modules_file.modules)} module descriptors from {modules_path}")
    return modules_file


def load_input_files(modules_path: str, plan_path: str) -> Tuple[ModulesFile, PlanFile]:
    """Load both the module manifest and the plan, modules first."""
    modules = load_modules(modules_path)
    plan = load_plan(plan_path)
    return modules, plan
