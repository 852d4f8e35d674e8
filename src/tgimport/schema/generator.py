"""Run the external tool to produce a provider schema."""

import json
import subprocess
from pathlib import Path
from typing import Optional, Union
from ..utils.errors import SchemaIOError, SchemaParseError, SchemaToolFailedError
from ..utils.logging import get_logger

logger = get_logger("schema.generator")

DEFAULT_TOOL = "terragrunt"
SCHEMA_FILENAME = ".terragrunt-provider-schema.json"
SCHEMA_ARGS = ["providers", "schema", "-json"]


def write_provider_schema(
    directory: Union[str, Path],
    tool: str = DEFAULT_TOOL,
    schema_filename: str = SCHEMA_FILENAME,
    timeout: Optional[float] = None,
) -> Path:
    """
    Generate the provider schema and write it next to the configuration.
    
    Runs `<tool> providers schema -json` in the directory, checks that stdout
    is JSON and writes it verbatim to <directory>/<schema_filename>.
    
    Args:
        directory: Directory to run the tool in
        tool: Executable name
        schema_filename: Output file name
        timeout: Optional timeout in seconds
        
    Returns:
        Path of the written schema file
        
    Raises:
        SchemaIOError: If the tool cannot be spawned or the file cannot be written
        SchemaToolFailedError: If the tool exits non-zero
        SchemaParseError: If the tool output is not JSON
    """
    directory = Path(directory)
    logger.info(f"Generating provider schema with `{tool} {' '.join(SCHEMA_ARGS)}` in {directory}")
    
    try:
        result = subprocess.run(
            [tool] + SCHEMA_ARGS,
            cwd=directory,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise SchemaIOError(f"Failed to run {tool} providers schema in {directory}: {e}")
    
    if result.returncode != 0:
        raise SchemaToolFailedError(result.returncode, result.stdout or "", result.stderr or "")
    
    try:
        json.loads(result.stdout)
    except json.JSONDecodeError as e:
        raise SchemaParseError(f"Provider schema output is not valid JSON: {e}")
    
    schema_path = directory / schema_filename
    try:
        schema_path.write_text(result.stdout, encoding='utf-8')
    except OSError as e:
        raise SchemaIOError(f"Failed to write schema file {schema_path}: {e}")
    
    logger.info(f"Provider schema written to {schema_path}")
    return schema_path


def run_init(directory: Union[str, Path], tool: str = DEFAULT_TOOL, timeout: Optional[float] = None) -> bool:
    """
    Run `<tool> init` so provider plugins are available for schema generation.
    
    Failures are logged as warnings and never raised.
    
    Returns:
        True if init succeeded
    """
    logger.info(f"Running `{tool} init` in {directory}")
    try:
        result = subprocess.run(
            [tool, "init"],
            cwd=Path(directory),
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.warning(f"Could not run {tool} init in {directory}: {e}")
        return False
    
    if result.returncode != 0:
        logger.warning(f"{tool} init failed in {directory} (exit code {result.returncode}): {result.stderr.strip()}")
        return False
    
    logger.debug(f"{tool} init completed in {directory}")
    return True
