"""Shared JSON file reading for the input loaders."""

import json
from pathlib import Path
from typing import Any
from ..utils.errors import InputIOError, InputParseError


def read_json_file(path: Path, label: str) -> Any:
    """
    Read and parse a JSON file.
    
    Args:
        path: File to read
        label: Human-readable name used in error messages ("plan", "modules")
        
    Returns:
        Parsed JSON value
        
    Raises:
        InputIOError: If the file is missing or unreadable
        InputParseError: If the file is not valid JSON
    """
    if not path.exists():
        raise InputIOError(f"Failed to read {label} file: {path} does not exist")
    
    if not path.is_file():
        raise InputIOError(f"Failed to read {label} file: {path} is not a file")
    
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise InputParseError(f"Failed to parse {label} JSON in file {path}: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise InputIOError(f"Failed to read {label} file {path}: {e}")
