"""Import command execution."""

from .models import ImportStatus, ImportResult, BatchResult
from .stats import ImportStats
from .executor import ImportExecutor

__all__ = ["ImportStatus", "ImportResult", "BatchResult", "ImportStats", "ImportExecutor"]
