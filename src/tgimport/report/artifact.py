"""JSON run report written after an import run."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Union
from ..execution.stats import ImportStats
from ..planning.models import ImportPlan
from ..utils.errors import ReportError
from ..utils.logging import get_logger

logger = get_logger("report.artifact")


def build_run_report(stats: ImportStats, import_plan: ImportPlan, dry_run: bool = False) -> Dict[str, Any]:
    """Assemble the report dictionary (JSON-serialisable)."""
    from .. import __version__
    
    return {
        "summary": {
            "dry_run": dry_run,
            "planned_commands": len(import_plan.commands),
            "imported": stats.imported,
            "already_in_state": stats.already_in_state,
            "skipped": stats.skipped,
            "failed": stats.failed,
            "would_import": stats.dry_run,
            "total_processed": stats.total_processed(),
        },
        "results": [
            {
                "resource_address": result.resource_address,
                "resource_id": result.command.resource_id,
                "module_key": result.command.module_key,
                "working_directory": str(result.command.working_directory),
                "status": result.status.value,
                "command": result.command_string,
                "exit_code": result.exit_code,
                "duration_ms": result.duration_ms,
                "error": result.error_message,
            }
            for result in stats.results
        ],
        "skipped": [skipped.model_dump(mode="json") for skipped in import_plan.skipped],
        "metadata": {
            "tgimport_version": __version__,
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "generator": "tgimport run report",
        },
    }


def write_run_report(
    stats: ImportStats,
    import_plan: ImportPlan,
    output_path: Union[str, Path],
    dry_run: bool = False,
) -> Path:
    """
    Write the run report as JSON.
    
    Args:
        stats: Statistics of the finished run
        import_plan: The plan that was executed
        output_path: File to write; parent directories are created
        dry_run: Whether the run was a dry run
        
    Returns:
        Path of the written report
        
    Raises:
        ReportError: If the file cannot be written
    """
    output_path = Path(output_path)
    report = build_run_report(stats, import_plan, dry_run)
    
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ReportError(f"Failed to create report directory: {e}")
    
    try:
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(report, f, indent=2)
    except (OSError, TypeError) as e:
        raise ReportError(f"Failed to write run report {output_path}: {e}")
    
    logger.info(f"Run report written to {output_path}")
    return output_path
