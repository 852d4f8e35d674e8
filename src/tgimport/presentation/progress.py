"""Progress lines and run summaries for the terminal."""

import os
from enum import Enum
from typing import Dict, List, Optional
import click


class ProgressOperation(str, Enum):
    """Per-resource progress events."""
    CHECKING = "checking"
    IMPORTING = "importing"
    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"
    DRY_RUN = "dry_run"
    OUTPUT = "output"


EMOJI_MARKERS: Dict[ProgressOperation, str] = {
    ProgressOperation.CHECKING: "\U0001f50d",
    ProgressOperation.IMPORTING: "\U0001f4e6",
    ProgressOperation.SUCCESS: "✅",
    ProgressOperation.SKIPPED: "⚠️",
    ProgressOperation.FAILED: "❌",
    ProgressOperation.DRY_RUN: "\U0001f33f",
    ProgressOperation.OUTPUT: "\U0001f4dd",
}

ASCII_MARKERS: Dict[ProgressOperation, str] = {
    ProgressOperation.CHECKING: "[CHECK]",
    ProgressOperation.IMPORTING: "[IMPORT]",
    ProgressOperation.SUCCESS: "[OK]",
    ProgressOperation.SKIPPED: "[SKIP]",
    ProgressOperation.FAILED: "[FAIL]",
    ProgressOperation.DRY_RUN: "[DRY]",
    ProgressOperation.OUTPUT: "[OUT]",
}


def _use_ascii(ascii_mode: Optional[bool] = None) -> bool:
    """Resolve whether to use ASCII output (checked at format time)."""
    if ascii_mode is not None:
        return bool(ascii_mode)
    return os.environ.get("TGIMPORT_ASCII", "").lower() in ("1", "true", "yes")


def _marker(operation: ProgressOperation, ascii_mode: Optional[bool]) -> str:
    markers = ASCII_MARKERS if _use_ascii(ascii_mode) else EMOJI_MARKERS
    return markers[operation]


def format_progress(
    address: str,
    operation: ProgressOperation,
    detail: Optional[str] = None,
    ascii_mode: Optional[bool] = None,
) -> str:
    """
    One progress line for a resource.
    
    detail is the identifier for IMPORTING, the reason for SKIPPED, the
    error for FAILED, the command string for DRY_RUN and tool output for OUTPUT.
    """
    marker = _marker(operation, ascii_mode)
    if operation == ProgressOperation.CHECKING:
        return f"{marker} Checking {address}"
    if operation == ProgressOperation.IMPORTING:
        return f"{marker} Importing {address} with ID {detail}"
    if operation == ProgressOperation.SUCCESS:
        return f"{marker} Imported {address}"
    if operation == ProgressOperation.SKIPPED:
        return f"{marker} Skipped {address}: {detail}"
    if operation == ProgressOperation.FAILED:
        return f"{marker} Error importing {address}: {detail}"
    if operation == ProgressOperation.DRY_RUN:
        return f"{marker} [DRY RUN] {detail}"
    return f"{marker} Output for {address}:\n{detail}"


def print_import_progress(
    address: str,
    operation: ProgressOperation,
    detail: Optional[str] = None,
    ascii_mode: Optional[bool] = None,
) -> None:
    """Echo a progress line; failures go to stderr."""
    line = format_progress(address, operation, detail, ascii_mode)
    click.echo(line, err=operation == ProgressOperation.FAILED)


def format_import_summary(stats, ascii_mode: Optional[bool] = None) -> str:
    """Final summary of a live run from an ImportStats."""
    use_ascii = _use_ascii(ascii_mode)
    title = "Import Summary" if use_ascii else "\U0001f4ca Import Summary"
    lines: List[str] = [
        "",
        title,
        "-" * 40,
        f"Imported:         {stats.imported}",
        f"Already in state: {stats.already_in_state}",
        f"Skipped:          {stats.skipped}",
        f"Failed:           {stats.failed}",
    ]
    if stats.failed_resources:
        lines.append("")
        lines.append("Failed resources:")
        lines.extend(f"  - {address}" for address in stats.failed_resources)
    return "\n".join(lines)


def format_dry_run_summary(stats, ascii_mode: Optional[bool] = None) -> str:
    """Final summary of a dry run from an ImportStats."""
    use_ascii = _use_ascii(ascii_mode)
    title = "Dry Run Summary" if use_ascii else "\U0001f33f Dry Run Summary"
    lines: List[str] = [
        "",
        title,
        "-" * 40,
        f"Would import: {stats.dry_run}",
        f"Would skip:   {stats.skipped}",
    ]
    return "\n".join(lines)


def format_dry_run_banner(ascii_mode: Optional[bool] = None) -> str:
    """Notice printed before a dry run starts."""
    marker = _marker(ProgressOperation.DRY_RUN, ascii_mode)
    return f"{marker} Dry run: no import will be executed"
