"""Run report generation."""

from .artifact import build_run_report, write_run_report

__all__ = ["build_run_report", "write_run_report"]
