"""Shared utilities: errors and logging."""
