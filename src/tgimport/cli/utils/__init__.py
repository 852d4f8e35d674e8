"""CLI utilities package."""

from typing import Optional
import click
from .file_resolver import resolve_file_path


def format_error(message: str, suggestion: Optional[str] = None) -> str:
    """
    Format error message with optional suggestion.
    
    Args:
        message: Error message
        suggestion: Optional suggestion or help text
        
    Returns:
        Formatted error string
    """
    error = f"❌ Error: {message}"
    if suggestion:
        error += f"\n\U0001f4a1 Tip: {suggestion}"
    return error


def echo_safe(text: str, err: bool = False) -> None:
    """Echo text, replacing characters the terminal cannot encode."""
    try:
        click.echo(text, err=err)
    except UnicodeEncodeError:
        click.echo(text.encode('ascii', errors='replace').decode('ascii'), err=err)


__all__ = ["resolve_file_path", "format_error", "echo_safe"]
