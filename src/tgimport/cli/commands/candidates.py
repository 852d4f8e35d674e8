"""Candidates command - rank identifier candidates from a provider schema file."""

import json
import sys
import click
from ...schema.store import SchemaStore
from ...scoring.strategies import detect_provider_type, score_all_attributes, strategy_name
from ...utils.errors import TgImportError
from ...utils.logging import get_logger
from ..utils import format_error, echo_safe, resolve_file_path

logger = get_logger("cli.candidates")


@click.command()
@click.argument('schema_file', type=click.Path(exists=False))
@click.option('--resource-type', '-t', help='Only rank this resource type')
@click.option('--provider', '-p', help='Provider key in the schema (default: first provider)')
@click.option('--limit', '-n', default=5, show_default=True, type=click.IntRange(min=1), help='Candidates per resource type')
@click.option('--json', 'as_json', is_flag=True, help='Output structured JSON')
def candidates(schema_file, resource_type, provider, limit, as_json):
    """
    Show the best identifier candidates for resource types in a schema.
    
    SCHEMA_FILE is the output of `terragrunt providers schema -json`.
    """
    try:
        try:
            schema_path = resolve_file_path(schema_file)
        except FileNotFoundError as e:
            click.echo(format_error(str(e)), err=True)
            sys.exit(1)
        
        store = SchemaStore.from_file(schema_path)
        
        if resource_type:
            resource_types = [resource_type]
        else:
            resource_types = store.list_resource_types()
        
        ranking = {}
        for current_type in resource_types:
            attributes = store.get_resource_schema(current_type, provider)
            if not attributes:
                continue
            scored = score_all_attributes(attributes, current_type)[:limit]
            ranking[current_type] = [
                {
                    "attribute": name,
                    "score": score,
                    "potential_id": attributes[name].is_potential_id(),
                }
                for name, score in scored
            ]
        
        if resource_type and not ranking:
            click.echo(format_error(f"Resource type '{resource_type}' not found in {schema_file}"), err=True)
            sys.exit(1)
        
        if as_json:
            click.echo(json.dumps(ranking, indent=2))
            return
        
        for current_type, entries in ranking.items():
            strategy = strategy_name(detect_provider_type(current_type))
            echo_safe(f"{current_type} ({strategy})")
            for entry in entries:
                flag = "  *" if entry["potential_id"] else "   "
                echo_safe(f"{flag} {entry['attribute']:<30} {entry['score']:6.1f}")
            echo_safe("")
    
    except TgImportError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Candidate ranking failed: {e}"), err=True)
        sys.exit(1)
