"""
CLI-specific formatting functions.

This module handles presentation formatting for the CLI, including:
- Plain text example output, one line per invocation
- JSON and YAML renderings for scripting
- Rich tables for the example catalog
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "text":
        return format_text_output(data)
    elif format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip("\n")
    elif format_type == "table":
        return format_table_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_text_output(data: Any) -> str:
    """Format example output as plain lines."""
    if isinstance(data, dict) and "output" in data:
        return "\n".join(data["output"])
    if isinstance(data, dict) and "examples" in data:
        return "\n".join(f"{e['name']}: {e['summary']}" for e in data["examples"])
    return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "examples" in data:
        return format_examples_table(data["examples"])
    # Fallback to JSON for unknown data structures
    return json.dumps(data, indent=2, default=str)


def format_examples_table(examples: List[Dict[str, str]]) -> str:
    """Format the example catalog as a Rich table."""
    if not examples:
        return "No examples found."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Principle", style="green", no_wrap=True)
    table.add_column("Title", style="blue")
    table.add_column("Summary")

    for example in examples:
        table.add_row(
            example.get("name", "N/A"),
            example.get("principle", "N/A"),
            example.get("title", "N/A"),
            example.get("summary", ""),
        )

    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)

    return capture.get().rstrip("\n")
