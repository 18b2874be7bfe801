"""Output formatting for the ``list`` command."""
import json
from typing import Any, Dict, List

import yaml

from pattern_catalogue.cli.catalogue import DemoEntry


def _as_dicts(entries: List[DemoEntry]) -> List[Dict[str, Any]]:
    return [
        {"name": entry.name, "family": entry.family, "description": entry.description}
        for entry in entries
    ]


def format_table(entries: List[DemoEntry]) -> str:
    """Format demos as an aligned text table."""
    if not entries:
        return "No demos found."
    rows = [("NAME", "FAMILY", "DESCRIPTION")]
    rows.extend((entry.name, entry.family, entry.description) for entry in entries)
    name_width = max(len(row[0]) for row in rows)
    family_width = max(len(row[1]) for row in rows)
    lines = [f"{name:<{name_width}}  {family:<{family_width}}  {desc}" for name, family, desc in rows]
    lines.insert(1, f"{'-' * name_width}  {'-' * family_width}  {'-' * len('DESCRIPTION')}")
    return "\n".join(lines)


def format_output(entries: List[DemoEntry], format_type: str) -> str:
    """Format demos according to the specified format type."""
    if format_type == "json":
        return json.dumps({"demos": _as_dicts(entries)}, indent=2)
    elif format_type == "yaml":
        return yaml.safe_dump({"demos": _as_dicts(entries)}, default_flow_style=False, sort_keys=False)
    return format_table(entries)
