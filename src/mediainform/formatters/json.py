"""JSON output formatter."""

import json
from typing import Any

from mediainform.models import Info


def format_json(info: Info, indent: int = 2) -> str:
    """Format Info as JSON string.

    Args:
        info: Info object
        indent: JSON indentation level

    Returns:
        JSON formatted string
    """
    return info.model_dump_json(indent=indent)


def format_json_list(infos: list[Info], indent: int = 2) -> str:
    """Format multiple Info objects as JSON array.

    Args:
        infos: List of Info objects
        indent: JSON indentation level

    Returns:
        JSON array formatted string
    """
    data = [info.model_dump(mode="json") for info in infos]
    return json.dumps(data, indent=indent, ensure_ascii=False, default=str)


def to_dict(info: Info) -> dict[str, Any]:
    """Convert Info to dictionary."""
    return info.model_dump(mode="json")
