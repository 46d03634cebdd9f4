# clopts — MIT Licensed
"""Renders option values as Rich markup, colored by kind."""
from __future__ import annotations

from typing import Any

from rich.markup import escape

from clopts.themes import OneColors


def paint_value(value: Any) -> str:
    """
    Return Rich markup for a value.

    Lists and mappings are rendered structurally with their items painted
    recursively; None is rendered as `null`.
    """
    if value is None:
        return f"[{OneColors.MAGENTA_b}]null[/]"
    if isinstance(value, bool):
        return f"[{OneColors.LIGHT_YELLOW}]{str(value).lower()}[/]"
    if isinstance(value, (int, float)):
        return f"[{OneColors.CYAN}]{value}[/]"
    if isinstance(value, str):
        return f"[{OneColors.GREEN}]{escape(value)}[/]"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(paint_value(item) for item in value) + "]"
    if isinstance(value, dict):
        items = [f"{escape(str(key))}: {paint_value(item)}" for key, item in value.items()]
        if len(items) > 1:
            return "{ " + ", ".join(items) + " }"
        return "{" + ", ".join(items) + "}"
    return escape(str(value))
