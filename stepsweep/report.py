"""Render a ``UsageReport`` for the console or as JSON."""

import json
import os
from pathlib import Path
from typing import Union

from .config import DEFAULT_MAX_UNPARSED
from .models import PatternKind, UsageReport


def relative_to(root: Union[str, Path]):
    root = os.path.abspath(root)

    def rel(path: str) -> str:
        try:
            return os.path.relpath(os.path.abspath(path), root)
        except ValueError:
            # different drive on Windows
            return path

    return rel


def render_text(
    report: UsageReport,
    root: Union[str, Path] = ".",
    max_unparsed: int = DEFAULT_MAX_UNPARSED,
) -> str:
    """Format the report as the plain-text summary printed by the CLI."""
    rel = relative_to(root)
    lines = [
        "== Step Usage Summary ==",
        f"Step files: {report.step_file_count}",
        f"Feature files: {report.scenario_file_count}",
        f"Total step defs (parsed): {report.parsed_count}",
        f"Unused (parsed): {report.unused_count}",
        f"Unparsed (skipped due to variables/indirection): {report.unparsed_count}",
        "",
    ]

    def location(pattern) -> str:
        path = rel(pattern.source_file)
        return f"{path}:{pattern.line_number}" if pattern.line_number else path

    if report.unused:
        lines.append("== UNUSED STEP DEFINITIONS ==")
        for pattern in report.unused:
            lines.append(f"• {location(pattern)}  —  {pattern.display_text}")
        lines.append("")
    else:
        lines.append("No unused parsed steps found. 🎉")
        lines.append("")

    if report.unparsed:
        lines.append("== SKIPPED (non-literal patterns) ==")
        shown, hidden = report.unparsed_preview(max_unparsed)
        for pattern in shown:
            entry = f"• {location(pattern)}  —  {pattern.display_text}"
            if pattern.kind is not PatternKind.UNPARSED:
                entry += f"  ({pattern.error})"
            lines.append(entry)
        if hidden:
            lines.append(f"…and {hidden} more")
        lines.append("")
        lines.append(
            "(Hint: use literal regex or Cucumber Expressions to let the script parse them.)"
        )
        lines.append("")

    return "\n".join(lines)


def render_json(report: UsageReport, root: Union[str, Path] = ".") -> str:
    return json.dumps(report.to_dict(format_path=relative_to(root)), indent=2)
