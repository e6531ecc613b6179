"""Conversion reporting utilities."""
from __future__ import annotations

from .models import ConversionResult


def render_report(result: ConversionResult) -> str:
    """Return a human-readable summary of a conversion run."""

    header_lines = ["Conversion Report"]
    header_lines.append(f"Citation blocks: {result.blocks}")
    header_lines.append(f"Records converted: {len(result.records)}")

    if not result.issues:
        header_lines.append("No conversion issues detected.")
        return "\n".join(header_lines)

    lines = header_lines + ["Issues:"]
    for issue in result.issues:
        line = f"[{issue.severity.upper()}] {issue.code}: {issue.message}"
        if issue.block is not None:
            line = f"{line} (block {issue.block})"
        if issue.context:
            line += f" -> {issue.context}"
        lines.append(line)
    return "\n".join(lines)
