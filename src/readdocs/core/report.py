"""Render ranked search matches as plain text for agents and terminals."""

from __future__ import annotations

from readdocs.core.corpus import DocumentKind
from readdocs.core.search import MatchRecord

NO_MATCHES = "No matches found."


def format_record(record: MatchRecord) -> str:
    lines = [
        f"type: {record.kind.value}",
        f"name: {record.name}",
    ]
    if record.kind is DocumentKind.detail:
        lines.append(f"module: {record.module}")
    lines.extend([
        f"file: {record.file}",
        f"match_type: {record.category.value}",
        f"score: {record.score}",
    ])
    if record.matched_terms:
        lines.append(f"matched_keywords: {', '.join(record.matched_terms)}")
    if record.content_matches:
        parts = [
            f"{term} (lines: {', '.join(str(n) for n in line_numbers)})"
            for term, line_numbers in record.content_matches.items()
        ]
        lines.append(f"content_matches: {'; '.join(parts)}")
    return "\n".join(lines)


def format_results(records: list[MatchRecord]) -> str:
    """Join record blocks with a blank line, or NO_MATCHES when empty."""
    if not records:
        return NO_MATCHES
    return "\n\n".join(format_record(r) for r in records)
