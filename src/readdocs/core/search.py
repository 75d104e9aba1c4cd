"""Keyword search across module documents with filename/content ranking."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple

from readdocs.core.corpus import (
    Document,
    DocumentKind,
    SearchContext,
    read_content,
    walk_corpus,
)


class Combinator(str, Enum):
    AND = "and"
    OR = "or"


class MatchKind(Enum):
    none = 0
    partial = 1
    exact = 2


class MatchCategory(str, Enum):
    exact_filename = "exact-filename"
    partial_filename = "partial-filename"
    exact_content = "exact-content"
    partial_content = "partial-content"

    @property
    def rank(self) -> int:
        return _CATEGORY_RANK[self]

    @property
    def base_score(self) -> int:
        return _BASE_SCORE[self]


_CATEGORY_RANK = {
    MatchCategory.exact_filename: 4,
    MatchCategory.partial_filename: 3,
    MatchCategory.exact_content: 2,
    MatchCategory.partial_content: 1,
}

_BASE_SCORE = {
    MatchCategory.exact_filename: 100,
    MatchCategory.partial_filename: 80,
    MatchCategory.exact_content: 60,
    MatchCategory.partial_content: 40,
}

# Bonus per distinct matched term beyond the first
TERM_BONUS = 10


class QueryTerm(NamedTuple):
    text: str
    lower: str


@dataclass(frozen=True)
class FieldMatch:
    """How one query term matched one document."""

    filename: MatchKind = MatchKind.none
    content: MatchKind = MatchKind.none
    lines: tuple[int, ...] = ()

    @property
    def matched(self) -> bool:
        return self.filename is not MatchKind.none or self.content is not MatchKind.none


@dataclass
class MatchRecord:
    kind: DocumentKind
    name: str
    file: str
    score: int
    category: MatchCategory
    module: str | None = None
    matched_terms: list[str] = field(default_factory=list)
    content_matches: dict[str, list[int]] = field(default_factory=dict)

    def to_dict(self) -> dict:
        data = {
            "type": self.kind.value,
            "name": self.name,
            "file": self.file,
            "match_type": self.category.value,
            "score": self.score,
            "matched_keywords": list(self.matched_terms),
        }
        if self.module is not None:
            data["module"] = self.module
        if self.content_matches:
            data["content_matches"] = {
                term: list(lines) for term, lines in self.content_matches.items()
            }
        return data


def parse_combinator(value: Combinator | str) -> Combinator:
    """Accept "and"/"or" in any case; raises ValueError otherwise."""
    if isinstance(value, Combinator):
        return value
    return Combinator(value.strip().lower())


def tokenize(raw: str) -> list[QueryTerm]:
    """Split on whitespace into distinct terms, first-seen casing wins."""
    terms: list[QueryTerm] = []
    seen: set[str] = set()
    for fragment in raw.split():
        lower = fragment.lower()
        if lower in seen:
            continue
        seen.add(lower)
        terms.append(QueryTerm(fragment, lower))
    return terms


def _has_boundary(term: str, content: str) -> bool:
    # Only these literal flanks count; document start/end are not boundaries.
    return (
        f" {term} " in content
        or f"\n{term}\n" in content
        or f'"{term}"' in content
    )


def match_term(
    term: str,
    filename_stem: str,
    content: str | None,
    content_lines: list[str] | None = None,
) -> FieldMatch:
    """Match a lowercase term against a lowercase file stem and content.

    `content` of None means the document could not be read.
    """
    if filename_stem == term:
        filename = MatchKind.exact
    elif term in filename_stem:
        filename = MatchKind.partial
    else:
        filename = MatchKind.none

    if content is None or term not in content:
        return FieldMatch(filename=filename)

    if content_lines is None:
        content_lines = content.split("\n")
    lines = tuple(i for i, line in enumerate(content_lines, 1) if term in line)
    kind = MatchKind.exact if _has_boundary(term, content) else MatchKind.partial
    return FieldMatch(filename=filename, content=kind, lines=lines)


def _category(matches: list[FieldMatch]) -> MatchCategory:
    if any(m.filename is MatchKind.exact for m in matches):
        return MatchCategory.exact_filename
    if any(m.filename is MatchKind.partial for m in matches):
        return MatchCategory.partial_filename
    if any(m.content is MatchKind.exact for m in matches):
        return MatchCategory.exact_content
    return MatchCategory.partial_content


def classify(
    document: Document,
    terms: list[QueryTerm],
    combinator: Combinator = Combinator.OR,
) -> MatchRecord | None:
    """Score one document against the query, or None when it does not match."""
    stem = document.stem.lower()
    content = read_content(document.path)
    content_lower = content.lower() if content is not None else None
    lines_lower = content_lower.split("\n") if content_lower is not None else None

    matched: list[tuple[QueryTerm, FieldMatch]] = []
    for term in terms:
        result = match_term(term.lower, stem, content_lower, lines_lower)
        if result.matched:
            matched.append((term, result))

    if not matched:
        return None
    if combinator is Combinator.AND and len(matched) != len(terms):
        return None

    category = _category([m for _, m in matched])
    score = category.base_score + TERM_BONUS * (len(matched) - 1)
    content_matches = {term.text: list(m.lines) for term, m in matched if m.lines}

    is_detail = document.kind is DocumentKind.detail
    return MatchRecord(
        kind=document.kind,
        name=document.stem if is_detail else document.module.name,
        module=document.module.name if is_detail else None,
        file=f"{document.module.directory}/{document.path.name}",
        score=score,
        category=category,
        matched_terms=[term.text for term, _ in matched],
        content_matches=content_matches,
    )


def rank(records: list[MatchRecord]) -> list[MatchRecord]:
    """Order by score, then category precedence; ties keep encounter order."""
    return sorted(records, key=lambda r: (-r.score, -r.category.rank))


def search_docs(
    ctx: SearchContext,
    keyword: str,
    combinator: Combinator | str = Combinator.OR,
) -> list[MatchRecord]:
    """Scan the whole corpus for `keyword` and return ranked matches."""
    combinator = parse_combinator(combinator)
    terms = tokenize(keyword)
    if not terms:
        return []

    records: list[MatchRecord] = []
    for document in walk_corpus(ctx):
        record = classify(document, terms, combinator)
        if record is not None:
            records.append(record)
    return rank(records)
