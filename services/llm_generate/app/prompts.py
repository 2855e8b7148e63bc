"""
Prompt template and context formatting for GCP documentation summaries.

The template text is fixed; downstream evaluation compares answers
produced from it, so wording and line breaks must not drift.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping

from shared.models import SearchResult

# ===========================  SUMMARY GENERATION  ========================== #

SUMMARY_PROMPT_TEMPLATE = """
You are a helpful Google Cloud Platform technical expert. Based on the following relevant documentation excerpts,
provide a clear, accurate, and concise answer to the user's question. If the provided context doesn't fully
answer the question, acknowledge this and provide what information you can from the available context.

Context from GCP Documentation:
{context}

User Question: {question}

Please provide a technical summary that:
1. Directly answers the user's question using information from the documentation
2. Includes specific technical details and steps when available
3. Maintains technical accuracy without including information not present in the context
4. Acknowledges if any part of the question cannot be fully answered with the given context

Summary and Answer:"""

BLOCK_SEPARATOR = "\n"


def _score_key(score: Any) -> Any:
    # Numeric strings order by value, so "9" sorts before "10"
    if isinstance(score, str):
        try:
            return float(score)
        except ValueError:
            return score
    return score


def sort_by_score(results: Iterable[SearchResult]) -> List[SearchResult]:
    """Order results by ascending score.

    ``sorted`` is stable, so equal scores keep the caller's order.
    """
    return sorted(results, key=lambda r: _score_key(r.score))


def _present(value: Any) -> bool:
    if value is None or value is False:
        return False
    if isinstance(value, (str, int, float)):
        return bool(value) and value == value
    return True


def format_result(result: SearchResult) -> str:
    meta = result.metadata
    title = f"Title: {meta.title}\n" if meta and _present(meta.title) else ""
    section = f"Section: {meta.section}\n" if meta and _present(meta.section) else ""
    content = "" if result.content is None else result.content
    return f"{title}{section}Content: {content}\n---\n"


def _parse(item: Any) -> SearchResult:
    if isinstance(item, SearchResult):
        return item
    # Elements that are not objects carry no fields
    if not isinstance(item, Mapping):
        return SearchResult()
    return SearchResult.model_validate(dict(item))


def format_context(results: Iterable[SearchResult | Mapping[str, Any]]) -> str:
    """Render search results as the ``{context}`` block of the prompt."""
    parsed = [_parse(r) for r in results]
    return BLOCK_SEPARATOR.join(format_result(r) for r in sort_by_score(parsed))


def build_summary_prompt(question: str, context: str) -> str:
    """Substitute ``context`` and ``question`` into the summary template.

    Substitution is a single pass, so braces in either value are kept
    verbatim instead of being read as further placeholders.
    """
    head, rest = SUMMARY_PROMPT_TEMPLATE.split("{context}", 1)
    middle, tail = rest.split("{question}", 1)
    return f"{head}{context}{middle}{question}{tail}"
