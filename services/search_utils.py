# services/search_utils.py
from rapidfuzz import fuzz, utils
import html
import re
from typing import List, Optional, Sequence, Tuple

from schemas.productManagement.search import CatalogEntry, ScoredEntry
from services.search_config import (
    FIELD_WEIGHTS, SEARCH_MATCH_THRESHOLD, HIGHLIGHT_OPEN, HIGHLIGHT_CLOSE
)


def field_similarity(query: str, text: str) -> float:
    """
    Similarity between the query and one field value, from 0.0 to 1.0.

    Substring and token-set scorers only apply when the field is at least as
    long as the query, so a short brand or code cannot fully "contain" a
    longer query.
    """
    processed_query = utils.default_process(query)
    processed_text = utils.default_process(text or "")
    if not processed_query or not processed_text:
        return 0.0

    score = fuzz.ratio(processed_query, processed_text)
    if len(processed_text) >= len(processed_query):
        score = max(
            score,
            fuzz.partial_ratio(processed_query, processed_text),
            fuzz.token_set_ratio(processed_query, processed_text),
        )
    return score / 100.0


def score_entry(
    query: str,
    entry: CatalogEntry,
    threshold: float = SEARCH_MATCH_THRESHOLD,
    weights: Sequence[Tuple[str, float]] = FIELD_WEIGHTS,
) -> Optional[float]:
    """
    Relevance of one entry, or None when no field is within the threshold.

    A matching field's distance is pushed towards the threshold the lighter its
    weight is; the entry keeps its best field. An exact name match scores 1.0 and
    every kept entry scores at least 1 - threshold.
    """
    max_weight = max(weight for _, weight in weights)
    best_distance = None

    for field, weight in weights:
        distance = 1.0 - field_similarity(query, getattr(entry, field, "") or "")
        if distance > threshold:
            continue
        weighted = distance + (threshold - distance) * (1.0 - weight / max_weight)
        if best_distance is None or weighted < best_distance:
            best_distance = weighted

    if best_distance is None:
        return None
    return round(1.0 - best_distance, 6)


def rank_entries_by_relevance(
    entries: Sequence[CatalogEntry],
    query: str,
    threshold: float = SEARCH_MATCH_THRESHOLD,
) -> List[ScoredEntry]:
    """
    Score a page of entries against the query, drop the ones below the
    threshold and sort the rest by descending score. Ties keep page order.
    """
    scored = []
    for entry in entries:
        score = score_entry(query, entry, threshold)
        if score is None:
            continue
        scored.append(ScoredEntry(**entry.model_dump(), relevance_score=score))

    # sorted() is stable
    return sorted(scored, key=lambda item: item.relevance_score, reverse=True)


def highlight_text(text: str, query: str, open_tag: str = HIGHLIGHT_OPEN, close_tag: str = HIGHLIGHT_CLOSE) -> str:
    """
    Wrap every case-insensitive literal occurrence of query in the markers.

    The catalog text is HTML-escaped piece by piece, so the markers are the
    only markup in the result.
    """
    if not text:
        return text
    if not query:
        return html.escape(text)
    pattern = re.compile(re.escape(query), re.IGNORECASE)
    pieces = []
    last = 0
    for match in pattern.finditer(text):
        pieces.append(html.escape(text[last:match.start()]))
        pieces.append(f"{open_tag}{html.escape(match.group(0))}{close_tag}")
        last = match.end()
    pieces.append(html.escape(text[last:]))
    return "".join(pieces)


def strip_highlight(text: str, open_tag: str = HIGHLIGHT_OPEN, close_tag: str = HIGHLIGHT_CLOSE) -> str:
    if not text:
        return text
    return html.unescape(text.replace(open_tag, "").replace(close_tag, ""))


def highlight_entry(entry: ScoredEntry, query: str) -> ScoredEntry:
    return entry.model_copy(update={
        "highlighted_name": highlight_text(entry.name, query),
        "highlighted_description": highlight_text(entry.description, query),
    })
