"""
Term-frequency ranking.

Score(d) = sum_{t in query} tf(t, d)

where tf(t, d) is the number of times t occurs in d's term sequence.
Results are ordered by score descending, then doc_id ascending.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional


@dataclass(frozen=True)
class ScoredDocument:
    doc_id: int
    score: int

    def __repr__(self) -> str:
        return f"ScoredDocument(doc_id={self.doc_id!r}, score={self.score})"


def score_documents(
    terms: Iterable[str],
    lookup: Callable[[str], List[int]],
    term_frequency: Callable[[int, str], int],
) -> Dict[int, int]:
    """
    Accumulate per-document scores for the query terms.
    Each distinct document in a term's postings is credited once per query
    term; a repeated query term counts again. Documents no term reaches are
    absent from the result.
    """
    scores: Dict[int, int] = {}
    for term in terms:
        for doc_id in dict.fromkeys(lookup(term)):
            scores[doc_id] = scores.get(doc_id, 0) + term_frequency(doc_id, term)
    return scores


def rank(
    terms: Iterable[str],
    lookup: Callable[[str], List[int]],
    term_frequency: Callable[[int, str], int],
    top_k: Optional[int] = None,
) -> List[ScoredDocument]:
    scores = score_documents(terms, lookup, term_frequency)
    ranked = sorted(scores.items(), key=lambda x: (-x[1], x[0]))
    if top_k is not None:
        ranked = ranked[:top_k]
    return [ScoredDocument(doc_id, score) for doc_id, score in ranked]
