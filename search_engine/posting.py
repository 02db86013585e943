"""
Forward store and inverted index data structures.

The inverted index maps a term to its posting list: one doc_id entry per
occurrence of the term in the document (not deduplicated), so term frequency
is recoverable from the list itself. The forward store keeps each document's
term sequence. Both are filled during the load phase and only read afterwards.
"""

from typing import Iterable, Iterator


class InvertedIndex:
    """
    Inverted index: map from term -> list of doc_ids.
    Append-only add_posting during load; lookups hand out copies so query
    evaluation can never modify the stored lists.
    """

    def __init__(self) -> None:
        self._index: dict[str, list[int]] = {}

    def add_posting(self, term: str, doc_id: int) -> None:
        """Append one occurrence of term in doc_id (no duplicate check)."""
        if term not in self._index:
            self._index[term] = []
        self._index[term].append(doc_id)

    def get_postings(self, term: str) -> list[int]:
        """Return a copy of the posting list for a term, or empty list."""
        return list(self._index.get(term, ()))

    def remove_document(self, doc_id: int, terms: Iterable[str]) -> None:
        """Drop every posting of doc_id under the given terms."""
        for term in set(terms):
            postings = self._index.get(term)
            if postings is None:
                continue
            remaining = [d for d in postings if d != doc_id]
            if remaining:
                self._index[term] = remaining
            else:
                del self._index[term]

    def document_frequency(self, term: str) -> int:
        """Number of distinct documents containing term."""
        return len(set(self._index.get(term, ())))

    def total_postings(self) -> int:
        return sum(len(p) for p in self._index.values())

    def tokens(self) -> Iterator[str]:
        """Iterate over all terms in the index."""
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, term: str) -> bool:
        return term in self._index


class DocumentStore:
    """
    Forward store: map from doc_id -> term sequence (order and duplicates kept).
    """

    def __init__(self) -> None:
        self._docs: dict[int, tuple[str, ...]] = {}

    def put(self, doc_id: int, terms: Iterable[str]) -> tuple[str, ...] | None:
        """Store terms under doc_id, returning the terms it replaced (if any)."""
        previous = self._docs.get(doc_id)
        self._docs[doc_id] = tuple(terms)
        return previous

    def get_terms(self, doc_id: int) -> tuple[str, ...]:
        return self._docs.get(doc_id, ())

    def term_frequency(self, doc_id: int, term: str) -> int:
        """Count occurrences of term in the document's term sequence."""
        return self.get_terms(doc_id).count(term)

    def doc_ids(self) -> Iterator[int]:
        return iter(self._docs)

    def __len__(self) -> int:
        return len(self._docs)

    def __contains__(self, doc_id: int) -> bool:
        return doc_id in self._docs
