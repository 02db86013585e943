"""
SearchEngine: owns the stopword set, the forward store and the inverted index,
and answers AND / OR / mixed boolean queries and ranked queries over them.
"""

import logging
from pathlib import Path
from typing import Iterable, Union

from .boolean_query import and_postings, evaluate_mixed, or_postings
from .index_builder import (
    LoadStats,
    index_document,
    iter_document_records,
    load_stop_words,
)
from .posting import DocumentStore, InvertedIndex
from .ranker import ScoredDocument, rank
from .tokenizer import (
    extract_text_from_markup,
    normalize_term,
    read_text_lines,
    stem_token,
    tokenize,
)

logger = logging.getLogger(__name__)

Source = Union[str, Path, Iterable[str]]


def _read_source(source: Source) -> Iterable[str]:
    """A source is a path to a text file or an iterable of lines."""
    if isinstance(source, (str, Path)):
        return read_text_lines(Path(source))
    return source


class SearchEngine:
    """
    In-memory search engine.

    Load phase: load_stop_words() then load_documents(). Stopwords only affect
    documents loaded after them. Query methods never modify the index.
    """

    def __init__(self, *, stem: bool = False, strip_markup: bool = False) -> None:
        self.stem = stem
        self.strip_markup = strip_markup
        self.stop_words: set[str] = set()
        self.documents = DocumentStore()
        self.index = InvertedIndex()

    # Load phase

    def load_stop_words(self, source: Source) -> int:
        """Add stopwords from source; returns the size of the stopword set."""
        self.stop_words |= load_stop_words(_read_source(source))
        logger.info("Loaded %d stopwords", len(self.stop_words))
        return len(self.stop_words)

    def load_documents(self, source: Source) -> LoadStats:
        """
        Tokenize and index every valid record of source.
        Raises FileNotFoundError if source is a path that does not exist;
        malformed records are skipped and counted in the returned stats.
        """
        stats = LoadStats()
        for doc_id, text in iter_document_records(_read_source(source), stats):
            if self.strip_markup:
                text = extract_text_from_markup(text)
            terms = tokenize(text, self.stop_words, stem=self.stem)
            if index_document(self.documents, self.index, doc_id, terms):
                stats.overwritten_ids.append(doc_id)
            stats.records_indexed += 1
        logger.info(
            "Indexed %d records (%d distinct documents, %d skipped, %d unique terms)",
            stats.records_indexed,
            len(self.documents),
            stats.records_skipped,
            len(self.index),
        )
        return stats

    # Query phase

    def query_term(self, token: str) -> str:
        """Normalize a raw query token into an index term."""
        term = normalize_term(token)
        if self.stem and term:
            return stem_token(term)
        return term

    def postings(self, token: str) -> list[int]:
        """Fresh copy of the posting list for a raw query token."""
        return self.index.get_postings(self.query_term(token))

    def and_query(self, term1: str, term2: str) -> list[int]:
        return and_postings(self.postings(term1), self.postings(term2))

    def or_query(self, term1: str, term2: str) -> list[int]:
        return or_postings(self.postings(term1), self.postings(term2))

    def mixed_query(self, tokens: Iterable[str]) -> list[int]:
        """Evaluate terms joined by the literal operators "AND" / "OR"."""
        return evaluate_mixed(tokens, self.postings)

    def rank(self, terms: Iterable[str], top_k: int | None = None) -> list[ScoredDocument]:
        return rank(
            [self.query_term(t) for t in terms],
            self.index.get_postings,
            self.documents.term_frequency,
            top_k=top_k,
        )

    def stats(self) -> dict[str, int]:
        return {
            "documents": len(self.documents),
            "terms": len(self.index),
            "postings": self.index.total_postings(),
            "stop_words": len(self.stop_words),
        }
