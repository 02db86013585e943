"""In-memory boolean and ranked search engine package."""

from .posting import DocumentStore, InvertedIndex
from .index_builder import LoadStats, load_stop_words, iter_document_records
from .tokenizer import tokenize, normalize_term
from .boolean_query import and_postings, or_postings, evaluate_mixed
from .ranker import ScoredDocument, rank
from .engine import SearchEngine
