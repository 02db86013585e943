"""
Index builder: constructs the forward store and inverted index from a
document source of "id,text" records and a stopword source.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .posting import DocumentStore, InvertedIndex

logger = logging.getLogger(__name__)

# Field separator between id and text; only the first one counts
FIELD_SEPARATOR = ","


@dataclass
class LoadStats:
    """Outcome of one document load."""

    records_indexed: int = 0
    records_skipped: int = 0
    header_skipped: bool = False
    overwritten_ids: list[int] = field(default_factory=list)


def load_stop_words(lines: Iterable[str]) -> set[str]:
    """
    Build a stopword set: one stopword per line, trimmed and lower-cased.
    A blank line contributes "", which never matches since the tokenizer
    does not emit empty terms.
    """
    return {line.strip().lower() for line in lines}


def is_header_record(id_field: str) -> bool:
    """True if the id field looks like a column header ("id", "Document ID")."""
    lowered = id_field.lstrip("\ufeff").strip().lower()
    return lowered == "id" or "document id" in lowered


def parse_document_line(line: str) -> tuple[int, str]:
    """
    Split a record on the first comma and parse its id.
    Raises ValueError for a non-numeric id or a missing text field.
    """
    parts = line.split(FIELD_SEPARATOR, 1)
    id_field = parts[0].strip()
    digits = id_field[1:] if id_field.startswith("+") else id_field
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"invalid document ID {id_field!r}")
    if len(parts) < 2:
        raise ValueError(f"no text field for document ID {id_field}")
    return int(digits), parts[1].strip()


def iter_document_records(
    lines: Iterable[str],
    stats: LoadStats | None = None,
) -> Iterator[tuple[int, str]]:
    """
    Yield (doc_id, text) for every valid record.
    - A header is only recognized on the very first line.
    - Blank lines are ignored; malformed records are logged and skipped.
    """
    stats = stats if stats is not None else LoadStats()
    for line_no, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if line_no == 1 and is_header_record(line.split(FIELD_SEPARATOR, 1)[0]):
            logger.debug("Skipping header record: %r", line)
            stats.header_skipped = True
            continue
        if not line.strip():
            logger.debug("Skipping blank line %d", line_no)
            continue
        try:
            yield parse_document_line(line)
        except ValueError as e:
            stats.records_skipped += 1
            logger.warning("Skipping line %d due to %s: %r", line_no, e, line)


def index_document(
    documents: DocumentStore,
    index: InvertedIndex,
    doc_id: int,
    terms: list[str],
) -> bool:
    """
    Store a document's terms and append one posting per term occurrence.
    A repeated doc_id replaces the earlier document in both stores.
    Returns True if an earlier document was replaced.
    """
    previous = documents.put(doc_id, terms)
    if previous is not None:
        index.remove_document(doc_id, previous)
    for term in terms:
        index.add_posting(term, doc_id)
    return previous is not None
