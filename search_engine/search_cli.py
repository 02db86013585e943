"""
Interactive search component.

Loads a stopword list and a document CSV ("id,text" per line, optional
header) into a SearchEngine, then answers queries typed at the prompt:

- "a and b" / "a or b"          pairwise boolean query
- "a or b and c ..."            mixed boolean query (AND binds tighter)
- anything else                 term-frequency ranked query

Usage (from repo root):
    python -m search_engine.search_cli \
        --stopwords resources/stop.txt \
        --documents resources/dataset.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from .boolean_query import OPERATORS
from .engine import SearchEngine
from .ranker import ScoredDocument

DEFAULT_STOPWORDS_PATH = Path("resources/stop.txt")
DEFAULT_DOCUMENTS_PATH = Path("resources/dataset.csv")

PROMPT = "Enter your query (AND, OR, or Rank), or type 'exit' to quit:"
EXIT_COMMAND = "exit"


@dataclass
class QueryResult:
    kind: str
    doc_ids: List[int] = field(default_factory=list)
    ranked: List[ScoredDocument] = field(default_factory=list)


def classify_query(parts: List[str]) -> str:
    """
    Pick the query form for a whitespace-split query line:
    "pairwise", "mixed" or "ranked".
    """
    lowered = [p.lower() for p in parts]
    if len(parts) == 3 and lowered[1] in ("and", "or"):
        return "pairwise"
    if "and" in lowered or "or" in lowered:
        return "mixed"
    return "ranked"


def execute_query(
    engine: SearchEngine,
    raw_query: str,
    top_k: Optional[int] = None,
) -> QueryResult:
    parts = raw_query.strip().lower().split()
    kind = classify_query(parts)

    if kind == "pairwise":
        if parts[1] == "and":
            return QueryResult(kind, doc_ids=engine.and_query(parts[0], parts[2]))
        return QueryResult(kind, doc_ids=engine.or_query(parts[0], parts[2]))

    if kind == "mixed":
        tokens = [p.upper() if p.upper() in OPERATORS else p for p in parts]
        return QueryResult(kind, doc_ids=engine.mixed_query(tokens))

    return QueryResult(kind, ranked=engine.rank(parts, top_k=top_k))


def display_results(result: QueryResult) -> None:
    if result.kind == "ranked":
        if not result.ranked:
            print("No documents found.")
            return
        for scored in result.ranked:
            print(f"Document {scored.doc_id} (Score: {scored.score})")
        return

    if not result.doc_ids:
        print("No documents found.")
        return
    for doc_id in result.doc_ids:
        print(f"Document {doc_id}")


def print_index_stats(engine: SearchEngine) -> None:
    stats = engine.stats()
    print("\n" + "=" * 50)
    print("INDEX ANALYTICS")
    print("=" * 50)
    print()
    print("| Metric                      | Value |")
    print("|-----------------------------|-------|")
    print(f"| Number of indexed documents | {stats['documents']} |")
    print(f"| Number of unique terms      | {stats['terms']} |")
    print(f"| Number of postings          | {stats['postings']} |")
    print(f"| Number of stopwords         | {stats['stop_words']} |")
    print()


def run_search_loop(engine: SearchEngine, top_k: Optional[int] = None) -> None:
    """
    Interactive command-line search loop.
    """
    while True:
        print(PROMPT)
        try:
            raw_query = input().strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if raw_query.lower() == EXIT_COMMAND:
            print("Exiting search engine.")
            break

        display_results(execute_query(engine, raw_query, top_k=top_k))


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Simple boolean and ranked search CLI.")
    parser.add_argument(
        "--stopwords",
        type=Path,
        default=DEFAULT_STOPWORDS_PATH,
        help="Path to stopword list (one word per line).",
    )
    parser.add_argument(
        "--documents",
        type=Path,
        default=DEFAULT_DOCUMENTS_PATH,
        help="Path to document CSV (id,text per line).",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=None,
        help="Number of top ranked results to show (default: all).",
    )
    parser.add_argument(
        "--stem",
        action="store_true",
        help="Porter-stem document and query terms.",
    )
    parser.add_argument(
        "--strip-markup",
        action="store_true",
        help="Extract visible text from HTML in the document text column.",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print index analytics and exit.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for load diagnostics.",
    )
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    engine = SearchEngine(stem=args.stem, strip_markup=args.strip_markup)
    try:
        engine.load_stop_words(args.stopwords)
        engine.load_documents(args.documents)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.stats:
        print_index_stats(engine)
        return

    run_search_loop(engine, top_k=args.top)


if __name__ == "__main__":
    main()
