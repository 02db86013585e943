"""Shared test fixtures."""

from pathlib import Path
import sys

import pytest


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from search_engine.engine import SearchEngine  # noqa: E402


STOP_WORDS = ["the", "and", "a"]

# Postings: apple [1, 2, 2, 4], banana [1, 2], cherry [2, 3], date [3, 4]
DOCUMENTS = [
    "Document ID,Text",
    "1,Apple banana.",
    "2,\"Banana, cherry; apple apple!\"",
    "3,Cherry date",
    "4,the date and the apple",
]

# alpha {1, 2}, beta {2, 3}, gamma {3, 4}
PRECEDENCE_DOCUMENTS = [
    "1,alpha",
    "2,alpha beta",
    "3,beta gamma",
    "4,gamma",
]


@pytest.fixture
def engine():
    """Engine loaded with the small fruit corpus."""
    search = SearchEngine()
    search.load_stop_words(STOP_WORDS)
    search.load_documents(DOCUMENTS)
    return search


@pytest.fixture
def precedence_engine():
    search = SearchEngine()
    search.load_documents(PRECEDENCE_DOCUMENTS)
    return search


@pytest.fixture
def corpus_files(tmp_path):
    """Stopword and document files on disk."""
    stop_path = tmp_path / "stop.txt"
    stop_path.write_text("\n".join(STOP_WORDS) + "\n", encoding="utf-8")
    docs_path = tmp_path / "dataset.csv"
    docs_path.write_text("\n".join(DOCUMENTS) + "\n", encoding="utf-8")
    return stop_path, docs_path
