"""
Text normalizer and tokenizer for the search engine index.
Lower-cases text, strips everything but ASCII letters, digits and whitespace,
splits on whitespace and drops stopwords.
Supports optional stemming (Porter) and optional markup stripping for corpora
whose text column carries HTML.
"""

import re
import warnings
from pathlib import Path
from typing import Iterable
from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning, MarkupResemblesLocatorWarning
warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

from nltk.stem import PorterStemmer
from nltk.tokenize import WhitespaceTokenizer

_STEMMER = PorterStemmer()
_SPLITTER = WhitespaceTokenizer()

# Anything that is not an ASCII letter, digit or whitespace is dropped
_STRIP_PATTERN = re.compile(r"[^a-z0-9\s]", flags=re.ASCII)


def stem_token(word: str) -> str:
    """Return Porter stem of word."""
    return _STEMMER.stem(word)


def stem_tokens(tokens: list[str]) -> list[str]:
    """Stem a list of tokens."""
    return [_STEMMER.stem(t) for t in tokens]


def extract_text_from_markup(content: str) -> str:
    """
    Extract visible text from HTML content, stripping tags and scripts.
    """
    soup = BeautifulSoup(content, "lxml")
    for element in soup(["script", "style"]):
        element.decompose()
    return soup.get_text(separator=" ", strip=True)


def normalize_text(text: str) -> str:
    """
    Lower-case text and remove every character that is not a letter, a digit
    or whitespace. Words joined by a removed character ("don't", "e-mail")
    collapse into one run ("dont", "email").
    """
    if not text:
        return ""
    return _STRIP_PATTERN.sub("", text.lower())


def normalize_term(token: str) -> str:
    """Normalize a single query token the same way document text is normalized."""
    return normalize_text(token).strip()


def tokenize(
    text: str,
    stop_words: Iterable[str] = (),
    *,
    stem: bool = False,
) -> list[str]:
    """
    Tokenize text into index terms.
    Order and duplicates are preserved; stopwords are removed before stemming.
    Returns [] when nothing survives normalization.
    """
    normalized = normalize_text(text)
    tokens = _SPLITTER.tokenize(normalized)
    if stop_words:
        stop_words = stop_words if isinstance(stop_words, (set, frozenset)) else set(stop_words)
        tokens = [t for t in tokens if t not in stop_words]
    if stem:
        return stem_tokens(tokens)
    return tokens


def read_text_lines(filepath: Path) -> list[str]:
    """
    Read a text source (stopword list, document CSV) as lines, handling common encodings.
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"Source file not found: {filepath}")
    # utf-8-sig drops a leading BOM; latin-1 accepts any byte and must stay last.
    # Lines break only at \n, \r or \r\n, never at other Unicode separators.
    for encoding in ("utf-8-sig", "cp1252", "latin-1"):
        try:
            with open(filepath, "r", encoding=encoding) as f:
                return [line.rstrip("\r\n") for line in f]
        except UnicodeDecodeError:
            continue
    raise ValueError(f"Could not decode file: {filepath}")
