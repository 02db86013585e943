"""Unit tests for stopword loading, record parsing and document indexing."""

import logging

import pytest

from search_engine.index_builder import (
    LoadStats,
    index_document,
    is_header_record,
    iter_document_records,
    load_stop_words,
    parse_document_line,
)
from search_engine.posting import DocumentStore, InvertedIndex


def test_load_stop_words_trims_and_lowercases():
    assert load_stop_words(["  The \n", "AND", ""]) == {"the", "and", ""}


@pytest.mark.parametrize("id_field", ["id", " ID ", "Document ID", "document id (int)", "\ufeffid"])
def test_header_detection(id_field):
    assert is_header_record(id_field)


@pytest.mark.parametrize("id_field", ["1", "identifier", "docid", ""])
def test_non_header_fields(id_field):
    assert not is_header_record(id_field)


def test_parse_splits_on_first_comma_only():
    assert parse_document_line(" 12 , hello, world ") == (12, "hello, world")


def test_parse_accepts_explicit_plus_sign():
    assert parse_document_line("+5,signed") == (5, "signed")


@pytest.mark.parametrize("line", ["x,hello", "-3,negative", "1.5,float", "5", ",no id", "+,sign only", "++5,double"])
def test_parse_rejects_malformed_records(line):
    with pytest.raises(ValueError):
        parse_document_line(line)


def test_header_only_skipped_on_first_record():
    stats = LoadStats()
    records = list(iter_document_records(["id,secret words", "1,foo", "3,id"], stats))

    assert records == [(1, "foo"), (3, "id")]
    assert stats.header_skipped
    assert stats.records_skipped == 0


def test_header_like_record_later_is_malformed(caplog):
    stats = LoadStats()
    with caplog.at_level(logging.WARNING, logger="search_engine.index_builder"):
        records = list(iter_document_records(["1,foo", "id,text", "2,bar"], stats))

    assert records == [(1, "foo"), (2, "bar")]
    assert not stats.header_skipped
    assert stats.records_skipped == 1
    assert "invalid document ID 'id'" in caplog.text


def test_malformed_records_are_skipped_and_load_continues(caplog):
    stats = LoadStats()
    lines = ["1,first", "abc,bad id", "", "2,second\r\n"]
    with caplog.at_level(logging.WARNING):
        records = list(iter_document_records(lines, stats))

    assert records == [(1, "first"), (2, "second")]
    assert stats.records_skipped == 1
    assert "line 2" in caplog.text


def test_index_document_mirrors_forward_store():
    documents = DocumentStore()
    index = InvertedIndex()

    index_document(documents, index, 1, ["x", "y", "x"])
    index_document(documents, index, 2, ["x"])

    assert index.get_postings("x") == [1, 1, 2]
    assert index.get_postings("y") == [1]
    assert documents.get_terms(1) == ("x", "y", "x")


def test_duplicate_doc_id_replaces_earlier_document():
    documents = DocumentStore()
    index = InvertedIndex()

    assert not index_document(documents, index, 1, ["old", "shared"])
    index_document(documents, index, 2, ["shared"])
    assert index_document(documents, index, 1, ["new", "shared"])

    assert documents.get_terms(1) == ("new", "shared")
    assert "old" not in index
    assert index.get_postings("shared") == [2, 1]
    assert index.get_postings("new") == [1]


def test_bom_prefixed_header_is_recognized(caplog):
    stats = LoadStats()
    with caplog.at_level(logging.WARNING):
        records = list(iter_document_records(["\ufeffid,text", "1,foo"], stats))

    assert records == [(1, "foo")]
    assert stats.header_skipped
    assert stats.records_skipped == 0
    assert caplog.text == ""
