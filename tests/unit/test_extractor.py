"""
Unit tests for tag extraction.
"""

import os

import pytest

from xmlcomp.comparer import CompareContext, matches_doc_type, parse_line, read_tags
from xmlcomp.errors import FileAccessError, InvalidArgumentError


class TestParseLine:
    """Single-line scanner."""

    def test_simple_entry(self):
        assert parse_line("<name>Alice</name>") == ("<name>", "Alice")

    def test_indented_entry(self):
        assert parse_line("    <label>Steel wall</label>") == ("<label>", "Steel wall")

    def test_attributes_are_cut_from_key(self):
        assert parse_line('<li Class="Rich">Gold</li>') == ("<li", "Gold")

    def test_empty_value(self):
        assert parse_line("<empty></empty>") == ("<empty>", "")

    def test_value_runs_to_last_open_bracket(self):
        assert parse_line("<a>x<b>y</b>") == ("<a>", "x<b>y")

    @pytest.mark.parametrize("line", [
        "",
        "plain text",
        "only < bracket",
        "only > bracket",
        "<LanguageData>",
        "</LanguageData>",
        '<?xml version="1.0" encoding="utf-8"?>',
        "<!-- a comment -->",
        "a > b <c",
    ])
    def test_lines_without_entry(self, line):
        assert parse_line(line) is None

    def test_tag_starting_with_separator_is_skipped(self, monkeypatch):
        monkeypatch.setattr(os, "sep", "<")
        assert parse_line("<name>Alice</name>") is None


class TestMatchesDocType:
    """Document type gate."""

    def test_matching_extension(self):
        assert matches_doc_type("Keyed/Misc.xml", "xml")

    def test_other_extension(self):
        assert not matches_doc_type("Keyed/Misc.txt", "xml")

    def test_only_last_extension_counts(self):
        assert not matches_doc_type("Misc.xml.bak", "xml")

    def test_case_sensitive(self):
        assert not matches_doc_type("Misc.XML", "xml")


class TestReadTags:
    """File-level extraction."""

    def test_reads_sample_document(self, create_test_file, context, sample_document):
        path = create_test_file("Misc.xml", sample_document)

        tags = read_tags(path, context)

        assert tags == {"<name>": "Alice", "<age>": "30"}
        assert context.lines == 5

    def test_other_type_is_skipped_without_counting(self, create_test_file, context, sample_document):
        path = create_test_file("Misc.txt", sample_document)

        assert read_tags(path, context) == {}
        assert context.lines == 0

    def test_other_type_is_not_opened(self, temp_dir, context):
        # Missing file of another type is not an error
        assert read_tags(temp_dir / "absent.txt", context) == {}

    def test_later_duplicate_wins(self, create_test_file, context):
        path = create_test_file("Dup.xml", "<k>first</k>\n<k>second</k>\n")

        assert read_tags(path, context) == {"<k>": "second"}
        assert context.lines == 2

    def test_crlf_line_endings(self, temp_dir, context):
        path = temp_dir / "Win.xml"
        path.write_bytes(b"<k>v</k>\r\n<j>w</j>\r\n")

        assert read_tags(path, context) == {"<k>": "v", "<j>": "w"}

    def test_counts_lines_without_tags(self, create_test_file, context):
        path = create_test_file("Blank.xml", "\n\nno tag here\n<k>v</k>")

        read_tags(path, context)

        assert context.lines == 4

    def test_custom_doc_type(self, create_test_file):
        context = CompareContext(doc_type="txt")
        path = create_test_file("Notes.txt", "<k>v</k>\n")

        assert read_tags(path, context) == {"<k>": "v"}

    def test_missing_file_raises(self, temp_dir, context):
        with pytest.raises(FileAccessError) as exc_info:
            read_tags(temp_dir / "absent.xml", context)

        assert exc_info.value.context["operation"] == "read"
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_empty_name_raises(self, context):
        with pytest.raises(InvalidArgumentError):
            read_tags("", context)
