"""
Unit tests for the INI parser (flatparse.parsers.ini).

Line classification and section assembly are tested separately, then
together through parse_ini().
"""

from __future__ import annotations

import pytest

from flatparse.exceptions import IniSyntaxError
from flatparse.models import Config, Section
from flatparse.parsers.ini import (
    IniParser,
    Property,
    SectionAccumulator,
    SectionHeader,
    assemble_sections,
    classify_line,
    classify_lines,
    parse_ini,
)
from tests.conftest import INI_SAMPLE


# ---------------------------------------------------------------------------
# classify_line / classify_lines
# ---------------------------------------------------------------------------

class TestClassifyLine:
    """Tests for single-line classification."""

    def test_property(self):
        assert classify_line("some_key=some_value") == Property("some_key", "some_value")

    def test_empty_value(self):
        assert classify_line("ip=") == Property("ip", "")

    def test_value_keeps_later_equals(self):
        """Only the first '=' separates key from value."""
        assert classify_line("query=a=b") == Property("query", "a=b")

    def test_surrounding_spaces_dropped(self):
        assert classify_line("  key = value\t") == Property("key", "value")

    def test_section_header(self):
        assert classify_line("[server_1]") == SectionHeader("server_1")

    def test_section_name_is_literal(self):
        assert classify_line("[my server.v2]") == SectionHeader("my server.v2")

    def test_empty_section_name(self):
        assert classify_line("[]") == SectionHeader("")

    @pytest.mark.parametrize("line", ["", "   ", "\t", " \t "])
    def test_blank_lines(self, line):
        assert classify_line(line) is None

    def test_missing_equals(self):
        with pytest.raises(IniSyntaxError, match="key=value"):
            classify_line("key_no_equals")

    def test_unclosed_header(self):
        with pytest.raises(IniSyntaxError, match="closing"):
            classify_line("[unclosed")

    def test_text_after_header(self):
        with pytest.raises(IniSyntaxError, match="after section header"):
            classify_line("[a]b")

    def test_empty_key(self):
        with pytest.raises(IniSyntaxError, match="empty key"):
            classify_line("=value")

    def test_error_position_uses_whole_text(self):
        text = "a=1\n  oops\n"
        with pytest.raises(IniSyntaxError) as exc_info:
            classify_line("  oops", text, 4)
        err = exc_info.value
        assert (err.line, err.column, err.offset) == (2, 3, 6)
        assert err.line_text == "  oops"


class TestClassifyLines:
    def test_skips_blank_lines(self):
        entries = list(classify_lines("\na=1\n\n[s]\n  \nb=2\n"))
        assert entries == [Property("a", "1"), SectionHeader("s"), Property("b", "2")]

    def test_crlf(self):
        entries = list(classify_lines("[s]\r\nk=v\r\n"))
        assert entries == [SectionHeader("s"), Property("k", "v")]

    def test_error_reports_line_number(self):
        with pytest.raises(IniSyntaxError) as exc_info:
            list(classify_lines("a=1\n[ok]\n[broken\n"))
        assert exc_info.value.line == 3
        assert exc_info.value.line_text == "[broken"


# ---------------------------------------------------------------------------
# SectionAccumulator / assemble_sections
# ---------------------------------------------------------------------------

class TestSectionAccumulator:
    """The fold step, driven directly without any text."""

    def test_finish_without_input_gives_default_section(self):
        config = SectionAccumulator().finish()
        assert config == Config((Section("", {}),))

    def test_properties_before_header_go_to_default(self):
        acc = SectionAccumulator()
        acc.add_property("a", "1")
        acc.start_section("s")
        acc.add_property("b", "2")
        config = acc.finish()
        assert config.sections == (Section("", {"a": "1"}), Section("s", {"b": "2"}))

    def test_header_flushes_empty_section(self):
        acc = SectionAccumulator()
        acc.start_section("first")
        acc.start_section("second")
        config = acc.finish()
        assert config.names() == ["", "first", "second"]
        assert all(not section.values for section in config)

    def test_duplicate_key_last_wins(self):
        acc = SectionAccumulator()
        acc.add_property("k", "old")
        acc.add_property("k", "new")
        assert acc.finish().default.values == {"k": "new"}

    def test_feed_dispatches_entries(self):
        acc = SectionAccumulator()
        acc.feed(SectionHeader("s"))
        acc.feed(Property("k", "v"))
        assert acc.name == "s"
        assert acc.values == {"k": "v"}
        assert acc.completed == [Section("", {})]

    def test_finish_copies_values(self):
        acc = SectionAccumulator()
        acc.add_property("k", "v")
        config = acc.finish()
        acc.add_property("k", "changed")
        assert config.default["k"] == "v"


class TestAssembleSections:
    def test_repeated_header_names_not_merged(self):
        config = assemble_sections([
            SectionHeader("dup"),
            Property("a", "1"),
            SectionHeader("dup"),
            Property("b", "2"),
        ])
        assert len(config) == 3
        assert [s.values for s in config.find("dup")] == [{"a": "1"}, {"b": "2"}]

    def test_empty_entries(self):
        assert assemble_sections([]).names() == [""]


# ---------------------------------------------------------------------------
# parse_ini
# ---------------------------------------------------------------------------

class TestParseIni:
    """End-to-end parses of INI text."""

    def test_sample(self):
        config = parse_ini(INI_SAMPLE)
        assert len(config) == 4

        default, server_1, empty, second = config.sections

        assert default.name == ""
        assert default.values == {"username": "abc", "password": "pass"}

        assert server_1.name == "server_1"
        assert server_1.values == {
            "interface": "eth0",
            "ip": "127.0.0.1",
            "document_root": "/var/www/example.org",
        }

        assert empty.name == "empty_section"
        assert empty.values == {}

        assert second.name == "second_server"
        assert len(second.values) == 3
        assert second["ip"] == ""
        assert second["interface"] == "eth1"
        assert second["document_root"] == "/var/www/example.com"

    def test_empty_input(self):
        config = parse_ini("")
        assert config.names() == [""]
        assert config.default.values == {}

    def test_first_section_always_unnamed(self):
        config = parse_ini("[only]\nk=v")
        assert config.names() == ["", "only"]
        assert config.default.values == {}

    def test_trailing_empty_section_kept(self):
        assert parse_ini("a=1\n[last]").names() == ["", "last"]

    def test_duplicate_key_in_section(self):
        assert parse_ini("[s]\nk=1\nk=2\n").get("s", "k") == "2"

    def test_parse_is_deterministic(self):
        assert parse_ini(INI_SAMPLE) == parse_ini(INI_SAMPLE)

    @pytest.mark.parametrize(
        "text",
        ["key_no_equals", "[unclosed", "a=1\n[s]\njunk\n", "[s] x"],
    )
    def test_malformed_input(self, text):
        with pytest.raises(IniSyntaxError):
            parse_ini(text)

    def test_parser_instance(self):
        assert IniParser().parse("k=v").default["k"] == "v"
