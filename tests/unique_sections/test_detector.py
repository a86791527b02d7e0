"""Tests for duplicate header detection."""

import logging
from types import SimpleNamespace

import pytest

from unique_sections.detector import (
    check,
    duplicate_nodes,
    extract_headers,
    find_duplicates,
    group_headers,
)
from unique_sections.errors import DuplicateHeadersError
from unique_sections.models import Document, Node


def make_document(*headers: str) -> Document:
    return Document.from_headers(list(headers))


def test_scenario_repeated_name():
    """Test that an exact repeat is reported."""
    document = make_document("NAME", "SYNOPSIS", "NAME")

    with pytest.raises(DuplicateHeadersError) as exc_info:
        check(document)

    assert exc_info.value.duplicates == ["NAME"]
    assert str(exc_info.value) == "Error: The following headers appear multiple times: 'NAME'"


def test_scenario_plural_reports_first_occurrence():
    """Test that singular and plural headers are duplicates in lax mode."""
    document = make_document("AUTHOR", "AUTHORS")

    with pytest.raises(DuplicateHeadersError) as exc_info:
        check(document, strict=False)

    assert exc_info.value.duplicates == ["AUTHOR"]


def test_scenario_plural_allowed_when_strict():
    """Test that strict mode only flags identical headers."""
    document = make_document("AUTHOR", "AUTHORS")

    assert check(document, strict=True) is document


def test_scenario_reordered_and_list():
    """Test that reordered AND lists are duplicates."""
    document = make_document("COPYRIGHT AND LICENSE", "LICENSE AND COPYRIGHT")

    with pytest.raises(DuplicateHeadersError) as exc_info:
        check(document)

    assert exc_info.value.duplicates == ["COPYRIGHT AND LICENSE"]


@pytest.mark.parametrize("strict", [True, False])
def test_scenario_distinct_headers_pass(strict):
    """Test that distinct headers pass and the document is untouched."""
    document = make_document("NAME", "SYNOPSIS", "DESCRIPTION")
    before = Document.from_headers(["NAME", "SYNOPSIS", "DESCRIPTION"])

    result = check(document, strict=strict)

    assert result is document
    assert document == before


def test_multiple_duplicates_are_sorted():
    """Test that representatives are reported in sorted order."""
    document = make_document("SEE ALSO", "NAME", "Authors", "see also", "NAME", "AUTHOR")

    with pytest.raises(DuplicateHeadersError) as exc_info:
        check(document)

    assert exc_info.value.duplicates == ["Authors", "NAME", "SEE ALSO"]
    assert str(exc_info.value) == (
        "Error: The following headers appear multiple times: 'Authors', 'NAME', 'SEE ALSO'"
    )


def test_check_is_deterministic():
    """Test that repeated checks give identical messages."""
    document = make_document("B", "A", "b", "a", "C")

    messages = []
    for _ in range(2):
        with pytest.raises(DuplicateHeadersError) as exc_info:
            check(document)
        messages.append(str(exc_info.value))

    assert messages[0] == messages[1]
    assert "'A', 'B'" in messages[0]


def test_only_top_level_sections_are_checked():
    """Test that nested sections and other nodes are ignored."""
    document = Document(
        children=[
            Node("head1", "NAME", [Node("head2", "DETAILS")]),
            Node(None, "NAME"),
            Node("head2", "NAME"),
            Node("head1", "METHODS", [Node("head2", "DETAILS")]),
            SimpleNamespace(content="NAME"),
        ]
    )

    assert check(document) is document


def test_missing_content_counts_as_empty_header():
    """Test that section nodes without content are tolerated."""
    document = Document(children=[Node("head1", None), Node("head1", "")])

    assert extract_headers(document) == ["", ""]
    with pytest.raises(DuplicateHeadersError) as exc_info:
        check(document)
    assert exc_info.value.duplicates == [""]


def test_punctuation_only_headers_are_duplicates():
    """Test that different all-punctuation headers are grouped together."""
    document = make_document("---", "???")

    with pytest.raises(DuplicateHeadersError) as exc_info:
        check(document)

    assert exc_info.value.duplicates == ["---"]


def test_custom_section_command():
    """Test that another command can mark top-level sections."""
    document = Document(children=[Node("h1", "Usage"), Node("h1", "USAGE"), Node("head1", "X")])

    assert find_duplicates(document, command="h1") == ["Usage"]
    assert find_duplicates(document) == []


def test_group_headers_preserves_order():
    """Test that groups keep document order within and across keys."""
    groups = group_headers(["AUTHORS", "NAME", "AUTHOR", "Authors"])

    assert [g.key for g in groups] == ["AUTHOR", "NAME"]
    assert groups[0].headers == ["AUTHORS", "AUTHOR", "Authors"]
    assert groups[0].representative == "AUTHORS"
    assert groups[0].is_duplicate
    assert not groups[1].is_duplicate


def test_find_duplicates_does_not_raise():
    """Test that find_duplicates reports without failing."""
    assert find_duplicates(make_document("NAME", "name")) == ["NAME"]
    assert find_duplicates(make_document("NAME", "name"), strict=True) == []


def test_duplicate_nodes_match_exact_header():
    """Test that only nodes with the representative text are returned."""
    document = make_document("AUTHOR", "NAME", "AUTHORS", "AUTHOR")

    nodes = duplicate_nodes(document, ["AUTHOR"])

    assert [n.content for n in nodes] == ["AUTHOR", "AUTHOR"]


def test_debug_trace_lists_duplicated_nodes(caplog):
    """Test that the duplicated sections are logged before failing."""
    document = Document(
        children=[
            Node("head1", "NAME", [Node(None, "Foo - first")]),
            Node("head1", "NAME", [Node(None, "Foo - second")]),
        ]
    )

    with caplog.at_level(logging.DEBUG, logger="unique_sections.detector"):
        with pytest.raises(DuplicateHeadersError):
            check(document)

    assert "Foo - first" in caplog.text
    assert "Foo - second" in caplog.text
    assert "appear multiple times" in caplog.text
