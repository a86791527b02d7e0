"""Duplicate detection over the top-level sections of a document.

The check must run after every step that can add or rename top-level sections,
otherwise sections generated later are never seen. Callers are responsible for
scheduling it last.
"""

from common.logger import get_logger

from .constants import TOP_LEVEL_COMMAND
from .errors import DuplicateHeadersError
from .models import Document, HeaderGroup, Node
from .normalizer import normalize

logger = get_logger(__name__)


def _is_section(node, command: str) -> bool:
    return getattr(node, "command", None) == command


def extract_headers(document: Document, command: str = TOP_LEVEL_COMMAND) -> list[str]:
    """Get the header texts of a document's top-level sections.

    Only direct children are inspected. Missing content counts as an empty header.

    Args:
        document: Parsed document
        command: Command marking a top-level section

    Returns:
        Header texts in document order
    """
    return [
        getattr(node, "content", None) or ""
        for node in document.children
        if _is_section(node, command)
    ]


def group_headers(headers: list[str], strict: bool = False) -> list[HeaderGroup]:
    """Group headers by canonical key.

    Args:
        headers: Header texts in document order
        strict: Whether only identical headers share a key

    Returns:
        One group per key, ordered by the first occurrence of each key
    """
    groups: dict[str, HeaderGroup] = {}
    for header in headers:
        key = normalize(header, strict)
        if key not in groups:
            groups[key] = HeaderGroup(key=key, headers=[])
        groups[key].headers.append(header)
    return list(groups.values())


def find_duplicates(
    document: Document, strict: bool = False, command: str = TOP_LEVEL_COMMAND
) -> list[str]:
    """Find the representative name of every duplicated section.

    Args:
        document: Parsed document
        strict: Whether only identical headers are duplicates
        command: Command marking a top-level section

    Returns:
        Sorted first-encountered header of each duplicate group
    """
    groups = group_headers(extract_headers(document, command), strict)
    return sorted(g.representative for g in groups if g.is_duplicate)


def duplicate_nodes(
    document: Document, names: list[str], command: str = TOP_LEVEL_COMMAND
) -> list[Node]:
    """Get the top-level nodes whose header is exactly one of names."""
    nodes = []
    for name in names:
        nodes.extend(
            node
            for node in document.children
            if _is_section(node, command) and (getattr(node, "content", None) or "") == name
        )
    return nodes


def _trace(nodes) -> str:
    return "".join(
        node.render() if hasattr(node, "render") else f"={node.command} {node.content}\n"
        for node in nodes
    )


def check(
    document: Document, strict: bool = False, command: str = TOP_LEVEL_COMMAND
) -> Document:
    """Ensure a document has no duplicate top-level section headers.

    The document is never modified.

    Args:
        document: Finalized document
        strict: Whether only identical headers are duplicates
        command: Command marking a top-level section

    Returns:
        The same document, when no duplicates were found

    Raises:
        DuplicateHeadersError: If two or more headers share a canonical key
    """
    duplicates = find_duplicates(document, strict, command)
    if not duplicates:
        return document

    logger.debug(
        "Sections of duplicated headers:\n\n%s",
        _trace(duplicate_nodes(document, duplicates, command)),
        extra={"markup": False},
    )
    error = DuplicateHeadersError(duplicates)
    logger.error(str(error), extra={"markup": False})
    raise error
