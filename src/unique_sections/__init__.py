"""Detect duplicate top-level section headers in finished documents."""

from .detector import check, duplicate_nodes, extract_headers, find_duplicates, group_headers
from .errors import ConfigurationError, DuplicateHeadersError, UniqueSectionsError
from .models import Document, HeaderGroup, Node
from .normalizer import normalize, singularize
from .plugin import EnsureUniqueSections

__all__ = [
    "check",
    "duplicate_nodes",
    "extract_headers",
    "find_duplicates",
    "group_headers",
    "ConfigurationError",
    "DuplicateHeadersError",
    "UniqueSectionsError",
    "Document",
    "HeaderGroup",
    "Node",
    "normalize",
    "singularize",
    "EnsureUniqueSections",
]
