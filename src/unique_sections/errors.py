"""Exceptions raised by unique_sections."""

from .constants import DUPLICATE_MESSAGE


class UniqueSectionsError(Exception):
    """Base class for all unique_sections errors."""


class DuplicateHeadersError(UniqueSectionsError):
    """Raised when two or more top-level headers share a canonical key.

    Attributes:
        duplicates: Sorted representative header names, one per duplicate group
    """

    def __init__(self, duplicates: list[str]):
        self.duplicates = list(duplicates)
        super().__init__(self.format_message(self.duplicates))

    @staticmethod
    def format_message(duplicates: list[str]) -> str:
        """Build the human-readable report for a list of duplicate names.

        Example:
            >>> DuplicateHeadersError.format_message(["AUTHOR", "NAME"])
            "Error: The following headers appear multiple times: 'AUTHOR', 'NAME'"
        """
        return DUPLICATE_MESSAGE + "'" + "', '".join(duplicates) + "'"


class ConfigurationError(UniqueSectionsError, ValueError):
    """Raised when a plugin is given an invalid configuration."""
