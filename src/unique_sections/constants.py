"""Shared constants for the unique_sections package."""

# Command that marks a direct child of a document as a top-level section
TOP_LEVEL_COMMAND = "head1"

# Delimiter between the members of an "X AND Y" header
AND_SEPARATOR = " AND "

DUPLICATE_MESSAGE = "Error: The following headers appear multiple times: "
