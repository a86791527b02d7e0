"""Data models for documents and header groups."""

from dataclasses import dataclass, field


@dataclass
class Node:
    """A single node of a parsed documentation tree."""

    command: str | None = None  # e.g., "head1", "head2", "over"
    content: str | None = None  # Header text for section nodes
    children: list["Node"] = field(default_factory=list)

    @property
    def text(self) -> str:
        """Content of the node, or an empty string when it has none."""
        return self.content or ""

    def render(self, indent: int = 0) -> str:
        """Render the node and its children as an indented outline.

        Used for debug output only; the format is not stable.

        Example:
            >>> Node("head1", "NAME", [Node(None, "Foo - bar")]).render()
            '=head1 NAME\\n  Foo - bar\\n'
        """
        pad = "  " * indent
        if self.command:
            line = f"{pad}={self.command} {self.text}".rstrip()
        else:
            line = f"{pad}{self.text}"
        rendered = line + "\n"
        for child in self.children:
            rendered += child.render(indent + 1)
        return rendered


@dataclass
class Document:
    """An ordered sequence of top-level nodes."""

    children: list[Node] = field(default_factory=list)

    @classmethod
    def from_headers(cls, headers: list[str], command: str = "head1") -> "Document":
        """Build a document with one top-level section per header.

        Args:
            headers: Header texts in document order
            command: Command to tag each section node with

        Returns:
            A new Document
        """
        return cls(children=[Node(command, h) for h in headers])


@dataclass
class HeaderGroup:
    """Original headers that share a canonical key, in document order."""

    key: str
    headers: list[str]

    @property
    def representative(self) -> str:
        """First-encountered header of the group."""
        return self.headers[0]

    @property
    def is_duplicate(self) -> bool:
        """Check if more than one header produced this key."""
        return len(self.headers) > 1
