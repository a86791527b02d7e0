"""Finalizer that ensures a woven document has no duplicate section headers."""

from collections.abc import Mapping

from common.env import FALSE_VALUES, TRUE_VALUES, env
from common.logger import get_logger

from .detector import check
from .errors import ConfigurationError
from .models import Document
from .normalizer import normalize

logger = get_logger(__name__)


def parse_bool(name: str, value) -> bool:
    """Parse a boolean option from a config value.

    Args:
        name: Option name, used in error messages
        value: A bool, or a string such as "1", "0", "true", "off"

    Returns:
        Parsed boolean

    Raises:
        ConfigurationError: If the value is not a recognised boolean
    """
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean for '{name}': {value!r}")


class EnsureUniqueSections:
    """Fail a document whose top-level section headers repeat.

    Register it as the last finalizer of a pipeline: it only sees sections
    that exist when it runs, and finalizers that append leftover sections are
    the most likely source of duplicates. The plugin never reorders the
    pipeline itself; hosts should honour ``runs_last``.

    In weaver.ini style configuration:

        [-EnsureUniqueSections]
        strict = 0 ; The default
    """

    runs_last = True

    CONFIG_KEYS = {"strict", "section_command"}

    def __init__(self, strict: bool | None = None, section_command: str | None = None):
        """Initialize the plugin.

        Args:
            strict: Only treat identical headers as duplicates. If None, uses
                environment variable UNIQUE_SECTIONS_STRICT or defaults to False.
            section_command: Command marking a top-level section. If None, uses
                UNIQUE_SECTIONS_COMMAND or defaults to 'head1'.
        """
        self.strict = env.strict() if strict is None else strict
        self.section_command = section_command or env.section_command()

    @classmethod
    def from_config(cls, config: Mapping[str, object]) -> "EnsureUniqueSections":
        """Build a plugin from a config section.

        Raises:
            ConfigurationError: On unknown keys or a malformed value
        """
        unknown = sorted(set(config) - cls.CONFIG_KEYS)
        if unknown:
            raise ConfigurationError(f"Unknown option(s): {', '.join(unknown)}")

        strict = parse_bool("strict", config["strict"]) if "strict" in config else None
        section_command = config.get("section_command")
        if section_command is not None:
            section_command = str(section_command).strip()
            if not section_command:
                raise ConfigurationError("'section_command' must not be empty")
        return cls(strict=strict, section_command=section_command)

    def header_key(self, text: str) -> str:
        """Canonical key of a header under this plugin's strictness."""
        return normalize(text, self.strict)

    def finalize_document(self, document: Document) -> Document:
        """Check the finished document for duplicate headers.

        Returns:
            The unmodified document

        Raises:
            DuplicateHeadersError: If any headers are duplicated
        """
        logger.debug(
            f"Checking {len(document.children)} nodes for duplicate "
            f"'{self.section_command}' headers (strict={self.strict})"
        )
        return check(document, strict=self.strict, command=self.section_command)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(strict={self.strict!r}, section_command={self.section_command!r})"
