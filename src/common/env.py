"""Environment configuration interface for unique-sections.

This module provides a clean interface for accessing environment variables,
centralizing all environment variable access in one place.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

# Boolean spellings accepted in environment variables and config mappings
TRUE_VALUES: set[str] = {"1", "true", "yes", "on"}
FALSE_VALUES: set[str] = {"0", "false", "no", "off", ""}


class Environment:
    """Interface for accessing environment configuration."""

    @staticmethod
    def strict() -> bool:
        """Get the default strictness policy.

        Returns:
            True if only identical headers count as duplicates, defaults to False
        """
        return os.getenv("UNIQUE_SECTIONS_STRICT", "0").strip().lower() in TRUE_VALUES

    @staticmethod
    def section_command() -> str:
        """Get the command that marks a top-level section.

        Returns:
            Section command, defaults to 'head1'
        """
        return os.getenv("UNIQUE_SECTIONS_COMMAND", "head1")

    @staticmethod
    def log_level() -> str:
        """Get the logging level.

        Returns:
            Upper-case level name, defaults to 'INFO'
        """
        return os.getenv("LOG_LEVEL", "INFO").upper()


# Singleton instance for convenient access
env = Environment()
