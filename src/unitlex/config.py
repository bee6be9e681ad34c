"""
unitlex Configuration
=====================

Settings for the command-line tools and other callers that read
definition files from disk. Configuration can come from:
- Default values (defined here)
- Environment variables (LexerConfig.from_env)
- Command-line options (applied by the CLI on top of from_env)

Decoding bytes into text happens here, in the caller, and never inside
the scanner. Invalid byte sequences are replaced with U+FFFD so that a
damaged file still scans; the replacement character then shows up as an
ERROR token at the damaged spot.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import logging
import os

from unitlex.errors import ConfigError
from unitlex.lexer.policy import LexerPolicy

logger = logging.getLogger(__name__)

TRUTHY = ("1", "true", "yes", "on")


@dataclass
class LexerConfig:
    """
    Configuration for reading and scanning a definitions file.

    Attributes:
        definitions_path: File read when no input file is given
        encoding: Text encoding of definition files (default: utf-8)
        comment_char: Comment marker, None to disable comments
        max_errors: Maximum lexical errors reported (default: 100)
        strict: Stop at the first lexical error
    """

    definitions_path: Path = field(default_factory=lambda: Path("definitions.units"))
    encoding: str = "utf-8"
    comment_char: Optional[str] = "#"
    max_errors: int = 100
    strict: bool = False

    @classmethod
    def from_env(cls) -> "LexerConfig":
        """
        Create LexerConfig from environment variables.

        Environment variables (all optional):
            UNITLEX_DEFINITIONS: Default definitions file
            UNITLEX_ENCODING: Source text encoding
            UNITLEX_COMMENT_CHAR: Comment marker (empty string disables)
            UNITLEX_MAX_ERRORS: Error report limit (integer, at least 1)
            UNITLEX_STRICT: Strict mode (1/true/yes/on)

        Returns:
            LexerConfig with values from environment variables
        """
        config = cls()

        if path := os.environ.get("UNITLEX_DEFINITIONS"):
            config.definitions_path = Path(path)

        if encoding := os.environ.get("UNITLEX_ENCODING"):
            config.encoding = encoding

        comment = os.environ.get("UNITLEX_COMMENT_CHAR")
        if comment is not None:
            config.comment_char = comment or None

        if max_errors := os.environ.get("UNITLEX_MAX_ERRORS"):
            try:
                limit = int(max_errors)
            except ValueError:
                limit = 0
            if limit >= 1:
                config.max_errors = limit
            else:
                logger.warning("ignoring invalid UNITLEX_MAX_ERRORS=%r", max_errors)

        if strict := os.environ.get("UNITLEX_STRICT"):
            config.strict = strict.strip().lower() in TRUTHY

        return config

    def policy(self) -> LexerPolicy:
        """
        Build the lexer policy for this configuration.

        Raises:
            PolicyError: If the configured comment marker is unusable
        """
        return LexerPolicy(comment_char=self.comment_char)

    def read_source(self, path: Optional[Path] = None) -> str:
        """
        Read and decode a definitions file.

        Args:
            path: File to read (default: definitions_path)

        Returns:
            Decoded text, invalid sequences replaced

        Raises:
            ConfigError: If the configured encoding is unknown
            FileNotFoundError: If the file does not exist
        """
        path = Path(path) if path is not None else self.definitions_path
        data = path.read_bytes()
        try:
            text = data.decode(self.encoding, errors="replace")
        except LookupError as e:
            raise ConfigError(f"unknown encoding '{self.encoding}'") from e

        logger.debug("read %d bytes from %s", len(data), path)
        return text
