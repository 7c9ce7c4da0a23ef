"""Configuration file reading for compose-options."""

import logging
import sys
from collections.abc import Iterable
from typing import BinaryIO

from compose_options.config.protocols import DocumentParser
from compose_options.constants import STDIN_PATH
from compose_options.loader import ConfigFile, parse_yaml

logger = logging.getLogger(__name__)


class ConfigFileReader:
    """Read and parse configuration files, or standard input for '-'.

    Reading stops at the first failure. Parser errors are raised unchanged
    and I/O problems surface as OSError, so a missing file and a malformed
    one stay distinguishable.
    """

    def __init__(self, parser: DocumentParser = parse_yaml, stdin: BinaryIO | None = None) -> None:
        """Initialize the reader.

        Args:
            parser: Document parser to hand raw bytes to
            stdin: Binary stream read for '-' (sys.stdin.buffer if None)
        """
        self._parser = parser
        self._stdin = stdin

    def read(self, paths: Iterable[str]) -> list[ConfigFile]:
        """Read and parse each path in order.

        Args:
            paths: Absolute paths, or '-' for standard input

        Returns:
            One ConfigFile per path, in the same order

        Raises:
            DocumentParseError: If a document cannot be parsed
            OSError: If a file cannot be read
        """
        files = []
        for path in paths:
            content = self._read_bytes(path)
            config = self._parser(content, filename=path)
            files.append(ConfigFile(filename=path, config=config))
        return files

    def _read_bytes(self, path: str) -> bytes:
        if path == STDIN_PATH:
            logger.debug("Reading configuration from standard input")
            stream = self._stdin if self._stdin is not None else sys.stdin.buffer
            return stream.read()

        logger.debug(f"Reading configuration from {path}")
        with open(path, 'rb') as f:
            return f.read()
