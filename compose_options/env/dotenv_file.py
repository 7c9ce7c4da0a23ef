"""Dotenv file source for compose-options."""

import io
import logging
import re
from pathlib import Path

from dotenv.parser import Binding, parse_stream
from dotenv.variables import parse_variables

from compose_options.constants import DOTENV_FILE_NAME
from compose_options.exceptions import MalformedEnvFileError

logger = logging.getLogger(__name__)

# KEY: value, rewritten to KEY=value before parsing
_COLON_STATEMENT = re.compile(
    r"^(?P<key>\s*(?:export\s+)?[A-Za-z_][A-Za-z0-9_.]*)\s*:[ \t]*(?P<rest>.*)$", re.DOTALL
)


class DotEnvFileSource:
    """Read ``KEY=VALUE`` pairs from the ``.env`` file of a directory.

    Statements are parsed with python-dotenv's parser, and ``KEY: value`` is
    accepted as well. ``${VAR}`` and ``${VAR:-default}`` in unquoted or
    double-quoted values are expanded from the keys defined earlier in the
    same file; single-quoted values are kept as written.

    Attributes:
        path: Location of the dotenv file
    """

    def __init__(self, directory: str | Path) -> None:
        """Initialize the dotenv source.

        Args:
            directory: Directory expected to contain the ``.env`` file
        """
        self.path = Path(directory) / DOTENV_FILE_NAME

    @property
    def source_description(self) -> str:
        """Human-readable description of the source."""
        return f"dotenv file: {self.path}"

    def load(self) -> dict[str, str]:
        """Parse the dotenv file.

        Returns:
            Mapping of variables, empty when the file does not exist

        Raises:
            MalformedEnvFileError: If a statement cannot be parsed or has no value
        """
        if not self.path.is_file():
            logger.debug(f"No dotenv file at {self.path}")
            return {}

        values: dict[str, str] = {}
        with open(self.path, 'r', encoding='utf-8') as f:
            for binding in parse_stream(f):
                if binding.error or (binding.key is not None and binding.value is None):
                    binding = self._parse_colon_statement(binding)
                if binding.key is None:
                    continue
                values[binding.key] = self._expand(binding, values)

        logger.debug(f"Loaded {len(values)} variable(s) from {self.path}")
        return values

    def _parse_colon_statement(self, binding: Binding) -> Binding:
        """Reparse a rejected statement written as ``KEY: value``."""
        match = _COLON_STATEMENT.match(binding.original.string)
        if match is not None:
            rewritten = f"{match['key']}={match['rest']}"
            reparsed = next(parse_stream(io.StringIO(rewritten)), None)
            if reparsed is not None and not reparsed.error and reparsed.value is not None:
                return reparsed
        raise MalformedEnvFileError(self.path, binding.original.line, binding.original.string)

    @staticmethod
    def _expand(binding: Binding, known: dict[str, str]) -> str:
        _, _, raw_value = binding.original.string.partition("=")
        if raw_value.lstrip().startswith("'"):
            return binding.value
        return "".join(atom.resolve(known) for atom in parse_variables(binding.value))
