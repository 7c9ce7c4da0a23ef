"""Protocol definitions for the collaborators of project resolution."""

from typing import Any, Protocol, runtime_checkable

from compose_options.loader.models import ConfigDetails, LoadOption, Project


@runtime_checkable
class DocumentParser(Protocol):
    """Protocol for structured-document parsers.

    ConfigFileReader depends on this abstraction rather than on YAML, so any
    parser that turns raw bytes into a mapping can be injected.

    Implementations include:
    - parse_yaml: PyYAML-based parser
    """

    def __call__(self, content: bytes, *, filename: str | None = None) -> dict[str, Any]:
        """Parse raw document content.

        Args:
            content: Bytes read from a file or standard input
            filename: Name of the source, for error messages

        Returns:
            The parsed top-level mapping

        Raises:
            DocumentParseError: If the content is not a valid document
        """
        ...


@runtime_checkable
class ProjectLoader(Protocol):
    """Protocol for the loader that turns resolved inputs into a Project.

    Implementations include:
    - load: merge, interpolate, apply directives
    """

    def __call__(self, details: ConfigDetails, *options: LoadOption) -> Project:
        """Load a project.

        Args:
            details: Parsed documents, absolute working directory, environment
            *options: Load directives to apply to the loader's own options

        Returns:
            The loaded project
        """
        ...
