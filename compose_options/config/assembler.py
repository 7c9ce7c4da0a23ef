"""Project assembly for compose-options."""

import logging
import os
from collections.abc import Mapping

from compose_options.config.naming import ProjectNameResolver
from compose_options.config.options import ProjectOptions
from compose_options.config.protocols import ProjectLoader
from compose_options.config.reader import ConfigFileReader
from compose_options.config.resolver import ConfigPathResolver
from compose_options.loader import ConfigDetails, Project, load

logger = logging.getLogger(__name__)


class ProjectAssembler:
    """Turn ProjectOptions into a loaded Project.

    The sequence is: resolve the working directory, resolve config paths,
    read and parse them, add the name directive, call the loader, and record
    the config paths as the caller gave them on the result. Any error aborts
    the whole sequence.

    Attributes:
        path_resolver: Resolver for config file paths
        name_resolver: Resolver for the project name
        reader: Reader for config files and standard input
    """

    def __init__(
            self,
            *,
            loader: ProjectLoader = load,
            reader: ConfigFileReader | None = None,
            environ: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize the assembler.

        Args:
            loader: Project loader to delegate to
            reader: Config file reader (a YAML reader on sys.stdin if None)
            environ: Environment snapshot for COMPOSE_* overrides (os.environ if None)
        """
        environ = os.environ if environ is None else environ
        self._loader = loader
        self.reader = reader or ConfigFileReader()
        self.path_resolver = ConfigPathResolver(environ)
        self.name_resolver = ProjectNameResolver(environ)

    def build(self, options: ProjectOptions) -> Project:
        """Load the project described by ``options``.

        ``options`` is not modified.

        Args:
            options: Populated project options

        Returns:
            The loaded project, with compose_files set to the paths as given
            or discovered

        Raises:
            ConfigError: On any resolution, parsing or loading failure
            OSError: If a file or the current directory cannot be read
        """
        working_dir = os.path.abspath(options.get_working_dir())
        logger.debug(f"Working directory: {working_dir}")

        resolved = self.path_resolver.resolve(options.config_paths, options.working_dir or None)
        config_files = self.reader.read(resolved.open_paths)

        directives = [
            *options.load_options,
            self.name_resolver.directive(options.name, working_dir),
        ]
        details = ConfigDetails(
            config_files=config_files,
            working_dir=working_dir,
            environment=dict(options.environment),
        )
        project = self._loader(details, *directives)

        project.compose_files = list(resolved.display_paths)
        return project


def project_from_options(options: ProjectOptions, **kwargs) -> Project:
    """Load a project from options; ``kwargs`` go to ProjectAssembler."""
    return ProjectAssembler(**kwargs).build(options)
