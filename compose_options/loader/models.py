"""Pydantic models exchanged with the project loader."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field


class ConfigFile(BaseModel):
    """A parsed configuration document and the name it was read from."""

    filename: str = Field(..., description="Path as opened, or '-' for standard input")
    config: dict[str, Any] = Field(default_factory=dict)


class ConfigDetails(BaseModel):
    """Everything the loader needs to build a project."""

    config_files: list[ConfigFile]
    working_dir: str = Field(..., description="Absolute project working directory")
    environment: dict[str, str] = Field(default_factory=dict)


class LoaderOptions(BaseModel):
    """Options of the project loader, mutated by load directives."""

    name: str = ""
    skip_interpolation: bool = False
    discard_env_files: bool = False


class Project(BaseModel):
    """A resolved, merged project."""

    name: str
    working_dir: str
    compose_files: list[str] = Field(default_factory=list)
    services: dict[str, dict[str, Any]] = Field(default_factory=dict)
    networks: dict[str, Any] = Field(default_factory=dict)
    volumes: dict[str, Any] = Field(default_factory=dict)
    secrets: dict[str, Any] = Field(default_factory=dict)
    configs: dict[str, Any] = Field(default_factory=dict)
    environment: dict[str, str] = Field(default_factory=dict)

    def service_names(self) -> list[str]:
        """Return service names in sorted order."""
        return sorted(self.services)


LoadOption = Callable[[LoaderOptions], None]
