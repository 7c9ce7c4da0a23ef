"""Constants for compose-options."""

import os

VERSION = "0.3.0"

# Environment variables consulted during resolution
COMPOSE_PROJECT_NAME = "COMPOSE_PROJECT_NAME"
COMPOSE_FILE_PATH = "COMPOSE_FILE"
COMPOSE_FILE_SEPARATOR = "COMPOSE_FILE_SEPARATOR"

# Config file names for auto-discovery (in order of preference)
DEFAULT_FILE_NAMES = [
    "compose.yaml",
    "compose.yml",
    "docker-compose.yml",
    "docker-compose.yaml",
]

DEFAULT_FILE_SEPARATOR = os.pathsep

# Config path that stands for standard input
STDIN_PATH = "-"

DOTENV_FILE_NAME = ".env"
