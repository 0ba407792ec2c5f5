"""Environment readers for process variables, dotenv files and test snapshots."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Mapping

from dotenv import dotenv_values

from .interfaces import EnvironmentReaderPort


class MappingEnvironmentReader(EnvironmentReaderPort):
    """Environment reader backed by an immutable snapshot of key/value pairs."""

    def __init__(self, values: Mapping[str, str | None]):
        """Initialize reader from a mapping snapshot.

        Args:
            values: Key/value pairs; None values are treated as absent.

        Raises:
            ValueError: Raised when values is None.
        """

        if values is None:
            raise ValueError("values must not be None")
        self._values = dict(values)

    def config_read(self, name: str) -> str | None:
        return self._values.get(name)


class ProcessEnvironmentReader(EnvironmentReaderPort):
    """Environment reader that consults `os.environ` on every read."""

    def config_read(self, name: str) -> str | None:
        return os.environ.get(name)


def config_create_environment_reader(
    env_files: Iterable[str | Path] = (".env.local", ".env"),
    base_directory: str | Path | None = None,
    process_environment: Mapping[str, str] | None = None,
) -> MappingEnvironmentReader:
    """Build a reader merging dotenv files under the process environment.

    Earlier files take precedence over later ones and process variables take
    precedence over every file. Missing files are skipped.

    Args:
        env_files: Dotenv file names in precedence order.
        base_directory: Directory the file names are resolved against; defaults to cwd.
        process_environment: Process variables; defaults to `os.environ`.

    Returns:
        MappingEnvironmentReader: Reader over the merged snapshot.

    Raises:
        OSError: Raised when an existing dotenv file cannot be read.
    """

    resolved_directory = Path(base_directory) if base_directory is not None else Path.cwd()
    merged_values: dict[str, str | None] = {}

    for env_file in reversed(tuple(env_files)):
        env_path = resolved_directory / env_file
        if not env_path.is_file():
            continue
        merged_values.update(dotenv_values(env_path))

    merged_values.update(os.environ if process_environment is None else process_environment)
    return MappingEnvironmentReader(values=merged_values)
