"""Exceptions raised by the songbook pipeline.

Input problems derive from ``ValueError`` and file problems from ``OSError`` so
callers that only know the builtins still catch them.
"""

from pathlib import Path


class OpenbookError(Exception):
    """Base class for every openbook failure."""


class UnknownTranspositionError(OpenbookError, ValueError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Unable to parse transpose input of [{key}]")
        self.key = key


class MissingFrontmatterError(OpenbookError, ValueError):
    def __init__(self, terminator: str, path: Path | None = None) -> None:
        where = f" in {path}" if path is not None else ""
        super().__init__(f"No frontmatter terminator '{terminator}' found{where}")
        self.terminator = terminator
        self.path = path


class MissingTitleError(OpenbookError, ValueError):
    def __init__(self, path: Path | None = None) -> None:
        where = f" {path}" if path is not None else ""
        super().__init__(f"Song file{where} has no 'title:' in its frontmatter")
        self.path = path


class SongDecodeError(OpenbookError, ValueError):
    def __init__(self, path: Path, cause: UnicodeDecodeError) -> None:
        super().__init__(f"Song file {path} is not valid UTF-8: {cause}")
        self.path = path
        self.cause = cause


class SongsDirectoryError(OpenbookError, OSError):
    def __init__(self, path: Path) -> None:
        super().__init__(f"Songs directory '{path}' does not exist")
        self.path = path


class TemplateLoadError(OpenbookError, OSError):
    """A template file could not be read. Raised before any song is rendered."""

    def __init__(self, name: str, cause: Exception) -> None:
        super().__init__(f"Unable to read {name} template: {cause}")
        self.name = name
        self.cause = cause


class OutputWriteError(OpenbookError, OSError):
    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Unable to write output file '{path}': {cause}")
        self.path = path
        self.cause = cause
