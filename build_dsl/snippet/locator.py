"""Discovery of documentation snippet directories and files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List, Set

from ..config import LocatorSettings
from ..constants import JAVA_SOURCE_MARKER, JAVA_SUFFIX, LOGGER_NAME, SNIPPET_DIR
from .model import DerivedClassId, SnippetClassId, UnmappedClassId

logger = logging.getLogger(LOGGER_NAME)

PathLike = str | os.PathLike[str]


class SnippetLocator:
    """Finds ``snippet`` directories below source roots and the files inside them."""

    def __init__(self, settings: LocatorSettings | None = None) -> None:
        self.settings = settings or LocatorSettings()

    def find_snippet_dirs(self, roots: Iterable[PathLike]) -> Set[str]:
        """Return the absolute paths of all directories named ``snippet``.

        Each root is searched recursively and is itself a candidate. Roots
        that do not exist contribute nothing.
        """
        found: Set[str] = set()
        for root in roots:
            root_path = Path(root).absolute()
            if not root_path.is_dir():
                logger.debug("Skipping missing source directory %s", root_path)
                continue

            if root_path.name == SNIPPET_DIR:
                found.add(str(root_path))

            for current, dirs, _files in os.walk(
                root_path,
                onerror=self._log_walk_error,
                followlinks=self.settings.follow_symlinks,
            ):
                for name in dirs:
                    if name != SNIPPET_DIR:
                        continue
                    candidate = os.path.join(current, name)
                    if os.path.islink(candidate) and not self.settings.follow_symlinks:
                        continue
                    found.add(candidate)

        logger.debug("Found %d snippet directories", len(found))
        return found

    def list_snippet_files(self, snippet_dirs: Iterable[PathLike]) -> List[str]:
        """List the regular files directly inside each snippet directory.

        Raises:
            OSError: If a directory cannot be listed.
        """
        files: List[str] = []
        for directory in sorted(str(d) for d in snippet_dirs):
            entries = sorted(Path(directory).iterdir())
            files.extend(str(entry.absolute()) for entry in entries if entry.is_file())
        return files

    @staticmethod
    def derive_class_identifier(file_path: PathLike) -> SnippetClassId:
        """Derive the class identifier of a snippet file.

        ``.../src/main/java/com/example/snippet/Foo.java`` becomes
        ``com/example/Foo``. Paths without the source marker are returned
        unchanged as an :class:`UnmappedClassId`.
        """
        path = str(file_path)
        index = path.rfind(JAVA_SOURCE_MARKER)
        if index == -1:
            return UnmappedClassId(original_path=path)

        segments = path[index + len(JAVA_SOURCE_MARKER):].split("/")
        # The leading segment has no '/' before it and is never removed
        for position in range(1, len(segments)):
            if segments[position] == SNIPPET_DIR:
                del segments[position]
                break

        identifier = "/".join(segments)
        if identifier.endswith(JAVA_SUFFIX):
            identifier = identifier[: -len(JAVA_SUFFIX)]
        return DerivedClassId(identifier=identifier)

    @staticmethod
    def snippet_path_string(snippet_dirs: Iterable[PathLike]) -> str | None:
        """Join the directories with ``os.pathsep``, or return ``None`` when there are none."""
        joined = os.pathsep.join(sorted({str(d) for d in snippet_dirs}))
        return joined or None

    @staticmethod
    def _log_walk_error(error: OSError) -> None:
        logger.warning("Cannot read directory %s: %s", error.filename, error.strerror)


_default_locator = SnippetLocator()


def find_snippet_dirs(roots: Iterable[PathLike]) -> Set[str]:
    return _default_locator.find_snippet_dirs(roots)


def list_snippet_files(snippet_dirs: Iterable[PathLike]) -> List[str]:
    return _default_locator.list_snippet_files(snippet_dirs)


derive_class_identifier = SnippetLocator.derive_class_identifier
snippet_path_string = SnippetLocator.snippet_path_string


__all__ = [
    "SnippetLocator",
    "find_snippet_dirs",
    "list_snippet_files",
    "derive_class_identifier",
    "snippet_path_string",
]
