"""In-process model of a Java-style multi-project build."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from fnmatch import fnmatch
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Sequence, Type, TypeVar

from ..errors import UnknownDomainObjectError, UnknownProjectError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class FileCollection:
    """Immutable set of absolute file system paths."""

    files: frozenset[Path] = frozenset()

    @classmethod
    def of(cls, paths: Iterable[str | os.PathLike[str]]):
        return cls(frozenset(Path(p).absolute() for p in paths))

    def plus(self, other: "FileCollection") -> "FileCollection":
        """Return the union of both collections."""
        if not isinstance(other, FileCollection):
            raise TypeError(f"Cannot combine a file collection with {type(other).__name__}")
        both_trees = isinstance(self, FileTree) and isinstance(other, FileTree)
        result_type = FileTree if both_trees else FileCollection
        return result_type(self.files | other.files)

    def __add__(self, other: object) -> "FileCollection":
        if not isinstance(other, FileCollection):
            return NotImplemented
        return self.plus(other)

    def __iter__(self) -> Iterator[Path]:
        return iter(sorted(self.files))

    def __len__(self) -> int:
        return len(self.files)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, (str, os.PathLike)):
            return Path(item).absolute() in self.files
        return False

    @property
    def is_empty(self) -> bool:
        return not self.files

    def as_path(self) -> str:
        """Join the sorted paths with the platform path-list separator."""
        return os.pathsep.join(str(p) for p in self)


@dataclass(frozen=True, slots=True)
class FileTree(FileCollection):
    """Regular files collected from one or more directory hierarchies."""


@dataclass(slots=True)
class SourceDirectorySet:
    """Named, ordered set of source directories plus filename include patterns."""

    name: str
    source_directories: List[Path] = field(default_factory=list)
    includes: Sequence[str] = ("*",)

    def src_dir(self, path: str | os.PathLike[str]) -> "SourceDirectorySet":
        self.source_directories.append(Path(path).absolute())
        return self

    def _matches(self, filename: str) -> bool:
        return any(fnmatch(filename, pattern) for pattern in self.includes)

    @property
    def as_file_tree(self) -> FileTree:
        files: set[Path] = set()
        for directory in self.source_directories:
            # Conventional directories need not exist
            if not directory.is_dir():
                continue
            for root, _dirs, filenames in os.walk(directory):
                root_path = Path(root)
                for filename in filenames:
                    file_path = root_path / filename
                    if self._matches(filename) and file_path.is_file():
                        files.add(file_path.absolute())
        return FileTree(frozenset(files))


@dataclass(frozen=True, slots=True, kw_only=True)
class SourceSetOutput(FileCollection):
    """Compiled-output locations of a source set.

    As a file collection it holds the classes directories and the resources directory.
    """

    classes_dirs: FileCollection
    resources_dir: Path

    def __post_init__(self) -> None:
        resources_dir = Path(self.resources_dir).absolute()
        object.__setattr__(self, "resources_dir", resources_dir)
        object.__setattr__(self, "files", self.classes_dirs.files | {resources_dir})


@dataclass(slots=True)
class SourceSet:
    """Named grouping of source directories and their compiled output."""

    name: str
    java: SourceDirectorySet
    resources: SourceDirectorySet
    output: SourceSetOutput
    compile_classpath: FileCollection = field(default_factory=FileCollection)

    @property
    def all_java(self) -> SourceDirectorySet:
        return self.java

    @property
    def all_source(self) -> SourceDirectorySet:
        return SourceDirectorySet(
            name=f"{self.name} source",
            source_directories=[
                *self.java.source_directories,
                *self.resources.source_directories,
            ],
        )


class SourceSetContainer:
    """Ordered, name-keyed collection of source sets."""

    def __init__(self, source_sets: Iterable[SourceSet] = ()) -> None:
        self._source_sets: Dict[str, SourceSet] = {}
        for source_set in source_sets:
            self.add(source_set)

    def add(self, source_set: SourceSet) -> SourceSet:
        if source_set.name in self._source_sets:
            raise ValueError(f"Source set '{source_set.name}' already exists")
        self._source_sets[source_set.name] = source_set
        return source_set

    def find_by_name(self, name: str) -> SourceSet | None:
        return self._source_sets.get(name)

    def get_by_name(self, name: str) -> SourceSet:
        source_set = self._source_sets.get(name)
        if source_set is None:
            raise UnknownDomainObjectError("SourceSet", name)
        return source_set

    __getitem__ = get_by_name

    def names(self) -> List[str]:
        return list(self._source_sets)

    def __iter__(self) -> Iterator[SourceSet]:
        return iter(self._source_sets.values())

    def __len__(self) -> int:
        return len(self._source_sets)

    def __contains__(self, name: object) -> bool:
        return name in self._source_sets

    def __repr__(self) -> str:
        return f"SourceSetContainer({self.names()!r})"


@dataclass(slots=True)
class JavaPluginExtension:
    """Extension registered on projects that carry Java sources."""

    source_sets: SourceSetContainer = field(default_factory=SourceSetContainer)


class ExtensionContainer:
    """Type-keyed store of project extensions."""

    def __init__(self) -> None:
        self._extensions: Dict[type, Any] = {}

    def add(self, extension: T) -> T:
        self._extensions[type(extension)] = extension
        return extension

    def find_by_type(self, extension_type: Type[T]) -> T | None:
        return self._extensions.get(extension_type)

    def get_by_type(self, extension_type: Type[T]) -> T:
        extension = self._extensions.get(extension_type)
        if extension is None:
            raise UnknownDomainObjectError("Extension", extension_type.__name__)
        return extension


@dataclass(slots=True, eq=False)
class Project:
    """A node in the build's project hierarchy.

    ``extra`` is the per-project string-keyed property store. ``children`` maps
    a child's name to the child project.
    """

    name: str
    project_dir: Path
    parent: Project | None = field(default=None, repr=False)
    extra: Dict[str, Any] = field(default_factory=dict)
    extensions: ExtensionContainer = field(default_factory=ExtensionContainer, repr=False)
    children: Dict[str, "Project"] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self.project_dir = Path(self.project_dir).absolute()

    @property
    def path(self) -> str:
        if self.parent is None:
            return ":"
        parent_path = self.parent.path
        return f"{parent_path}{self.name}" if parent_path == ":" else f"{parent_path}:{self.name}"

    @property
    def root_project(self) -> "Project":
        project = self
        while project.parent is not None:
            project = project.parent
        return project

    def add_child(self, child: "Project") -> "Project":
        if child.name in self.children:
            raise ValueError(f"Project '{self.path}' already has a child named '{child.name}'")
        child.parent = self
        self.children[child.name] = child
        return child

    def project(self, path: str) -> "Project":
        """Look up a project by absolute path (``:a:b``) or by a path relative to this one."""
        if path == ":":
            return self.root_project

        current = self.root_project if path.startswith(":") else self
        for segment in path.strip(":").split(":"):
            child = current.children.get(segment)
            if child is None:
                raise UnknownProjectError(path)
            current = child
        return current

    def all_projects(self) -> List["Project"]:
        """Return this project followed by all descendants, depth first."""
        projects = [self]
        for name in sorted(self.children):
            projects.extend(self.children[name].all_projects())
        return projects


__all__ = [
    "FileCollection",
    "FileTree",
    "SourceDirectorySet",
    "SourceSetOutput",
    "SourceSet",
    "SourceSetContainer",
    "JavaPluginExtension",
    "ExtensionContainer",
    "Project",
]
