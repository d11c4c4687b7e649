"""Derived views of a project: module name, sources, classpaths and snippets."""

from __future__ import annotations

from functools import reduce
from pathlib import Path
from typing import Any, Callable, List, Sequence, Set, TypeVar

from ..constants import MAIN_SOURCE_SET_NAME, MODULE_NAME_PROPERTY, TEST_SOURCE_SET_NAME
from ..snippet.locator import SnippetLocator
from ..snippet.model import SnippetClassId
from .model import (
    FileCollection,
    FileTree,
    JavaPluginExtension,
    Project,
    SourceSet,
    SourceSetContainer,
    SourceSetOutput,
)

T = TypeVar("T")

ProjectOrList = Project | Sequence[Project]


def _combine(projects: ProjectOrList, accessor: Callable[[Project], T]) -> T:
    if isinstance(projects, Project):
        return accessor(projects)
    if not projects:
        raise ValueError("At least one project is required")
    return reduce(lambda a, b: a + b, (accessor(project) for project in projects))


def main_source_set(source_sets: SourceSetContainer) -> SourceSet:
    """Return the ``main`` source set."""
    return source_sets.get_by_name(MAIN_SOURCE_SET_NAME)


def source_sets(project: Project) -> SourceSetContainer:
    """Return the source sets of a Java project."""
    return project.extensions.get_by_type(JavaPluginExtension).source_sets


def test_classes(project: Project, project_name: str) -> SourceSetOutput:
    """Return the test output of another project in the same build."""
    sibling = project.root_project.project(project_name)
    return source_sets(sibling)[TEST_SOURCE_SET_NAME].output


def get_module_name(project: Project) -> str:
    """Return the configured module name, falling back to the project name."""
    if is_module(project):
        return str(project.extra[MODULE_NAME_PROPERTY])
    return project.name


def set_module_name(project: Project, value: Any) -> None:
    project.extra[MODULE_NAME_PROPERTY] = value


def is_module(project: Project) -> bool:
    return MODULE_NAME_PROPERTY in project.extra


def all_java(projects: ProjectOrList) -> FileTree:
    """Return the main Java sources of a project, or their union over a list."""
    return _combine(projects, lambda p: main_source_set(source_sets(p)).all_java.as_file_tree)


def compile_classpath(projects: ProjectOrList) -> FileCollection:
    """Return the main compile classpath of a project, or their union over a list."""
    return _combine(projects, lambda p: main_source_set(source_sets(p)).compile_classpath)


def source_dirs(project: Project) -> List[Path]:
    """Return every source directory of every source set, in declaration order."""
    return [
        directory
        for source_set in source_sets(project)
        for directory in source_set.all_source.source_directories
    ]


def snippet_paths(project: Project, locator: SnippetLocator | None = None) -> Set[str]:
    locator = locator or SnippetLocator()
    return locator.find_snippet_dirs(source_dirs(project))


def snippet_files(project: Project, locator: SnippetLocator | None = None) -> List[str]:
    locator = locator or SnippetLocator()
    return locator.list_snippet_files(snippet_paths(project, locator))


def snippet_classes(project: Project, locator: SnippetLocator | None = None) -> List[SnippetClassId]:
    locator = locator or SnippetLocator()
    return [locator.derive_class_identifier(f) for f in snippet_files(project, locator)]


def snippet_path_string(projects: ProjectOrList, locator: SnippetLocator | None = None) -> str | None:
    """Return the snippet directories joined with ``os.pathsep``, or ``None`` if there are none."""
    locator = locator or SnippetLocator()
    if isinstance(projects, Project):
        projects = [projects]
    paths: Set[str] = set()
    for project in projects:
        paths |= snippet_paths(project, locator)
    return locator.snippet_path_string(paths)


__all__ = [
    "main_source_set",
    "source_sets",
    "test_classes",
    "get_module_name",
    "set_module_name",
    "is_module",
    "all_java",
    "compile_classpath",
    "source_dirs",
    "snippet_paths",
    "snippet_files",
    "snippet_classes",
    "snippet_path_string",
]
