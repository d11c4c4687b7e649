"""Build the project model from directories that follow the standard Java layout."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List

from ..config import LocatorSettings
from ..constants import LOGGER_NAME, MAIN_SOURCE_SET_NAME, TEST_SOURCE_SET_NAME
from .extensions import set_module_name
from .model import (
    FileCollection,
    JavaPluginExtension,
    Project,
    SourceDirectorySet,
    SourceSet,
    SourceSetOutput,
)

logger = logging.getLogger(LOGGER_NAME)

BUILD_FILES = ("build.gradle", "build.gradle.kts")
EXCLUDE_DIRS = {"build", "buildSrc", "gradle", "node_modules", "out", "target"}

_MODULE_DECLARATION = re.compile(
    r"^\s*(?:@[\w.]+(?:\([^)]*\))?\s*)*(?:open\s+)?module\s+([\w.]+)\s*\{",
    re.MULTILINE,
)
_COMMENTS = re.compile(r"/\*.*?\*/|//[^\n]*", re.DOTALL)


def read_module_name(module_info: Path) -> str | None:
    """Return the module declared in a ``module-info.java`` file, if any."""
    source = _COMMENTS.sub("", module_info.read_text(encoding="utf-8"))
    match = _MODULE_DECLARATION.search(source)
    return match.group(1) if match else None


def _source_set_names(src_dir: Path) -> List[str]:
    names = [MAIN_SOURCE_SET_NAME, TEST_SOURCE_SET_NAME]
    for candidate in sorted(p for p in src_dir.iterdir() if p.is_dir()):
        if candidate.name in names:
            continue
        if (candidate / "java").is_dir() or (candidate / "resources").is_dir():
            names.append(candidate.name)
    return names


def _create_source_set(project_dir: Path, name: str, compile_classpath: FileCollection) -> SourceSet:
    src = project_dir / "src" / name
    build = project_dir / "build"
    return SourceSet(
        name=name,
        java=SourceDirectorySet(f"{name} Java source", includes=("*.java",)).src_dir(src / "java"),
        resources=SourceDirectorySet(f"{name} resources").src_dir(src / "resources"),
        output=SourceSetOutput(
            classes_dirs=FileCollection.of([build / "classes" / "java" / name]),
            resources_dir=build / "resources" / name,
        ),
        compile_classpath=compile_classpath,
    )


def apply_java_conventions(project: Project, settings: LocatorSettings | None = None) -> JavaPluginExtension:
    """Register the standard source sets on ``project``."""
    settings = settings or LocatorSettings()
    extension = project.extensions.add(JavaPluginExtension())

    libs_dir = project.project_dir / settings.libs_dir
    libraries = FileCollection.of(sorted(libs_dir.glob("*.jar")) if libs_dir.is_dir() else [])

    main = extension.source_sets.add(
        _create_source_set(project.project_dir, MAIN_SOURCE_SET_NAME, libraries)
    )
    for name in _source_set_names(project.project_dir / "src")[1:]:
        extension.source_sets.add(
            _create_source_set(project.project_dir, name, main.output.classes_dirs + libraries)
        )

    module_info = project.project_dir / "src" / MAIN_SOURCE_SET_NAME / "java" / "module-info.java"
    if module_info.is_file():
        module_name = read_module_name(module_info)
        if module_name:
            set_module_name(project, module_name)
        else:
            logger.warning("No module declaration found in %s", module_info)

    logger.debug(
        "Applied java conventions to %s with source sets %s",
        project.path,
        extension.source_sets.names(),
    )
    return extension


def load_project(
    project_dir: str | Path,
    name: str | None = None,
    parent: Project | None = None,
    settings: LocatorSettings | None = None,
) -> Project:
    """Create a project for ``project_dir``; java conventions apply if it has a ``src`` directory.

    Raises:
        FileNotFoundError: If the directory does not exist
        NotADirectoryError: If the path is not a directory
    """
    path = Path(project_dir)
    if not path.exists():
        raise FileNotFoundError(f"Project directory not found: {project_dir}")
    if not path.is_dir():
        raise NotADirectoryError(f"Project path is not a directory: {project_dir}")

    project = Project(name=name or path.absolute().name, project_dir=path)
    if parent is not None:
        parent.add_child(project)

    if (path / "src").is_dir():
        apply_java_conventions(project, settings)
    return project


def _looks_like_project(directory: Path) -> bool:
    if directory.name.startswith(".") or directory.name in EXCLUDE_DIRS:
        return False
    if (directory / "src").is_dir():
        return True
    return any((directory / build_file).is_file() for build_file in BUILD_FILES)


def load_build(root_dir: str | Path, settings: LocatorSettings | None = None) -> Project:
    """Load the root project and every immediate subdirectory that looks like a project."""
    root = load_project(root_dir, settings=settings)
    for candidate in sorted(p for p in root.project_dir.iterdir() if p.is_dir()):
        if _looks_like_project(candidate):
            load_project(candidate, parent=root, settings=settings)

    logger.info(
        "Loaded build %s with %d subprojects", root.name, len(root.children)
    )
    return root


__all__ = [
    "apply_java_conventions",
    "load_build",
    "load_project",
    "read_module_name",
]
