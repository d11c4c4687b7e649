"""Project model, derived accessors and the conventional-layout loader."""

from .extensions import (
    all_java,
    compile_classpath,
    get_module_name,
    is_module,
    main_source_set,
    set_module_name,
    snippet_classes,
    snippet_files,
    snippet_path_string,
    snippet_paths,
    source_dirs,
    source_sets,
    test_classes,
)
from .loader import apply_java_conventions, load_build, load_project
from .model import (
    ExtensionContainer,
    FileCollection,
    FileTree,
    JavaPluginExtension,
    Project,
    SourceDirectorySet,
    SourceSet,
    SourceSetContainer,
    SourceSetOutput,
)

__all__ = [
    "ExtensionContainer",
    "FileCollection",
    "FileTree",
    "JavaPluginExtension",
    "Project",
    "SourceDirectorySet",
    "SourceSet",
    "SourceSetContainer",
    "SourceSetOutput",
    "all_java",
    "apply_java_conventions",
    "compile_classpath",
    "get_module_name",
    "is_module",
    "load_build",
    "load_project",
    "main_source_set",
    "set_module_name",
    "snippet_classes",
    "snippet_files",
    "snippet_path_string",
    "snippet_paths",
    "source_dirs",
    "source_sets",
    "test_classes",
]
