"""Convenience accessors for Java-style multi-project builds."""

from .config import LocatorSettings
from .errors import BuildDslError, UnknownDomainObjectError, UnknownProjectError
from .project import Project, load_build, load_project
from .snippet import DerivedClassId, SnippetLocator, SnippetReport, UnmappedClassId

__all__ = [
    "LocatorSettings",
    "BuildDslError",
    "UnknownDomainObjectError",
    "UnknownProjectError",
    "Project",
    "load_build",
    "load_project",
    "SnippetLocator",
    "DerivedClassId",
    "UnmappedClassId",
    "SnippetReport",
]
