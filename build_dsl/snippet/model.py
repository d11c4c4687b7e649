from __future__ import annotations

from typing import List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class DerivedClassId(BaseModel):
    """Identifier derived from a snippet file below ``src/main/java``."""

    kind: Literal["derived"] = "derived"
    identifier: str

    model_config = ConfigDict(frozen=True)

    @property
    def value(self) -> str:
        return self.identifier

    @property
    def is_derived(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.identifier


class UnmappedClassId(BaseModel):
    """Fallback for snippet files outside the standard source layout.

    The value is the original path and is not a valid class name.
    """

    kind: Literal["unmapped"] = "unmapped"
    original_path: str

    model_config = ConfigDict(frozen=True)

    @property
    def value(self) -> str:
        return self.original_path

    @property
    def is_derived(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.original_path


SnippetClassId = Union[DerivedClassId, UnmappedClassId]


class SnippetReport(BaseModel):
    """Snippet summary of a single project."""

    project: str
    module_name: str
    is_module: bool = False
    snippet_paths: List[str] = Field(default_factory=list)
    snippet_files: List[str] = Field(default_factory=list)
    snippet_classes: List[SnippetClassId] = Field(default_factory=list)
    snippet_path_string: str | None = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


__all__ = ["DerivedClassId", "UnmappedClassId", "SnippetClassId", "SnippetReport"]
