"""Snippet directory discovery and class identifier derivation."""

from .locator import SnippetLocator
from .model import DerivedClassId, SnippetClassId, SnippetReport, UnmappedClassId

__all__ = [
    "SnippetLocator",
    "DerivedClassId",
    "UnmappedClassId",
    "SnippetClassId",
    "SnippetReport",
]
