from __future__ import annotations


class BuildDslError(Exception):
    """Base class for errors raised by the project model."""


class UnknownDomainObjectError(BuildDslError, KeyError):
    """A named source set or a typed extension is not registered."""

    def __init__(self, kind: str, name: str) -> None:
        super().__init__(f"{kind} with name '{name}' not found.")
        self.kind = kind
        self.name = name

    def __str__(self) -> str:
        # KeyError quotes its argument otherwise
        return str(self.args[0])


class UnknownProjectError(UnknownDomainObjectError):
    """No project with the requested path exists in the build."""

    def __init__(self, path: str) -> None:
        super().__init__("Project", path)


__all__ = ["BuildDslError", "UnknownDomainObjectError", "UnknownProjectError"]
