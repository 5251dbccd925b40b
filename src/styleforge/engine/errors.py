from __future__ import annotations


class UnknownFieldError(KeyError):
    """A mutation named a field path that does not exist on StyleState."""

    def __init__(self, path: str) -> None:
        super().__init__(path)
        self.path = path

    def __str__(self) -> str:
        return f"Unknown style field: {self.path}"
