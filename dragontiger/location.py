"""Source positions and ranges."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A point in a source file."""

    filename: str | None = None
    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        prefix = f"{self.filename}:" if self.filename is not None else ""
        return f"{prefix}{self.line}.{self.column}"


@dataclass(frozen=True)
class Location:
    """A range in a source file; the end column is exclusive."""

    begin: Position = Position()
    end: Position | None = None

    def __post_init__(self) -> None:
        if self.end is None:
            object.__setattr__(self, "end", self.begin)

    def __str__(self) -> str:
        begin, end = self.begin, self.end
        end_column = end.column - 1 if end.column > 0 else 0
        text = str(begin)
        if end.filename is not None and end.filename != begin.filename:
            text += f"-{end.filename}:{end.line}.{end_column}"
        elif begin.line < end.line:
            text += f"-{end.line}.{end_column}"
        elif begin.column < end_column:
            text += f"-{end_column}"
        return text


# Stands for the absence of a source location, as for primitive declarations.
NO_LOCATION = Location(Position("<none>", 0, 0))