from typing import Optional, Tuple


class TexcalcError(Exception):
    """Base exception for the notation toolkit."""

    pass


class ParseError(TexcalcError):
    """Raised when source text cannot be turned into a program.

    ``position`` is a 0-based offset into the text handed to the parser;
    ``line`` and ``column`` are 1-based.
    """

    def __init__(
        self,
        message: str,
        position: int,
        line: int,
        column: int,
        expected: Tuple[str, ...] = (),
        found: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.position = position
        self.line = line
        self.column = column
        self.expected = expected
        self.found = found

    def __str__(self) -> str:
        expected = ""
        if self.expected:
            expected = f"; expected {', '.join(self.expected)}"
        found = ""
        if self.found is not None:
            found = f"; found {self.found}"
        return f"{self.message} at line {self.line}, column {self.column}{expected}{found}"

    def context(self, text: str) -> str:
        lines = text.split("\n")
        if not 1 <= self.line <= len(lines):
            return ""
        source_line = lines[self.line - 1].rstrip("\r")
        caret = " " * (max(self.column, 1) - 1) + "^"
        return f"{source_line}\n{caret}"
