"""Source context used to build readable compile errors."""

from __future__ import annotations

from dataclasses import dataclass


class CompileError(Exception):
    """An error in the compiled source, with the offending line marked."""


def _format(message: str, args: tuple[str, ...]) -> str:
    pieces = message.split("%")
    values = iter(args)
    parts = [pieces[0]]
    for piece in pieces[1:]:
        parts.append(next(values, "%"))
        parts.append(piece)
    return "".join(parts)


@dataclass
class CodeContext:
    """The source text of one file, for error reporting."""

    source_code: str
    file_name: str

    def report_error(self, column: int, row: int, highlight_word_size: int, message: str, *args: str) -> None:
        """Raise a :class:`CompileError` pointing at the given place."""
        raise CompileError(self.build_error(True, column, row, highlight_word_size, message, *args))

    def build_error(
        self,
        decorate: bool,
        column: int,
        row: int,
        highlight_word_size: int,
        message: str,
        *args: str,
    ) -> str:
        """Build an error text; ``column`` is the 1-based line, ``row`` the end position of the word."""
        error = f"{_format(message, args)}\n[line {column}]"
        lines = self.source_code.split("\n")
        if not 1 <= column <= len(lines):
            raise ValueError(f"line {column} is outside the source")
        if row < highlight_word_size or highlight_word_size < 0:
            raise ValueError("highlighted word does not fit before its end position")
        line = lines[column - 1]
        box = "." * max(len(line), len(error)) if decorate else ""
        return "\n".join(
            [
                "",
                box,
                line,
                " " * (row - highlight_word_size) + "^" * highlight_word_size,
                error,
                box,
            ]
        )