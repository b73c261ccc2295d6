#!/usr/bin/env python3

"""Indentation-aware line writer used by all renderers."""

from collections.abc import Iterator
from contextlib import contextmanager


class IndentedTextWriter:
    """Accumulates generated source lines with brace-block indentation."""

    def __init__(self, indent_text: str = "    ") -> None:
        self._lines: list[str] = []
        self._indent_level = 0
        self._indent_text = indent_text

    def write_line(self, line: str = "") -> None:
        """Write a line at the current indentation; empty lines carry no indent."""
        if line:
            self._lines.append(self._indent_text * self._indent_level + line)
        else:
            self._lines.append("")

    def increase_indent(self) -> None:
        self._indent_level += 1

    def decrease_indent(self) -> None:
        if self._indent_level == 0:
            raise RuntimeError("Cannot decrease indentation below zero")
        self._indent_level -= 1

    @contextmanager
    def block(self) -> Iterator[None]:
        """Write ``{``, indent the body, and close with ``}``."""
        self.write_line("{")
        self.increase_indent()
        yield
        self.decrease_indent()
        self.write_line("}")

    def to_string(self) -> str:
        return "".join(f"{line}\n" for line in self._lines)
