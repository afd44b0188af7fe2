"""Checks that source lines are indented in steps of four spaces."""

from __future__ import annotations


class IndentationCheckError(ValueError):
    """Raised when indentation problems were found; holds every message."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.errors = list(errors)


class IndentationChecker:
    """Tracks the indentation level across lines and records problems.

    Problems accumulate across calls to :meth:`check` on one checker.
    """

    def __init__(self) -> None:
        self.indent_level = 0
        self.errors: list[str] = []

    def check(self, source: str) -> None:
        """Check ``source``; raise :class:`IndentationCheckError` on problems."""
        lines = source.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        for number, raw in enumerate(lines, start=1):
            line = raw[:-1] if raw.endswith("\r") else raw
            if not line:
                continue

            indent = len(line) - len(line.lstrip(" "))
            if indent % 4 != 0:
                self.errors.append(
                    f"Line {number}: Indentation must be multiple of 4 spaces, "
                    f"found {indent} spaces"
                )

            expected = self.indent_level * 4
            if indent > expected:
                if indent == expected + 4:
                    self.indent_level += 1
                else:
                    self.errors.append(
                        f"Line {number}: Unexpected indentation level {indent} "
                        f"(expected {expected + 4})"
                    )
            elif indent < expected:
                if indent % 4 == 0:
                    self.indent_level = indent // 4
                else:
                    self.errors.append(f"Line {number}: Invalid dedent")

        if self.errors:
            raise IndentationCheckError(self.errors)


def check_indentation(source: str) -> None:
    """Check ``source`` with a fresh :class:`IndentationChecker`."""
    IndentationChecker().check(source)