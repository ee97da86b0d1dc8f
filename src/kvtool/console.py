"""Streams a command reads from and writes to."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import BinaryIO, TextIO

import typer


@dataclass
class Console:
    """Input, output and diagnostic streams injected into commands.

    Streams left as ``None`` resolve to the process streams at the moment they
    are used, so test runners that swap ``sys.stdout`` still capture output.
    Values go to ``stdout`` as raw bytes; messages go to ``stderr`` only.
    """

    stdin: BinaryIO | None = None
    stdout: BinaryIO | None = None
    stderr: TextIO | None = None
    color: bool | None = None

    @property
    def input(self) -> BinaryIO:
        return self.stdin if self.stdin is not None else sys.stdin.buffer

    @property
    def output(self) -> BinaryIO:
        return self.stdout if self.stdout is not None else sys.stdout.buffer

    @property
    def diagnostics(self) -> TextIO:
        return self.stderr if self.stderr is not None else sys.stderr

    def read_input(self) -> bytes:
        return self.input.read()

    def write(self, data: bytes) -> None:
        out = self.output
        out.write(data)
        out.flush()

    def error(self, message: str, hint: str | None = None) -> None:
        typer.secho(f"error: {message}", file=self.diagnostics, fg=typer.colors.RED, color=self.color)
        if hint:
            typer.secho(f"hint: {hint}", file=self.diagnostics, fg=typer.colors.CYAN, color=self.color)
