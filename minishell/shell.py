"""The interactive read-execute loop."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Mapping
from typing import TextIO

from minishell.environment import Environment
from minishell.executor import run_command
from minishell.parsing import parse_command

PROMPT = "\x1b[35m < O_O > \x1b[0m"
EXIT_WORD = "exit"


class Shell:
    """Reads command lines from ``stdin`` and runs them one by one."""

    def __init__(self, environ: Mapping[str, str] | Iterable[str] | None = None,
                 stdin: TextIO | None = None, stdout: TextIO | None = None,
                 stderr: TextIO | None = None) -> None:
        if environ is None:
            environ = os.environ
        if isinstance(environ, Mapping):
            self.env = Environment(environ.items())
        else:
            self.env = Environment.from_strings(environ)
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.status = 0

    def _interactive(self) -> bool:
        try:
            return bool(self.stdin.isatty())
        except (AttributeError, ValueError):
            return False

    def _prompt(self) -> None:
        if self._interactive():
            self.stdout.write(PROMPT)
            self.stdout.flush()

    def execute_line(self, line: str) -> int | None:
        """Run one input line and return its status.

        Returns ``None`` when the line asks the shell to exit. A line with
        no words leaves the status unchanged.
        """
        words = parse_command(line)
        if not words:
            return self.status
        if words[0] == EXIT_WORD:
            return None
        self.status = run_command(words, self.env, self.stdout, self.stderr)
        return self.status

    def run(self) -> int:
        """Read lines until end of input or ``exit``; return the last status."""
        self._prompt()
        for line in self.stdin:
            if self.execute_line(line) is None:
                break
            self._prompt()
        if self._interactive():
            self.stdout.write("exit\n")
            self.stdout.flush()
        return self.status


def main(argv: list[str] | None = None) -> int:
    """Start a shell on the process's own streams and environment."""
    return Shell(os.environ, sys.stdin, sys.stdout, sys.stderr).run()


if __name__ == "__main__":
    sys.exit(main())