"""Ordered store of the shell's environment variables."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

PATH_NAME = "PATH"
DEFAULT_PATH = "/usr/bin:/bin"


class Environment:
    """Variables kept in the order they were first defined.

    Replacing a value keeps the variable's position. Removing a variable
    drops it from the sequence.
    """

    def __init__(self, entries: Iterable[tuple[str, str]] = ()) -> None:
        self._vars: dict[str, str] = {}
        for name, value in entries:
            self._vars[name] = value

    @classmethod
    def from_strings(cls, lines: Iterable[str]) -> "Environment":
        """Build an environment from ``NAME=VALUE`` strings.

        The name ends at the first ``=``; the value runs to the end of the
        line. A missing value gives an empty string.
        """
        entries = []
        for line in lines:
            name, _, value = line.lstrip("=").partition("=")
            value = value.lstrip("\n").split("\n", 1)[0]
            entries.append((name, value))
        return cls(entries)

    def to_strings(self) -> list[str]:
        """Return the variables as ``NAME=VALUE`` strings, in order."""
        return [f"{name}={value}" for name, value in self._vars.items()]

    def get(self, name: str, default: str | None = None) -> str | None:
        """Return the value of ``name``, or ``default`` when it is unset."""
        return self._vars.get(name, default)

    def set(self, name: str, value: str) -> None:
        """Define ``name``, replacing its value in place if it exists."""
        self._vars[name] = value

    def unset(self, *names: str) -> int:
        """Remove every listed variable; return how many were removed."""
        removed = 0
        for name in names:
            if self._vars.pop(name, None) is not None:
                removed += 1
        return removed

    def ensure_path(self) -> None:
        """Add a default ``PATH`` when none is defined."""
        if PATH_NAME not in self._vars:
            self._vars[PATH_NAME] = DEFAULT_PATH

    def __len__(self) -> int:
        return len(self._vars)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(list(self._vars.items()))

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __repr__(self) -> str:
        return f"Environment({list(self._vars.items())!r})"