"""Lookup and execution of commands, built-in or external."""

from __future__ import annotations

import os
import signal
import subprocess
import sys
from collections.abc import Iterable
from typing import TextIO

from minishell.builtins import BuiltinError, find_builtin
from minishell.environment import Environment

ERROR = 84
SEGFAULT_STATUS = 139
LS_ERROR = 2
NOT_FOUND_STATUS = 1
SUCCESS = 0
SEGFAULT_MESSAGE = "Segmentation fault (core dumped)\n"


def _search_dirs(entry: str) -> list[str]:
    """Return the directories an environment entry offers for a lookup.

    The variable's name is tried first, then every ``:``-separated part of
    its value; empty parts are skipped.
    """
    name, sep, value = entry.split("\n", 1)[0].lstrip("=").partition("=")
    dirs = [name] if name else []
    if sep:
        dirs.extend(part for part in value.split(":") if part)
    return dirs


def find_executable(entries: Iterable[str], name: str) -> str | None:
    """Find ``name`` in the directories named by the environment entries.

    Every ``NAME=VALUE`` entry is searched in order, and the first readable
    candidate is returned. ``None`` means the command was not found.
    """
    for entry in entries:
        for directory in _search_dirs(entry):
            candidate = f"{directory}/{name}"
            if os.path.exists(candidate) and os.access(candidate, os.R_OK):
                return candidate
    return None


def _stream_fd(stream: TextIO) -> int | None:
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        return None
    stream.flush()
    return fd


def _not_found(name: str, err: TextIO) -> int:
    err.write(f"{name}: Command not found.\n")
    return NOT_FOUND_STATUS


def run_external(args: list[str], env: Environment,
                 stdout: TextIO | None = None,
                 stderr: TextIO | None = None) -> int:
    """Run a program found through the environment and return the shell status.

    A program killed by a segmentation fault gives 139, ``ls`` failing with
    status 2 gives 2, and any other completion gives 0. A command that
    cannot be found or started gives 1.
    """
    out = stdout or sys.stdout
    err = stderr or sys.stderr
    name = args[0]
    path = find_executable(env.to_strings(), name)
    if path is None:
        return _not_found(name, err)

    out_fd = _stream_fd(out)
    err_fd = _stream_fd(err)
    try:
        proc = subprocess.run(
            args,
            executable=path,
            env=dict(env),
            stdout=subprocess.PIPE if out_fd is None else out_fd,
            stderr=subprocess.PIPE if err_fd is None else err_fd,
            check=False,
        )
    except OSError:
        return _not_found(name, err)

    if proc.stdout:
        out.write(proc.stdout.decode(errors="replace"))
    if proc.stderr:
        err.write(proc.stderr.decode(errors="replace"))

    if proc.returncode == -signal.SIGSEGV:
        out.write(SEGFAULT_MESSAGE)
        return SEGFAULT_STATUS
    if name == "ls" and proc.returncode == LS_ERROR:
        return LS_ERROR
    return SUCCESS


def run_command(args: list[str], env: Environment,
                stdout: TextIO | None = None,
                stderr: TextIO | None = None) -> int:
    """Run one parsed command line and return its status.

    A default ``PATH`` is added first when none is set. A failing built-in
    gives 84.
    """
    env.ensure_path()
    builtin = find_builtin(args[0])
    if builtin is None:
        return run_external(args, env, stdout, stderr)
    try:
        builtin(args, env, stdout, stderr)
    except BuiltinError:
        return ERROR
    return SUCCESS