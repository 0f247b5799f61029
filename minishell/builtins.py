"""Commands handled by the shell itself: env, setenv, unsetenv and cd."""

from __future__ import annotations

import os
import stat
import sys
from collections.abc import Callable
from typing import TextIO

from minishell.environment import Environment


class BuiltinError(Exception):
    """A built-in command failed; any message was already written to stderr."""


Builtin = Callable[[list[str], Environment, "TextIO | None", "TextIO | None"], None]


def _streams(stdout: TextIO | None, stderr: TextIO | None) -> tuple[TextIO, TextIO]:
    return stdout or sys.stdout, stderr or sys.stderr


def _fail(stderr: TextIO, message: str = "") -> BuiltinError:
    if message:
        stderr.write(message)
    return BuiltinError(message)


def print_env(args: list[str], env: Environment,
              stdout: TextIO | None = None, stderr: TextIO | None = None) -> None:
    """Write every variable as ``NAME=VALUE``, one per line."""
    out, _ = _streams(stdout, stderr)
    for name, value in env:
        out.write(f"{name}={value}\n")


def validate_variable_name(name: str) -> None:
    """Raise ValueError with the shell's message if ``name`` is not valid."""
    if not name or not (name[0].isascii() and (name[0].isalpha() or name[0] == "_")):
        raise ValueError("setenv: Variable name must begin with a letter.\n")
    for char in name[1:]:
        if char.isascii() and (char.isalnum() or char in "._"):
            continue
        raise ValueError(
            "setenv: Variable name must contain alphanumeric characters.\n")


def set_env(args: list[str], env: Environment,
            stdout: TextIO | None = None, stderr: TextIO | None = None) -> None:
    """Define a variable, or print the environment when given no operand.

    Invalid usage is reported on stderr without failing the command.
    """
    _, err = _streams(stdout, stderr)
    if len(args) > 3:
        err.write("setenv: Too many arguments.\n")
        return
    if len(args) == 1:
        print_env(args, env, stdout, stderr)
        return
    try:
        validate_variable_name(args[1])
    except ValueError as exc:
        err.write(str(exc))
        return
    env.set(args[1], args[2] if len(args) == 3 else "")


def unset_env(args: list[str], env: Environment,
              stdout: TextIO | None = None, stderr: TextIO | None = None) -> None:
    """Remove the named variables."""
    _, err = _streams(stdout, stderr)
    if len(args) < 2:
        raise _fail(err, "unsetenv: Too few arguments.\n")
    env.unset(*args[1:])


def _cd_home(env: Environment, err: TextIO) -> None:
    home = env.get("HOME")
    if home is None:
        return
    if not os.path.exists(home):
        raise _fail(err)
    try:
        os.chdir(home)
    except OSError:
        raise _fail(err) from None


def _cd_path(path: str, env: Environment, err: TextIO) -> None:
    if not os.path.isdir(path):
        raise _fail(err, f"{path}: Not a directory.\n")
    mode = os.stat(path).st_mode
    if not mode & stat.S_IRUSR and not mode & stat.S_IRGRP:
        raise _fail(err, f"{path}: Permission denied.\n")
    try:
        os.chdir(path)
    except OSError:
        raise _fail(err) from None
    if "PWD" in env:
        env.set("PWD", os.getcwd())


def change_directory(args: list[str], env: Environment,
                     stdout: TextIO | None = None,
                     stderr: TextIO | None = None) -> None:
    """Change the working directory to the operand, or to ``HOME``."""
    _, err = _streams(stdout, stderr)
    if len(args) == 1:
        _cd_home(env, err)
    elif len(args) == 2:
        _cd_path(args[1], env, err)
    else:
        raise _fail(err, "cd: Too many arguments.\n")


BUILTINS: dict[str, Builtin] = {
    "env": print_env,
    "cd": change_directory,
    "setenv": set_env,
    "unsetenv": unset_env,
}


def find_builtin(name: str) -> Builtin | None:
    """Return the built-in command called ``name``, if there is one."""
    return BUILTINS.get(name)