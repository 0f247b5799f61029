# minishell

A small interactive command shell. It reads one command per line from
standard input, runs a few built-in commands itself and starts every other
program by searching the directories listed in the environment.

## Installing

```
pip install .
```

## Running

```
minishell
```

If standard input is a terminal, the prompt ` < O_O > ` is shown before
each line and `exit` is printed when the shell stops. Input can also be
piped in:

```
printf 'setenv GREETING hello\nenv\n' | minishell
```

The shell stops at end of input or when a line starts with the word
`exit`. Its exit status is the status of the last command it ran.

## Commands

Words on a line are separated by spaces and tabs. Lines with no words are
skipped and leave the status unchanged.

| Command | Effect |
| --- | --- |
| `env` | Print every variable as `NAME=value`, in definition order. |
| `setenv` | With no arguments, behaves like `env`. |
| `setenv NAME` | Set `NAME` to an empty value. |
| `setenv NAME VALUE` | Set `NAME` to `VALUE`. |
| `unsetenv NAME...` | Remove the named variables. |
| `cd` | Change to the directory named by `HOME`, if it is set. |
| `cd DIR` | Change to `DIR`; if `PWD` is set, update it. |

A variable name for `setenv` must begin with an ASCII letter or underscore
and contain only ASCII letters, digits, `.` and `_`. Messages such as
`setenv: Too many arguments.`, `unsetenv: Too few arguments.`,
`cd: Too many arguments.`, `DIR: Not a directory.` and
`DIR: Permission denied.` are written to standard error.

Status of a command:

- a built-in gives 0, or 84 when it fails (`unsetenv` with no names, `cd`
  with too many arguments or a directory it cannot enter); `setenv`
  reports bad usage but still gives 0;
- a program that cannot be found or started is reported as
  `NAME: Command not found.` and gives 1;
- a program killed by a segmentation fault prints
  `Segmentation fault (core dumped)` and gives 139;
- `ls` exiting with status 2 gives 2;
- any other program gives 0, whatever its own exit status.

Before each command, if `PATH` is not set the shell adds
`PATH=/usr/bin:/bin`. A program is looked for in the directories named by
every `NAME=VALUE` entry of the environment, in order: the name itself,
then each `:`-separated part of the value. The first readable match is run.

## What it does not do

There are no pipes, redirections, `;` or `&&`, no quoting or escaping, no
variable or glob expansion and no job control. Each line is one command and
its words.

## Using it from Python

```python
import io
from minishell.shell import Shell

out = io.StringIO()
shell = Shell({"HOME": "/tmp", "PATH": "/usr/bin:/bin"},
              stdin=io.StringIO("setenv LANG C\nenv\n"),
              stdout=out, stderr=io.StringIO())
status = shell.run()
print(out.getvalue())
```

`Shell` also accepts a list of `NAME=VALUE` strings as its environment, and
`Shell.execute_line(line)` runs a single line, returning `None` for `exit`.

Other pieces:

- `minishell.environment.Environment`: ordered variables with `get`, `set`,
  `unset`, `ensure_path`, `from_strings` and `to_strings`.
- `minishell.parsing.parse_command` and `split_words`: line splitting.
- `minishell.builtins`: `print_env`, `set_env`, `unset_env`,
  `change_directory`, `validate_variable_name`, `find_builtin` and
  `BuiltinError`.
- `minishell.executor`: `find_executable`, `run_external` and
  `run_command`.