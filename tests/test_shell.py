import io

from minishell.shell import PROMPT, Shell


class _TtyInput(io.StringIO):
    def isatty(self):
        return True


def _run(text, environ=("PATH=/bin",)):
    out, err = io.StringIO(), io.StringIO()
    shell = Shell(list(environ), io.StringIO(text), out, err)
    status = shell.run()
    return shell, status, out.getvalue(), err.getvalue()


def test_setenv_then_env():
    shell, status, out, _ = _run("setenv FOO bar\nenv\n")
    assert status == 0
    assert "FOO=bar\n" in out
    assert shell.env.get("FOO") == "bar"


def test_exit_stops_reading():
    shell, status, _, _ = _run("exit\nsetenv A b\n")
    assert status == 0
    assert "A" not in shell.env


def test_status_is_last_command():
    _, status, _, err = _run("unsetenv\n")
    assert status == 84
    assert err == "unsetenv: Too few arguments.\n"


def test_exit_keeps_previous_status():
    _, status, _, _ = _run("unsetenv\nexit\n")
    assert status == 84


def test_blank_lines_are_skipped():
    shell, status, _, _ = _run("\n   \nsetenv X 1\n")
    assert status == 0
    assert shell.env.get("X") == "1"


def test_no_prompt_when_not_interactive():
    _, _, out, _ = _run("setenv A b\n")
    assert PROMPT not in out
    assert out == ""


def test_prompt_and_exit_when_interactive():
    out = io.StringIO()
    shell = Shell(["PATH=/bin"], _TtyInput("setenv A b\n"), out, io.StringIO())
    assert shell.run() == 0
    assert out.getvalue() == PROMPT + PROMPT + "exit\n"


def test_environ_mapping():
    shell = Shell({"A": "b"}, io.StringIO(""), io.StringIO(), io.StringIO())
    assert shell.env.get("A") == "b"


def test_execute_line_exit_returns_none():
    shell = Shell(["PATH=/bin"], io.StringIO(""), io.StringIO(), io.StringIO())
    assert shell.execute_line("exit\n") is None


def test_execute_line_runs_command():
    shell = Shell(["PATH=/bin"], io.StringIO(""), io.StringIO(), io.StringIO())
    assert shell.execute_line("setenv NAME value\n") == 0
    assert shell.env.get("NAME") == "value"


def test_external_command(tmp_path):
    script = tmp_path / "hello"
    script.write_text("#!/bin/sh\necho hello\n")
    script.chmod(0o755)
    _, status, out, _ = _run("hello\n", environ=(f"PATH={tmp_path}",))
    assert status == 0
    assert out == "hello\n"