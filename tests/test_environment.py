from minishell.environment import DEFAULT_PATH, Environment


def test_round_trip_keeps_order():
    lines = ["A=1", "B=2", "C=3"]
    assert Environment.from_strings(lines).to_strings() == lines


def test_value_may_contain_equals():
    env = Environment.from_strings(["X=a=b"])
    assert env.get("X") == "a=b"


def test_missing_value_is_empty():
    env = Environment.from_strings(["FOO="])
    assert env.get("FOO") == ""
    assert env.to_strings() == ["FOO="]


def test_value_stops_at_newline():
    env = Environment.from_strings(["K=v\nrest"])
    assert env.get("K") == "v"


def test_get_default():
    env = Environment([("A", "1")])
    assert env.get("MISSING") is None
    assert env.get("MISSING", "fallback") == "fallback"


def test_set_replaces_in_place():
    env = Environment([("A", "1"), ("B", "2")])
    env.set("A", "changed")
    assert env.to_strings() == ["A=changed", "B=2"]


def test_set_new_appends():
    env = Environment([("A", "1")])
    env.set("B", "2")
    assert env.to_strings() == ["A=1", "B=2"]


def test_unset_several():
    env = Environment([("A", "1"), ("B", "2"), ("C", "3")])
    assert env.unset("A", "C") == 2
    assert env.to_strings() == ["B=2"]


def test_unset_missing_is_noop():
    env = Environment([("A", "1")])
    assert env.unset("Z") == 0
    assert env.to_strings() == ["A=1"]


def test_ensure_path_adds_default():
    env = Environment([("A", "1")])
    env.ensure_path()
    assert env.get("PATH") == DEFAULT_PATH
    assert env.to_strings()[-1] == "PATH=/usr/bin:/bin"


def test_ensure_path_keeps_existing():
    env = Environment([("PATH", "/opt")])
    env.ensure_path()
    assert env.get("PATH") == "/opt"
    assert len(env) == 1


def test_len_contains_iter():
    env = Environment([("A", "1"), ("B", "2")])
    assert len(env) == 2
    assert "A" in env
    assert "Z" not in env
    assert list(env) == [("A", "1"), ("B", "2")]