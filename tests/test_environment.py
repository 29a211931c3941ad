import os
import stat

from pipex.environment import find_executable, get_env


def _make_executable(directory, name, mode=0o755):
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(mode)
    return path


def test_get_env_from_mapping():
    assert get_env("HOME", {"HOME": "/home/someone", "PATH": "/bin"}) == "/home/someone"


def test_get_env_from_entries():
    env = ["USER=someone", "PATH=/usr/bin:/bin", "SHELL=/bin/sh"]
    assert get_env("PATH", env) == "/usr/bin:/bin"


def test_get_env_requires_exact_name():
    env = ["PATHX=/nowhere", "XPATH=/elsewhere"]
    assert get_env("PATH", env) is None


def test_get_env_first_entry_wins():
    env = ["PATH=/first", "PATH=/second"]
    assert get_env("PATH", env) == "/first"


def test_get_env_value_may_contain_equals():
    assert get_env("OPTS", ["OPTS=a=b"]) == "a=b"


def test_get_env_missing_in_mapping():
    assert get_env("MISSING", {}) is None


def test_find_executable_in_path(tmp_path):
    _make_executable(tmp_path, "tool")
    env = {"PATH": f"/nonexistent-dir:{tmp_path}"}
    assert find_executable("tool", env) == f"{tmp_path}/tool"


def test_find_executable_uses_first_word(tmp_path):
    _make_executable(tmp_path, "tool")
    env = [f"PATH={tmp_path}"]
    assert find_executable("tool -x --verbose", env) == f"{tmp_path}/tool"


def test_find_executable_first_directory_wins(tmp_path):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    _make_executable(first, "tool")
    _make_executable(second, "tool")
    env = {"PATH": f"{first}:{second}"}
    assert find_executable("tool", env) == f"{first}/tool"


def test_find_executable_skips_empty_path_entries(tmp_path):
    _make_executable(tmp_path, "tool")
    env = {"PATH": f"::{tmp_path}:"}
    assert find_executable("tool", env) == f"{tmp_path}/tool"


def test_find_executable_ignores_non_executable(tmp_path):
    _make_executable(tmp_path, "data", mode=stat.S_IRUSR | stat.S_IWUSR)
    env = {"PATH": str(tmp_path)}
    if os.access(tmp_path / "data", os.X_OK):
        expected = f"{tmp_path}/data"
    else:
        expected = "data"
    assert find_executable("data", env) == expected


def test_find_executable_not_found_returns_command(tmp_path):
    env = {"PATH": str(tmp_path)}
    assert find_executable("no-such-tool arg", env) == "no-such-tool arg"


def test_find_executable_without_path_returns_command():
    assert find_executable("tool", {}) == "tool"


def test_find_executable_blank_command_returned_unchanged(tmp_path):
    env = {"PATH": str(tmp_path)}
    assert find_executable("   ", env) == "   "