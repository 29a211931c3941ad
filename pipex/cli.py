"""Run ``infile cmd1 | cmd2 > outfile`` the way a shell pipeline would."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping
from typing import IO, Optional, Sequence, Union

from .environment import Environment, find_executable
from .strings import split

USAGE = "./pipex infile cmd outfile\n"
NOT_FOUND = "pipex: command not found: "


class UsageError(Exception):
    """The command line does not describe a valid pipeline."""

    def __init__(self) -> None:
        super().__init__(USAGE.strip())


def _environment_dict(env: Environment) -> dict[str, str]:
    if isinstance(env, Mapping):
        return dict(env)
    result: dict[str, str] = {}
    for entry in env:
        key, _, value = entry.partition("=")
        result.setdefault(key, value)
    return result


def _start(
    cmd: str,
    env: dict[str, str],
    stdin: Union[int, IO[bytes]],
    stdout: int,
) -> Optional[subprocess.Popen]:
    args = split(cmd, " ")
    if not args:
        sys.stderr.write(NOT_FOUND)
        sys.stderr.flush()
        return None
    path = find_executable(args[0], env)
    # A name that was not found on PATH is taken relative to the working
    # directory, never searched for again.
    if "/" not in path:
        path = f"./{path}"
    try:
        return subprocess.Popen(args, executable=path, stdin=stdin, stdout=stdout, env=env)
    except OSError:
        sys.stderr.write(f"{NOT_FOUND}{args[0]}\n")
        sys.stderr.flush()
        return None


def _exit_status(code: int) -> int:
    return code if code >= 0 else 128 - code


def _close_and_reap(process: Optional[subprocess.Popen]) -> None:
    if process is None:
        return
    if process.stdout is not None:
        process.stdout.close()
    process.wait()


def run(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Optional[Environment] = None,
) -> int:
    """Feed ``infile`` through ``cmd1`` into ``cmd2`` and write to ``outfile``.

    Returns the exit status of ``cmd2``. An unreadable ``infile`` leaves
    ``cmd2`` with empty input; an unwritable ``outfile`` gives status 0.
    A command that cannot be started is reported and gives status 1.
    """
    if not cmd1 or not cmd2:
        raise UsageError()
    environment = _environment_dict(os.environ if env is None else env)

    first: Optional[subprocess.Popen] = None
    try:
        source = os.open(infile, os.O_RDONLY)
    except OSError:
        source = None
    if source is not None:
        try:
            first = _start(cmd1, environment, source, subprocess.PIPE)
        finally:
            os.close(source)

    try:
        sink = os.open(outfile, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o777)
    except OSError:
        _close_and_reap(first)
        return 0

    feed: Union[int, IO[bytes]] = (
        first.stdout if first is not None and first.stdout is not None else subprocess.DEVNULL
    )
    try:
        second = _start(cmd2, environment, feed, sink)
    finally:
        os.close(sink)
        if first is not None and first.stdout is not None:
            first.stdout.close()

    status = 1 if second is None else _exit_status(second.wait())
    if first is not None:
        first.wait()
    return status


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not os.environ:
        return 1
    if len(args) != 4:
        sys.stderr.write(USAGE)
        return 1
    try:
        return run(args[0], args[1], args[2], args[3], env=os.environ)
    except UsageError:
        sys.stderr.write(USAGE)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())