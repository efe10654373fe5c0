"""Run ``infile < cmd1 | cmd2 > outfile`` as two processes joined by a pipe."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from typing import Union

from pipex.path import CommandNotFound, resolve_command, split_cmd

USAGE = "Usage: ./pipex infile cmd1 cmd2 outfile"
EXIT_FAILURE = 1
_OUTFILE_FLAGS = os.O_CREAT | os.O_WRONLY | os.O_TRUNC
_OUTFILE_MODE = 0o664

_Stage = Union[subprocess.Popen, int]


class PipexError(Exception):
    """The pipeline could not be set up at all."""

    exit_status = EXIT_FAILURE


def _report(message: str) -> None:
    sys.stderr.write(f"Pipex: {message}\n")
    sys.stderr.flush()


def _os_error_text(label: str, exc: OSError) -> str:
    return f"{label}: {exc.strerror or exc}"


def _spawn(args: Sequence[str], stdin: int, stdout: int, env: Mapping[str, str]) -> _Stage:
    """Resolve and start one command; return the process or the status it failed with."""
    try:
        executable = resolve_command(args, env)
    except CommandNotFound as exc:
        _report(str(exc))
        return exc.exit_status
    try:
        return subprocess.Popen(
            list(args), executable=executable, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError as exc:
        _report(_os_error_text("execve", exc))
        return EXIT_FAILURE


def _start_reader(infile: str, command: str, pipe_write: int, env: Mapping[str, str]) -> _Stage:
    try:
        in_fd = os.open(infile, os.O_RDONLY)
    except OSError as exc:
        _report(_os_error_text(infile, exc))
        return EXIT_FAILURE
    try:
        return _spawn(split_cmd(command), in_fd, pipe_write, env)
    finally:
        os.close(in_fd)


def _start_writer(outfile: str, command: str, pipe_read: int, env: Mapping[str, str]) -> _Stage:
    try:
        out_fd = os.open(outfile, _OUTFILE_FLAGS, _OUTFILE_MODE)
    except OSError as exc:
        _report(_os_error_text(outfile, exc))
        return EXIT_FAILURE
    try:
        return _spawn(split_cmd(command), pipe_read, out_fd, env)
    finally:
        os.close(out_fd)


def _wait(stage: _Stage) -> int:
    if isinstance(stage, int):
        return stage
    return stage.wait()


def run(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> int:
    """Feed ``infile`` through ``cmd1`` into ``cmd2``, writing ``outfile``.

    Each side fails on its own, reporting to stderr, while the other still
    runs. Returns the exit status of ``cmd2``, or 1 when it was killed by a
    signal. Raises PipexError when the pipe cannot be created.
    """
    environment: Mapping[str, str] = dict(os.environ if env is None else env)
    try:
        pipe_read, pipe_write = os.pipe()
    except OSError as exc:
        raise PipexError(_os_error_text("pipe failed", exc)) from exc

    try:
        first = _start_reader(infile, cmd1, pipe_write, environment)
    finally:
        os.close(pipe_write)
    try:
        second = _start_writer(outfile, cmd2, pipe_read, environment)
    finally:
        os.close(pipe_read)

    _wait(first)
    status = _wait(second)
    return status if status >= 0 else EXIT_FAILURE


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        sys.stderr.write(USAGE + "\n")
        return EXIT_FAILURE
    infile, cmd1, cmd2, outfile = args
    try:
        return run(infile, cmd1, cmd2, outfile, None)
    except PipexError as exc:
        _report(str(exc))
        return exc.exit_status


if __name__ == "__main__":
    sys.exit(main())