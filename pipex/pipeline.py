"""Run two commands with the output of the first feeding the second."""

import errno
import os
import subprocess
import sys
import tempfile
from collections.abc import Mapping, Sequence
from contextlib import ExitStack
from typing import IO, Optional, Union

from .split import split_command

BIN_DIR = "/usr/bin/"
USAGE_ERROR = "Input error: not enough arguments"
COMMAND_NOT_FOUND = 127

Stream = Union[int, IO[bytes], None]


class PipexError(Exception):
    """Raised when pipex is invoked with the wrong arguments."""


def resolve_command(args: Sequence[str]) -> Optional[str]:
    """Return the path of the program named by the first argument."""
    return BIN_DIR + args[0] if args else None


def child_error(args: Sequence[str], command: Optional[str]) -> int:
    """Report why a command could not be started and return its exit status."""
    if not args:
        print("pipex: : command not found", file=sys.stderr)
        return COMMAND_NOT_FOUND
    if command is None or not os.path.exists(command):
        print(f"pipex: {args[0]}: command not found", file=sys.stderr)
        return COMMAND_NOT_FOUND
    if os.path.isdir(command) or not os.access(command, os.X_OK):
        reason = errno.EACCES
    else:
        reason = errno.ENOEXEC
    print(f"pipex: {os.strerror(reason)}", file=sys.stderr)
    return 1


def run_child(
    command_line: str,
    stdin: Stream,
    stdout: Stream,
    env: Optional[Mapping[str, str]],
) -> int:
    """Run one command line with the given streams and return its exit status."""
    args = split_command(command_line)
    command = resolve_command(args)
    if command is None:
        return child_error(args, command)
    try:
        completed = subprocess.run(
            args, executable=command, stdin=stdin, stdout=stdout, env=env, check=False
        )
    except OSError:
        return child_error(args, command)
    return completed.returncode


def _open(path: str, flags: int, mode: int = 0o777) -> Optional[int]:
    try:
        return os.open(path, flags, mode)
    except OSError as exc:
        print(f"{path}: {exc.strerror}", file=sys.stderr)
        return None


def run_pipex(
    infile: str,
    first_command: str,
    second_command: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Behave like `< infile first | second > outfile`; return the second's status."""
    with ExitStack() as stack:
        try:
            channel = stack.enter_context(tempfile.TemporaryFile())
        except OSError as exc:
            print(exc.strerror, file=sys.stderr)
            return 1

        out_fd = _open(outfile, os.O_TRUNC | os.O_CREAT | os.O_RDWR, 0o644)
        if out_fd is not None:
            stack.callback(os.close, out_fd)
        in_fd = _open(infile, os.O_RDONLY)
        if in_fd is not None:
            stack.callback(os.close, in_fd)

        # The first command finishes before the second one starts.
        if in_fd is not None:
            run_child(first_command, in_fd, channel, env)
        channel.seek(0)

        if out_fd is None:
            return 1
        status = run_child(second_command, channel, out_fd, env)

    # A command killed by a signal has no exit code; it is reported as 0.
    return max(status, 0)


def _parse_args(args: Sequence[str]) -> tuple[str, str, str, str]:
    if len(args) != 4:
        raise PipexError(USAGE_ERROR)
    infile, first, second, outfile = args
    return infile, first, second, outfile


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point: pipex infile cmd1 cmd2 outfile."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        infile, first, second, outfile = _parse_args(args)
    except PipexError as exc:
        print(exc)
        return 1
    return run_pipex(infile, first, second, outfile)


if __name__ == "__main__":
    raise SystemExit(main())