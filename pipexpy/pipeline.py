"""Running a chain of commands joined by pipes, from an input file to an output file."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass
from typing import IO, Iterable, Mapping, Optional, Union

from pipexpy.paths import find_command_path
from pipexpy.strings import split

EXIT_FAILURE = 1
EXIT_CANNOT_EXECUTE = 126
EXIT_NOT_FOUND = 127


class PipexError(Exception):
    """A failure that stops the whole run, carrying the exit status to report."""

    def __init__(self, message: str, exit_status: int = EXIT_FAILURE) -> None:
        super().__init__(message)
        self.exit_status = exit_status


@dataclass(frozen=True)
class Stage:
    """One command of a pipeline: its words and the executable it resolved to."""

    command: str
    argv: tuple[str, ...]
    path: Optional[str]

    @property
    def found(self) -> bool:
        return self.path is not None


def build_stages(
    commands: Iterable[str], env: Optional[Mapping[str, str]] = None
) -> list[Stage]:
    """Split each command line on spaces and resolve its executable."""
    stages = []
    for command in commands:
        argv = tuple(split(command, " "))
        path = find_command_path(argv[0], env) if argv else None
        stages.append(Stage(command, argv, path))
    return stages


def _start(
    stage: Stage,
    stdin: Optional[IO[bytes]],
    stdout: Union[IO[bytes], int],
    env: Optional[Mapping[str, str]],
) -> Union[subprocess.Popen, int]:
    """Launch one stage, or return the exit status it fails with."""
    if stage.path is None:
        print("command not found!", file=sys.stderr)
        return EXIT_NOT_FOUND
    try:
        return subprocess.Popen(
            list(stage.argv),
            executable=stage.path,
            stdin=stdin if stdin is not None else subprocess.DEVNULL,
            stdout=stdout,
            env=None if env is None else dict(env),
        )
    except OSError as exc:
        print(f"execve failed!: {exc.strerror or exc}", file=sys.stderr)
        return EXIT_CANNOT_EXECUTE


def run_pipeline(
    infile: str,
    commands: Iterable[str],
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> list[int]:
    """Run commands as a pipeline reading infile and writing outfile.

    The output file is created or truncated first; failing to open it raises
    PipexError. A stage that cannot run (unreadable input file, unknown
    command, unexecutable file) reports on stderr and leaves the next stage
    reading an empty input. Returns the exit status of every stage in order.
    """
    commands = list(commands)
    if not commands:
        raise ValueError("at least one command is required")
    try:
        out_fd = os.open(outfile, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        raise PipexError(f"error opening output file!: {exc.strerror}") from exc

    results: list[Union[subprocess.Popen, int]] = []
    with os.fdopen(out_fd, "wb") as out:
        stages = build_stages(commands, env)
        last = len(stages) - 1
        upstream: Optional[IO[bytes]] = None
        for index, stage in enumerate(stages):
            stdout: Union[IO[bytes], int] = out if index == last else subprocess.PIPE
            if index == 0:
                try:
                    stdin: Optional[IO[bytes]] = open(infile, "rb")
                except OSError as exc:
                    print(f"can't open input file: {exc.strerror}", file=sys.stderr)
                    results.append(EXIT_FAILURE)
                    continue
            else:
                stdin, upstream = upstream, None
            try:
                outcome = _start(stage, stdin, stdout, env)
            finally:
                if stdin is not None:
                    stdin.close()
            results.append(outcome)
            if isinstance(outcome, subprocess.Popen) and outcome.stdout is not None:
                upstream = outcome.stdout
        if upstream is not None:
            upstream.close()

    return [r if isinstance(r, int) else r.wait() for r in results]