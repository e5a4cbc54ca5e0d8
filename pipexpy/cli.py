"""Command-line entry points: two commands, or any number with the multi form."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from pipexpy.pipeline import PipexError, run_pipeline

USAGE = "Correct usage: ./pipex infile cmd1 cmd2 outfile"
USAGE_MULTI = "Usage: ./pipex infile cmd1 cmd2 ... cmdN outfile"


@dataclass(frozen=True)
class Arguments:
    """The parsed command line: input file, commands and output file."""

    infile: str
    commands: tuple[str, ...]
    outfile: str


def parse_args(argv: Sequence[str], multi: bool = False) -> Arguments:
    """Parse arguments (program name excluded).

    The plain form takes exactly two non-empty commands; the multi form takes
    two or more. Raises PipexError on a bad command line.
    """
    args = list(argv)
    if multi:
        if len(args) < 4:
            raise PipexError(USAGE_MULTI)
    else:
        if len(args) != 4:
            raise PipexError(USAGE)
        if not args[1] or not args[2]:
            raise PipexError("empty command")
    return Arguments(args[0], tuple(args[1:-1]), args[-1])


def _run(argv: Optional[Sequence[str]], multi: bool) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        arguments = parse_args(argv, multi)
        run_pipeline(arguments.infile, arguments.commands, arguments.outfile)
    except PipexError as exc:
        print(exc, file=sys.stderr)
        return exc.exit_status
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run infile | cmd1 | cmd2 > outfile."""
    return _run(argv, multi=False)


def main_multi(argv: Optional[Sequence[str]] = None) -> int:
    """Run infile | cmd1 | ... | cmdN > outfile."""
    return _run(argv, multi=True)


if __name__ == "__main__":
    sys.exit(main())