# pipexpy

pipexpy sends a file through a chain of commands and writes the result to
another file. The shell line `< infile cmd1 | cmd2 > outfile` does the same.

## Installation

```
pip install .
```

To install and run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

With two commands, the output of the first is piped into the second:

```
pipex infile "grep foo" "wc -l" outfile
```

`pipex` needs exactly four arguments, and neither command may be empty.

`pipex-multi` accepts two or more commands:

```
pipex-multi infile "cat" "tr a-z A-Z" "sort" "uniq -c" outfile
```

How a run proceeds:

- The output file is created or truncated first, with mode `0644`.
- Each command string is split on spaces. Quoting and shell expansion are
  not supported.
- The command's first word is looked up in this order:
  1. As given, if that file is executable.
  2. In each directory listed in `PATH`, in order, unless the word begins
     with `.` or `/`.
- If a command cannot be found, the run prints `command not found!` and that
  stage gets status 127.
- If a command is found but cannot be started, that stage gets status 126.
- If the input file cannot be opened, the error is reported and the first
  stage gets status 1. The next stage then reads empty input.

Both commands exit with status 1 in two cases: the arguments are wrong, which
prints a usage line, or the output file cannot be opened. In every other case
they exit with 0, whatever the statuses of the individual commands were.

## Library use

```python
from pipexpy.pipeline import run_pipeline, build_stages
from pipexpy.paths import find_command_path

statuses = run_pipeline("in.txt", ["grep foo", "wc -l"], "out.txt")
```

- `pipexpy.paths`:
  - `search_dirs(env)` lists the `PATH` directories. It raises `LookupError`
    when `PATH` is missing.
  - `command_name(full_cmd)` returns the first word of a command.
  - `find_command_path(full_cmd, env)` returns the executable's path, or
    `None` when there is none.
- `pipexpy.pipeline`:
  - `build_stages(commands, env)` turns command strings into frozen `Stage`
    objects with the fields `command`, `argv` and `path`, plus a `found`
    property.
  - `run_pipeline(infile, commands, outfile, env)` runs the stages and
    returns the exit status of each one, in order. It raises `PipexError`
    when the output file cannot be opened, and `ValueError` when no command
    is given. `PipexError` carries an `exit_status`.
- `pipexpy.cli`:
  - `parse_args(argv, multi)` checks the arguments and returns `Arguments`
    with the fields `infile`, `commands` and `outfile`.
  - `main` and `main_multi` are the two commands above.

The package also includes some small helper modules:

- `pipexpy.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower`, and also `atoi` and `itoa`, which work
  on 32-bit signed integers.
- `pipexpy.memory`: `bzero`, `memset`, `memcpy`, `memmove`, `memchr`,
  `memcmp` and `calloc`, which work on `bytearray` buffers.
- `pipexpy.strings`: `split`, `substr`, `strjoin`, `strtrim`, `strchr`,
  `strrchr`, `strnstr`, `strncmp`, `strlcpy`, `strlcat`, `strmapi` and
  `striteri`.
- `pipexpy.llist`: a singly linked `LinkedList` of `Node` objects. It has
  `push_front`, `push_back`, `last`, `clear`, `iterate` and `map`, and
  supports `len()` and iteration.
- `pipexpy.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, which
  write to a text stream (standard output by default).

## What it does not do

pipexpy is not a shell. It has no quoting, globbing, variables or here-documents.
The only redirections it offers are the single input file and the single output
file. It does not report the commands' exit statuses as its own exit status.