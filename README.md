# pipex

`pipex` runs two commands one after the other. The first reads from an input
file, and its output goes to the second, which writes to an output file. The
result is the same as this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

For the tests:

```sh
pip install ".[test]"
pytest
```

## Command-line use

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

`python -m pipex.pipeline` takes the same arguments.

It always takes exactly four arguments. With any other number it prints
`Input error: not enough arguments` to standard output and exits with status 1.

- The output file is created with mode `0644`, or emptied if it already exists,
  before either command runs.
- Each command is split on spaces. A word wrapped in single quotes stays one
  argument, so `"grep 'hello world'"` runs `grep` with the single argument
  `hello world`.
- Commands are looked up in `/usr/bin/` only.
- The first command runs to completion and its output is held in a temporary
  file. The second command then reads that output.
- If the input file cannot be opened, the error is reported as
  `<path>: <reason>` and the first command is skipped. The second command then
  gets empty input.
- If the output file cannot be opened, the error is reported the same way. The
  second command is skipped and `pipex` exits with status 1.
- If a command cannot be found, `pipex: <name>: command not found` goes to
  standard error and that stage ends with status 127. An empty command gives
  `pipex: : command not found`. A command that exists but cannot be run gives
  `pipex: <reason>` and status 1.
- In every other case `pipex` exits with the status of the second command. A
  second command killed by a signal counts as status 0.

Example:

```sh
pipex input.txt "grep 'error'" "wc -l" count.txt
```

## Library use

```python
from pipex.split import split_command
from pipex.pipeline import run_pipex

split_command("grep 'hello world' -n", " ", "'")
# ['grep', 'hello world', '-n']

status = run_pipex("input.txt", "cat", "wc -l", "count.txt", env=None)
```

`pipex.split` has:

- `split_command(text, separator=" ", quote="'")` splits a command line into
  words. Only the first character of `separator` and `quote` counts. Every
  character of `separator` is trimmed from both ends of the line first. An
  empty `separator` or `quote` raises `ValueError`.
- `trim(text, chars)` removes leading and trailing characters found in `chars`.
- `count_words(text, separator=" ", quote="'")` estimates how many words
  `split_command` returns. The estimate is never below the real count.

`pipex.pipeline` has:

- `run_pipex(infile, first_command, second_command, outfile, env=None)` runs the
  whole pipeline and returns the exit status described above.
- `run_child(command_line, stdin, stdout, env)` splits and runs one command
  with the given streams and returns its exit status.
- `resolve_command(args)` returns `/usr/bin/` plus the first argument, or
  `None` for an empty list.
- `child_error(args, command)` prints why a command could not start and returns
  127 or 1.
- `main(argv=None)` is the command-line entry point. It returns the exit status.
- `PipexError` is raised internally when the number of arguments is wrong. `main`
  catches it and reports it.

## What it does not do

- It joins exactly two commands. Longer chains are not supported.
- Commands are not searched for on `PATH`, only in `/usr/bin/`.
- Command lines are not parsed like a shell parses them. There are no double
  quotes, escapes, variables, globbing or redirections inside a command.
- The two commands do not run at the same time. The first one must finish
  before the second one starts.