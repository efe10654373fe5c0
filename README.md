# pipex

`pipex` runs two commands joined by a pipe. The first command reads its input
from a file. The second command writes its output to another file. It behaves
like this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

It needs Python 3.10 or later and a POSIX system.

## Installing

```sh
pip install .
```

To run the test suite, install the `test` extra:

```sh
pip install ".[test]"
pytest
```

## Command line

```sh
pipex infile "cmd1 args" "cmd2 args" outfile
```

The command takes exactly four arguments. With any other count it prints
`Usage: ./pipex infile cmd1 cmd2 outfile` to standard error and exits with
status 1.

- **Splitting commands.** Each command is split on spaces, and empty words are
  dropped. Quotes get no special handling, so `"grep hello"` becomes
  `["grep", "hello"]`.
- **Finding commands.** The first word is looked up in the directories listed
  in `PATH`. The first `dir/name` that may be executed is used.
- **Output file.** `outfile` is created if it does not exist and truncated if
  it does. New files get mode `0664`.
- **Exit status.** The exit status is the exit status of the second command.
  If the second command was killed by a signal, the status is 1.
- **Failures on one side.** Each side fails on its own, and the other side
  still runs. Errors go to standard error:
  - If `infile` cannot be opened, or `outfile` cannot be created, the message
    is `Pipex: <name>: <reason>` and that side fails with status 1.
  - If a command is not found on `PATH`, the message is
    `Pipex: <cmd>: command not found` and that side fails with status 127.
  - If a command is found but cannot be started, the message is
    `Pipex: execve: <reason>` and that side fails with status 1.
- **Pipe failure.** If the pipe itself cannot be created, the message is
  `Pipex: pipe failed: <reason>` and the exit status is 1.

Example:

```sh
pipex input.txt "grep error" "wc -l" count.txt
```

## Library use

```python
from pipex.pipeline import run, PipexError

status = run("input.txt", "grep error", "wc -l", "count.txt", {"PATH": "/bin:/usr/bin"})
```

`run` behaves as described in the Command line section. If `env` is omitted or
`None`, it uses a copy of `os.environ`. It raises `PipexError` when the pipe
cannot be created. `main(argv=None)` is the command-line entry point and
returns the exit status.

`pipex.path` resolves commands on its own:

```python
from pipex.path import split_cmd, find_path_value, find_command, resolve_command, CommandNotFound

split_cmd("ls  -l")                                # ["ls", "-l"]
find_path_value({"PATH": "/bin"})                  # "/bin"
find_command("ls", {"PATH": "/bin:/usr/bin"})      # e.g. "/bin/ls", or None
resolve_command(["ls", "-l"], {"PATH": "/bin"})    # raises CommandNotFound if absent
```

`CommandNotFound` carries the command `name` and an `exit_status` of 127.

`pipex.text` holds string helpers:

- `split` and `trim`
- `substr` and `itoa`
- `atoi`, which parses a leading integer after whitespace and one sign
- `bounded_find`, `find_char`, `rfind_char` and `compare_prefix`
- `map_indexed`
- `bounded_copy` and `bounded_concat`, which return the resulting text together
  with the length the full result would need

`pipex.chars` holds character and byte helpers:

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print`
- `to_lower` and `to_upper`
- `find_byte` and `compare_bytes`

The character helpers accept either a one-character string or an integer code.

## What it does not do

- It runs exactly two commands. It does not take longer pipelines.
- It does not read input from a here-document.
- It does no shell parsing. There is no quoting, escaping, globbing or variable
  expansion.
- Command names are always searched for in `PATH`. A name that contains a
  slash is joined to each `PATH` directory like any other name. It is not run
  as a path.