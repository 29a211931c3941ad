# pipex

`pipex` runs two commands joined by a pipe. The first command reads from an
input file, and the second command writes to an output file. The call

```
pipex infile "cmd1" "cmd2" outfile
```

does the same work as the shell line

```
< infile cmd1 | cmd2 > outfile
```

## Installation

```
pip install .
```

This installs the `pipex` command. The same entry point can also be started
with `python -m pipex.cli`.

## Usage

```
pipex input.txt "grep hello" "wc -l" output.txt
```

- Each command is split on spaces. Quoting inside a command is not supported.
- The first word of each command is looked up in the directories listed in
  `PATH`. A name that is not found there is tried relative to the working
  directory (a name that already contains `/` is used as given).
- The output file is created with mode `0777` (less the umask) if it does not
  exist, and is truncated if it does.
- If the input file cannot be opened, the first command is not run and the
  second command reads empty input.
- If the output file cannot be opened, neither command writes it and the exit
  status is 0.
- Passing the wrong number of arguments, or an empty command, prints
  `./pipex infile cmd outfile` to standard error and exits with status 1.
- With an empty environment the command exits with status 1 without running
  anything.
- A command that cannot be started prints
  `pipex: command not found: <name>` to standard error. If it is the second
  command, the exit status is 1.
- Otherwise the exit status is that of the second command; a command killed
  by a signal gives 128 plus the signal number.

## Library use

`pipex.cli.run(infile, cmd1, cmd2, outfile, env=None)` runs the pipeline
without going through the command line and returns the exit status described
above. `env` may be a mapping or a sequence of `NAME=value` strings; it
defaults to `os.environ`. An empty command raises `pipex.cli.UsageError`.
`pipex.cli.main(argv=None)` is the command-line entry point and returns the
exit status.

`pipex.environment` has:

- `get_env(name, env)`: the value of `name` in a mapping or in a sequence of
  `NAME=value` strings (the first matching entry wins), or `None`.
- `find_executable(cmd, env)`: `directory/word` for the first `PATH`
  directory holding an executable named after the first word of `cmd`, or
  `cmd` unchanged when there is none.

Some smaller helpers come with the package as well:

- `pipex.strings`:
  - `split(s, sep)` splits on a single character and drops empty fields.
  - `atoi(s)` parses a leading decimal integer after optional whitespace and
    one sign; a value above 2147483647 gives -1 and one below -2147483648
    gives 0.
  - `itoa(n)` renders a 32-bit signed integer and raises `OverflowError`
    outside that range.
  - `strtrim(s, charset)`, `substr(s, start, length)`,
    `strnstr(haystack, needle, length)` (the rest of `haystack` from the
    match, or `None`) and `strcmp(a, b)` (difference of the first mismatching
    characters; a `None` first argument gives 1).
- `pipex.printf`: `format_printf(fmt, *args)` returns the formatted text and
  `printf(fmt, *args)` writes it to standard output and returns its length.
  They handle `%c %s %p %d %i %u %x %X %%`. `%s` of `None` gives `(null)`,
  `%p` of `None` gives `0x0`, integers are wrapped to 32 bits, and an unknown
  conversion consumes its argument and prints nothing. Too few arguments
  raise `TypeError`; a trailing lone `%` raises `ValueError`.
- `pipex.lines`: `LineReader(fd, buffer_size=42)` reads a file descriptor one
  line at a time; `next_line()` returns each line with its newline, or `None`
  at the end, and the reader can be iterated. `read_lines(fd, buffer_size=42)`
  yields every remaining line.

## Limits

`pipex` joins exactly two commands. It does not chain more than two, does not
read input from a here-document, and does not interpret shell syntax such as
quotes, variables or globs inside a command.

## Running the tests

```
pip install ".[test]"
pytest
```