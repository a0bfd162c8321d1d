# toolbelt

A handful of small command-line utilities, each usable from the shell and as
a Python library.

## Installation

```
pip install .
```

Install the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### `rdiff`

Compares two text files line by line, using a longest-common-subsequence
table, and prints a blank line followed by every line with a marker:

- `  ` (two spaces): the line is in both files
- `< `: the line is only in the first file
- `> `: the line is only in the second file

```
rdiff old.txt new.txt
```

At least two file names are required; with fewer, `rdiff` prints
`Too few arguments.` and exits with status 1. If a file cannot be read, it
prints an error to standard error and exits with status 1.

### `toolbelt-wc`

Counts lines, words and bytes and prints them as `lines words bytes`. With no
arguments it reads standard input; otherwise it reports on each file named on
the command line, followed by the file name.

```
toolbelt-wc notes.txt report.txt
cat notes.txt | toolbelt-wc
```

A word is counted wherever a letter, digit or ASCII punctuation byte follows
ASCII whitespace, plus one for any non-empty input. If a file cannot be
opened, an error is printed to standard error and the exit status is 1.

### `inspect-fds`

Shows the open file descriptors of a running process and of its children.
The target is given either as a command name or as a process id:

```
inspect-fds 5612
inspect-fds my_server
```

For every descriptor it prints the descriptor number, the access mode
(`read`, `write` or `read/write`), the cursor position and the file name.
Terminals are shown as `<terminal>` and pipes as `<pipe #N>`; pipe names are
coloured so that every descriptor on the same pipe shares a colour.

If the target matches no running process, or `ps`/`pgrep` fail, the command
prints an error and exits with status 1. This command works on Linux only: it
reads `/proc` and runs `ps` and `pgrep`.

## Library use

- `toolbelt.grid.Grid`: a fixed-size two-dimensional grid of integers with
  `get` (returns `None` out of bounds), `set` (raises `IndexError` out of
  bounds), `size`, `rows`, `clear` and `display`.
- `toolbelt.rdiff`: `read_file_lines`, `lcs` (builds the LCS table as a
  `Grid`) and `diff_lines` (yields the marked diff lines).
- `toolbelt.wc`: `count` reads a binary stream and returns a `FileInfo` with
  `lines`, `words`, `characters` (ASCII bytes) and `bytes`.
- `toolbelt.debugger_command`: `parse_command` turns a list of tokens into
  one of the command objects `Quit`, `Cont`, `Back`, `Break`, `Info`, `Run`
  or `Disassemble`, or `None` for an unknown command. It raises `ValueError`
  for an empty token list, or when `break` or `info` lacks its argument.
- `toolbelt.open_file`: `OpenFile.from_fd`, `AccessMode`, and the helpers
  `path_to_name`, `parse_cursor` and `parse_access_mode` for
  `/proc/<pid>/fdinfo` text.
- `toolbelt.process`: `Process` with `list_fds`, `list_open_files` and
  `print`.
- `toolbelt.ps_utils`: `get_target`, `get_process`, `get_child_processes`,
  `get_pid_by_command_name` and `parse_ps_line`; failures to run or parse
  `ps` and `pgrep` raise `PsError`.

```python
from toolbelt.rdiff import lcs, diff_lines

old = ["a", "b", "c"]
new = ["a", "c", "d"]
for line in diff_lines(lcs(old, new), old, new):
    print(line)
```

## What this package does not do

`toolbelt.debugger_command` only parses debugger commands. The package has no
debugger: it cannot start or trace a program, set breakpoints in a running
process, print backtraces, read debugging symbols or disassemble code, and it
has no interactive debugger prompt.