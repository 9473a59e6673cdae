# procmon

procmon is a small process monitor for Linux, in the style of `top`. It
scans `/proc` and reads each process's name, state and owning user from
`/proc/<pid>/status`. It then prints a table sized to the terminal.

## Installation

```
pip install .
```

## Usage

```
procmon
```

The command takes no options. It runs ten rounds, two seconds apart. Each
round it resets the terminal and prints the table again:

- A header with the columns `PID`, `STATE`, `MEM%`, `USER` and `COMMAND`.
- A ruler as wide as the terminal.
- At most one process for each initial letter of the command name, from `A`
  to `Z`. For each letter it shows the first matching process, in
  directory order.

The list stops once the rows would take up more than the terminal height
minus three lines. If `/proc` cannot be read, an `opendir:` message is
printed to standard error for that round.

A process is left out if its status file cannot be read, if it has no
`Name:`, `State:` or `Uid:` line, or if its uid has no entry in the
password database.

## Using it from Python

```python
from procmon.monitor import collect, render

infos = collect(user=None, proc_root="/proc")
print(render(infos, width=80, height=24), end="")
```

`procmon.monitor`:

- `ProcessInfo` is a dataclass with the fields `pid`, `user`, `cmd`,
  `status` and `mem`. `mem` defaults to `None`.
- `list_pids(proc_root)` returns the numeric entries of the directory.
- `read_process(pid, proc_root)` reads one process. It returns `None` if
  the process cannot be read.
- `collect(user, proc_root)` reads every process. When `user` is given, it
  keeps only that user's processes.
- `user_name(uid_field)` maps the first uid in a `Uid:` value to a login
  name.
- `select_rows(infos, limit)`, `format_header(width)`, `format_row(info)`
  and `render(infos, width, height)` build the table as text.
- `clear_screen(stream)` writes the terminal reset sequence. It writes to
  standard output by default.
- `main(argv)` is the `procmon` command.

`procmon.status`:

- `is_numeric`, `field_value` and `find_field` parse `Key: value` lines.

`procmon.terminal`:

- `terminal_height()` returns the terminal's row count. It falls back to
  24 when the size is unknown.
- `terminal_width()` returns the terminal's column count. It falls back to
  80 when the size is unknown, and also when the terminal reports 24
  columns.

## Limitations

- The `MEM%` column is always empty. Memory use is never read.
- No CPU usage is shown.
- The table shows at most one process per initial letter.
- The command has no options: it cannot filter by user, change the refresh
  interval or run until interrupted. Filtering by user is available only
  through `collect`.

## Tests

```
pip install .[test]
pytest
```