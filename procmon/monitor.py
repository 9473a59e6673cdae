"""A small top-like listing of processes read from /proc."""

from __future__ import annotations

import os
import pwd
import re
import sys
import time
from dataclasses import dataclass
from string import ascii_uppercase
from typing import Iterable, Optional, TextIO

from procmon.status import find_field, is_numeric
from procmon.terminal import terminal_height, terminal_width

HEADER_CUT = 3
_ROUNDS = 10
_INTERVAL = 2
_ROW_FORMAT = "{:<10} {:<15} {:<10} {:<12} {:<10}"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class ProcessInfo:
    """What the listing shows for one process."""

    pid: str
    user: str
    cmd: str
    status: str
    mem: Optional[str] = None


def user_name(uid_field: str) -> Optional[str]:
    """Map the first uid of a ``Uid:`` field to a login name, or None."""
    token = uid_field.split(None, 1)[0] if uid_field.strip() else ""
    match = _LEADING_INT.match(token)
    uid = int(match.group(1)) if match else 0
    try:
        return pwd.getpwuid(uid).pw_name
    except (KeyError, OverflowError):
        return None


def list_pids(proc_root: str = "/proc") -> list[str]:
    """Return the numeric entries of *proc_root* in directory order.

    Raises OSError when the directory cannot be read.
    """
    return [name for name in os.listdir(proc_root) if is_numeric(name)]


def read_process(pid: str, proc_root: str = "/proc") -> Optional[ProcessInfo]:
    """Read name, state and owner of *pid*; None if any of them is missing."""
    path = os.path.join(proc_root, pid, "status")
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            lines = iter(handle)
            cmd = find_field(lines, "Name:")
            if cmd is None:
                return None
            status = find_field(lines, "State:")
            if status is None:
                return None
            uid_field = find_field(lines, "Uid:")
    except OSError:
        return None
    if uid_field is None:
        return None
    user = user_name(uid_field)
    if user is None:
        return None
    return ProcessInfo(pid=pid, user=user, cmd=cmd, status=status)


def collect(user: Optional[str] = None, proc_root: str = "/proc") -> list[ProcessInfo]:
    """Read every process under *proc_root*, optionally only those of *user*."""
    infos = []
    for pid in list_pids(proc_root):
        info = read_process(pid, proc_root)
        if info is None:
            continue
        if user is not None and info.user != user:
            continue
        infos.append(info)
    return infos


def select_rows(infos: Iterable[ProcessInfo], limit: int) -> list[ProcessInfo]:
    """Pick the first process per initial letter A..Z, at most *limit* rows."""
    infos = list(infos)
    rows: list[ProcessInfo] = []
    for letter in ascii_uppercase:
        if len(rows) >= limit:
            break
        match = next((i for i in infos if i.cmd[:1].upper() == letter), None)
        if match is not None:
            rows.append(match)
    return rows


def format_header(width: int) -> str:
    """Return the column titles and a rule *width* characters long."""
    titles = _ROW_FORMAT.format("PID", "STATE", "MEM%", "USER", "COMMAND")
    return f"{titles}\n{'-' * width}\n"


def format_row(info: ProcessInfo) -> str:
    """Return one line of the listing for *info*."""
    mem = info.mem if info.mem is not None else ""
    return _ROW_FORMAT.format(info.pid, info.status, mem, info.user, info.cmd) + "\n"


def render(infos: Iterable[ProcessInfo], width: int, height: int) -> str:
    """Return the whole screen: header and rows that fit in *height*."""
    rows = select_rows(infos, height - HEADER_CUT)
    return format_header(width) + "".join(format_row(info) for info in rows)


def clear_screen(stream: Optional[TextIO] = None) -> None:
    """Reset the terminal so the next screen starts at the top left."""
    out = stream if stream is not None else sys.stdout
    out.write("\033c")
    out.flush()


def main(argv: Optional[list[str]] = None) -> int:
    """Show the process listing ten times, two seconds apart."""
    for _ in range(_ROUNDS):
        clear_screen()
        try:
            infos = collect(None)
        except OSError as exc:
            print(f"opendir: {exc.strerror or exc}", file=sys.stderr)
        else:
            sys.stdout.write(render(infos, terminal_width(), terminal_height()))
            sys.stdout.flush()
        time.sleep(_INTERVAL)
    return 0