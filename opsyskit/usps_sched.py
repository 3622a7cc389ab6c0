"""Round-robin scheduling of the commands listed in a file.

Every command is started as a process that stops itself before it executes
its program.  The scheduler then continues one process at a time for a
fixed quantum, stopping it again and putting it at the back of the queue
if it has not finished.  The monitoring variant prints a status table,
built from ``/proc/<pid>/stat``, at the start of every time slice.
"""

from __future__ import annotations

import os
import signal
import sys
import time
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Optional

from opsyskit.p1fxns import put_error, put_str
from opsyskit.usps_launch import parse_options, read_commands

HEADER = "PID\t\tCommand\t\tUtime\t\t\tMemory\t\t\tRunning"
_POLL_SECONDS = 0.005

Monitor = Callable[[list[int], int, int], None]


@dataclass
class _Job:
    index: int
    pid: int


def read_proc_stat(pid: int) -> dict[str, Any]:
    """Read ``/proc/<pid>/stat`` and return its main fields.

    The result holds ``pid``, ``command``, ``state``, ``utime`` (clock
    ticks in user mode) and ``vsize`` (virtual memory size in bytes).
    Raises OSError when the process has no entry.
    """
    with open(f"/proc/{pid}/stat", encoding="utf-8", errors="replace") as stat:
        text = stat.read()
    head, _, tail = text.rpartition(")")
    pid_text, _, command = head.partition(" (")
    fields = tail.split()
    # fields[0] is field 3 of the file, so field n is fields[n - 3]
    return {
        "pid": int(pid_text),
        "command": command,
        "state": fields[0],
        "utime": int(fields[11]),
        "vsize": int(fields[20]),
    }


def format_status(pids: Iterable[int], current_pid: int, elapsed_ms: int) -> str:
    """Build the status table for ``pids``, marking ``current_pid`` as running."""
    pid_list = list(pids)
    lines = [
        HEADER,
        f"Number of processes: {len(pid_list)}\t\t\t"
        f"Current process: {current_pid}\t\t\t"
        f"Time Running: {elapsed_ms}",
    ]
    for pid in pid_list:
        try:
            stat = read_proc_stat(pid)
        except (OSError, ValueError, IndexError):
            command = utime = vsize = "-"
        else:
            command, utime, vsize = stat["command"], stat["utime"], stat["vsize"]
        running = "Yes" if pid == current_pid else "No"
        lines.append(f"{pid}\t\t{command}\t\t{utime}\t\t\t{vsize}\t\t\t{running}")
    return "\n".join(lines)


def _spawn_stopped(argv: list[str]) -> int:
    """Fork a child that stops itself, then executes ``argv`` once continued."""
    sys.stdout.flush()
    sys.stderr.flush()
    pid = os.fork()
    if pid:
        return pid
    try:
        os.kill(os.getpid(), signal.SIGSTOP)
        os.execvp(argv[0], argv)
    except OSError:
        put_error(sys.stderr, "Error with child process execution")
    finally:
        os._exit(1)
    return pid  # not reached


def _run_slice(pid: int, quantum_ms: int) -> Optional[int]:
    """Continue ``pid`` for one quantum; return its exit code or None if preempted."""
    os.kill(pid, signal.SIGCONT)
    if quantum_ms <= 0:
        _, status = os.waitpid(pid, 0)
        return os.waitstatus_to_exitcode(status)
    deadline = time.monotonic() + quantum_ms / 1000
    while True:
        done, status = os.waitpid(pid, os.WNOHANG)
        if done:
            return os.waitstatus_to_exitcode(status)
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            break
        time.sleep(min(_POLL_SECONDS, remaining))
    try:
        os.kill(pid, signal.SIGSTOP)
    except ProcessLookupError:
        pass
    _, status = os.waitpid(pid, os.WUNTRACED)
    if os.WIFSTOPPED(status):
        return None
    return os.waitstatus_to_exitcode(status)


def run_round_robin(
    commands: Iterable[list[str]],
    quantum_ms: int,
    monitor: Optional[Monitor] = None,
) -> list[int]:
    """Run ``commands`` one at a time in slices of ``quantum_ms`` milliseconds.

    A quantum of zero or less lets each process run to completion.  Before
    every slice, ``monitor`` (when given) is called with the pids still
    unfinished, the pid about to run and the milliseconds of preempted
    slices so far.  Returns each command's exit code in order; a command
    that cannot be executed exits with code 1.
    """
    command_list = list(commands)
    results: list[Optional[int]] = [None] * len(command_list)
    queue: deque[_Job] = deque()
    for index, argv in enumerate(command_list):
        pid = _spawn_stopped(argv)
        _, status = os.waitpid(pid, os.WUNTRACED)
        if os.WIFSTOPPED(status):
            queue.append(_Job(index, pid))
        else:
            results[index] = os.waitstatus_to_exitcode(status)

    elapsed_ms = 0
    while queue:
        job = queue.popleft()
        if monitor is not None:
            live = sorted([job, *queue], key=lambda j: j.index)
            monitor([j.pid for j in live], job.pid, elapsed_ms)
        code = _run_slice(job.pid, quantum_ms)
        if code is None:
            elapsed_ms += quantum_ms
            queue.append(job)
        else:
            results[job.index] = code
    return [1 if code is None else code for code in results]


def _print_status(pids: list[int], current_pid: int, elapsed_ms: int) -> None:
    put_str(sys.stdout, format_status(pids, current_pid, elapsed_ms) + "\n")


def _main(argv: Optional[list[str]], monitor: Optional[Monitor]) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_options(argv, os.environ)
    except ValueError as err:
        put_str(sys.stderr, str(err))
        return 1
    if options.quantum_ms < 0:
        put_str(sys.stderr, "Error: No quantum given")
        return 1
    if options.command_file is None:
        commands = read_commands(sys.stdin)
    else:
        try:
            stream = open(options.command_file, encoding="utf-8")
        except OSError:
            put_str(sys.stderr, "Error: opening commands file")
            return 1
        with stream:
            commands = read_commands(stream)
    run_round_robin(commands, options.quantum_ms, monitor)
    return 0


def main_v3(argv: Optional[list[str]] = None) -> int:
    """Command entry point: schedule the commands round robin."""
    return _main(argv, None)


def main_v4(argv: Optional[list[str]] = None) -> int:
    """Command entry point: schedule round robin, printing a status table per slice."""
    return _main(argv, _print_status)