"""Launch the commands listed in a file, one process per line.

Two launch strategies are provided.  ``run_simple`` starts every command
at once and waits for all of them.  ``run_synchronized`` creates every
process first and holds each before it executes its program.  After a
short delay it releases them all with SIGUSR1, then stops them all with
SIGSTOP and continues them all with SIGCONT.
"""

from __future__ import annotations

import os
import signal
import subprocess
import sys
import time
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Optional, TextIO

from opsyskit.p1fxns import atoi, get_word, put_error, put_str, read_line

QUANTUM_ENV = "USPS_QUANTUM_MSEC"
MAX_LINE_SIZE = 4096
MAX_ARGS = 64
START_DELAY = 0.75


@dataclass(frozen=True)
class UspsOptions:
    """Settings taken from the command line and the environment."""

    quantum_ms: int
    command_file: Optional[str] = None


def parse_options(
    argv: list[str], environ: Optional[Mapping[str, str]] = None
) -> UspsOptions:
    """Parse ``-q <msec>`` and an optional command-file argument.

    Unknown options are ignored.  When ``-q`` is absent, the quantum comes
    from ``USPS_QUANTUM_MSEC``.  Raises ValueError if neither gives one.
    """
    if environ is None:
        environ = os.environ
    quantum = -1
    positionals: list[str] = []
    args = iter(argv)
    for arg in args:
        if arg == "--":
            positionals.extend(args)
            break
        if arg.startswith("-") and arg != "-":
            flags = arg[1:]
            for pos, flag in enumerate(flags):
                if flag == "q":
                    value = flags[pos + 1:] or next(args, None)
                    if value is not None:
                        quantum = atoi(value)
                    break
        else:
            positionals.append(arg)

    env_value = environ.get(QUANTUM_ENV)
    if env_value is not None:
        if quantum < 0:
            quantum = atoi(env_value)
    elif quantum < 0:
        raise ValueError("Error: No environment variable set or passed")
    return UspsOptions(quantum, positionals[0] if positionals else None)


def parse_command(line: str) -> list[str]:
    """Split one command line into its words, honouring simple quotes."""
    if line.endswith("\n"):
        line = line[:-1]
    words: list[str] = []
    pos = 0
    while len(words) < MAX_ARGS:
        found = get_word(line, pos)
        if found is None:
            break
        word, pos = found
        words.append(word)
    return words


def read_commands(stream: TextIO) -> list[list[str]]:
    """Read every non-blank line of ``stream`` as a command."""
    commands: list[list[str]] = []
    while line := read_line(stream, MAX_LINE_SIZE):
        words = parse_command(line)
        if words:
            commands.append(words)
    return commands


def run_simple(commands: Iterable[list[str]]) -> list[int]:
    """Start every command, then wait for all; return their exit codes.

    A command that cannot be started is reported on standard error and
    counted as exit code 1.
    """
    processes: list[Optional[subprocess.Popen]] = []
    for argv in commands:
        try:
            processes.append(subprocess.Popen(argv))
        except OSError:
            put_error(sys.stderr, "Error with child process")
            processes.append(None)
    return [1 if proc is None else proc.wait() for proc in processes]


def _spawn_held(argv: list[str]) -> int:
    """Fork a child that waits for SIGUSR1 before executing ``argv``."""
    sys.stdout.flush()
    sys.stderr.flush()
    pid = os.fork()
    if pid:
        return pid
    try:
        signal.sigwait({signal.SIGUSR1})
        signal.pthread_sigmask(signal.SIG_UNBLOCK, {signal.SIGUSR1})
        os.execvp(argv[0], argv)
    except OSError:
        put_error(sys.stderr, "Error with child process execution")
    finally:
        os._exit(1)
    return pid  # not reached


def _send(pid: int, sig: int) -> None:
    try:
        os.kill(pid, sig)
    except ProcessLookupError:
        pass


def run_synchronized(commands: Iterable[list[str]]) -> list[int]:
    """Create all processes held, then release, stop and continue them together.

    Returns the exit code of each command in order.  A command that cannot
    be executed exits with code 1.
    """
    command_list = list(commands)
    if not command_list:
        return []
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, {signal.SIGUSR1})
    try:
        pids = [_spawn_held(argv) for argv in command_list]
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)

    time.sleep(START_DELAY)
    for sig in (signal.SIGUSR1, signal.SIGSTOP, signal.SIGCONT):
        for pid in pids:
            _send(pid, sig)
    return [os.waitstatus_to_exitcode(os.waitpid(pid, 0)[1]) for pid in pids]


def _main(argv: Optional[list[str]], runner) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_options(argv, os.environ)
    except ValueError as err:
        put_str(sys.stderr, str(err))
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
    runner(commands)
    return 0


def main_v1(argv: Optional[list[str]] = None) -> int:
    """Command entry point: launch all commands and wait for them."""
    return _main(argv, run_simple)


def main_v2(argv: Optional[list[str]] = None) -> int:
    """Command entry point: launch all commands held, then release them together."""
    return _main(argv, run_synchronized)