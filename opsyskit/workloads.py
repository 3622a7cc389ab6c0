"""Synthetic CPU-bound and I/O-bound workloads that run for a set time."""

from __future__ import annotations

import getopt
import os
import re
import sys
import time
from typing import Optional, TextIO

_USAGE = "usage: {prog} [-m <minutes>] [-n <name>]"
_CPU_BATCH = 300_000_000
_IO_BATCH = 6_000_000
_IO_BLOCK = bytes(1000)
_CHECK_EVERY = 100_000
_IO_CHECK_EVERY = 1_000


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def parse_options(argv: list[str], default_name: str) -> tuple[int, str]:
    """Parse ``-m <minutes>`` and ``-n <name>``; return ``(minutes, name)``.

    Raises ValueError naming the offending option when one is not recognised
    or lacks its argument.
    """
    minutes = 1
    name = default_name
    try:
        opts, _ = getopt.getopt(argv, "m:n:")
    except getopt.GetoptError as err:
        raise ValueError(f"illegal option: -{err.opt}") from err
    for opt, value in opts:
        if opt == "-m":
            minutes = _atoi(value)
        else:
            name = value
    return minutes, name


def _deadline(minutes: float) -> Optional[float]:
    # A zero or negative alarm is never delivered: the workload runs forever.
    if minutes <= 0:
        return None
    return time.monotonic() + 60 * minutes


def _expired(deadline: Optional[float]) -> bool:
    return deadline is not None and time.monotonic() >= deadline


def cpu_bound(minutes: float, name: str, out: TextIO) -> int:
    """Spin the CPU for ``minutes``, writing ``"<name>: 0"`` at each batch start.

    Returns the number of status lines written.
    """
    deadline = _deadline(minutes)
    lines = 0
    while not _expired(deadline):
        for i in range(_CPU_BATCH):
            if i % _CPU_BATCH == 0:
                out.write(f"{name}: 0\n")
                out.flush()
                lines += 1
            if i % _CHECK_EVERY == 0 and _expired(deadline):
                break
    return lines


def io_bound(minutes: float, name: str) -> int:
    """Write 1000-byte blocks to the null device for ``minutes``.

    Returns the number of blocks written.
    """
    del name  # accepted for symmetry with cpu_bound; nothing is printed
    deadline = _deadline(minutes)
    writes = 0
    with open(os.devnull, "wb", buffering=0) as sink:
        while not _expired(deadline):
            for j in range(_IO_BATCH):
                sink.write(_IO_BLOCK)
                writes += 1
                if j % _IO_CHECK_EVERY == 0 and _expired(deadline):
                    break
    return writes


def _run(argv: Optional[list[str]], prog: str, worker) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        minutes, name = parse_options(argv, format(os.getpid(), "x"))
    except ValueError as err:
        print(err, file=sys.stderr)
        print(_USAGE.format(prog=prog), file=sys.stderr)
        return 1
    worker(minutes, name)
    return 0


def cpubound_main(argv: Optional[list[str]] = None) -> int:
    """Command entry point for the CPU-bound workload."""
    return _run(argv, "cpubound", lambda m, n: cpu_bound(m, n, sys.stdout))


def iobound_main(argv: Optional[list[str]] = None) -> int:
    """Command entry point for the I/O-bound workload."""
    return _run(argv, "iobound", io_bound)