import os
import sys

import pytest

from opsyskit.usps_sched import (
    HEADER,
    format_status,
    main_v3,
    main_v4,
    read_proc_stat,
    run_round_robin,
)

PY = sys.executable


def test_read_proc_stat_of_self():
    stat = read_proc_stat(os.getpid())
    assert stat["pid"] == os.getpid()
    assert stat["utime"] >= 0
    assert stat["vsize"] >= 0
    assert 1 <= len(stat["command"]) <= 15


def test_read_proc_stat_missing_process():
    with pytest.raises(OSError):
        read_proc_stat(999999999)


def test_format_status_layout():
    me = os.getpid()
    missing = 999999999
    text = format_status([me, missing], me, 40)
    lines = text.split("\n")
    assert lines[0] == HEADER
    assert lines[1].startswith("Number of processes: 2\t\t\t")
    assert f"Current process: {me}" in lines[1]
    assert lines[1].endswith("Time Running: 40")
    assert len(lines) == 4
    assert lines[2].startswith(f"{me}\t\t")
    assert lines[2].endswith("Yes")
    assert lines[3] == f"{missing}\t\t-\t\t-\t\t\t-\t\t\tNo"


def test_format_status_empty():
    text = format_status([], 0, 0)
    assert text.split("\n")[0] == HEADER
    assert len(text.split("\n")) == 2


def test_round_robin_exit_codes():
    commands = [
        [PY, "-c", "pass"],
        [PY, "-c", "import sys; sys.exit(3)"],
    ]
    assert run_round_robin(commands, 20) == [0, 3]


def test_round_robin_unknown_command_exits_one():
    assert run_round_robin([["no-such-command-opsyskit"]], 20) == [1]


def test_round_robin_zero_quantum_runs_to_completion():
    calls = []
    codes = run_round_robin(
        [[PY, "-c", "pass"], [PY, "-c", "pass"]],
        0,
        lambda pids, cur, el: calls.append((list(pids), cur, el)),
    )
    assert codes == [0, 0]
    assert len(calls) == 2
    assert all(el == 0 for _, _, el in calls)


def test_round_robin_monitor_invariants():
    calls = []
    commands = [
        [PY, "-c", "import time; time.sleep(0.3)"],
        [PY, "-c", "pass"],
    ]
    codes = run_round_robin(
        commands, 20, lambda pids, cur, el: calls.append((list(pids), cur, el))
    )
    assert codes == [0, 0]
    assert len(calls) > 2
    assert all(cur in pids for pids, cur, _ in calls)
    elapsed = [el for _, _, el in calls]
    assert elapsed == sorted(elapsed)
    assert all(el % 20 == 0 for el in elapsed)
    assert len(calls[0][0]) == 2


def test_round_robin_empty():
    assert run_round_robin([], 20) == []


def test_main_v3_with_file(tmp_path):
    path = tmp_path / "cmds.txt"
    path.write_text(f"{PY} -c pass\n\n{PY} -c pass\n")
    assert main_v3(["-q", "20", str(path)]) == 0


def test_main_v3_quantum_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "cmds.txt"
    path.write_text(f"{PY} -c pass\n")
    monkeypatch.setenv("USPS_QUANTUM_MSEC", "20")
    assert main_v3([str(path)]) == 0


def test_main_v3_without_quantum(tmp_path, monkeypatch):
    path = tmp_path / "cmds.txt"
    path.write_text(f"{PY} -c pass\n")
    monkeypatch.delenv("USPS_QUANTUM_MSEC", raising=False)
    assert main_v3([str(path)]) == 1


def test_main_v3_missing_file(tmp_path):
    assert main_v3(["-q", "20", str(tmp_path / "absent.txt")]) == 1


def test_main_v4_prints_status(tmp_path, capsys):
    path = tmp_path / "cmds.txt"
    path.write_text(f"{PY} -c pass\n")
    assert main_v4(["-q", "20", str(path)]) == 0
    out = capsys.readouterr().out
    assert HEADER in out
    assert "Number of processes: 1" in out