import io
import sys

import pytest

from opsyskit.usps_launch import (
    QUANTUM_ENV,
    UspsOptions,
    main_v1,
    main_v2,
    parse_command,
    parse_options,
    read_commands,
    run_simple,
    run_synchronized,
)


def _exit_with(code):
    return [sys.executable, "-c", f"raise SystemExit({code})"]


def test_quantum_from_option():
    assert parse_options(["-q", "250"], {}) == UspsOptions(250, None)


def test_quantum_attached_to_option():
    assert parse_options(["-q250"], {}).quantum_ms == 250


def test_quantum_from_environment():
    assert parse_options([], {QUANTUM_ENV: "100"}).quantum_ms == 100


def test_option_overrides_environment():
    assert parse_options(["-q", "250"], {QUANTUM_ENV: "100"}).quantum_ms == 250


def test_missing_quantum_is_an_error():
    with pytest.raises(ValueError, match="No environment variable set or passed"):
        parse_options(["commands.txt"], {})


def test_command_file_and_unknown_options():
    options = parse_options(["-x", "cmds.txt", "-q", "5"], {})
    assert options.command_file == "cmds.txt"
    assert options.quantum_ms == 5


def test_parse_command_with_quotes():
    assert parse_command("ls -l 'my file' \"two words\"\n") == [
        "ls",
        "-l",
        "my file",
        "two words",
    ]


def test_parse_command_blank_line():
    assert parse_command("   \n") == []


def test_read_commands_skips_blank_lines():
    stream = io.StringIO("echo a\n\nsleep 1\n")
    assert read_commands(stream) == [["echo", "a"], ["sleep", "1"]]


def test_run_simple_exit_codes():
    assert run_simple([_exit_with(3), _exit_with(0)]) == [3, 0]


def test_run_simple_missing_program(capsys):
    codes = run_simple([["/nonexistent/program/for/test"]])
    assert codes == [1]
    assert "Error with child process" in capsys.readouterr().err


def test_run_synchronized_exit_codes():
    assert run_synchronized([_exit_with(3), _exit_with(0)]) == [3, 0]


def test_run_synchronized_missing_program():
    assert run_synchronized([["/nonexistent/program/for/test"]]) == [1]


def test_run_synchronized_no_commands():
    assert run_synchronized([]) == []


def _write_command_file(tmp_path, target):
    script = f"open(r'{target}', 'w').write('done')"
    commands = tmp_path / "commands.txt"
    commands.write_text(f'"{sys.executable}" -c "{script}"\n')
    return commands


def test_main_v1_runs_commands(tmp_path, monkeypatch):
    monkeypatch.delenv(QUANTUM_ENV, raising=False)
    target = tmp_path / "out.txt"
    commands = _write_command_file(tmp_path, target)
    assert main_v1(["-q", "100", str(commands)]) == 0
    assert target.read_text() == "done"


def test_main_v2_runs_commands(tmp_path, monkeypatch):
    monkeypatch.setenv(QUANTUM_ENV, "100")
    target = tmp_path / "out.txt"
    commands = _write_command_file(tmp_path, target)
    assert main_v2([str(commands)]) == 0
    assert target.read_text() == "done"


def test_main_without_quantum_fails(monkeypatch, capsys):
    monkeypatch.delenv(QUANTUM_ENV, raising=False)
    assert main_v1([]) == 1
    assert "No environment variable set or passed" in capsys.readouterr().err


def test_main_missing_file_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv(QUANTUM_ENV, "100")
    assert main_v1([str(tmp_path / "absent.txt")]) == 1
    assert "Error: opening commands file" in capsys.readouterr().err