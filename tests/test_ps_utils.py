import subprocess
from unittest.mock import patch

import pytest

from toolbelt import ps_utils
from toolbelt.process import Process
from toolbelt.ps_utils import (
    PsError,
    get_child_processes,
    get_pid_by_command_name,
    get_process,
    get_target,
    parse_ps_line,
)


def _fake_run(outputs):
    calls = []

    def run(args, **kwargs):
        calls.append(list(args))
        key = (args[0], args[1])
        stdout = outputs.get(key, b"")
        return subprocess.CompletedProcess(args, 0, stdout=stdout, stderr=b"")

    return run, calls


def test_parse_ps_line():
    assert parse_ps_line("  578   577 emacs inode.c") == Process(578, 577, "emacs inode.c")


def test_parse_ps_line_missing_second_column():
    with pytest.raises(PsError, match="Missing second column"):
        parse_ps_line("578")


def test_parse_ps_line_missing_third_column():
    with pytest.raises(PsError, match="Missing third column"):
        parse_ps_line("578 577")


def test_parse_ps_line_bad_integer():
    with pytest.raises(PsError, match="Error parsing integer"):
        parse_ps_line("abc 1 sh")


def test_get_target_success():
    run, calls = _fake_run(
        {
            ("pgrep", "-xU"): b"4242\n4243\n",
            ("ps", "--pid"): b" 4242  100 ./multi_pipe_test\n",
        }
    )
    with patch.object(ps_utils.subprocess, "run", side_effect=run):
        found = get_target("multi_pipe_test")
    assert found == Process(4242, 100, "./multi_pipe_test")
    assert calls[1][:3] == ["ps", "--pid", "4242"]


def test_get_target_invalid_command():
    run, calls = _fake_run({})
    with patch.object(ps_utils.subprocess, "run", side_effect=run):
        assert get_target("asdflksadfasdf") is None
    assert len(calls) == 1


def test_get_target_invalid_pid():
    run, calls = _fake_run({})
    with patch.object(ps_utils.subprocess, "run", side_effect=run):
        assert get_target("1234567890") is None
    assert calls[1][:3] == ["ps", "--pid", "1234567890"]


def test_get_process_found():
    run, _ = _fake_run({("ps", "--pid"): b"  7  1 /sbin/init splash\n"})
    with patch.object(ps_utils.subprocess, "run", side_effect=run):
        assert get_process(7) == Process(7, 1, "/sbin/init splash")


def test_get_child_processes():
    run, _ = _fake_run({("ps", "--ppid"): b"  10  5 sort\n  11  5 uniq -c\n"})
    with patch.object(ps_utils.subprocess, "run", side_effect=run):
        assert get_child_processes(5) == [Process(10, 5, "sort"), Process(11, 5, "uniq -c")]


def test_get_pid_by_command_name_bad_output():
    run, _ = _fake_run({("pgrep", "-xU"): b"notanumber\n"})
    with patch.object(ps_utils.subprocess, "run", side_effect=run):
        with pytest.raises(PsError, match="Error parsing integer"):
            get_pid_by_command_name("x")


def test_non_utf8_output():
    run, _ = _fake_run({("ps", "--pid"): b"\xff\xfe"})
    with patch.object(ps_utils.subprocess, "run", side_effect=run):
        with pytest.raises(PsError, match="not utf-8"):
            get_process(1)


def test_missing_executable():
    with patch.object(ps_utils.subprocess, "run", side_effect=FileNotFoundError("ps")):
        with pytest.raises(PsError, match="Error executing ps"):
            get_child_processes(1)