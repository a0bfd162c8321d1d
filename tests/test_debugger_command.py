import pytest

from toolbelt.debugger_command import (
    Back,
    Break,
    Cont,
    Disassemble,
    Info,
    Quit,
    Run,
    parse_command,
)


@pytest.mark.parametrize("word", ["q", "quit"])
def test_quit(word):
    assert parse_command([word]) == Quit()


@pytest.mark.parametrize("word", ["c", "cont", "continue"])
def test_cont(word):
    assert parse_command([word]) == Cont()


@pytest.mark.parametrize("word", ["bt", "back", "backtrace"])
def test_back(word):
    assert parse_command([word]) == Back()


@pytest.mark.parametrize("word", ["r", "run"])
def test_run_keeps_arguments(word):
    assert parse_command([word, "a", "b"]) == Run(("a", "b"))
    assert parse_command([word]) == Run(())


@pytest.mark.parametrize("word", ["b", "break"])
def test_break(word):
    assert parse_command([word, "main"]) == Break("main")
    assert parse_command([word, "*0x401000"]).arg == "*0x401000"


def test_info():
    assert parse_command(["info", "breakpoints"]) == Info("breakpoints")


def test_disassemble_ignores_extra_tokens():
    assert parse_command(["disassemble", "main"]) == Disassemble()


def test_unknown_command():
    assert parse_command(["frobnicate"]) is None


@pytest.mark.parametrize("tokens", [["break"], ["b"], ["info"]])
def test_missing_argument(tokens):
    with pytest.raises(ValueError):
        parse_command(tokens)


def test_empty_tokens():
    with pytest.raises(ValueError):
        parse_command([])