import json

import pytest

from dfa_validators.cli import EXIT_ALPHABET_VIOLATION, build_parser, main, protect_positionals
from dfa_validators.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    monkeypatch.delenv("DFA_VALIDATORS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DFA_VALIDATORS_LOG_JSON", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_valid(capsys):
    assert main(["floating-point", "12.5e-3"]) == 0
    out, err = capsys.readouterr()
    assert out == "The input string is valid\n"

def test_not_valid(capsys):
    assert main(["java-identifier", "_"]) == 0
    out, err = capsys.readouterr()
    assert out == "The input string is not valid\n"

def test_name_with_reference(capsys):
    assert main(["name-minus-one", "Alicf", "Alice"]) == 0
    assert capsys.readouterr().out == "The input string is valid\n"
    assert main(["name-minus-one", "Bob", "Alice"]) == 0
    assert capsys.readouterr().out == "The input string is not valid\n"

def test_alphabet_violation(capsys):
    assert main(["three-zeros", "0102"]) == EXIT_ALPHABET_VIOLATION
    out, err = capsys.readouterr()
    assert out == ""
    assert "Invalid character '2' at index 3 in input string 0102" in err

def test_missing_arguments(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["name-minus-one", "Alicf"])
    assert excinfo.value.code == 2
    with pytest.raises(SystemExit) as excinfo:
        main(["floating-point"])
    assert excinfo.value.code == 2
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2
    assert capsys.readouterr().out == ""

def test_unknown_language():
    with pytest.raises(SystemExit) as excinfo:
        main(["cobol-identifier", "x"])
    assert excinfo.value.code == 2

def test_list(capsys):
    assert main(["--list"]) == 0
    out = capsys.readouterr().out
    assert len(out.splitlines()) == 11
    assert out.startswith("three-zeros")

def test_verbose_logs_to_stderr(capsys):
    assert main(["-v", "last-three-a", "bba"]) == 0
    out, err = capsys.readouterr()
    assert out == "The input string is valid\n"
    assert "scan finished" in err

def test_log_level_from_environment(capsys, monkeypatch):
    monkeypatch.setenv("DFA_VALIDATORS_LOG_LEVEL", "info")
    assert main(["block-comment", "/*a*b/"]) == EXIT_ALPHABET_VIOLATION
    err = capsys.readouterr().err
    assert "alphabet violation" in err
    assert "scan finished" not in err

def test_json_logs(capsys, monkeypatch):
    monkeypatch.setenv("DFA_VALIDATORS_LOG_JSON", "true")
    monkeypatch.setenv("DFA_VALIDATORS_LOG_LEVEL", "debug")
    assert main(["last-three-a", "bba"]) == 0
    out, err = capsys.readouterr()
    assert out == "The input string is valid\n"
    records = [json.loads(line) for line in err.splitlines() if line.strip()]
    finished = [record for record in records if record["event"] == "scan finished"]
    assert len(finished) == 1
    assert finished[0]["language"] == "last-three-a"
    assert finished[0]["verdict"] == "Accepted"

def test_inputs_starting_with_dash(capsys):
    assert main(["floating-point", "-1e5"]) == 0
    assert capsys.readouterr().out == "The input string is valid\n"
    assert main(["floating-point", "-3.5e-2"]) == 0
    assert capsys.readouterr().out == "The input string is valid\n"
    assert main(["-v", "floating-point", "--", "-3"]) == 0
    assert capsys.readouterr().out == "The input string is valid\n"
    assert main(["java-identifier", "-x"]) == EXIT_ALPHABET_VIOLATION
    assert "Invalid character '-' at index 0 in input string -x" in capsys.readouterr().err
    assert main(["name-minus-one", "-lice", "Alice"]) == 0
    assert capsys.readouterr().out == "The input string is valid\n"

def test_options_go_before_language():
    # everything after the language name is an input, so a trailing -v is an extra argument
    with pytest.raises(SystemExit) as excinfo:
        main(["last-three-a", "bba", "-v"])
    assert excinfo.value.code == 2

def test_protect_positionals():
    assert protect_positionals(["floating-point", "-1e5"]) == ["floating-point", "--", "-1e5"]
    assert protect_positionals(["-v", "floating-point", "1"]) == ["-v", "floating-point", "--", "1"]
    assert protect_positionals(["floating-point", "--", "-1"]) == ["floating-point", "--", "-1"]
    assert protect_positionals(["--list"]) == ["--list"]
    assert protect_positionals(["cobol", "floating-point"]) == ["cobol", "floating-point"]

def test_parser_context_argument():
    parser = build_parser()
    args = parser.parse_args(["name-minus-one", "Alicf", "Alice"])
    assert (args.language, args.input, args.context) == ("name-minus-one", "Alicf", "Alice")
    args = parser.parse_args(["student-id", "24Bianchi"])
    assert not hasattr(args, "context")
