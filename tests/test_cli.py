import pytest

from numbasics.cli import main, type_sizes


def test_type_sizes_keys():
    assert set(type_sizes()) == {"int", "float", "double", "char"}


def test_char_is_one_byte():
    assert type_sizes()["char"] == 1


def test_double_at_least_float():
    sizes = type_sizes()
    assert sizes["double"] >= sizes["float"] > 0


def test_hello(capsys):
    assert main(["hello"]) == 0
    assert capsys.readouterr().out.strip() == "Hello, World!"


def test_no_command_greets(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "Hello, World!"


def test_echo(capsys):
    assert main(["echo", "42"]) == 0
    assert capsys.readouterr().out.strip() == "You entered: 42"


def test_echo_rejects_non_integer():
    with pytest.raises(SystemExit) as excinfo:
        main(["echo", "abc"])
    assert excinfo.value.code == 2


def test_sizes_output(capsys):
    assert main(["sizes"]) == 0
    lines = capsys.readouterr().out.splitlines()
    sizes = type_sizes()
    assert lines == [
        f"Size of int: {sizes['int']} bytes",
        f"Size of float: {sizes['float']} bytes",
        f"Size of double: {sizes['double']} bytes",
        f"Size of char: {sizes['char']} byte",
    ]