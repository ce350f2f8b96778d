"""Tests for the prints console command."""

import pytest
from beartype.roar import BeartypeCallHintParamViolation

from purecmd import map_effect, print_, prints, replace_with, sequence


def test_prints_writes_one_line_and_returns_value(capsys) -> None:
    assert prints("hi")() == "hi"

    assert capsys.readouterr().out == "hi\n"


def test_prints_is_deferred(capsys) -> None:
    prints("not yet")

    assert capsys.readouterr().out == ""


def test_prints_reruns_on_each_invocation(capsys) -> None:
    """Invoking the same command twice writes the line twice."""
    c = prints("again")
    c()
    c()

    assert capsys.readouterr().out == "again\nagain\n"


def test_sequence_of_prints(capsys) -> None:
    c = sequence(prints("a"), prints("b"))

    assert c() == "b"
    assert capsys.readouterr().out == "a\nb\n"


def test_map_effect_over_prints_adds_no_output(capsys) -> None:
    c = map_effect(len, prints("four"))

    assert c() == 4
    assert capsys.readouterr().out == "four\n"


def test_replace_with_over_prints(capsys) -> None:
    assert replace_with(0, prints("x"))() == 0
    assert capsys.readouterr().out == "x\n"


def test_prints_requires_str() -> None:
    with pytest.raises(BeartypeCallHintParamViolation):
        prints(42)


def test_print_alias() -> None:
    assert print_ is prints


def test_prints_logs_through_loguru(loguru_records, capsys) -> None:
    prints("logged")()

    assert [record["message"] for record in loguru_records] == ["prints: 'logged'"]
    assert loguru_records[0]["extra"]["component"] == "purecmd"
    assert capsys.readouterr().out == "logged\n"
