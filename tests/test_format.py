# tests/test_format.py

from __future__ import annotations

import pytest

from namefully import Config, Namefully, NotAllowedError, Title
from namefully.core.exceptions import ExceptionKind
from namefully.formatting import NameFormatter


@pytest.fixture()
def name() -> Namefully:
    return Namefully("Mr John Ben Smith Ph.D")


@pytest.mark.parametrize(
    "pattern, expected",
    [
        ("official", "Mr SMITH, John Ben Ph.D"),
        ("o", "Mr SMITH, John Ben Ph.D"),
        ("O", "MR SMITH, JOHN BEN PH.D"),
        ("short", "John Smith"),
        ("long", "John Ben Smith"),
        ("public", "John S"),
        ("b", "John Ben Smith"),
        ("B", "JOHN BEN SMITH"),
        ("f", "John"),
        ("F", "JOHN"),
        ("l, f", "Smith, John"),
        ("L, f m", "SMITH, John Ben"),
        ("p f l s", "Mr John Smith Ph.D"),
        ("P S", "MR PH.D"),
        ("$F.$M.$L", "J.B.S"),
        ("f $m. l", "John B. Smith"),
        ("f $l", "John S"),
        ("f-l", "John-Smith"),
        ("f_l", "John_Smith"),
        ("  f  ", "John"),
    ],
)
def test_format_patterns(name, pattern, expected):
    assert name.format(pattern) == expected


def test_default_pattern_is_official(name):
    assert name.format() == "Mr SMITH, John Ben Ph.D"


def test_initial_mark_before_other_directive_gives_nothing(name):
    assert name.format("f$b") == "John"
    assert name.format("$.f") == "John"


def test_missing_parts_render_empty():
    name = Namefully("John Smith")
    assert name.format("p f $m l s") == "John  Smith"
    assert name.format("o") == "SMITH, John"


def test_official_with_ending_and_us_title():
    name = Namefully("Mr John Ben Smith Ph.D", Config(ending=True, title=Title.US))
    assert name.format("o") == "Mr. SMITH, John Ben, Ph.D"

    no_middle = Namefully("John Smith", Config(ending=True))
    assert no_middle.format("o") == "SMITH, John,"


@pytest.mark.parametrize("pattern", ["x", "f n", "f@l", "{f}"])
def test_unsupported_characters_are_not_allowed(name, pattern):
    with pytest.raises(NotAllowedError) as exc:
        name.format(pattern)
    assert exc.value.operation == "format"
    assert exc.value.kind is ExceptionKind.NOT_ALLOWED
    assert exc.value.source == "Mr John Ben Smith Ph.D"


def test_formatter_reads_current_state(name):
    formatter = NameFormatter(name)
    assert formatter.format("l f") == "Smith John"
    name.flip()
    assert formatter.format("b") == "Smith John Ben"
