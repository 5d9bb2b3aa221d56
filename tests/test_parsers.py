# tests/test_parsers.py

from __future__ import annotations

import pytest

from namefully.config import Config
from namefully.core.exceptions import InputError, UnknownError, ValidationError
from namefully.full_name import FullName
from namefully.models import FirstName, LastName, Name
from namefully.namefully import Namefully
from namefully.parsing import (
    BoundParser,
    JsonNameParser,
    ListNameParser,
    ListStringParser,
    Parser,
    StringParser,
)
from namefully.types import NameOrder, Separator, Surname


def _values(full: FullName):
    return {
        "prefix": full.prefix.value if full.prefix else None,
        "first": full.first_name.value,
        "middle": [n.value for n in full.middle_name],
        "last": full.last_name.value,
        "suffix": full.suffix.value if full.suffix else None,
    }


# ----------------------------------------------------------------------
# String / list of strings
# ----------------------------------------------------------------------

def test_string_parser_five_parts():
    full = StringParser().parse("Mr John Ben Smith Ph.D")
    assert _values(full) == {
        "prefix": "Mr",
        "first": "John",
        "middle": ["Ben"],
        "last": "Smith",
        "suffix": "Ph.D",
    }


def test_string_parser_uses_configured_separator():
    full = StringParser().parse("John, Ben, Smith", Config(separator=Separator.COMMA))
    assert _values(full)["first"] == "John"
    assert _values(full)["middle"] == ["Ben"]
    assert _values(full)["last"] == "Smith"


def test_list_string_parser_by_last_name():
    raw = ["Smith", "John", "Ben"]
    full = ListStringParser().parse(raw, Config(ordered_by=NameOrder.LAST_NAME))
    assert _values(full) == {
        "prefix": None,
        "first": "John",
        "middle": ["Ben"],
        "last": "Smith",
        "suffix": None,
    }
    assert raw == ["Smith", "John", "Ben"]


def test_list_string_parser_trims_and_splits_middle_blob():
    full = ListStringParser().parse(["  John ", "Ben Carl", " Smith"])
    assert _values(full)["first"] == "John"
    assert _values(full)["middle"] == ["Ben", "Carl"]
    assert _values(full)["last"] == "Smith"


def test_list_string_parser_four_parts_by_last_name():
    full = ListStringParser().parse(["Dr", "Smith", "John", "Ben"], Config(ordered_by=NameOrder.LAST_NAME))
    assert _values(full)["prefix"] == "Dr"
    assert _values(full)["last"] == "Smith"
    assert _values(full)["middle"] == ["Ben"]


def test_bypass_keeps_structural_checks_only():
    relaxed = ListStringParser().parse(["J4ne", "Doe"], Config(bypass=True))
    assert relaxed.first_name.value == "J4ne"

    with pytest.raises(ValidationError):
        ListStringParser().parse(["J4ne", "Doe"], Config(bypass=False))
    with pytest.raises(InputError):
        ListStringParser().parse(["Jane"], Config(bypass=True))
    with pytest.raises(InputError):
        StringParser().parse("a b c d e f")


def test_list_string_parser_rejects_non_strings():
    with pytest.raises(InputError):
        ListStringParser().parse(["John", 42])


# ----------------------------------------------------------------------
# JSON map
# ----------------------------------------------------------------------

def test_json_parser_builds_full_name():
    full = JsonNameParser().parse(
        {"prefix": "Mr", "firstName": "John", "middleName": "Ben Carl", "lastName": "Smith", "suffix": "Jr"}
    )
    assert _values(full) == {
        "prefix": "Mr",
        "first": "John",
        "middle": ["Ben", "Carl"],
        "last": "Smith",
        "suffix": "Jr",
    }


@pytest.mark.parametrize(
    "raw, order, slot",
    [
        ("M4 John Ben Smith Ph.D", NameOrder.FIRST_NAME, "prefix"),
        ("Mr John Smith Ph2D", NameOrder.FIRST_NAME, "lastName"),
        ("Mr John Ben Smith J7", NameOrder.FIRST_NAME, "suffix"),
        ("D7 Smith John Ben", NameOrder.LAST_NAME, "prefix"),
    ],
)
def test_strict_list_parser_names_prefix_and_suffix_slots(raw, order, slot):
    with pytest.raises(ValidationError) as exc:
        StringParser().parse(raw, Config(bypass=False, ordered_by=order))
    assert exc.value.name_type == slot


def test_strict_json_parser_names_prefix_and_suffix_slots():
    strict = Config(bypass=False)
    with pytest.raises(ValidationError) as exc:
        JsonNameParser().parse({"prefix": "M4", "firstName": "John", "lastName": "Smith"}, strict)
    assert exc.value.name_type == "prefix"

    with pytest.raises(ValidationError) as exc:
        JsonNameParser().parse({"firstName": "John", "lastName": "Smith", "suffix": "J7"}, strict)
    assert exc.value.name_type == "suffix"


def test_json_parser_accepts_middle_name_list():
    full = JsonNameParser().parse({"firstName": "John", "middleName": ["Ben", "Carl"], "lastName": "Smith"})
    assert _values(full)["middle"] == ["Ben", "Carl"]

    name = Namefully({"firstName": "John", "middleName": ("Ben",), "lastName": "Smith"})
    assert name.middle_name() == ["Ben"]
    assert name.birth == "John Ben Smith"


def test_json_parser_validation_names_the_slot():
    with pytest.raises(ValidationError) as exc:
        JsonNameParser().parse({"firstName": "J4ne", "lastName": "Doe"}, Config(bypass=False))
    assert exc.value.name_type == "firstName"


def test_json_parser_key_checks():
    with pytest.raises(InputError) as exc:
        JsonNameParser().parse({"firstName": "Jane", "lastName": "Doe", "nickname": "JD"})
    assert "nickname" in exc.value.message

    with pytest.raises(InputError):
        JsonNameParser().parse({"firstName": "Jane", "middleName": "Ann"})
    with pytest.raises(InputError):
        JsonNameParser().parse({})


# ----------------------------------------------------------------------
# Tagged atoms
# ----------------------------------------------------------------------

def test_list_name_parser_keeps_structure():
    full = ListNameParser().parse(
        [
            Name.prefix("Mr"),
            FirstName("John", ["Jack"]),
            Name.middle("Ben"),
            LastName("Smith", "Doe"),
            Name.suffix("Jr"),
        ],
        Config(surname=Surname.HYPHENATED),
    )
    assert full.first_name.more == ["Jack"]
    assert full.last_name.mother == "Doe"
    assert full.last_name.format is Surname.HYPHENATED
    assert full.last_name.to_string() == "Smith-Doe"
    assert [n.value for n in full.middle_name] == ["Ben"]


def test_list_name_parser_wraps_plain_atoms():
    full = ListNameParser().parse([Name.last("Smith"), Name.first("John")])
    assert isinstance(full.first_name, FirstName)
    assert isinstance(full.last_name, LastName)
    assert full.first_name.value == "John"


def test_list_name_parser_requires_first_and_last():
    with pytest.raises(InputError):
        ListNameParser().parse([Name.first("John"), Name.middle("Ben")])


# ----------------------------------------------------------------------
# Heuristic build and custom parsers
# ----------------------------------------------------------------------

@pytest.mark.parametrize("text", ["", "   ", "John"])
def test_build_rejects_fewer_than_two_words(text):
    with pytest.raises(InputError):
        Parser.build(text)


def test_build_binds_short_text_as_is():
    bound = Parser.build("  John   Ben Smith ")
    assert isinstance(bound, BoundParser)
    assert bound.raw == ["John", "Ben", "Smith"]
    assert [n.value for n in bound.parse().middle_name] == ["Ben"]


def test_build_groups_interior_words_as_middle_names():
    bound = Parser.build("John Ben Carl Smith")
    assert bound.raw == ["John", "Ben Carl", "Smith"]

    full = bound.parse()
    assert full.first_name.value == "John"
    assert [n.value for n in full.middle_name] == ["Ben", "Carl"]
    assert full.last_name.value == "Smith"


class ExplodingParser(Parser):
    def _parse(self, raw, config):
        raise RuntimeError("boom")


class FixedParser(Parser):
    def _parse(self, raw, config):
        return FullName.raw("Jane", "Doe", config=config)


def test_unexpected_errors_are_wrapped():
    with pytest.raises(UnknownError) as exc:
        ExplodingParser().parse("anything")
    assert isinstance(exc.value.error, RuntimeError)
    assert exc.value.__cause__ is exc.value.error


def test_custom_parser_receives_config():
    config = Config(name="custom")
    full = FixedParser().parse(object(), config)
    assert full.config is config
    assert full.first_name.value == "Jane"
