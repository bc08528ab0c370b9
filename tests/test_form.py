from dataclasses import dataclass, field
from urllib.parse import parse_qsl

import pytest

from stripetypes.card import CardType
from stripetypes.form import FormParams, encode_form


@dataclass
class _Sample(FormParams):
    name: str
    count: int | None = None
    kind: CardType | None = None
    tags: list[str] = field(default_factory=list, metadata={"omit_empty": True})
    type_: str | None = field(default=None, metadata={"wire": "type"})


class _NotDataclass(FormParams):
    pass


def test_to_dict_skips_none():
    assert FormParams.to_dict(_Sample("x")) == {"name": "x"}


def test_to_dict_renames_field():
    result = FormParams.to_dict(_Sample("x", type_="card"))
    assert result["type"] == "card"
    assert "type_" not in result


def test_to_dict_converts_enum_to_value():
    result = FormParams.to_dict(_Sample("x", kind=CardType.DEBIT))
    assert result["kind"] == CardType.DEBIT.value
    assert type(result["kind"]) is str


def test_omit_empty_field():
    assert "tags" not in FormParams.to_dict(_Sample("x"))
    assert FormParams.to_dict(_Sample("x", tags=["a"]))["tags"] == ["a"]


def test_to_dict_requires_dataclass():
    with pytest.raises(TypeError):
        FormParams.to_dict(_NotDataclass())


def test_list_uses_indexed_keys():
    assert encode_form({"amounts": [32, 45]}) == "amounts[0]=32&amounts[1]=45"


def test_bool_written_lowercase():
    assert encode_form({"flag": True}) == "flag=true"


def test_none_is_omitted():
    assert encode_form({"a": None, "b": "x"}) == "b=x"


def test_empty_list_emits_nothing():
    assert encode_form({"expand": []}) == ""


def test_nested_mapping_round_trip():
    encoded = encode_form({"metadata": {"order": "a b&c=d"}})
    assert parse_qsl(encoded) == [("metadata[order]", "a b&c=d")]


def test_enum_value_in_form():
    encoded = encode_form({"kind": CardType.PREPAID})
    assert dict(parse_qsl(encoded)) == {"kind": "prepaid"}


def test_encode_rejects_non_mapping():
    with pytest.raises(TypeError):
        encode_form([("a", "b")])


def test_to_form_matches_encoded_dict():
    sample = _Sample("n", count=3, tags=["p", "q"], type_="t")
    assert sample.to_form() == encode_form(sample.to_dict())
    assert dict(parse_qsl(sample.to_form())) == {
        "name": "n",
        "count": "3",
        "tags[0]": "p",
        "tags[1]": "q",
        "type": "t",
    }