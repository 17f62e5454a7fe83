"""Tests for the shape-tolerant value types in locapi.models.values."""

import pytest
from pydantic import BaseModel

from locapi.models import File, ResourceObject
from locapi.models.values import (
    BoolOrText,
    Many,
    NumberOrText,
    OneOrMany,
    Single,
    TextOrList,
    as_list,
    to_bool,
    to_number,
)


class Record(BaseModel):
    subject: TextOrList | None = None
    count: NumberOrText | None = None
    flag: BoolOrText | None = None
    rows: OneOrMany[list[int]] | None = None


def test_scalar_decodes_to_single():
    record = Record.model_validate_json('{"subject": "x"}')
    assert record.subject == Single("x")


def test_array_decodes_to_many():
    record = Record.model_validate_json('{"subject": ["x", "y"]}')
    assert record.subject == Many(["x", "y"])
    assert record.subject.values == ("x", "y")


def test_null_and_missing_decode_to_none():
    assert Record.model_validate_json('{"subject": null}').subject is None
    assert Record.model_validate_json("{}").subject is None


def test_one_element_array_stays_many():
    record = Record.model_validate_json('{"subject": ["only"]}')
    assert isinstance(record.subject, Many)
    assert len(record.subject) == 1


def test_empty_array_is_empty_many():
    record = Record.model_validate_json('{"subject": []}')
    assert record.subject == Many([])
    assert record.subject.first() is None


def test_python_input_is_accepted():
    record = Record.model_validate({"subject": ["a", "b"]})
    assert record.subject == Many(["a", "b"])
    assert Record(subject=Single("z")).subject == Single("z")


def test_list_item_type_falls_back_to_single():
    # A single list of ints is not a list of lists, so it is kept whole.
    record = Record.model_validate_json('{"rows": [1, 2, 3]}')
    assert record.rows == Single([1, 2, 3])

    nested = Record.model_validate_json('{"rows": [[1], [2, 3]]}')
    assert nested.rows == Many([[1], [2, 3]])


def test_numbers_keep_their_representation():
    assert Record.model_validate_json('{"count": 25}').count == 25
    assert Record.model_validate_json('{"count": 2.5}').count == 2.5
    assert Record.model_validate_json('{"count": "25"}').count == "25"


def test_booleans_keep_their_representation():
    assert Record.model_validate_json('{"flag": true}').flag is True
    assert Record.model_validate_json('{"flag": "true"}').flag == "true"


def test_serialization_restores_original_shape():
    raw = '{"subject": ["x"], "count": "7", "flag": false}'
    record = Record.model_validate_json(raw)
    dumped = record.model_dump(mode="json", exclude_none=True)
    assert dumped == {"subject": ["x"], "count": "7", "flag": False}

    single = Record.model_validate_json('{"subject": "x"}')
    assert single.model_dump(mode="json", exclude_none=True) == {"subject": "x"}


def test_nested_files_decode_per_page():
    resource = ResourceObject.model_validate_json(
        '{"files": [[{"url": "https://tile.loc.gov/a.jpg", "mimetype": "image/jpeg",'
        ' "height": 640, "width": 480}], [{"url": "https://tile.loc.gov/b.jpg"}]]}'
    )
    assert isinstance(resource.files, Many)
    pages = resource.files.as_list()
    assert len(pages) == 2
    first_page = pages[0]
    assert isinstance(first_page, Many)
    first_file = first_page.first()
    assert isinstance(first_file, File)
    assert first_file.url == Single("https://tile.loc.gov/a.jpg")
    assert first_file.height == 640


def test_as_list_flattens_every_shape():
    assert as_list(None) == []
    assert as_list(Single("a")) == ["a"]
    assert as_list(Many(["a", "b"])) == ["a", "b"]


def test_single_and_many_iterate_over_values():
    assert list(Single(1)) == [1]
    assert list(Many((1, 2))) == [1, 2]
    assert Many([1, 2]) == Many((1, 2))


def test_single_and_many_are_immutable():
    with pytest.raises(AttributeError):
        Single("a").value = "b"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        Many(["a"]).values = ("b",)  # type: ignore[misc]


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, None), (3, 3), (1.5, 1.5), ("42", 42), (" 2.5 ", 2.5), ("n/a", None)],
)
def test_to_number(value, expected):
    assert to_number(value) == expected


def test_to_number_rejects_booleans():
    assert to_number(True) is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, None),
        (True, True),
        (False, False),
        ("true", True),
        ("Yes", True),
        ("0", False),
        ("false", False),
        ("maybe", None),
    ],
)
def test_to_bool(value, expected):
    assert to_bool(value) is expected
