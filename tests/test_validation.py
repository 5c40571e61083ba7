import io

import pytest

from drone_survey.models import Field, Tree
from drone_survey.reader import ListTripleProvider, StreamTripleProvider, TripleProvider
from drone_survey.validation import (
    InvalidFieldError,
    InvalidInputError,
    InvalidTreeError,
    validate_field,
    validate_tree,
)


def test_validate_field_ok():
    assert validate_field(1, 50_000, 3) == Field(1, 50_000)


@pytest.mark.parametrize(
    "length, width, count",
    [(0, 2, 1), (2, 0, 1), (2, 2, 0), (50_001, 2, 1), (2, 50_001, 1), (1, 2, 50_001), (-3, 2, 1)],
)
def test_validate_field_rejects_out_of_range(length, width, count):
    with pytest.raises(InvalidFieldError):
        validate_field(length, width, count)


@pytest.mark.parametrize("height", [0, 31, -1])
def test_validate_tree_rejects_height(height):
    with pytest.raises(InvalidTreeError):
        validate_tree(Field(5, 5), 1, 1, height)


@pytest.mark.parametrize("x, y", [(0, 1), (6, 1), (1, 0), (1, 6)])
def test_validate_tree_rejects_position(x, y):
    with pytest.raises(InvalidTreeError):
        validate_tree(Field(5, 5), x, y, 3)


def test_validate_tree_ok():
    assert validate_tree(Field(5, 5), 5, 5, 30) == Tree(5, 5, 30)


def test_invalid_input_is_value_error():
    assert issubclass(InvalidFieldError, ValueError)
    assert issubclass(InvalidTreeError, InvalidInputError)


def test_stream_provider_reads_across_lines():
    p = StreamTripleProvider(io.StringIO("5 1\n3\n2 1 5\n"))
    assert p.read_triple() == (5, 1, 3)
    assert p.read_triple() == (2, 1, 5)


def test_stream_provider_end_of_input():
    p = StreamTripleProvider(io.StringIO("5 1"))
    with pytest.raises(InvalidInputError, match="end of input"):
        p.read_triple()


def test_stream_provider_bad_token():
    p = StreamTripleProvider(io.StringIO("5 x 1"))
    with pytest.raises(InvalidInputError, match="not an integer"):
        p.read_triple()


def test_list_provider():
    p = ListTripleProvider([(1, 2, 3)])
    assert p.read_triple() == (1, 2, 3)
    assert p.reads == 1
    with pytest.raises(InvalidInputError):
        p.read_triple()


def test_triple_provider_is_abstract():
    with pytest.raises(TypeError):
        TripleProvider()
