# validation.py
from drone_survey.config import (
    MAX_DIMENSION,
    MAX_TREE_HEIGHT,
    MIN_DIMENSION,
    MIN_TREE_HEIGHT,
)
from drone_survey.models import Field, Tree


class InvalidInputError(ValueError):
    """Input rejected before any traversal starts."""


class InvalidFieldError(InvalidInputError):
    pass


class InvalidTreeError(InvalidInputError):
    pass


def _in_range(v: int, lo: int, hi: int) -> bool:
    return lo <= v <= hi


def validate_field(length: int, width: int, count: int) -> Field:
    for name, v in (("length", length), ("width", width), ("count", count)):
        if not _in_range(v, MIN_DIMENSION, MAX_DIMENSION):
            raise InvalidFieldError(
                f"{name}={v} outside [{MIN_DIMENSION}, {MAX_DIMENSION}]"
            )
    return Field(length, width)


def validate_tree(field: Field, x: int, y: int, height: int) -> Tree:
    if not _in_range(height, MIN_TREE_HEIGHT, MAX_TREE_HEIGHT):
        raise InvalidTreeError(
            f"tree at ({x},{y}) height={height} outside "
            f"[{MIN_TREE_HEIGHT}, {MAX_TREE_HEIGHT}]"
        )
    if not field.contains(x, y):
        raise InvalidTreeError(
            f"tree at ({x},{y}) outside field {field.length}x{field.width}"
        )
    return Tree(x, y, height)
