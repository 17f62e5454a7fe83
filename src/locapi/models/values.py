# locapi/models/values.py
"""Shape-tolerant value types for loc.gov JSON payloads.

loc.gov serializes many fields as a bare scalar when there is one value and as
an array when there are several, and sometimes quotes numbers and booleans.
The types in this module absorb that variance once, so response models can
declare such fields without per-field validators:

* ``OneOrMany[T]`` decodes an array into ``Many[T]`` and anything else into
  ``Single[T]``. Cardinality is kept: a one-element array stays ``Many``.
* ``NumberOrText`` and ``BoolOrText`` keep whichever representation upstream
  sent; ``to_number`` and ``to_bool`` normalize them on demand.

Optionality is separate from cardinality: fields are declared
``OneOrMany[T] | None`` and JSON ``null`` decodes to ``None``.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, get_args

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from ..log_config import logger

T = TypeVar("T")

_TRUE_STRINGS = frozenset({"true", "yes", "1", "y", "t"})
_FALSE_STRINGS = frozenset({"false", "no", "0", "n", "f"})


@dataclass(frozen=True)
class Single(Generic[T]):
    """A field upstream sent as one bare value."""

    value: T

    def as_list(self) -> list[T]:
        return [self.value]

    def first(self) -> T:
        return self.value

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __len__(self) -> int:
        return 1


@dataclass(frozen=True, init=False)
class Many(Generic[T]):
    """A field upstream sent as an array. Order is preserved."""

    values: tuple[T, ...]

    def __init__(self, values: Iterable[T] = ()):
        object.__setattr__(self, "values", tuple(values))

    def as_list(self) -> list[T]:
        return list(self.values)

    def first(self) -> T | None:
        return self.values[0] if self.values else None

    def __iter__(self) -> Iterator[T]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)


def _to_plain(value: Any) -> Any:
    if isinstance(value, Single):
        return _to_plain(value.value)
    if isinstance(value, Many):
        return [_to_plain(v) for v in value.values]
    if isinstance(value, list):
        return [_to_plain(v) for v in value]
    return value


class OneOrMany(Generic[T]):
    """Annotation for fields that arrive either as ``T`` or as an array of ``T``.

    Use it as a type, e.g. ``subject: OneOrMany[str] | None = None``. Validated
    values are ``Single[T]`` or ``Many[T]`` instances; ``OneOrMany`` itself is
    never instantiated.

    Arrays are tried as ``Many[T]`` first and fall back to ``Single[T]``, which
    keeps ``OneOrMany[list[X]]`` working when upstream sends a single list.
    """

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        args = get_args(source_type)
        item_schema = (
            handler.generate_schema(args[0]) if args else core_schema.any_schema()
        )
        many_schema = core_schema.no_info_after_validator_function(
            Many, core_schema.list_schema(item_schema)
        )
        single_schema = core_schema.no_info_after_validator_function(
            Single, item_schema
        )
        return core_schema.json_or_python_schema(
            json_schema=core_schema.union_schema(
                [many_schema, single_schema], mode="left_to_right"
            ),
            python_schema=core_schema.union_schema(
                [
                    core_schema.is_instance_schema(Single),
                    core_schema.is_instance_schema(Many),
                    many_schema,
                    single_schema,
                ],
                mode="left_to_right",
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(_to_plain),
        )


TextOrList = OneOrMany[str]
"""A string or a list of strings."""

NumberOrText = int | float | str
"""A number, or its quoted string form (e.g. counts sent as ``"25"``)."""

BoolOrText = bool | str
"""A boolean, or its string form (e.g. ``"true"``)."""


def as_list(value: Single[T] | Many[T] | None) -> list[T]:
    """Flatten an optional shape-variant field into a plain list."""
    if value is None:
        return []
    return value.as_list()


def to_number(value: NumberOrText | None) -> int | float | None:
    """Coerce a ``NumberOrText`` value to a number, logging on failure."""
    if value is None:
        return None
    if isinstance(value, bool):
        logger.warning(f"Unexpected boolean {value!r} where a number was expected.")
        return None
    if isinstance(value, int | float):
        return value
    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        logger.warning(f"Could not coerce value '{value}' to a number.")
        return None


def to_bool(value: BoolOrText | None) -> bool | None:
    """Coerce a ``BoolOrText`` value to a boolean, logging on failure."""
    if value is None or isinstance(value, bool):
        return value
    text = value.strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    logger.warning(f"Could not coerce value '{value}' to a boolean.")
    return None
