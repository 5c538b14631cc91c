"""Typed configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union


class ValueType(Enum):
    """Result of type inference on a raw value string."""

    NULL = "null"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    ARRAY = "array"


@dataclass(frozen=True)
class StringValue:
    value: str

    type: ClassVar[ValueType] = ValueType.STRING

    def __str__(self) -> str:
        return f'"{self.value}"'

    def to_python(self) -> str:
        return self.value


@dataclass(frozen=True)
class IntegerValue:
    value: int

    type: ClassVar[ValueType] = ValueType.INTEGER

    def __str__(self) -> str:
        return str(self.value)

    def to_python(self) -> int:
        return self.value


@dataclass(frozen=True)
class FloatValue:
    value: float

    type: ClassVar[ValueType] = ValueType.FLOAT

    def __str__(self) -> str:
        return repr(self.value)

    def to_python(self) -> float:
        return self.value


@dataclass(frozen=True)
class BooleanValue:
    value: bool

    type: ClassVar[ValueType] = ValueType.BOOLEAN

    def __str__(self) -> str:
        return str(self.value).lower()

    def to_python(self) -> bool:
        return self.value


Scalar = Union[StringValue, IntegerValue, FloatValue, BooleanValue]

SCALAR_TYPES = {
    ValueType.STRING: StringValue,
    ValueType.INTEGER: IntegerValue,
    ValueType.FLOAT: FloatValue,
    ValueType.BOOLEAN: BooleanValue,
}


@dataclass(frozen=True)
class ArrayValue:
    """Homogeneous array: every item is a scalar of ``element_type``."""

    element_type: ValueType
    items: tuple[Scalar, ...]

    type: ClassVar[ValueType] = ValueType.ARRAY

    def __post_init__(self) -> None:
        expected = SCALAR_TYPES.get(self.element_type)
        if expected is None:
            raise ValueError(f"Arrays cannot hold {self.element_type.value} elements")
        for item in self.items:
            if not isinstance(item, expected):
                raise ValueError(f"Array of {self.element_type.value} cannot hold {item!r}")

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"

    def to_python(self) -> list[Any]:
        return [item.to_python() for item in self.items]


ConfigValue = Union[StringValue, IntegerValue, FloatValue, BooleanValue, ArrayValue]
