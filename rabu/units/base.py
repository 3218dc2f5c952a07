"""Common behaviour shared by all scalar audio units.

A unit is an immutable wrapper around a single number. Two units compare and
combine only when they are of exactly the same type; mixing a unit with a
different unit or with a bare number raises ``UnitMismatchError`` instead of
silently producing a meaningless result.
"""

import math
from numbers import Number
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import PydanticCustomError, core_schema

from ..errors import UnitMismatchError, UnitUnderflowError


class Unit:
    """Immutable numeric value tagged with its unit type."""

    __slots__ = ("_value",)

    # Primitive the raw value is coerced to on construction
    _primitive: type = float

    def __init__(self, value: Any):
        if isinstance(value, Unit):
            raise UnitMismatchError(
                f"cannot build {type(self).__name__} from {type(value).__name__}, "
                "use an explicit conversion"
            )
        if isinstance(value, (str, bytes)):
            raise TypeError(
                f"{type(self).__name__} needs a number, got {type(value).__name__}"
            )
        object.__setattr__(self, "_value", self._primitive(value))

    @property
    def value(self):
        """The raw value in the unit's primitive type."""
        return self._value

    def as_float(self) -> float:
        """Get the raw value as a float."""
        return float(self._value)

    def __float__(self) -> float:
        return self.as_float()

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._value))

    def __reduce__(self):
        return (type(self), (self._value,))

    def _require_same_unit(self, other: Any) -> None:
        if type(other) is not type(self):
            raise UnitMismatchError(
                f"cannot combine {type(self).__name__} with {type(other).__name__}"
            )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, (Unit, Number)):
            return NotImplemented
        self._require_same_unit(other)
        return self._value == other._value

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: Any) -> bool:
        self._require_same_unit(other)
        return self._value < other._value

    def __le__(self, other: Any) -> bool:
        self._require_same_unit(other)
        return self._value <= other._value

    def __gt__(self, other: Any) -> bool:
        self._require_same_unit(other)
        return self._value > other._value

    def __ge__(self, other: Any) -> bool:
        self._require_same_unit(other)
        return self._value >= other._value

    @classmethod
    def _raw_schema(cls) -> core_schema.CoreSchema:
        if cls._primitive is int:
            return core_schema.int_schema()
        return core_schema.float_schema()

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate from the raw number (or an instance), serialize to the raw number."""
        from_raw = core_schema.no_info_after_validator_function(cls, cls._raw_schema())

        def reject_other_units(value: Any) -> Any:
            # The lax number schemas would otherwise accept anything with __int__
            if isinstance(value, Unit):
                raise PydanticCustomError(
                    "unit_mismatch",
                    "expected {expected} or a raw number, got {actual}",
                    {"expected": cls.__name__, "actual": type(value).__name__},
                )
            return value

        return core_schema.json_or_python_schema(
            json_schema=from_raw,
            python_schema=core_schema.union_schema(
                [
                    core_schema.is_instance_schema(cls),
                    core_schema.no_info_before_validator_function(
                        reject_other_units, from_raw
                    ),
                ]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda unit: unit.value
            ),
        )


class IntegerUnit(Unit):
    """A unit whose raw value is an integer."""

    __slots__ = ()

    _primitive = int

    def as_int(self) -> int:
        """Get the raw value as an int."""
        return self._value

    def __int__(self) -> int:
        return self.as_int()


class Additive:
    """Mixin adding same-unit addition and subtraction.

    Units flagged ``_unsigned`` refuse to go below zero.
    """

    __slots__ = ()

    _unsigned = False

    def __add__(self, other: Any):
        self._require_same_unit(other)
        return type(self)(self._value + other._value)

    def __sub__(self, other: Any):
        self._require_same_unit(other)
        result = self._value - other._value
        if self._unsigned and result < 0:
            raise UnitUnderflowError(
                f"{self!r} - {other!r} would make {type(self).__name__} negative"
            )
        return type(self)(result)


def require_unit(value: Any, unit_type: type, name: str) -> None:
    """Raise ``UnitMismatchError`` unless ``value`` is a ``unit_type``."""
    if not isinstance(value, unit_type):
        raise UnitMismatchError(
            f"{name} must be {unit_type.__name__}, got {type(value).__name__}"
        )


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE 754 semantics: a zero denominator gives inf or nan."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator
