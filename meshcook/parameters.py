"""Operator parameters and the value logic behind their editing controls."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Union

Value = Union[int, float, str]


class ParmType(enum.Enum):
    """Kinds of parameter an operator can expose."""

    FLOAT = "float"
    INT = "int"
    BOOL = "bool"
    XYZ = "xyz"
    STRING = "string"


class RangeFlag(enum.Enum):
    """Whether a range end is a hard limit or only a slider hint."""

    LOCKED = "locked"
    UNLOCKED = "unlocked"


@dataclass(frozen=True)
class ParmRange:
    """Slider span; locked ends also clamp the values that may be set."""

    minimum: float = 0.0
    min_flag: RangeFlag = RangeFlag.UNLOCKED
    maximum: float = 10.0
    max_flag: RangeFlag = RangeFlag.UNLOCKED

    def clamp(self, value: float) -> float:
        """Pull ``value`` inside the locked ends of the range."""
        if self.min_flag is RangeFlag.LOCKED and value < self.minimum:
            value = self.minimum
        if self.max_flag is RangeFlag.LOCKED and value > self.maximum:
            value = self.maximum
        return value


_NUMERIC_TYPES = (ParmType.FLOAT, ParmType.XYZ, ParmType.INT, ParmType.BOOL)
_INTEGER_TYPES = (ParmType.INT, ParmType.BOOL)


@dataclass
class ParmTemplate:
    """Description of a parameter: its kind, name, default and range.

    ``vector_size`` defaults to 3 for XYZ parameters and 1 otherwise.
    """

    type: ParmType
    name: str
    label: str = ""
    default: Value | None = None
    vector_size: int | None = None
    range: ParmRange = field(default_factory=ParmRange)

    def __post_init__(self) -> None:
        if not isinstance(self.type, ParmType):
            raise TypeError(f"unknown parameter type {self.type!r}")
        if not self.label:
            self.label = self.name
        if self.vector_size is None:
            self.vector_size = 3 if self.type is ParmType.XYZ else 1
        if self.vector_size < 1:
            raise ValueError("vector_size must be at least 1")
        if self.default is None:
            self.default = "" if self.type is ParmType.STRING else 0


def _coerce(kind: ParmType, value: Value) -> Value:
    if kind is ParmType.STRING:
        if not isinstance(value, str):
            raise TypeError(f"string parameter cannot take {value!r}")
        return value
    if isinstance(value, str):
        raise TypeError(f"{kind.value} parameter cannot take a string")
    if kind in _INTEGER_TYPES:
        return int(value)
    return float(value)


class Parameter:
    """The live values of one parameter, one per vector component."""

    def __init__(self, template: ParmTemplate) -> None:
        self.template = template
        first = _coerce(template.type, template.default)
        self._values: list[Value] = [first] * template.vector_size

    @property
    def type(self) -> ParmType:
        return self.template.type

    @property
    def label(self) -> str:
        return self.template.label

    @property
    def values(self) -> tuple[Value, ...]:
        return tuple(self._values)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._values):
            raise IndexError(
                f"component {index} out of range for {self.template.name!r}"
            )

    def get(self, index: int = 0) -> Value:
        """Value of component ``index``."""
        self._check_index(index)
        return self._values[index]

    def set(self, value: Value, index: int = 0) -> None:
        """Store ``value`` in component ``index``, converted to the parameter's kind."""
        self._check_index(index)
        self._values[index] = _coerce(self.type, value)


class Slider:
    """Value state of a slider editing one numeric component of a parameter.

    Integer parameters give an integer slider; float and XYZ parameters a
    float slider. Changes are written straight back to the parameter.
    """

    def __init__(self, parameter: Parameter, index: int = 0) -> None:
        if parameter.type not in (ParmType.FLOAT, ParmType.XYZ, ParmType.INT):
            raise TypeError(f"no slider for {parameter.type.value} parameters")
        parameter.get(index)
        self.parameter = parameter
        self.index = index
        self.integer = parameter.type is ParmType.INT
        parm_range = parameter.template.range
        self.range = parm_range
        if self.integer:
            self.minimum: float = int(parm_range.minimum)
            self.maximum: float = int(parm_range.maximum)
        else:
            self.minimum = float(parm_range.minimum)
            self.maximum = float(parm_range.maximum)
        self.value: float = self._limit(parameter.get(index))

    def _limit(self, value: float) -> float:
        value = self.range.clamp(value)
        return int(value) if self.integer else float(value)

    def set_value(self, value: float) -> float:
        """Clamp ``value``, store it in the parameter and return what was stored."""
        self.value = self._limit(value)
        self.parameter.set(self.value, self.index)
        return self.value

    def set_from_position(self, x: float, width: float) -> float:
        """Set the value from a pointer at ``x`` across a slider ``width`` wide."""
        if width <= 0:
            raise ValueError("slider width must be positive")
        value = self.minimum + (self.maximum - self.minimum) * (x / width)
        if self.integer:
            value = round(value)
        return self.set_value(value)

    def fill_fraction(self) -> float:
        """Share of the slider to draw filled, between 0 and 1."""
        # The span is taken in whole units.
        span = int(self.maximum - self.minimum)
        if span == 0:
            return 0.0
        fraction = (self.value - self.minimum) / span
        return min(max(fraction, 0.0), 1.0)

    def label_text(self) -> str:
        """Value as shown on the slider: at most four characters."""
        text = str(self.value) if self.integer else format(self.value, ".6g")
        return text[:4]


def label_padding(labels: Iterable[str]) -> int:
    """Common label column width, in characters, for a panel of parameter rows."""
    widest = max((len(f"{label}:") for label in labels), default=0)
    return widest + 5