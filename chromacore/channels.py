"""
Channel values.

``Channel`` is a float clamped to ``[0, 1]``; ``Hue`` is a float in degrees
wrapped into ``[0, 360)``. Both are immutable (they are floats) and every
helper returns a new, re-bounded instance.
"""
from __future__ import annotations
import math
import warnings
from typing import ClassVar, Literal, Self

from boundednumbers.functions import clamp, cyclic_wrap_float

from .errors import OutOfRangeError
from .types.format_type import FormatType, max_non_hue, HUE_360

RealNumber = int | float
HueDirection = Literal["shortest", "longest", "cw", "ccw"]


def _finite_or_zero(value: RealNumber) -> float:
    value = float(value)
    if math.isnan(value):
        warnings.warn("NaN channel value replaced with 0.0", RuntimeWarning, stacklevel=3)
        return 0.0
    return value


class Channel(float):
    """A floating-point number clamped to the inclusive range ``[0, 1]``."""

    minimum: ClassVar[float] = 0.0
    maximum: ClassVar[float] = 1.0

    def __new__(cls, value: RealNumber = 0.0):
        value = _finite_or_zero(value)
        if not cls.minimum <= value <= cls.maximum:
            value = float(clamp(value, cls.minimum, cls.maximum))
        return super().__new__(cls, value)

    def __repr__(self):
        return f"{self.__class__.__name__}({float(self)})"

    @classmethod
    def checked(cls, value: RealNumber, name: str = "channel") -> Self:
        """Strict constructor: reject values outside the domain instead of clamping."""
        value = float(value)
        if math.isnan(value) or not cls.minimum <= value <= cls.maximum:
            raise OutOfRangeError(name, value, cls.minimum, cls.maximum)
        return cls(value)

    @classmethod
    def from_format(cls, value: RealNumber, format_type: FormatType) -> Self:
        return cls(float(value) / max_non_hue[FormatType(format_type)])

    def to_format(self, format_type: FormatType) -> RealNumber:
        format_type = FormatType(format_type)
        scaled = float(self) * max_non_hue[format_type]
        if format_type == FormatType.INT:
            return int(round(scaled))
        return scaled

    def scale(self, factor: RealNumber) -> Self:
        return self.__class__(float(self) * factor)

    def lerp(self, other: RealNumber, t: RealNumber) -> Self:
        t = float(clamp(float(t), 0.0, 1.0))
        return self.__class__(float(self) + (float(other) - float(self)) * t)


class Hue(float):
    """An angle in degrees, wrapped into ``[0, 360)``."""

    minimum: ClassVar[float] = 0.0
    maximum: ClassVar[float] = HUE_360

    def __new__(cls, value: RealNumber = 0.0):
        value = _finite_or_zero(value)
        if math.isinf(value):
            warnings.warn("Infinite hue replaced with 0.0", RuntimeWarning, stacklevel=2)
            value = 0.0
        if not cls.minimum <= value < cls.maximum:
            value = float(cyclic_wrap_float(value, cls.minimum, cls.maximum))
        # float modulo can land exactly on the upper bound
        if value >= cls.maximum:
            value = cls.minimum
        return super().__new__(cls, value)

    def __repr__(self):
        return f"Hue({float(self)})"

    @classmethod
    def checked(cls, value: RealNumber, name: str = "h") -> Self:
        """Strict constructor: accepts ``[0, 360]``; 360 is stored as 0."""
        value = float(value)
        if math.isnan(value) or not cls.minimum <= value <= cls.maximum:
            raise OutOfRangeError(name, value, cls.minimum, cls.maximum)
        return cls(value)

    def to_format(self, format_type: FormatType) -> RealNumber:
        if FormatType(format_type) == FormatType.INT:
            # 359.6 rounds to 360, which is the same angle as 0
            return int(round(float(self))) % int(HUE_360)
        return float(self)

    def distance(self, other: RealNumber) -> float:
        """Shortest angular distance to ``other``, in ``[0, 180]``."""
        delta = abs(float(self) - float(Hue(other)))
        return min(delta, HUE_360 - delta)

    def lerp(self, other: RealNumber, t: RealNumber, direction: HueDirection = "shortest") -> Self:
        """
        Interpolate around the hue circle.

        Args:
            other: Target hue in degrees.
            t: Interpolation factor, clamped to ``[0, 1]``.
            direction: ``shortest``, ``longest``, ``cw`` (increasing angle) or
                ``ccw`` (decreasing angle).
        """
        t = float(clamp(float(t), 0.0, 1.0))
        start = float(self)
        # forward distance in [0, 360)
        forward = float(Hue(float(other) - start))

        if direction == "cw":
            delta = forward
        elif direction == "ccw":
            delta = forward - HUE_360 if forward else 0.0
        elif direction == "shortest":
            delta = forward if forward <= HUE_360 / 2 else forward - HUE_360
        elif direction == "longest":
            if forward == 0.0:
                delta = 0.0
            else:
                delta = forward if forward > HUE_360 / 2 else forward - HUE_360
        else:
            raise ValueError(f"Invalid hue direction: {direction}")

        return self.__class__(start + delta * t)
