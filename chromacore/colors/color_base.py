from __future__ import annotations
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Sequence, Tuple, Self

from ..channels import Channel, Hue, RealNumber
from ..types.color_types import ColorSpace, HUE_SPACES
from ..types.format_type import FormatType

if TYPE_CHECKING:
    from .rgb import RGB


def channel_property(index: int, doc: str | None = None) -> property:
    def getter(self: ColorBase):
        return self._value[index]
    return property(getter, doc=doc)


class ColorBase:
    """
    Storage, immutability and alpha handling shared by every color model.

    Models declare their channels through ``channel_names`` and
    ``channel_types`` and implement ``to_rgb``/``from_rgb``. Values are
    stored as a tuple with alpha last; every channel is normalized by its
    type before the instance is frozen.
    """
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    mode:          ClassVar[ColorSpace]
    channel_names: ClassVar[Tuple[str, ...]]
    channel_types: ClassVar[Tuple[type, ...]]
    # attached in color.py
    convert: Callable[..., ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, channels: Sequence[RealNumber], alpha: RealNumber = 1.0) -> None:
        if len(channels) != self.num_channels():
            raise ValueError(
                f"{self.mode.value} expects {self.num_channels()} channels, got {len(channels)}"
            )
        value = tuple(kind(v) for kind, v in zip(self.channel_types, channels))
        self._value = value + (Channel(alpha),)

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def num_channels(cls) -> int:
        """Number of color channels, alpha excluded."""
        return len(cls.channel_types)

    @classmethod
    def checked(cls, *channels: RealNumber, alpha: RealNumber = 1.0) -> Self:
        """
        Strict constructor.

        Raises:
            OutOfRangeError: if any channel, alpha included, is outside its
                domain. Hue accepts [0, 360].
        """
        if len(channels) != cls.num_channels():
            raise ValueError(f"{cls.mode.value} expects {cls.num_channels()} channels, got {len(channels)}")
        values = [
            kind.checked(v, name)
            for kind, v, name in zip(cls.channel_types, channels, cls.channel_names)
        ]
        return cls(*values, alpha=Channel.checked(alpha, "alpha"))

    @classmethod
    def from_format(cls, values: Sequence[RealNumber], format_type: FormatType = FormatType.INT) -> Self:
        """
        Build a color from channels in ``format_type`` (0-255, 0-1 or 0-100).

        Hue is always in degrees. A trailing extra element is read as alpha
        in the same format.
        """
        n = cls.num_channels()
        if len(values) not in (n, n + 1):
            raise ValueError(f"{cls.mode.value} expects {n} or {n + 1} values, got {len(values)}")
        channels = [
            float(v) if kind is Hue else Channel.from_format(v, format_type)
            for kind, v in zip(cls.channel_types, values)
        ]
        alpha = Channel.from_format(values[n], format_type) if len(values) > n else 1.0
        return cls(*channels, alpha=alpha)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[float, ...]:
        """All channels, alpha last."""
        return self._value

    @property
    def channels(self) -> Tuple[float, ...]:
        """Color channels without alpha."""
        return self._value[:-1]

    @property
    def alpha(self) -> Channel:
        return self._value[-1]

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    @property
    def is_opaque(self) -> bool:
        return self.alpha == 1.0

    @property
    def is_transparent(self) -> bool:
        return self.alpha == 0.0

    def with_alpha(self, alpha: RealNumber) -> Self:
        """Return a copy with a new (clamped) alpha."""
        return self.__class__(*self.channels, alpha=alpha)

    def to_format(self, format_type: FormatType = FormatType.INT, include_alpha: bool = True) -> Tuple[RealNumber, ...]:
        values: Tuple[Any, ...] = self._value if include_alpha else self.channels
        return tuple(v.to_format(format_type) for v in values)

    # ------------------ CONVERSION CONTRACT ------------------
    def to_rgb(self) -> RGB:
        raise NotImplementedError

    @classmethod
    def from_rgb(cls, rgb: RGB) -> Self:
        raise NotImplementedError

    # ------------------ COMPARISON ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def is_close(self, other: ColorBase, tol: float = 1e-6) -> bool:
        """
        Channel-wise comparison within ``tol``, same model only.

        Hue is compared on the circle and ``tol`` is scaled to degrees.
        """
        if type(self) is not type(other):
            return False
        for kind, a, b in zip(self.channel_types + (Channel,), self._value, other._value):
            if kind is Hue:
                if a.distance(b) > tol * 360.0:
                    return False
            elif abs(a - b) > tol:
                return False
        return True

    def __repr__(self) -> str:
        parts = [f"{name}={float(v)!r}" for name, v in zip(self.channel_names, self.channels)]
        parts.append(f"alpha={float(self.alpha)!r}")
        return f"{self.__class__.__name__}({', '.join(parts)})"


def build_registry(*classes: type[ColorBase]) -> dict[ColorSpace, type[ColorBase]]:
    return {cls.mode: cls for cls in classes}
